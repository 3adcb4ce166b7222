"""
Race result SQL (raw, read-only).

All three result queries share one join graph:

    results r
      INNER JOIN drivers d
      INNER JOIN constructors co
      INNER JOIN races ra
      INNER JOIN status s

A result row missing any of its parents is dropped, so every payload has
complete `driver`, `constructor`, `race` and `status` objects.
"""

from __future__ import annotations

from typing import Any

from constructors.repository import CONSTRUCTOR
from core.db import Database, Failed, Fetched
from core.projection import Projection
from drivers.repository import DRIVER
from races.repository import RACE_SUMMARY

STATUS = Projection(
    "status",
    "s",
    {
        "status_id": "statusId",
        "status": "status",
    },
)

RESULT = Projection(
    "result",
    "r",
    {
        "result_id": "resultId",
        "race_id": "raceId",
        "number": "number",
        "grid": "grid",
        "position": "position",
        "position_text": "positionText",
        "position_order": "positionOrder",
        "points": "points",
        "laps": "laps",
        "time": "time",
        "milliseconds": "milliseconds",
        "fastest_lap": "fastestLap",
        "rank": "rank",
        "fastest_lap_time": "fastestLapTime",
        "fastest_lap_speed": "fastestLapSpeed",
    },
    nested={
        "status": STATUS,
        "driver": DRIVER,
        "constructor": CONSTRUCTOR,
        "race": RACE_SUMMARY,
    },
)

_BASE_QUERY = f"""
        SELECT
          {RESULT.select_list()}
        FROM results r
        INNER JOIN drivers d ON d.driverId = r.driverId
        INNER JOIN constructors co ON co.constructorId = r.constructorId
        INNER JOIN races ra ON ra.raceId = r.raceId
        INNER JOIN status s ON s.statusId = r.statusId
"""

SEASON_ORDER = "ra.year ASC, ra.round ASC, r.grid ASC, r.resultId ASC"


async def results_for_race(db: Database, race_id: int) -> Fetched[list[dict[str, Any]]] | Failed:
    return await db.fetch_all(
        f"""{_BASE_QUERY}
        WHERE r.raceId = $1
        ORDER BY r.grid ASC, r.resultId ASC
        """,
        race_id,
    )


async def results_for_driver(
    db: Database,
    driver_ref: str,
) -> Fetched[list[dict[str, Any]]] | Failed:
    return await db.fetch_all(
        f"""{_BASE_QUERY}
        WHERE lower(d.driverRef) = $1
        ORDER BY {SEASON_ORDER}
        """,
        driver_ref,
    )


async def results_for_driver_between(
    db: Database,
    driver_ref: str,
    *,
    start_year: int,
    end_year: int,
) -> Fetched[list[dict[str, Any]]] | Failed:
    return await db.fetch_all(
        f"""{_BASE_QUERY}
        WHERE lower(d.driverRef) = $1
          AND ra.year BETWEEN $2 AND $3
        ORDER BY {SEASON_ORDER}
        """,
        driver_ref,
        start_year,
        end_year,
    )
