"""
Standings SQL (raw, read-only).

Both tables store one snapshot row per entrant per race; filtering on
`raceId` yields the championship table as it stood after that race.
"""

from __future__ import annotations

from typing import Any

from constructors.repository import CONSTRUCTOR
from core.db import Database, Failed, Fetched
from core.projection import Projection
from drivers.repository import DRIVER
from races.repository import RACE_SUMMARY

_STANDING_COLUMNS = {
    "points": "points",
    "position": "position",
    "position_text": "positionText",
    "wins": "wins",
}

DRIVER_STANDING = Projection(
    "standing",
    "ds",
    {
        "driver_standings_id": "driverStandingsId",
        "race_id": "raceId",
        **_STANDING_COLUMNS,
    },
    nested={"driver": DRIVER, "race": RACE_SUMMARY},
)

CONSTRUCTOR_STANDING = Projection(
    "standing",
    "cs",
    {
        "constructor_standings_id": "constructorStandingsId",
        "race_id": "raceId",
        **_STANDING_COLUMNS,
    },
    nested={"constructor": CONSTRUCTOR, "race": RACE_SUMMARY},
)


async def driver_standings_for_race(
    db: Database,
    race_id: int,
) -> Fetched[list[dict[str, Any]]] | Failed:
    return await db.fetch_all(
        f"""
        SELECT
          {DRIVER_STANDING.select_list()}
        FROM driver_standings ds
        INNER JOIN drivers d ON d.driverId = ds.driverId
        INNER JOIN races ra ON ra.raceId = ds.raceId
        WHERE ds.raceId = $1
        ORDER BY ds.position ASC, ds.driverStandingsId ASC
        """,
        race_id,
    )


async def constructor_standings_for_race(
    db: Database,
    race_id: int,
) -> Fetched[list[dict[str, Any]]] | Failed:
    return await db.fetch_all(
        f"""
        SELECT
          {CONSTRUCTOR_STANDING.select_list()}
        FROM constructor_standings cs
        INNER JOIN constructors co ON co.constructorId = cs.constructorId
        INNER JOIN races ra ON ra.raceId = cs.raceId
        WHERE cs.raceId = $1
        ORDER BY cs.position ASC, cs.constructorStandingsId ASC
        """,
        race_id,
    )
