"""
Qualifying SQL (raw, read-only).
"""

from __future__ import annotations

from typing import Any

from constructors.repository import CONSTRUCTOR
from core.db import Database, Failed, Fetched
from core.projection import Projection
from drivers.repository import DRIVER
from races.repository import RACE_SUMMARY

QUALIFYING_ENTRY = Projection(
    "qualifying",
    "q",
    {
        "qualify_id": "qualifyId",
        "race_id": "raceId",
        "driver_id": "driverId",
        "constructor_id": "constructorId",
        "number": "number",
        "position": "position",
        "q1": "q1",
        "q2": "q2",
        "q3": "q3",
    },
    nested={
        "driver": DRIVER,
        "constructor": CONSTRUCTOR,
        "race": RACE_SUMMARY,
    },
)


async def qualifying_for_race(
    db: Database,
    race_id: int,
) -> Fetched[list[dict[str, Any]]] | Failed:
    return await db.fetch_all(
        f"""
        SELECT
          {QUALIFYING_ENTRY.select_list()}
        FROM qualifying q
        INNER JOIN drivers d ON d.driverId = q.driverId
        INNER JOIN constructors co ON co.constructorId = q.constructorId
        INNER JOIN races ra ON ra.raceId = q.raceId
        WHERE q.raceId = $1
        ORDER BY q.position ASC, q.qualifyId ASC
        """,
        race_id,
    )
