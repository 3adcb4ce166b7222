"""
Driver SQL (raw, read-only).

Results for a single race (`/drivers/race/{raceId}`) live in
`results.repository`; this module only reads the `drivers` table.
"""

from __future__ import annotations

from typing import Any

from core.db import Database, Failed, Fetched
from core.projection import Projection

DRIVER = Projection(
    "driver",
    "d",
    {
        "driver_id": "driverId",
        "driver_ref": "driverRef",
        "number": "number",
        "code": "code",
        "forename": "forename",
        "surname": "surname",
        "dob": "dob",
        "nationality": "nationality",
        "url": "url",
    },
)

DRIVER_ORDER = "d.surname ASC, d.forename ASC, d.driverId ASC"


async def list_drivers(db: Database) -> Fetched[list[dict[str, Any]]] | Failed:
    return await db.fetch_all(
        f"""
        SELECT
          {DRIVER.select_list()}
        FROM drivers d
        ORDER BY {DRIVER_ORDER}
        """
    )


async def get_driver_by_ref(
    db: Database,
    driver_ref: str,
) -> Fetched[dict[str, Any] | None] | Failed:
    return await db.fetch_one(
        f"""
        SELECT
          {DRIVER.select_list()}
        FROM drivers d
        WHERE lower(d.driverRef) = $1
        """,
        driver_ref,
    )


async def search_drivers_by_surname(
    db: Database,
    pattern: str,
) -> Fetched[list[dict[str, Any]]] | Failed:
    """
    `pattern` is an already lower-cased, escaped LIKE pattern (see
    `core.identifiers.prefix_pattern`).
    """
    return await db.fetch_all(
        f"""
        SELECT
          {DRIVER.select_list()}
        FROM drivers d
        WHERE lower(d.surname) LIKE $1 ESCAPE '\\'
        ORDER BY {DRIVER_ORDER}
        """,
        pattern,
    )
