"""
Constructor SQL (raw, read-only).
"""

from __future__ import annotations

from typing import Any

from core.db import Database, Failed, Fetched
from core.projection import Projection

CONSTRUCTOR = Projection(
    "constructor",
    "co",
    {
        "constructor_id": "constructorId",
        "constructor_ref": "constructorRef",
        "name": "name",
        "nationality": "nationality",
        "url": "url",
    },
)


async def list_constructors(db: Database) -> Fetched[list[dict[str, Any]]] | Failed:
    return await db.fetch_all(
        f"""
        SELECT
          {CONSTRUCTOR.select_list()}
        FROM constructors co
        ORDER BY co.name ASC, co.constructorId ASC
        """
    )


async def get_constructor_by_ref(
    db: Database,
    constructor_ref: str,
) -> Fetched[dict[str, Any] | None] | Failed:
    return await db.fetch_one(
        f"""
        SELECT
          {CONSTRUCTOR.select_list()}
        FROM constructors co
        WHERE lower(co.constructorRef) = $1
        """,
        constructor_ref,
    )
