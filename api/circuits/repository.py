"""
Circuit SQL (raw, read-only).
"""

from __future__ import annotations

from typing import Any

from core.db import Database, Failed, Fetched
from core.projection import Projection

CIRCUIT = Projection(
    "circuit",
    "ci",
    {
        "circuit_id": "circuitId",
        "circuit_ref": "circuitRef",
        "name": "name",
        "location": "location",
        "country": "country",
        "lat": "lat",
        "lng": "lng",
        "alt": "alt",
        "url": "url",
    },
)


async def list_circuits(db: Database) -> Fetched[list[dict[str, Any]]] | Failed:
    return await db.fetch_all(
        f"""
        SELECT
          {CIRCUIT.select_list()}
        FROM circuits ci
        ORDER BY ci.name ASC, ci.circuitId ASC
        """
    )


async def list_circuits_for_season(
    db: Database,
    year: int,
) -> Fetched[list[dict[str, Any]]] | Failed:
    """
    Circuits used in a season, once each, in the order of their first round.
    """
    return await db.fetch_all(
        f"""
        SELECT
          {CIRCUIT.select_list()}
        FROM circuits ci
        INNER JOIN races ra ON ra.circuitId = ci.circuitId
        WHERE ra.year = $1
        GROUP BY ci.circuitId, ci.circuitRef, ci.name, ci.location, ci.country,
                 ci.lat, ci.lng, ci.alt, ci.url
        ORDER BY MIN(ra.round) ASC, ci.circuitId ASC
        """,
        year,
    )


async def get_circuit_by_ref(
    db: Database,
    circuit_ref: str,
) -> Fetched[dict[str, Any] | None] | Failed:
    return await db.fetch_one(
        f"""
        SELECT
          {CIRCUIT.select_list()}
        FROM circuits ci
        WHERE lower(ci.circuitRef) = $1
        """,
        circuit_ref,
    )
