"""
Race SQL (raw, read-only).

Every race query inner-joins its circuit, so a race without a resolvable
circuit is never returned.
"""

from __future__ import annotations

from typing import Any

from circuits.repository import CIRCUIT
from core.db import Database, Failed, Fetched
from core.projection import Projection

_RACE_COLUMNS = {
    "race_id": "raceId",
    "year": "year",
    "round": "round",
    "name": "name",
    "date": "date",
    "time": "time",
    "url": "url",
}

RACE_SUMMARY = Projection("race", "ra", _RACE_COLUMNS)

RACE = Projection("race", "ra", _RACE_COLUMNS, nested={"circuit": CIRCUIT})

_BASE_QUERY = f"""
        SELECT
          {RACE.select_list()}
        FROM races ra
        INNER JOIN circuits ci ON ci.circuitId = ra.circuitId
"""

RACE_ORDER = "ra.year ASC, ra.round ASC, ra.raceId ASC"


async def get_race_by_season_round(
    db: Database,
    year: int,
    round_number: int,
) -> Fetched[dict[str, Any] | None] | Failed:
    return await db.fetch_one(
        f"""{_BASE_QUERY}
        WHERE ra.year = $1 AND ra.round = $2
        """,
        year,
        round_number,
    )


async def list_races_for_season(db: Database, year: int) -> Fetched[list[dict[str, Any]]] | Failed:
    return await db.fetch_all(
        f"""{_BASE_QUERY}
        WHERE ra.year = $1
        ORDER BY ra.round ASC, ra.raceId ASC
        """,
        year,
    )


async def list_races_for_circuit(
    db: Database,
    circuit_ref: str,
) -> Fetched[list[dict[str, Any]]] | Failed:
    return await db.fetch_all(
        f"""{_BASE_QUERY}
        WHERE lower(ci.circuitRef) = $1
        ORDER BY {RACE_ORDER}
        """,
        circuit_ref,
    )


async def list_races_for_circuit_between(
    db: Database,
    circuit_ref: str,
    *,
    start_year: int,
    end_year: int,
) -> Fetched[list[dict[str, Any]]] | Failed:
    return await db.fetch_all(
        f"""{_BASE_QUERY}
        WHERE lower(ci.circuitRef) = $1
          AND ra.year BETWEEN $2 AND $3
        ORDER BY {RACE_ORDER}
        """,
        circuit_ref,
        start_year,
        end_year,
    )


async def get_race_by_id(db: Database, race_id: int) -> Fetched[dict[str, Any] | None] | Failed:
    return await db.fetch_one(
        f"""{_BASE_QUERY}
        WHERE ra.raceId = $1
        """,
        race_id,
    )
