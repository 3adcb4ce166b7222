"""
Race lookups: validation, not-found policy and row mapping.
"""

from __future__ import annotations

from core import outcomes
from core.db import Database
from core.identifiers import normalize_ref
from core.validation import ensure_season_range

from . import repository
from .schemas import Race


def to_race(row: dict) -> Race:
    return Race.model_validate(repository.RACE.extract(row))


async def get_race_for_round(db: Database, year: int, round_number: int) -> Race:
    row = outcomes.one_row(
        await repository.get_race_by_season_round(db, year, round_number),
        f"Race round {round_number} for season {year} was not found.",
    )
    return to_race(row)


async def races_for_season(db: Database, year: int) -> list[Race]:
    rows = outcomes.some_rows(
        await repository.list_races_for_season(db, year),
        f"No races found for season {year}.",
    )
    return [to_race(row) for row in rows]


async def races_for_circuit(db: Database, ref: str) -> list[Race]:
    rows = outcomes.some_rows(
        await repository.list_races_for_circuit(db, normalize_ref(ref)),
        f"No races found for circuit '{ref}'.",
    )
    return [to_race(row) for row in rows]


async def races_for_circuit_between(
    db: Database,
    ref: str,
    start_year: int,
    end_year: int,
) -> list[Race]:
    ensure_season_range(start_year, end_year)
    rows = outcomes.some_rows(
        await repository.list_races_for_circuit_between(
            db,
            normalize_ref(ref),
            start_year=start_year,
            end_year=end_year,
        ),
        f"No races found for circuit '{ref}' between seasons {start_year} and {end_year}.",
    )
    return [to_race(row) for row in rows]


async def get_race(db: Database, race_id: int) -> Race:
    row = outcomes.one_row(
        await repository.get_race_by_id(db, race_id),
        f"Race with id '{race_id}' was not found.",
    )
    return to_race(row)
