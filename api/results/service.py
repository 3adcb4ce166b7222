"""
Result lookups: validation, not-found policy and row mapping.
"""

from __future__ import annotations

from core import outcomes
from core.db import Database
from core.identifiers import normalize_ref
from core.validation import ensure_season_range

from . import repository
from .schemas import Result


def to_result(row: dict) -> Result:
    return Result.model_validate(repository.RESULT.extract(row))


async def results_for_race(db: Database, race_id: int) -> list[Result]:
    rows = outcomes.some_rows(
        await repository.results_for_race(db, race_id),
        f"No results found for race {race_id}.",
    )
    return [to_result(row) for row in rows]


async def results_for_driver(db: Database, ref: str) -> list[Result]:
    rows = outcomes.some_rows(
        await repository.results_for_driver(db, normalize_ref(ref)),
        f"No results found for driver '{ref}'.",
    )
    return [to_result(row) for row in rows]


async def results_for_driver_between(
    db: Database,
    ref: str,
    start_year: int,
    end_year: int,
) -> list[Result]:
    ensure_season_range(start_year, end_year)
    rows = outcomes.some_rows(
        await repository.results_for_driver_between(
            db,
            normalize_ref(ref),
            start_year=start_year,
            end_year=end_year,
        ),
        f"No results found for driver '{ref}' between seasons {start_year} and {end_year}.",
    )
    return [to_result(row) for row in rows]
