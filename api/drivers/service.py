"""
Driver lookups: not-found policy and row mapping.
"""

from __future__ import annotations

from core import outcomes
from core.db import Database
from core.errors import NotFoundError
from core.identifiers import normalize_ref, prefix_pattern
from results import repository as results_repository
from results.schemas import Result
from results.service import to_result

from . import repository
from .schemas import Driver


def to_driver(row: dict) -> Driver:
    return Driver.model_validate(repository.DRIVER.extract(row))


async def list_drivers(db: Database) -> list[Driver]:
    rows = outcomes.all_rows(await repository.list_drivers(db))
    return [to_driver(row) for row in rows]


async def get_driver(db: Database, ref: str) -> Driver:
    row = outcomes.one_row(
        await repository.get_driver_by_ref(db, normalize_ref(ref)),
        f"Driver with ref '{ref}' was not found.",
    )
    return to_driver(row)


async def search_drivers(db: Database, substring: str) -> list[Driver]:
    not_found = f"No drivers found with surname starting with '{substring}'."
    if not substring.strip():
        raise NotFoundError(not_found)
    rows = outcomes.some_rows(
        await repository.search_drivers_by_surname(db, prefix_pattern(substring)),
        not_found,
    )
    return [to_driver(row) for row in rows]


async def drivers_for_race(db: Database, race_id: int) -> list[Result]:
    """
    Classified results of one race, one entry per driver, ordered by grid.
    """
    rows = outcomes.some_rows(
        await results_repository.results_for_race(db, race_id),
        f"No drivers found for race {race_id}.",
    )
    return [to_result(row) for row in rows]
