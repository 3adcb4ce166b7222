from __future__ import annotations

from core import outcomes
from core.db import Database

from . import repository
from .schemas import ConstructorStanding, DriverStanding


def to_driver_standing(row: dict) -> DriverStanding:
    return DriverStanding.model_validate(repository.DRIVER_STANDING.extract(row))


def to_constructor_standing(row: dict) -> ConstructorStanding:
    return ConstructorStanding.model_validate(repository.CONSTRUCTOR_STANDING.extract(row))


async def driver_standings(db: Database, race_id: int) -> list[DriverStanding]:
    rows = outcomes.some_rows(
        await repository.driver_standings_for_race(db, race_id),
        f"No driver standings found for race {race_id}.",
    )
    return [to_driver_standing(row) for row in rows]


async def constructor_standings(db: Database, race_id: int) -> list[ConstructorStanding]:
    rows = outcomes.some_rows(
        await repository.constructor_standings_for_race(db, race_id),
        f"No constructor standings found for race {race_id}.",
    )
    return [to_constructor_standing(row) for row in rows]
