from __future__ import annotations

from core import outcomes
from core.db import Database

from . import repository
from .schemas import QualifyingEntry


def to_entry(row: dict) -> QualifyingEntry:
    return QualifyingEntry.model_validate(repository.QUALIFYING_ENTRY.extract(row))


async def qualifying_for_race(db: Database, race_id: int) -> list[QualifyingEntry]:
    rows = outcomes.some_rows(
        await repository.qualifying_for_race(db, race_id),
        f"No qualifying results found for race {race_id}.",
    )
    return [to_entry(row) for row in rows]
