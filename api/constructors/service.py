from __future__ import annotations

from core import outcomes
from core.db import Database
from core.identifiers import normalize_ref

from . import repository
from .schemas import Constructor


def to_constructor(row: dict) -> Constructor:
    return Constructor.model_validate(repository.CONSTRUCTOR.extract(row))


async def list_constructors(db: Database) -> list[Constructor]:
    rows = outcomes.all_rows(await repository.list_constructors(db))
    return [to_constructor(row) for row in rows]


async def get_constructor(db: Database, ref: str) -> Constructor:
    row = outcomes.one_row(
        await repository.get_constructor_by_ref(db, normalize_ref(ref)),
        f"Constructor with ref '{ref}' was not found.",
    )
    return to_constructor(row)
