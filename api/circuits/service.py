"""
Circuit lookups: not-found policy and row mapping.
"""

from __future__ import annotations

from core import outcomes
from core.db import Database
from core.identifiers import normalize_ref

from . import repository
from .schemas import Circuit


def to_circuit(row: dict) -> Circuit:
    return Circuit.model_validate(repository.CIRCUIT.extract(row))


async def list_circuits(db: Database) -> list[Circuit]:
    rows = outcomes.all_rows(await repository.list_circuits(db))
    return [to_circuit(row) for row in rows]


async def circuits_for_season(db: Database, year: int) -> list[Circuit]:
    rows = outcomes.some_rows(
        await repository.list_circuits_for_season(db, year),
        f"No circuits found for season {year}.",
    )
    return [to_circuit(row) for row in rows]


async def get_circuit(db: Database, ref: str) -> Circuit:
    row = outcomes.one_row(
        await repository.get_circuit_by_ref(db, normalize_ref(ref)),
        f"Circuit with ref '{ref}' was not found.",
    )
    return to_circuit(row)
