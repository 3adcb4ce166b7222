"""
Race API endpoints.

Route order matters: the literal `season/` and `circuits/` paths are
registered before the catch-all `/{race_id}`.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database
from core.dependencies import get_db
from core.validation import IntPath

from . import service
from .schemas import Race

router = APIRouter(prefix="/races")


@router.get("/season/{year}/{round_number}", response_model=Race)
async def get_race_for_round(
    year: IntPath,
    round_number: IntPath,
    db: Database = Depends(get_db),
) -> Race:
    return await service.get_race_for_round(db, year, round_number)


@router.get("/season/{year}", response_model=list[Race])
async def races_for_season(year: IntPath, db: Database = Depends(get_db)) -> list[Race]:
    return await service.races_for_season(db, year)


@router.get("/circuits/{ref}/season/{start}/{end}", response_model=list[Race])
async def races_for_circuit_between(
    ref: str,
    start: IntPath,
    end: IntPath,
    db: Database = Depends(get_db),
) -> list[Race]:
    """
    Races held at a circuit between two seasons, both inclusive.
    """
    return await service.races_for_circuit_between(db, ref, start, end)


@router.get("/circuits/{ref}", response_model=list[Race])
async def races_for_circuit(ref: str, db: Database = Depends(get_db)) -> list[Race]:
    return await service.races_for_circuit(db, ref)


@router.get("/{race_id}", response_model=Race)
async def get_race(race_id: IntPath, db: Database = Depends(get_db)) -> Race:
    return await service.get_race(db, race_id)
