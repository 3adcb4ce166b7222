"""
Race result API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database
from core.dependencies import get_db
from core.validation import IntPath

from . import service
from .schemas import Result

router = APIRouter(prefix="/results")


@router.get("/drivers/{ref}/seasons/{start}/{end}", response_model=list[Result])
async def results_for_driver_between(
    ref: str,
    start: IntPath,
    end: IntPath,
    db: Database = Depends(get_db),
) -> list[Result]:
    """
    A driver's results between two seasons, both inclusive.
    """
    return await service.results_for_driver_between(db, ref, start, end)


@router.get("/driver/{ref}", response_model=list[Result])
async def results_for_driver(ref: str, db: Database = Depends(get_db)) -> list[Result]:
    return await service.results_for_driver(db, ref)


@router.get("/{race_id}", response_model=list[Result])
async def results_for_race(race_id: IntPath, db: Database = Depends(get_db)) -> list[Result]:
    return await service.results_for_race(db, race_id)
