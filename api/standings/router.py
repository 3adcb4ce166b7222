"""
Standings API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database
from core.dependencies import get_db
from core.validation import IntPath

from . import service
from .schemas import ConstructorStanding, DriverStanding

router = APIRouter(prefix="/standings")


@router.get("/drivers/{race_id}", response_model=list[DriverStanding])
async def driver_standings(
    race_id: IntPath,
    db: Database = Depends(get_db),
) -> list[DriverStanding]:
    return await service.driver_standings(db, race_id)


@router.get("/constructors/{race_id}", response_model=list[ConstructorStanding])
async def constructor_standings(
    race_id: IntPath,
    db: Database = Depends(get_db),
) -> list[ConstructorStanding]:
    return await service.constructor_standings(db, race_id)
