"""
Driver API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database
from core.dependencies import get_db
from core.validation import IntPath
from results.schemas import Result

from . import service
from .schemas import Driver

router = APIRouter(prefix="/drivers")


@router.get("", response_model=list[Driver])
async def list_drivers(db: Database = Depends(get_db)) -> list[Driver]:
    """
    All drivers ordered by surname, then forename.
    """
    return await service.list_drivers(db)


@router.get("/race/{race_id}", response_model=list[Result])
async def drivers_for_race(race_id: IntPath, db: Database = Depends(get_db)) -> list[Result]:
    return await service.drivers_for_race(db, race_id)


@router.get("/search/{substring}", response_model=list[Driver])
async def search_drivers(substring: str, db: Database = Depends(get_db)) -> list[Driver]:
    """
    Drivers whose surname starts with `substring` (case-insensitive).
    """
    return await service.search_drivers(db, substring)


@router.get("/{ref}", response_model=Driver)
async def get_driver(ref: str, db: Database = Depends(get_db)) -> Driver:
    return await service.get_driver(db, ref)
