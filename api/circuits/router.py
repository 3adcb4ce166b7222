"""
Circuit API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database
from core.dependencies import get_db
from core.validation import IntPath

from . import service
from .schemas import Circuit

router = APIRouter(prefix="/circuits")


@router.get("", response_model=list[Circuit])
async def list_circuits(db: Database = Depends(get_db)) -> list[Circuit]:
    """
    All circuits ordered alphabetically by name.
    """
    return await service.list_circuits(db)


@router.get("/season/{year}", response_model=list[Circuit])
async def circuits_for_season(year: IntPath, db: Database = Depends(get_db)) -> list[Circuit]:
    """
    Circuits used in a season, ordered by round.
    """
    return await service.circuits_for_season(db, year)


@router.get("/{ref}", response_model=Circuit)
async def get_circuit(ref: str, db: Database = Depends(get_db)) -> Circuit:
    return await service.get_circuit(db, ref)
