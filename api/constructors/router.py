"""
Constructor API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database
from core.dependencies import get_db

from . import service
from .schemas import Constructor

router = APIRouter(prefix="/constructors")


@router.get("", response_model=list[Constructor])
async def list_constructors(db: Database = Depends(get_db)) -> list[Constructor]:
    return await service.list_constructors(db)


@router.get("/{ref}", response_model=Constructor)
async def get_constructor(ref: str, db: Database = Depends(get_db)) -> Constructor:
    """
    Constructor by reference code (case-insensitive).
    """
    return await service.get_constructor(db, ref)
