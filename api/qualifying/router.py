"""
Qualifying API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database
from core.dependencies import get_db
from core.validation import IntPath

from . import service
from .schemas import QualifyingEntry

router = APIRouter(prefix="/qualifying")


@router.get("/{race_id}", response_model=list[QualifyingEntry])
async def qualifying_for_race(
    race_id: IntPath,
    db: Database = Depends(get_db),
) -> list[QualifyingEntry]:
    """
    Qualifying classification of a race, ordered by position.
    """
    return await service.qualifying_for_race(db, race_id)
