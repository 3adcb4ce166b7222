"""
Request-level checks that run before any query.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Path

from .errors import ValidationError

# Ids, years and rounds are int4 columns; larger values cannot be bound.
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1

IntPath = Annotated[int, Path(ge=INT4_MIN, le=INT4_MAX)]


def ensure_season_range(start_year: int, end_year: int) -> None:
    """
    Reject inverted ranges; `start == end` is a single season.
    """
    if end_year < start_year:
        raise ValidationError("End year must be greater than or equal to start year.")
