"""
Not-found / failure policy applied to adapter outcomes.

Services call these right after a repository query; they either hand back
the rows or raise the matching `ApiError` for the app-level handlers.
"""

from __future__ import annotations

from typing import Any

from .db import Failed, Fetched
from .errors import NotFoundError

Row = dict[str, Any]


def all_rows(outcome: Fetched[list[Row]] | Failed) -> list[Row]:
    """
    Rows of an unfiltered listing; an empty list is a valid answer.
    """
    match outcome:
        case Failed(error=error):
            raise error
        case Fetched(value=rows):
            return rows
    raise TypeError(f"Unexpected query outcome: {outcome!r}")


def some_rows(outcome: Fetched[list[Row]] | Failed, not_found: str) -> list[Row]:
    match outcome:
        case Failed(error=error):
            raise error
        case Fetched(value=[]):
            raise NotFoundError(not_found)
        case Fetched(value=rows):
            return rows
    raise TypeError(f"Unexpected query outcome: {outcome!r}")


def one_row(outcome: Fetched[Row | None] | Failed, not_found: str) -> Row:
    match outcome:
        case Failed(error=error):
            raise error
        case Fetched(value=None):
            raise NotFoundError(not_found)
        case Fetched(value=row):
            return row
    raise TypeError(f"Unexpected query outcome: {outcome!r}")
