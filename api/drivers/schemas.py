"""
Driver payloads.
"""

from __future__ import annotations

from datetime import date

from core.schemas import ApiModel


class Driver(ApiModel):
    driver_id: int
    driver_ref: str
    number: int | None = None
    code: str | None = None
    forename: str
    surname: str
    dob: date | None = None
    nationality: str | None = None
    url: str | None = None
