"""
Qualifying payloads.
"""

from __future__ import annotations

from constructors.schemas import Constructor
from core.schemas import ApiModel
from drivers.schemas import Driver
from races.schemas import RaceSummary


class QualifyingEntry(ApiModel):
    qualify_id: int
    race_id: int
    driver_id: int
    constructor_id: int
    number: int | None = None
    position: int | None = None
    q1: str | None = None
    q2: str | None = None
    q3: str | None = None
    driver: Driver
    constructor: Constructor
    race: RaceSummary
