"""
Championship standings payloads (snapshot after one race).
"""

from __future__ import annotations

from constructors.schemas import Constructor
from core.schemas import ApiModel
from drivers.schemas import Driver
from races.schemas import RaceSummary


class DriverStanding(ApiModel):
    driver_standings_id: int
    race_id: int
    points: float | None = None
    position: int | None = None
    position_text: str | None = None
    wins: int | None = None
    driver: Driver
    race: RaceSummary


class ConstructorStanding(ApiModel):
    constructor_standings_id: int
    race_id: int
    points: float | None = None
    position: int | None = None
    position_text: str | None = None
    wins: int | None = None
    constructor: Constructor
    race: RaceSummary
