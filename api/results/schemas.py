"""
Race result payloads.
"""

from __future__ import annotations

from constructors.schemas import Constructor
from core.schemas import ApiModel
from drivers.schemas import Driver
from races.schemas import RaceSummary


class Status(ApiModel):
    status_id: int
    status: str


class Result(ApiModel):
    result_id: int
    race_id: int
    number: int | None = None
    grid: int | None = None
    # Unclassified finishers keep an explicit null.
    position: int | None
    position_text: str | None = None
    position_order: int | None = None
    points: float | None = None
    laps: int | None = None
    time: str | None = None
    milliseconds: int | None = None
    fastest_lap: int | None = None
    rank: int | None = None
    fastest_lap_time: str | None = None
    fastest_lap_speed: str | None = None
    status: Status
    driver: Driver
    constructor: Constructor
    race: RaceSummary
