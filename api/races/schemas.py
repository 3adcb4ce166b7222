"""
Race payloads.
"""

from __future__ import annotations

import datetime

from circuits.schemas import Circuit
from core.schemas import ApiModel


class RaceSummary(ApiModel):
    """
    Race nested inside results, qualifying entries and standings.
    """

    race_id: int
    year: int
    round: int
    name: str
    date: datetime.date | None = None
    time: datetime.time | None = None
    url: str | None = None


class Race(RaceSummary):
    circuit: Circuit
