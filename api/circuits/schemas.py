"""
Circuit payloads.
"""

from __future__ import annotations

from core.schemas import ApiModel


class Circuit(ApiModel):
    circuit_id: int
    circuit_ref: str
    name: str
    location: str | None = None
    country: str | None = None
    lat: float | None = None
    lng: float | None = None
    alt: int | None = None
    url: str | None = None
