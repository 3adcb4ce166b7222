"""
Constructor payloads.
"""

from __future__ import annotations

from core.schemas import ApiModel


class Constructor(ApiModel):
    constructor_id: int
    constructor_ref: str
    name: str
    nationality: str | None = None
    url: str | None = None
