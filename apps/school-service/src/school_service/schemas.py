from __future__ import annotations

from pydantic import BaseModel


class SchoolWithDistance(BaseModel):
    id: int
    name: str
    address: str
    latitude: float
    longitude: float
    distance: float
