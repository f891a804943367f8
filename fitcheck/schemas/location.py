from __future__ import annotations
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from fitcheck.core.clock import as_utc


class LocationCreate(BaseModel):
    title: str
    description: Optional[str] = None
    phone: Optional[str] = None
    latitude: float
    longitude: float


class LocationRef(BaseModel):
    """Campos públicos de uma academia, usados em histórico e respostas."""
    id: str
    title: str
    description: Optional[str] = None
    phone: Optional[str] = None
    latitude: float
    longitude: float

    model_config = {"from_attributes": True}


class LocationOut(LocationRef):
    created_at: Optional[datetime] = None

    @field_validator("created_at")
    @classmethod
    def _utc(cls, v):
        return as_utc(v)


class LocationHit(LocationOut):
    distance: Optional[float] = None


class SearchPage(BaseModel):
    items: List[LocationHit] = Field(default_factory=list)
    total_count: int
    current_page: int
    total_pages: int
    per_page: int
    has_next_page: bool
    has_previous_page: bool
    search_query: str


class LocationSummary(BaseModel):
    id: str
    title: str
    latitude: float
    longitude: float


class DistanceCheck(BaseModel):
    is_valid: bool
    distance_meters: float
    location: LocationSummary
