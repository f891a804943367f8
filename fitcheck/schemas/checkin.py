from __future__ import annotations
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from fitcheck.core.clock import as_utc
from fitcheck.schemas.location import LocationRef


class CheckInCreate(BaseModel):
    location_id: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class CheckInOut(BaseModel):
    id: str
    user_id: str
    location_id: str
    created_at: datetime
    validated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @field_validator("created_at", "validated_at")
    @classmethod
    def _utc(cls, v):
        return as_utc(v)


class HistoryEntry(CheckInOut):
    location_details: Optional[LocationRef] = None


class FrequentLocation(BaseModel):
    location_id: str
    location_title: str
    count: int


class HistorySummary(BaseModel):
    total_check_ins: int
    check_ins_this_month: int
    check_ins_this_week: int
    check_ins_today: int
    most_frequent_location: Optional[FrequentLocation] = None


class HistoryPage(BaseModel):
    check_ins: List[HistoryEntry] = Field(default_factory=list)
    total_count: int
    current_page: int
    total_pages: int
    per_page: int
    has_next_page: bool
    has_previous_page: bool
    summary: HistorySummary


class CheckInPage(BaseModel):
    check_ins: List[CheckInOut] = Field(default_factory=list)
    total_count: int
    current_page: int
    total_pages: int
    per_page: int
