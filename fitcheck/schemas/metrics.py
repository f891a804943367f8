from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, Field


class DateCount(BaseModel):
    date: str
    count: int


class LocationCount(BaseModel):
    location_id: str
    location_title: str
    count: int


class ActiveUser(BaseModel):
    user_id: str
    check_in_count: int


class PopularLocation(BaseModel):
    location_id: str
    location_title: str
    check_in_count: int


class MetricsReport(BaseModel):
    total_check_ins: int = 0
    total_users: int = 0
    total_locations: int = 0
    check_ins_by_date: List[DateCount] = Field(default_factory=list)
    check_ins_by_location: List[LocationCount] = Field(default_factory=list)
    average_check_ins_per_user: float = 0
    most_active_user: Optional[ActiveUser] = None
    most_popular_location: Optional[PopularLocation] = None
