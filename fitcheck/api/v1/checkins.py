# fitcheck/api/v1/checkins.py
from __future__ import annotations
import datetime as dt
from typing import Optional
from fastapi import APIRouter, Depends

from fitcheck.api.deps import get_current_user, get_check_in_engine, get_validation_engine, get_aggregator
from fitcheck.models.user import User
from fitcheck.schemas.checkin import CheckInCreate, CheckInOut, CheckInPage, HistoryPage
from fitcheck.services.checkins import CheckInEngine
from fitcheck.services.history import HistoryAndMetricsAggregator
from fitcheck.services.validation import ValidationEngine

router = APIRouter()

@router.post("/", response_model=CheckInOut, status_code=201)
def create_check_in(
    body: CheckInCreate,
    user: User = Depends(get_current_user),
    engine: CheckInEngine = Depends(get_check_in_engine),
):
    check_in = engine.check_in(user.id, body.location_id, body.latitude, body.longitude)
    return CheckInOut.model_validate(check_in)

@router.patch("/{check_in_id}/validate", response_model=CheckInOut)
def validate_check_in(
    check_in_id: str,
    user: User = Depends(get_current_user),
    engine: ValidationEngine = Depends(get_validation_engine),
):
    return CheckInOut.model_validate(engine.validate(check_in_id, user.id))

@router.get("/history", response_model=HistoryPage)
def history(
    page: int = 1,
    per_page: int = 20,
    start_date: Optional[dt.datetime] = None,
    end_date: Optional[dt.datetime] = None,
    location_id: Optional[str] = None,
    include_details: bool = False,
    user: User = Depends(get_current_user),
    aggregator: HistoryAndMetricsAggregator = Depends(get_aggregator),
):
    return aggregator.history(
        user.id, page=page, per_page=per_page, start_date=start_date, end_date=end_date,
        location_id=location_id, include_details=include_details,
    )

@router.get("/", response_model=CheckInPage)
def list_check_ins(
    page: int = 1,
    per_page: int = 20,
    user: User = Depends(get_current_user),
    aggregator: HistoryAndMetricsAggregator = Depends(get_aggregator),
):
    return aggregator.user_check_ins(user.id, page=page, per_page=per_page)
