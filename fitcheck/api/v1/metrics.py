# fitcheck/api/v1/metrics.py
from __future__ import annotations
import datetime as dt
from typing import Optional
from fastapi import APIRouter, Depends

from fitcheck.api.deps import get_aggregator
from fitcheck.api.permissions import require_roles
from fitcheck.core.rbac import Role
from fitcheck.schemas.metrics import MetricsReport
from fitcheck.services.history import HistoryAndMetricsAggregator

router = APIRouter()

@router.get("/check-ins", response_model=MetricsReport, dependencies=[Depends(require_roles(Role.ADMIN))])
def check_in_metrics(
    user_id: Optional[str] = None,
    location_id: Optional[str] = None,
    start_date: Optional[dt.datetime] = None,
    end_date: Optional[dt.datetime] = None,
    aggregator: HistoryAndMetricsAggregator = Depends(get_aggregator),
):
    return aggregator.metrics(user_id=user_id, location_id=location_id, start_date=start_date, end_date=end_date)
