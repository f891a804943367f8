# fitcheck/core/clock.py
from __future__ import annotations

import datetime as dt
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from fitcheck.core.config import settings

Clock = Callable[[], dt.datetime]

def utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)

def as_utc(value: Optional[dt.datetime]) -> Optional[dt.datetime]:
    # SQLite devolve datetime sem tzinfo; gravamos sempre em UTC
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc)

def local_tz() -> ZoneInfo:
    return ZoneInfo(settings.TIMEZONE)

def local_date(value: dt.datetime) -> dt.date:
    return as_utc(value).astimezone(local_tz()).date()

def _start_of(day: dt.date) -> dt.datetime:
    return dt.datetime.combine(day, dt.time.min, tzinfo=local_tz()).astimezone(dt.timezone.utc)

def day_bounds(now: dt.datetime) -> tuple[dt.datetime, dt.datetime]:
    """[início do dia, início do dia seguinte) no fuso local, em UTC."""
    today = local_date(now)
    return _start_of(today), _start_of(today + dt.timedelta(days=1))

def start_of_today(now: dt.datetime) -> dt.datetime:
    return _start_of(local_date(now))

def start_of_week(now: dt.datetime) -> dt.datetime:
    # semana começa no domingo (dia 0)
    today = local_date(now)
    days_since_sunday = (today.weekday() + 1) % 7
    return _start_of(today - dt.timedelta(days=days_since_sunday))

def start_of_month(now: dt.datetime) -> dt.datetime:
    return _start_of(local_date(now).replace(day=1))
