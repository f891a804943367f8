# fitcheck/services/history.py
"""
Histórico paginado do usuário e métricas globais de check-in.

Tudo aqui é leitura: nenhum estado fica no agregador entre chamadas (caches de
título vivem só dentro de uma chamada).
"""
from __future__ import annotations

import datetime as dt
from typing import Dict, Iterable, List, Optional, Tuple

from fitcheck.core.clock import (
    Clock,
    utcnow,
    as_utc,
    local_date,
    start_of_today,
    start_of_week,
    start_of_month,
)
from fitcheck.core.errors import InvalidDateRangeError
from fitcheck.schemas.checkin import (
    CheckInOut,
    CheckInPage,
    FrequentLocation,
    HistoryEntry,
    HistoryPage,
    HistorySummary,
)
from fitcheck.schemas.location import LocationRef
from fitcheck.schemas.metrics import ActiveUser, DateCount, LocationCount, MetricsReport, PopularLocation
from fitcheck.services.stores import CheckInStore, LocationStore
from fitcheck.services.validators import require_id, check_pagination, total_pages

DEFAULT_WINDOW = dt.timedelta(days=30)
UNKNOWN_LOCATION = "Unknown location"


def _top(counts: Dict[str, int]) -> Optional[Tuple[str, int]]:
    """Maior contagem; empate fica com o primeiro visto (ordem de inserção do dict)."""
    best: Optional[Tuple[str, int]] = None
    for key, count in counts.items():
        if best is None or count > best[1]:
            best = (key, count)
    return best


def _count_by(values: Iterable[str]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for v in values:
        counts[v] = counts.get(v, 0) + 1
    return counts


class _LocationLookup:
    def __init__(self, locations: LocationStore):
        self.locations = locations
        self._cache: Dict[str, object] = {}

    def get(self, location_id: str):
        if location_id not in self._cache:
            self._cache[location_id] = self.locations.get(location_id)
        return self._cache[location_id]

    def title(self, location_id: str) -> str:
        location = self.get(location_id)
        return location.title if location else UNKNOWN_LOCATION


class HistoryAndMetricsAggregator:
    def __init__(self, check_ins: CheckInStore, locations: LocationStore, clock: Clock = utcnow):
        self.check_ins = check_ins
        self.locations = locations
        self.clock = clock

    def _window(
        self,
        now: dt.datetime,
        start_date: Optional[dt.datetime],
        end_date: Optional[dt.datetime],
        strict: bool = True,
    ) -> Tuple[dt.datetime, dt.datetime]:
        start = as_utc(start_date) if start_date else now - DEFAULT_WINDOW
        end = as_utc(end_date) if end_date else now
        # strict=False: só valida quando as duas datas vêm do caller
        if strict or (start_date and end_date):
            if start >= end:
                raise InvalidDateRangeError()
        return start, end

    # ------------------------------------------------------------------ history

    def history(
        self,
        user_id: str,
        page: int = 1,
        per_page: int = 20,
        start_date: Optional[dt.datetime] = None,
        end_date: Optional[dt.datetime] = None,
        location_id: Optional[str] = None,
        include_details: bool = False,
    ) -> HistoryPage:
        require_id(user_id, "User ID")
        check_pagination(page, per_page)
        now = as_utc(self.clock())
        start, end = self._window(now, start_date, end_date, strict=False)

        skip = (page - 1) * per_page
        rows = self.check_ins.find_page_by_user(user_id, skip, per_page, "desc")
        total = self.check_ins.count_by_user(user_id)

        # filtros aplicados sobre a página já buscada
        rows = [r for r in rows if start <= as_utc(r.created_at) <= end]
        if location_id:
            rows = [r for r in rows if r.location_id == location_id]

        lookup = _LocationLookup(self.locations)
        entries: List[HistoryEntry] = []
        for r in rows:
            entry = HistoryEntry.model_validate(r)
            if include_details:
                location = lookup.get(r.location_id)
                entry.location_details = LocationRef.model_validate(location) if location else None
            entries.append(entry)

        pages = total_pages(total, per_page)
        return HistoryPage(
            check_ins=entries,
            total_count=total,
            current_page=page,
            total_pages=pages,
            per_page=per_page,
            has_next_page=page < pages,
            has_previous_page=page > 1,
            summary=self._summary(user_id, now, lookup),
        )

    def _summary(self, user_id: str, now: dt.datetime, lookup: _LocationLookup) -> HistorySummary:
        # sobre todos os check-ins do usuário, não só a página
        everything = self.check_ins.list_by_user(user_id)
        created = [as_utc(c.created_at) for c in everything]
        today, week, month = start_of_today(now), start_of_week(now), start_of_month(now)

        most_frequent = None
        top = _top(_count_by(c.location_id for c in everything))
        if top:
            most_frequent = FrequentLocation(location_id=top[0], location_title=lookup.title(top[0]), count=top[1])

        return HistorySummary(
            total_check_ins=len(everything),
            check_ins_this_month=sum(1 for t in created if t >= month),
            check_ins_this_week=sum(1 for t in created if t >= week),
            check_ins_today=sum(1 for t in created if t >= today),
            most_frequent_location=most_frequent,
        )

    def user_check_ins(self, user_id: str, page: int = 1, per_page: int = 20) -> CheckInPage:
        require_id(user_id, "User ID")
        check_pagination(page, per_page)
        skip = (page - 1) * per_page
        rows = self.check_ins.find_page_by_user(user_id, skip, per_page, "desc")
        total = self.check_ins.count_by_user(user_id)
        return CheckInPage(
            check_ins=[CheckInOut.model_validate(r) for r in rows],
            total_count=total,
            current_page=page,
            total_pages=total_pages(total, per_page),
            per_page=per_page,
        )

    # ------------------------------------------------------------------ metrics

    def metrics(
        self,
        user_id: Optional[str] = None,
        location_id: Optional[str] = None,
        start_date: Optional[dt.datetime] = None,
        end_date: Optional[dt.datetime] = None,
    ) -> MetricsReport:
        now = as_utc(self.clock())
        start, end = self._window(now, start_date, end_date)

        rows = self.check_ins.find_in_range(start, end)
        if user_id:
            rows = [r for r in rows if r.user_id == user_id]
        if location_id:
            rows = [r for r in rows if r.location_id == location_id]

        by_user = _count_by(r.user_id for r in rows)
        by_location = _count_by(r.location_id for r in rows)
        by_date = _count_by(local_date(r.created_at).isoformat() for r in rows)

        lookup = _LocationLookup(self.locations)
        total = len(rows)
        total_users = len(by_user)

        most_active = None
        top_user = _top(by_user)
        if top_user:
            most_active = ActiveUser(user_id=top_user[0], check_in_count=top_user[1])

        most_popular = None
        top_location = _top(by_location)
        if top_location:
            most_popular = PopularLocation(
                location_id=top_location[0],
                location_title=lookup.title(top_location[0]),
                check_in_count=top_location[1],
            )

        return MetricsReport(
            total_check_ins=total,
            total_users=total_users,
            total_locations=self.locations.count(),
            check_ins_by_date=[DateCount(date=d, count=c) for d, c in sorted(by_date.items())],
            check_ins_by_location=sorted(
                (LocationCount(location_id=lid, location_title=lookup.title(lid), count=c)
                 for lid, c in by_location.items()),
                key=lambda row: row.count,
                reverse=True,
            ),
            average_check_ins_per_user=round(total / total_users, 2) if total_users else 0,
            most_active_user=most_active,
            most_popular_location=most_popular,
        )
