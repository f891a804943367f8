# fitcheck/services/search.py
from __future__ import annotations

import datetime as dt
from typing import List, Optional

from fitcheck.core.clock import as_utc
from fitcheck.core.errors import InvalidArgumentError, MissingCoordinatesError
from fitcheck.schemas.location import LocationHit, SearchPage
from fitcheck.services.geo import distance_meters
from fitcheck.services.stores import LocationStore
from fitcheck.services.validators import check_pagination, check_latitude, check_longitude, total_pages

SORT_KEYS = ("name", "distance", "createdAt")
SORT_ORDERS = ("asc", "desc")
MAX_SEARCH_DISTANCE_METERS = 50000

_EPOCH = dt.datetime.min.replace(tzinfo=dt.timezone.utc)


class SearchEngine:
    def __init__(self, locations: LocationStore):
        self.locations = locations

    def search(
        self,
        query: str,
        page: int = 1,
        per_page: int = 20,
        sort_by: str = "name",
        sort_order: str = "asc",
        user_latitude: Optional[float] = None,
        user_longitude: Optional[float] = None,
        max_distance: Optional[float] = None,
    ) -> SearchPage:
        if not query or not query.strip():
            raise InvalidArgumentError("Search query is required")
        check_pagination(page, per_page)
        if sort_by not in SORT_KEYS:
            raise InvalidArgumentError("Sort by must be one of: name, distance, createdAt")
        if sort_order not in SORT_ORDERS:
            raise InvalidArgumentError("Sort order must be asc or desc")
        if user_latitude is not None:
            check_latitude(user_latitude, "User latitude")
        if user_longitude is not None:
            check_longitude(user_longitude, "User longitude")
        if max_distance is not None and max_distance <= 0:
            raise InvalidArgumentError("Maximum distance must be greater than 0")
        if max_distance is not None and max_distance > MAX_SEARCH_DISTANCE_METERS:
            raise InvalidArgumentError("Maximum distance cannot exceed 50,000 meters")

        has_coords = user_latitude is not None and user_longitude is not None
        if sort_by == "distance" and not has_coords:
            raise MissingCoordinatesError()

        needle = query.strip().casefold()
        hits: List[LocationHit] = []
        for location in self.locations.search(query.strip()):
            if not _matches(location, needle):
                continue
            hit = LocationHit.model_validate(location)
            if has_coords:
                distance = distance_meters(user_latitude, user_longitude, location.latitude, location.longitude)
                # raio só vale com coordenadas; sem elas o max_distance é ignorado
                if max_distance is not None and distance > max_distance:
                    continue
                hit.distance = round(distance, 2)
            hits.append(hit)

        ordered = _sort(hits, sort_by, sort_order)

        total = len(ordered)
        pages = total_pages(total, per_page)
        skip = (page - 1) * per_page
        return SearchPage(
            items=ordered[skip:skip + per_page],
            total_count=total,
            current_page=page,
            total_pages=pages,
            per_page=per_page,
            has_next_page=page < pages,
            has_previous_page=page > 1,
            search_query=query,
        )


def _matches(location, needle: str) -> bool:
    title = (location.title or "").casefold()
    description = (location.description or "").casefold()
    return needle in title or needle in description


def _by_name(hit: LocationHit) -> str:
    return hit.title.casefold()


def _by_distance(hit: LocationHit) -> float:
    return hit.distance


def _by_created_at(hit: LocationHit) -> dt.datetime:
    return as_utc(hit.created_at) or _EPOCH


_SORT_KEYS = {"name": _by_name, "distance": _by_distance, "createdAt": _by_created_at}


def _sort(hits: List[LocationHit], sort_by: str, sort_order: str) -> List[LocationHit]:
    # sorted é estável, inclusive com reverse=True
    return sorted(hits, key=_SORT_KEYS[sort_by], reverse=(sort_order == "desc"))
