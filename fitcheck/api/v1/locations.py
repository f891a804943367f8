# fitcheck/api/v1/locations.py
from __future__ import annotations
from typing import Optional
from fastapi import APIRouter, Depends, Query

from fitcheck.api.deps import get_current_user, get_check_in_engine, get_location_registry, get_search_engine
from fitcheck.api.permissions import require_roles
from fitcheck.core.rbac import Role
from fitcheck.schemas.location import DistanceCheck, LocationCreate, LocationOut, SearchPage
from fitcheck.services.checkins import CheckInEngine, GEOFENCE_RADIUS_METERS
from fitcheck.services.locations import LocationRegistry
from fitcheck.services.search import SearchEngine

router = APIRouter()

@router.post("/", response_model=LocationOut, status_code=201,
             dependencies=[Depends(require_roles(Role.ADMIN))])
def create_location(body: LocationCreate, registry: LocationRegistry = Depends(get_location_registry)):
    return LocationOut.model_validate(registry.create(**body.model_dump()))

# GET /locations/search?q=..&page=..&per_page=..&sort_by=..&sort_order=..&lat=..&lon=..&max_distance=..
@router.get("/search", response_model=SearchPage, dependencies=[Depends(get_current_user)])
def search_locations(
    q: str = Query(..., description="Texto buscado em título ou descrição"),
    page: int = 1,
    per_page: int = 20,
    sort_by: str = "name",
    sort_order: str = "asc",
    lat: Optional[float] = None,
    lon: Optional[float] = None,
    max_distance: Optional[float] = None,
    engine: SearchEngine = Depends(get_search_engine),
):
    return engine.search(
        q, page=page, per_page=per_page, sort_by=sort_by, sort_order=sort_order,
        user_latitude=lat, user_longitude=lon, max_distance=max_distance,
    )

@router.get("/{location_id}/distance", response_model=DistanceCheck, dependencies=[Depends(get_current_user)])
def check_distance(
    location_id: str,
    lat: float,
    lon: float,
    max_distance: float = GEOFENCE_RADIUS_METERS,
    engine: CheckInEngine = Depends(get_check_in_engine),
):
    return engine.check_distance(location_id, lat, lon, max_distance=max_distance)
