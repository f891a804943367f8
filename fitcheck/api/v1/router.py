# fitcheck/api/v1/router.py
from fastapi import APIRouter
from fitcheck.api.v1 import locations, checkins, metrics, users

api_router = APIRouter()

api_router.include_router(users.router,     prefix="/users",     tags=["users"])
api_router.include_router(locations.router, prefix="/locations", tags=["locations"])
api_router.include_router(checkins.router,  prefix="/check-ins", tags=["check-ins"])
api_router.include_router(metrics.router,   prefix="/metrics",   tags=["metrics"])
