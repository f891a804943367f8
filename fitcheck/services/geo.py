# fitcheck/services/geo.py
from math import radians, sin, cos, sqrt, atan2

EARTH_RADIUS_METERS = 6371000

def distance_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distância haversine em metros entre dois pontos (graus)."""
    φ1, φ2 = radians(lat1), radians(lat2)
    Δφ = radians(lat2 - lat1)
    Δλ = radians(lon2 - lon1)

    a = sin(Δφ/2)**2 + cos(φ1) * cos(φ2) * sin(Δλ/2)**2
    c = 2 * atan2(sqrt(a), sqrt(1 - a))
    return EARTH_RADIUS_METERS * c
