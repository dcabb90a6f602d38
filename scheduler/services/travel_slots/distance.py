# scheduler/services/travel_slots/distance.py
"""
Road distance estimate between two points.

No routing service is called: great-circle distance is scaled by
config.city_multiplier to approximate urban detours.
"""

import math

from ...schemas.travel_slots import GeoPoint
from .config import TravelConfig

EARTH_RADIUS_KM = 6371


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )

    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def estimate_distance_km(a: GeoPoint, b: GeoPoint, config: TravelConfig) -> float:
    """Great-circle distance a → b in km, corrected for city routing."""
    return haversine_km(a.lat, a.lng, b.lat, b.lng) * config.city_multiplier
