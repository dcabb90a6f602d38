# scheduler/services/travel_slots/origin.py

from typing import Optional

from ...schemas.travel_slots import GeoPoint, Origin

UNKNOWN_ORIGIN = GeoPoint(lat=0.0, lng=0.0)


def resolve_origin(last_job: Optional[GeoPoint], base: Optional[GeoPoint]) -> Origin:
    """Pick the travel origin: last job → base → (0, 0) marked unknown."""
    if last_job is not None:
        return Origin(point=last_job, source="last_job")
    if base is not None:
        return Origin(point=base, source="base")
    return Origin(point=UNKNOWN_ORIGIN, source="unknown")
