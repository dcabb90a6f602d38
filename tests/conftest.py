import pytest

from scheduler.schemas.travel_slots import GeoPoint
from scheduler.services.travel_slots.config import TravelConfig

ORG_ID = "550e8400-e29b-41d4-a716-446655440000"
DAY = "2025-09-15"

AMSTERDAM_CENTER = GeoPoint(lat=52.3702, lng=4.8952)
AMSTERDAM_NEARBY = GeoPoint(lat=52.3720, lng=4.9000)
AMSTERDAM_ZUIDOOST = GeoPoint(lat=52.315, lng=4.95)
ROTTERDAM = GeoPoint(lat=51.9244, lng=4.4777)
BRUSSELS = GeoPoint(lat=50.8503, lng=4.3517)


@pytest.fixture
def config() -> TravelConfig:
    return TravelConfig()


@pytest.fixture
def make_request():
    """Build a request dict with Amsterdam defaults; override any field."""
    def _make(**overrides) -> dict:
        data = {
            "org_id": ORG_ID,
            "day": DAY,
            "job_duration_minutes": 60,
            "risk": "med",
            "base": {"lat": AMSTERDAM_CENTER.lat, "lng": AMSTERDAM_CENTER.lng},
            "target": {"lat": AMSTERDAM_NEARBY.lat, "lng": AMSTERDAM_NEARBY.lng},
        }
        data.update(overrides)
        return {k: v for k, v in data.items() if v is not None}
    return _make
