"""
Tests for services/travel_slots/origin.py
"""

from conftest import AMSTERDAM_CENTER, ROTTERDAM
from scheduler.services.travel_slots.origin import resolve_origin


class TestResolveOrigin:

    def test_last_job_wins(self):
        origin = resolve_origin(last_job=ROTTERDAM, base=AMSTERDAM_CENTER)
        assert origin.source == "last_job"
        assert origin.point == ROTTERDAM

    def test_base_when_no_last_job(self):
        origin = resolve_origin(last_job=None, base=AMSTERDAM_CENTER)
        assert origin.source == "base"
        assert origin.point == AMSTERDAM_CENTER

    def test_unknown_falls_back_to_null_island(self):
        origin = resolve_origin(last_job=None, base=None)
        assert origin.source == "unknown"
        assert (origin.point.lat, origin.point.lng) == (0.0, 0.0)
