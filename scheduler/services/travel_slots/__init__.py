# scheduler/services/travel_slots/__init__.py
"""
Travel-aware slot suggestions.

Single job, single day: candidate windows shifted by estimated travel
from the technician's last known location, bounded by business hours,
with a heuristic confidence score.
"""

from .config import TravelConfig, get_travel_config
from .errors import InputValidationError
from .suggest import suggest_slots, suggest_slots_response, validate_request

__all__ = [
    "TravelConfig",
    "get_travel_config",
    "InputValidationError",
    "suggest_slots",
    "suggest_slots_response",
    "validate_request",
]
