# scheduler/services/travel_slots/buffer.py
"""
Travel time and risk buffer.

    travel_minutes = ceil(distance_km / base_speed_kmh * 60)
    buffer_minutes = min(ceil(travel_minutes * (1 + risk_pct)), max_buffer_minutes)

Both are rounded up: travel time is never underestimated.
"""

import math

from .config import TravelConfig


# Absorbs multiplication error only (10 * 1.1 = 11.000000000000002)
CEIL_TOLERANCE = 1e-9


def ceil_minutes(value: float) -> int:
    """
    Round up to whole minutes.

    Values within CEIL_TOLERANCE above a whole minute round down to it, so
    10 * 1.1 gives 11, not 12. Anything larger (20.0000004) rounds up.
    """
    return math.ceil(value - CEIL_TOLERANCE)


def travel_minutes(distance_km: float, config: TravelConfig) -> int:
    return ceil_minutes(distance_km / config.base_speed_kmh * 60)


def buffer_minutes(travel_min: int, risk: str, config: TravelConfig) -> int:
    """Risk-adjusted buffer, capped at config.max_buffer_minutes."""
    raw = ceil_minutes(travel_min * (1 + config.risk_pct(risk)))
    return min(raw, config.max_buffer_minutes)
