# scheduler/services/travel_slots/config.py
"""
Tunables for travel-aware slot suggestions.
"""

import logging
from dataclasses import dataclass, field
from datetime import time
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ...config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "Europe/Amsterdam"
RISK_TIERS = ("low", "med", "high")


def _default_risk_buffer() -> Mapping[str, float]:
    return MappingProxyType({"low": 0.10, "med": 0.20, "high": 0.30})


def is_valid_timezone(name: str | None) -> bool:
    if not name:
        return False
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True


def normalize_timezone(name: str | None) -> str:
    """Return `name` if it is a known IANA zone, else the default zone."""
    if is_valid_timezone(name):
        return name
    logger.warning(f"Unknown timezone {name!r}, falling back to {DEFAULT_TIMEZONE}")
    return DEFAULT_TIMEZONE


@dataclass(frozen=True)
class TravelConfig:
    """
    Configuration for the travel-aware slot engine.

    Attributes:
        city_multiplier: Correction applied to great-circle distance (urban detours)
        base_speed_kmh: Assumed effective in-city speed
        risk_buffer: Buffer percentage per risk tier (low/med/high)
        max_buffer_minutes: Hard cap on buffer minutes
        work_start / work_end: Business hours (local wall clock)
        timezone: IANA zone the business hours are expressed in
        candidate_offsets_minutes: Start offsets from work_start, ascending
        unknown_origin_penalty: Confidence penalty when origin is unknown
        distance_penalty_km: Distance that costs 1.0 confidence (before capping)
        max_distance_penalty: Cap on the distance penalty
        min_confidence: Floor for reported confidence
    """
    city_multiplier: float = 1.35
    base_speed_kmh: float = 28.0
    risk_buffer: Mapping[str, float] = field(default_factory=_default_risk_buffer)
    max_buffer_minutes: int = 45
    work_start: time = time(8, 0)
    work_end: time = time(17, 0)
    timezone: str = DEFAULT_TIMEZONE
    candidate_offsets_minutes: tuple[int, ...] = (0, 120, 300, 420)
    unknown_origin_penalty: float = 0.2
    distance_penalty_km: float = 30.0
    max_distance_penalty: float = 0.4
    min_confidence: float = 0.4

    def __post_init__(self):
        """Validate configuration."""
        if self.city_multiplier <= 0:
            raise ValueError(f"city_multiplier must be positive, got {self.city_multiplier}")
        if self.base_speed_kmh <= 0:
            raise ValueError(f"base_speed_kmh must be positive, got {self.base_speed_kmh}")

        if set(self.risk_buffer) != set(RISK_TIERS):
            raise ValueError(f"risk_buffer must define exactly {RISK_TIERS}, got {sorted(self.risk_buffer)}")
        pcts = [self.risk_buffer[tier] for tier in RISK_TIERS]
        if any(p < 0 for p in pcts):
            raise ValueError(f"risk_buffer percentages must be non-negative, got {pcts}")
        if pcts != sorted(pcts):
            raise ValueError(f"risk_buffer must not decrease from low to high, got {pcts}")
        # Freeze a caller-supplied dict
        object.__setattr__(self, "risk_buffer", MappingProxyType(dict(self.risk_buffer)))

        if self.max_buffer_minutes < 0:
            raise ValueError(f"max_buffer_minutes must be >= 0, got {self.max_buffer_minutes}")
        if self.work_start >= self.work_end:
            raise ValueError(f"work_start must be before work_end, got {self.work_start}-{self.work_end}")
        if not is_valid_timezone(self.timezone):
            raise ValueError(f"Unknown timezone: {self.timezone!r}")

        offsets = tuple(self.candidate_offsets_minutes)
        if not offsets:
            raise ValueError("candidate_offsets_minutes must not be empty")
        if any(o < 0 for o in offsets):
            raise ValueError(f"candidate_offsets_minutes must be non-negative, got {offsets}")
        if list(offsets) != sorted(set(offsets)):
            raise ValueError(f"candidate_offsets_minutes must be strictly ascending, got {offsets}")
        object.__setattr__(self, "candidate_offsets_minutes", offsets)

        for name in ("unknown_origin_penalty", "max_distance_penalty", "min_confidence"):
            value = getattr(self, name)
            if not 0 <= value <= 1:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if self.distance_penalty_km <= 0:
            raise ValueError(f"distance_penalty_km must be positive, got {self.distance_penalty_km}")

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    def risk_pct(self, risk: str) -> float:
        """Buffer percentage for a risk tier."""
        try:
            return self.risk_buffer[risk]
        except KeyError:
            raise ValueError(f"Unknown risk tier: {risk!r}") from None


@lru_cache
def get_travel_config() -> TravelConfig:
    """
    Get travel configuration (singleton).

    Reads overrides from SCHEDULER_* environment variables.
    """
    settings = get_settings()
    return TravelConfig(
        city_multiplier=settings.city_multiplier,
        base_speed_kmh=settings.base_speed_kmh,
        max_buffer_minutes=settings.max_buffer_minutes,
        work_start=time(settings.work_start_hour, 0),
        work_end=time(settings.work_end_hour, 0),
        timezone=normalize_timezone(settings.timezone),
    )
