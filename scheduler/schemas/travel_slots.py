# scheduler/schemas/travel_slots.py
"""
Pydantic schemas for travel-aware slot suggestions.
"""

import re
from datetime import date, datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

RiskTier = Literal["low", "med", "high"]
OriginSource = Literal["last_job", "base", "unknown"]

ORG_ID_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9_.:\-]{0,63}")
DAY_RE = re.compile(r"\d{4}-\d{2}-\d{2}")

# Points that may also arrive as flat <name>_lat / <name>_lng fields
FLAT_POINT_FIELDS = ("base", "last_job", "target")


class GeoPoint(BaseModel):
    """A latitude/longitude pair in degrees."""
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)

    model_config = ConfigDict(frozen=True, allow_inf_nan=False, extra="forbid")


class Origin(BaseModel):
    """Travel starting point and where it came from."""
    point: GeoPoint
    source: OriginSource

    model_config = ConfigDict(frozen=True)


class SuggestSlotsRequest(BaseModel):
    """Request for travel-aware slot candidates on one day."""
    org_id: str = Field(description="Opaque organization id")
    day: date = Field(description="Target day in YYYY-MM-DD format")
    job_duration_minutes: int = Field(gt=0, strict=True)
    risk: RiskTier = "med"

    base: Optional[GeoPoint] = None
    last_job: Optional[GeoPoint] = None
    target: GeoPoint

    model_config = ConfigDict(extra="forbid", revalidate_instances="always")

    @model_validator(mode="before")
    @classmethod
    def fold_flat_points(cls, data: Any) -> Any:
        """Accept base_lat/base_lng style fields and fold them into points."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for name in FLAT_POINT_FIELDS:
            lat_key, lng_key = f"{name}_lat", f"{name}_lng"
            if lat_key not in data and lng_key not in data:
                continue
            lat = data.pop(lat_key, None)
            lng = data.pop(lng_key, None)
            if lat is None and lng is None:
                continue
            if lat is None or lng is None:
                raise ValueError(f"{lat_key} and {lng_key} must be given together")
            if data.get(name) is not None:
                raise ValueError(f"{name} given both nested and as {lat_key}/{lng_key}")
            data[name] = {"lat": lat, "lng": lng}
        return data

    @field_validator("org_id")
    @classmethod
    def validate_org_id(cls, v: str) -> str:
        if not ORG_ID_RE.fullmatch(v):
            raise ValueError("org_id must be 1-64 characters of letters, digits, '_', '.', ':' or '-'")
        return v

    @field_validator("day", mode="before")
    @classmethod
    def validate_day(cls, v: Any) -> Any:
        """Validate date format."""
        if isinstance(v, datetime):
            raise ValueError("Day must be a date without a time component")
        if isinstance(v, date):
            return v
        if not isinstance(v, str) or not DAY_RE.fullmatch(v):
            raise ValueError("Day must be in YYYY-MM-DD format")
        try:
            return datetime.strptime(v, "%Y-%m-%d").date()
        except ValueError:
            raise ValueError("Day must be a valid calendar date")


class SlotCandidate(BaseModel):
    """A proposed appointment window."""
    start: datetime
    end: datetime
    buffer_minutes: int = Field(ge=0)
    confidence: float = Field(ge=0.0, le=1.0)
    rationale: str

    model_config = ConfigDict(frozen=True)


class SuggestSlotsResponse(BaseModel):
    """Candidates plus the request-level values they were derived from."""
    org_id: str
    day: date
    timezone: str
    work_start: datetime
    work_end: datetime

    origin_source: OriginSource
    distance_km: float
    travel_minutes: int
    buffer_minutes: int
    confidence: float

    candidates: list[SlotCandidate]

    model_config = ConfigDict(frozen=True)
