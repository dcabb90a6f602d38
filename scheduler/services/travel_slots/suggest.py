# scheduler/services/travel_slots/suggest.py
"""
Entry point: travel-aware slot suggestions for one job on one day.

Pipeline (once per request):
  validate → origin → distance → travel/buffer → candidates → confidence

Pure and synchronous: no I/O, no shared state. Identical input gives
identical output. An empty list means nothing fits that day; it is not
an error.
"""

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from ...schemas.travel_slots import SlotCandidate, SuggestSlotsRequest, SuggestSlotsResponse
from .buffer import buffer_minutes, travel_minutes
from .candidates import generate_candidates, work_window
from .confidence import score_confidence
from .config import TravelConfig, get_travel_config
from .distance import estimate_distance_km
from .errors import InputValidationError
from .origin import resolve_origin

logger = logging.getLogger(__name__)


def validate_request(request: SuggestSlotsRequest | Mapping[str, Any]) -> SuggestSlotsRequest:
    """Validate a request model or a plain mapping, raising InputValidationError."""
    if not isinstance(request, (SuggestSlotsRequest, Mapping)):
        raise InputValidationError(
            f"Invalid slot request: expected a mapping, got {type(request).__name__}"
        )
    if not isinstance(request, SuggestSlotsRequest):
        request = dict(request)
    try:
        return SuggestSlotsRequest.model_validate(request)
    except ValidationError as e:
        error = InputValidationError.from_pydantic(e)
        logger.warning(f"Slot request rejected, invalid fields: {error.fields or ['request']}")
        raise error from e


def suggest_slots_response(
    request: SuggestSlotsRequest | Mapping[str, Any],
    config: TravelConfig | None = None,
) -> SuggestSlotsResponse:
    """
    Compute candidates together with the request-level values behind them.

    Args:
        request: SuggestSlotsRequest or a mapping with the same fields
            (flat base_lat/base_lng style fields are accepted too)
        config: Tunables; defaults to the process-wide config. Pass a
            different one for per-organization or regional policy.

    Raises:
        InputValidationError: request is invalid (before any computation)
    """
    req = validate_request(request)
    config = config or get_travel_config()

    origin = resolve_origin(req.last_job, req.base)
    distance_km = estimate_distance_km(origin.point, req.target, config)
    travel_min = travel_minutes(distance_km, config)
    buffer_min = buffer_minutes(travel_min, req.risk, config)
    confidence = score_confidence(origin.source, distance_km, config)

    logger.debug(
        f"org={req.org_id} origin={origin.source} dist={distance_km:.2f}km "
        f"travel={travel_min}m buffer={buffer_min}m confidence={confidence:.3f}"
    )

    day_start, day_end = work_window(req.day, config)
    windows = generate_candidates(
        day_start,
        day_end,
        req.job_duration_minutes,
        buffer_min,
        config.candidate_offsets_minutes,
    )

    candidates = [
        SlotCandidate(
            start=start,
            end=end,
            buffer_minutes=buffer_min,
            confidence=confidence,
            rationale=(
                f"dist={distance_km:.1f}km, buffer={buffer_min}m, "
                f"origin={origin.source}, risk={req.risk}, cand#{position}"
            ),
        )
        for position, start, end in windows
    ]

    logger.info(
        f"Suggested {len(candidates)} slot(s) for org={req.org_id} day={req.day.isoformat()}"
    )

    return SuggestSlotsResponse(
        org_id=req.org_id,
        day=req.day,
        timezone=config.timezone,
        work_start=day_start,
        work_end=day_end,
        origin_source=origin.source,
        distance_km=distance_km,
        travel_minutes=travel_min,
        buffer_minutes=buffer_min,
        confidence=confidence,
        candidates=candidates,
    )


def suggest_slots(
    request: SuggestSlotsRequest | Mapping[str, Any],
    config: TravelConfig | None = None,
) -> list[SlotCandidate]:
    """Ordered slot candidates for the request (possibly empty)."""
    return list(suggest_slots_response(request, config).candidates)
