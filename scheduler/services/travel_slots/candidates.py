# scheduler/services/travel_slots/candidates.py
"""
Candidate windows inside business hours.

A fixed, small set of start offsets from the work-day start is tried
(default +0h, +2h, +5h, +7h: early, mid-morning, after lunch, late
afternoon). Each window is

    start = work_start + offset
    end   = start + job_duration + buffer

and dropped if `end` is past work_end. Not a full time grid.

Arithmetic is done in UTC so DST days keep exact durations.
"""

import logging
from datetime import date, datetime, timedelta, timezone

from .config import TravelConfig

logger = logging.getLogger(__name__)


def work_window(day: date, config: TravelConfig) -> tuple[datetime, datetime]:
    """Business hours of `day` as aware datetimes in the configured zone."""
    tz = config.tzinfo
    return (
        datetime.combine(day, config.work_start, tzinfo=tz),
        datetime.combine(day, config.work_end, tzinfo=tz),
    )


def generate_candidates(
    work_start: datetime,
    work_end: datetime,
    job_duration_minutes: int,
    buffer_minutes: int,
    offsets_minutes: tuple[int, ...],
) -> list[tuple[int, datetime, datetime]]:
    """
    Generate windows that fit the work day.

    Returns:
        List of (position, start, end), position = 1-based index in
        offsets_minutes. Ascending by start. Empty list = nothing fits.
    """
    tz = work_start.tzinfo
    base_utc = work_start.astimezone(timezone.utc)
    # Elapsed minutes, not wall clock: differs on DST days
    window_min = (work_end.astimezone(timezone.utc) - base_utc) // timedelta(minutes=1)
    span_min = job_duration_minutes + buffer_minutes

    windows: list[tuple[int, datetime, datetime]] = []

    # Fit is decided in integer minutes; datetimes are only built for
    # windows inside the day, so huge durations or 9999-12-31 cannot overflow.
    for position, offset in enumerate(offsets_minutes, start=1):
        if offset + span_min > window_min:
            logger.debug(f"cand#{position} dropped: needs {offset + span_min}m of a {window_min}m window")
            continue
        start = base_utc + timedelta(minutes=offset)
        end = start + timedelta(minutes=span_min)
        windows.append((position, start.astimezone(tz), end.astimezone(tz)))

    return windows
