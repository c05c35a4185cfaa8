"""
Work-time arithmetic shared by time sessions, work hours and attendance.

All inputs are normalized to naive UTC before subtracting, so callers may
pass timezone-aware values straight from request payloads.
"""

from datetime import datetime
from typing import Optional

from workforce.core.clock import to_naive_utc, utcnow
from workforce.core.errors import ValidationFailed

SECONDS_PER_HOUR = 3600


def elapsed_hours(
    start: datetime,
    end: Optional[datetime] = None,
    *,
    now: Optional[datetime] = None,
) -> float:
    """Hours between ``start`` and ``end`` (or ``now`` when still running)."""
    start_utc = to_naive_utc(start)
    end_utc = to_naive_utc(end) if end is not None else to_naive_utc(now) or utcnow()

    if end_utc < start_utc:
        raise ValidationFailed("End time must not be before start time")

    return (end_utc - start_utc).total_seconds() / SECONDS_PER_HOUR


def total_hours(
    start: datetime,
    end: Optional[datetime] = None,
    break_minutes: int = 0,
    *,
    now: Optional[datetime] = None,
) -> float:
    """
    Worked hours rounded to two decimals:

        (end - start) in hours - break_minutes / 60

    A break longer than the elapsed time is rejected.
    """
    if break_minutes < 0:
        raise ValidationFailed("Break time must not be negative")

    hours = elapsed_hours(start, end, now=now) - (break_minutes / 60)
    if hours < 0:
        raise ValidationFailed("Break time exceeds elapsed time")

    return round(hours, 2)
