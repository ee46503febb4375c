"""Calendar bucket enumeration for the daily summary path."""

from __future__ import annotations

from datetime import date, timedelta
from typing import List

from ...models.nutrition import DateRange
from .errors import InvalidRangeError


def inclusive_day_count(start: date, end: date) -> int:
    """Number of calendar days in ``[start, end]``."""
    return (end - start).days + 1


def build_daily_buckets(date_range: DateRange) -> List[str]:
    """Return one ``YYYY-MM-DD`` key per calendar day in the range, ascending.

    Dates are stepped with ``datetime.date`` arithmetic, so 23 or 25 hour
    local days around DST transitions still count as exactly one day.
    """
    if date_range.start > date_range.end:
        raise InvalidRangeError(
            f"Start date {date_range.start.isoformat()} is after end date "
            f"{date_range.end.isoformat()}"
        )
    days = inclusive_day_count(date_range.start, date_range.end)
    return [(date_range.start + timedelta(days=offset)).isoformat() for offset in range(days)]
