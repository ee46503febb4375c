"""Range-size policy for summary requests."""

from __future__ import annotations

from datetime import date, timedelta
from typing import List, Tuple

from ...models.nutrition import DateRange, PeriodKind, QuickRange, RangePolicyResponse
from .buckets import inclusive_day_count
from .errors import InvalidRangeError

MAX_DAILY_RANGE_DAYS = 29

# (label, days back from today); the range is inclusive of today.
QUICK_RANGES: Tuple[Tuple[str, int], ...] = (
    ("Last 7 days", 6),
    ("Last 30 days", 29),
    ("Last 90 days", 89),
)


def is_range_allowed(period: PeriodKind, start: date, end: date) -> bool:
    """Return whether the period may be summarized over ``[start, end]``.

    A reversed range is never allowed. Only the locally computed daily path
    is capped by length; coarser periods accept any ordered span.
    """
    if start > end:
        return False
    if period is not PeriodKind.DAILY:
        return True
    return inclusive_day_count(start, end) <= MAX_DAILY_RANGE_DAYS


def ensure_ordered(date_range: DateRange) -> None:
    if date_range.start > date_range.end:
        raise InvalidRangeError(
            f"Start date {date_range.start.isoformat()} is after end date "
            f"{date_range.end.isoformat()}"
        )


def ensure_valid_range(period: PeriodKind, date_range: DateRange) -> None:
    """Raise ``InvalidRangeError`` unless the range can be summarized."""
    ensure_ordered(date_range)
    if not is_range_allowed(period, date_range.start, date_range.end):
        raise InvalidRangeError(
            f"Date range too large for daily view. Maximum {MAX_DAILY_RANGE_DAYS} days allowed."
        )


def describe_range(period: PeriodKind, start: date, end: date) -> RangePolicyResponse:
    day_count = inclusive_day_count(start, end)
    return RangePolicyResponse(
        period=period,
        start_date=start,
        end_date=end,
        day_count=max(day_count, 0),
        allowed=is_range_allowed(period, start, end),
        max_daily_days=MAX_DAILY_RANGE_DAYS,
    )


def build_quick_ranges(period: PeriodKind, today: date) -> List[QuickRange]:
    return [
        QuickRange(
            label=label,
            start_date=today - timedelta(days=days_back),
            end_date=today,
            disabled=not is_range_allowed(period, today - timedelta(days=days_back), today),
        )
        for label, days_back in QUICK_RANGES
    ]
