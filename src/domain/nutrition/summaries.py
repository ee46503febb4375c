"""Timezone-aware daily aggregation of meal records."""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timezone
from typing import Dict, Iterable, List
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ...models.nutrition import BucketSummary, DateRange, MealRecord
from .buckets import build_daily_buckets
from .errors import InvalidTimezoneError
from .summary import build_bucket_summary


def load_zone(name: str) -> ZoneInfo:
    """Return the ``ZoneInfo`` for ``name`` or raise ``InvalidTimezoneError``."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidTimezoneError(f"Unknown timezone {name!r}") from exc


def local_date_for(logged_at: datetime, zone: ZoneInfo) -> str:
    """Project a UTC instant into ``zone`` and return its ``YYYY-MM-DD`` date."""
    if logged_at.tzinfo is None:
        logged_at = logged_at.replace(tzinfo=timezone.utc)
    return logged_at.astimezone(zone).date().isoformat()


def group_by_local_date(
    records: Iterable[MealRecord], date_range: DateRange, zone: ZoneInfo
) -> Dict[str, List[MealRecord]]:
    """Group records by local date, dropping those outside the range."""
    start = date_range.start.isoformat()
    end = date_range.end.isoformat()
    grouped: Dict[str, List[MealRecord]] = defaultdict(list)
    for record in records:
        local_date = local_date_for(record.logged_at, zone)
        if start <= local_date <= end:
            grouped[local_date].append(record)
    return grouped


def summarize_daily(
    date_range: DateRange, records: Iterable[MealRecord], timezone_name: str
) -> List[BucketSummary]:
    """Aggregate records into one bucket per calendar day of the range.

    Every day in ``[start, end]`` is present, including days without meals.
    Records are attributed by their local date in ``timezone_name``, so a meal
    whose UTC timestamp lies inside the range may still be excluded and vice
    versa.
    """
    zone = load_zone(timezone_name)
    grouped = group_by_local_date(records, date_range, zone)
    return [build_bucket_summary(key, grouped.get(key, [])) for key in build_daily_buckets(date_range)]


def filter_records_in_range(
    records: Iterable[MealRecord], date_range: DateRange, timezone_name: str
) -> List[MealRecord]:
    """Return records whose local date is in range, newest first."""
    zone = load_zone(timezone_name)
    grouped = group_by_local_date(records, date_range, zone)
    selected = [record for items in grouped.values() for record in items]
    return sorted(selected, key=lambda record: record.logged_at, reverse=True)
