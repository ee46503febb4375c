"""Bucket summary builders."""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from ...models.nutrition import BucketSummary, MealRecord, Nutrients, PeriodKind
from .errors import RemoteAggregationError

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Bucket key column returned by each remote period procedure.
REMOTE_KEY_FIELDS: Dict[PeriodKind, str] = {
    PeriodKind.DAILY: "date",
    PeriodKind.WEEKLY: "week_start",
    PeriodKind.MONTHLY: "month_start",
    PeriodKind.YEARLY: "year_start",
}

_REMOTE_TOTAL_COLUMNS: Dict[str, str] = {
    "calories": "total_calories",
    "protein_g": "total_protein",
    "carbs_g": "total_carbs",
    "fat_g": "total_fat",
    "fiber_g": "total_fiber",
    "sodium_mg": "total_sodium",
}


def build_bucket_summary(bucket_key: str, records: Iterable[MealRecord]) -> BucketSummary:
    """Fold a group of records into one bucket."""
    totals = Nutrients()
    count = 0
    for record in records:
        totals = totals + record.nutrients
        count += 1
    return BucketSummary(bucket_key=bucket_key, totals=totals, meal_count=count)


def _normalize_key(raw: Any) -> Optional[str]:
    if not isinstance(raw, str) or not raw:
        return None
    if _ISO_DATE.match(raw):
        return raw
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        return None


def _number(row: Mapping[str, Any], column: str) -> float:
    value = row.get(column)
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise RemoteAggregationError(
            f"Remote summary column {column!r} is not numeric: {value!r}"
        ) from exc
    return number if math.isfinite(number) else 0.0


def bucket_from_remote_row(period: PeriodKind, row: Mapping[str, Any]) -> BucketSummary:
    """Map one pre-bucketed remote row onto a canonical ``BucketSummary``."""
    if not isinstance(row, Mapping):
        raise RemoteAggregationError(f"Remote summary row is not an object: {row!r}")
    preferred = REMOTE_KEY_FIELDS[period]
    key_fields = [preferred] + [f for f in REMOTE_KEY_FIELDS.values() if f != preferred]
    bucket_key: Optional[str] = None
    for field in key_fields:
        bucket_key = _normalize_key(row.get(field))
        if bucket_key:
            break
    if bucket_key is None:
        raise RemoteAggregationError(
            f"Remote {period.value} summary row has no usable {preferred!r}: {dict(row)!r}"
        )
    totals = Nutrients(
        **{name: _number(row, column) for name, column in _REMOTE_TOTAL_COLUMNS.items()}
    )
    return BucketSummary(
        bucket_key=bucket_key,
        totals=totals,
        meal_count=int(_number(row, "meal_count")),
    )


def normalize_remote_rows(
    period: PeriodKind, rows: Sequence[Mapping[str, Any]]
) -> List[BucketSummary]:
    """Normalize remote rows, all or nothing, sorted ascending by bucket key."""
    if not isinstance(rows, Sequence) or isinstance(rows, (str, bytes)):
        raise RemoteAggregationError(f"Remote summary returned {type(rows).__name__}, expected a list")
    buckets = [bucket_from_remote_row(period, row) for row in rows]
    return sorted(buckets, key=lambda bucket: bucket.bucket_key)
