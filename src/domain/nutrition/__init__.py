"""Nutrition domain utilities."""

from .buckets import build_daily_buckets, inclusive_day_count
from .errors import (
    InvalidRangeError,
    InvalidTimezoneError,
    NutritionAggregationError,
    RecordFetchError,
    RemoteAggregationError,
)
from .policy import (
    MAX_DAILY_RANGE_DAYS,
    build_quick_ranges,
    describe_range,
    ensure_ordered,
    ensure_valid_range,
    is_range_allowed,
)
from .rollup import compute_rollup
from .summaries import filter_records_in_range, load_zone, local_date_for, summarize_daily
from .summary import build_bucket_summary, normalize_remote_rows

__all__ = [
    "MAX_DAILY_RANGE_DAYS",
    "InvalidRangeError",
    "InvalidTimezoneError",
    "NutritionAggregationError",
    "RecordFetchError",
    "RemoteAggregationError",
    "build_bucket_summary",
    "build_daily_buckets",
    "build_quick_ranges",
    "describe_range",
    "ensure_ordered",
    "compute_rollup",
    "ensure_valid_range",
    "filter_records_in_range",
    "inclusive_day_count",
    "is_range_allowed",
    "load_zone",
    "local_date_for",
    "normalize_remote_rows",
    "summarize_daily",
]
