"""Failures surfaced by the nutrition aggregation core."""

from __future__ import annotations


class NutritionAggregationError(Exception):
    """Base class for aggregation failures; never an empty result."""


class InvalidRangeError(NutritionAggregationError):
    """Raised when a date range is reversed or too long for the period."""


class RecordFetchError(NutritionAggregationError):
    """Raised when meal records could not be retrieved."""


class RemoteAggregationError(NutritionAggregationError):
    """Raised when the remote period summary failed or returned malformed rows."""


class InvalidTimezoneError(NutritionAggregationError):
    """Raised when the effective timezone is unknown to the tz database."""
