"""Factories and assertion helpers for API tests."""

from __future__ import annotations

from typing import Any, Dict, Optional

from src.platform.config import Settings


def make_headers(
    settings: Settings,
    *,
    user_id: str = "user-1",
    device_timezone: Optional[str] = "UTC",
) -> Dict[str, str]:
    """Return authenticated request headers for a user on a device."""

    headers = {"x-api-key": settings.api_key, "X-User-Id": user_id}
    if device_timezone is not None:
        headers["X-Device-Timezone"] = device_timezone
    return headers


def assert_bucket(bucket: Dict[str, Any], key: str, **totals: Any) -> None:
    """Assert a serialized bucket has the given key and nutrient totals."""

    assert bucket["bucket_key"] == key, f"Expected bucket {key!r}, saw {bucket['bucket_key']!r}"
    meal_count = totals.pop("meal_count", None)
    if meal_count is not None:
        assert bucket["meal_count"] == meal_count
    for name, value in totals.items():
        assert (
            bucket["totals"][name] == value
        ), f"Expected {name}={value!r} in {key}, saw {bucket['totals'][name]!r}"
