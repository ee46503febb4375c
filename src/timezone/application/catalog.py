"""Curated timezone choices offered to users."""

from __future__ import annotations

from typing import Dict, List, Tuple

from ...models.timezone import TimezoneOption

AUTO_DETECT_VALUE = "auto"

# (label, value, region)
COMMON_TIMEZONES: Tuple[Tuple[str, str, str], ...] = (
    ("Auto-detect (Recommended)", AUTO_DETECT_VALUE, "System"),
    ("Pacific Time (PT)", "America/Los_Angeles", "North America"),
    ("Mountain Time (MT)", "America/Denver", "North America"),
    ("Central Time (CT)", "America/Chicago", "North America"),
    ("Eastern Time (ET)", "America/New_York", "North America"),
    ("Atlantic Time (AT)", "America/Halifax", "North America"),
    ("London (GMT/BST)", "Europe/London", "Europe"),
    ("Paris (CET/CEST)", "Europe/Paris", "Europe"),
    ("Berlin (CET/CEST)", "Europe/Berlin", "Europe"),
    ("Dubai (GST)", "Asia/Dubai", "Middle East"),
    ("India (IST)", "Asia/Kolkata", "Asia"),
    ("Singapore (SGT)", "Asia/Singapore", "Asia"),
    ("Tokyo (JST)", "Asia/Tokyo", "Asia"),
    ("Sydney (AEST/AEDT)", "Australia/Sydney", "Australia"),
    ("Auckland (NZST/NZDT)", "Pacific/Auckland", "Pacific"),
    ("UTC", "UTC", "Universal"),
)


def grouped_timezone_options() -> Dict[str, List[TimezoneOption]]:
    """Return the curated zones grouped by region, preserving list order."""
    regions: Dict[str, List[TimezoneOption]] = {}
    for label, value, region in COMMON_TIMEZONES:
        regions.setdefault(region, []).append(
            TimezoneOption(label=label, value=value, region=region)
        )
    return regions
