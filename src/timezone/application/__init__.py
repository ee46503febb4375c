"""Application layer helpers for timezone preferences."""

from .catalog import AUTO_DETECT_VALUE, COMMON_TIMEZONES, grouped_timezone_options
from .ports import DeviceZoneProvider, TimezoneStatePort
from .resolver import FALLBACK_TIMEZONE, TimezoneResolver

__all__ = [
    "AUTO_DETECT_VALUE",
    "COMMON_TIMEZONES",
    "DeviceZoneProvider",
    "FALLBACK_TIMEZONE",
    "TimezoneResolver",
    "TimezoneStatePort",
    "grouped_timezone_options",
]
