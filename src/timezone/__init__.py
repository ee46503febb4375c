"""Timezone preference modules."""

from .application import TimezoneResolver, TimezoneStatePort
from .infrastructure import RedisTimezoneStore, create_redis_timezone_store

__all__ = [
    "TimezoneResolver",
    "TimezoneStatePort",
    "RedisTimezoneStore",
    "create_redis_timezone_store",
]
