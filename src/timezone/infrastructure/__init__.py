"""Infrastructure helpers for timezone preferences."""

from .redis_store import RedisTimezoneStore, create_redis_timezone_store

__all__ = ["RedisTimezoneStore", "create_redis_timezone_store"]
