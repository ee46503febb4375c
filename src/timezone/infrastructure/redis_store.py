"""Redis-backed implementation of the timezone state port."""
from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from ...models.timezone import TimezoneState
from ...platform.clients import RedisClient
from ..application.ports import TimezoneStatePort

logger = logging.getLogger(__name__)


class RedisTimezoneStore(TimezoneStatePort):
    """Keep each user's timezone preference as JSON in Redis."""

    key_prefix = "timezone-storage"

    def __init__(self, redis: RedisClient) -> None:
        self._redis = redis

    def _key(self, user_id: str) -> str:
        return f"{self.key_prefix}:{user_id}"

    def load(self, user_id: str) -> Optional[TimezoneState]:
        raw = self._redis.get(self._key(user_id))
        if not raw:
            return None
        try:
            return TimezoneState.model_validate_json(raw)
        except ValidationError:
            logger.warning("Ignoring unreadable timezone state for %s: %r", user_id, raw)
            return None

    def save(self, user_id: str, state: TimezoneState) -> None:
        self._redis.set(self._key(user_id), state.model_dump_json())


def create_redis_timezone_store(*, redis: RedisClient) -> TimezoneStatePort:
    """Create a Redis timezone store without FastAPI dependencies."""
    return RedisTimezoneStore(redis)
