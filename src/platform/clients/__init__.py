"""Factories for the external clients shared by the integrations."""

from __future__ import annotations

from typing import Any, Optional, Protocol

from fastapi import Depends
from upstash_redis import Redis

from ..config import Settings, get_settings


class RedisClient(Protocol):
    """Key-value operations the timezone preference store relies on."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str, ex: Optional[int] = None) -> Any:
        ...


def get_redis(settings: Settings = Depends(get_settings)) -> RedisClient:
    """Return an Upstash REST client built from the configured credentials."""

    return Redis(
        url=settings.upstash_redis_rest_url,
        token=settings.upstash_redis_rest_token,
    )


__all__ = ["RedisClient", "get_redis"]
