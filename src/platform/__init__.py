"""Cross-cutting platform services: settings, security and client factories."""

from __future__ import annotations

from .clients import RedisClient, get_redis
from .config import Settings, get_settings
from .security import api_key_header, verify_api_key

__all__ = [
    "RedisClient",
    "Settings",
    "api_key_header",
    "get_redis",
    "get_settings",
    "verify_api_key",
]
