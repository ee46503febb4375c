from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Hosting providers expose upper-case variable names (e.g. ``SUPABASE_URL``).
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    api_key: str
    supabase_url: str
    supabase_service_key: str
    upstash_redis_rest_url: str
    upstash_redis_rest_token: str
    remote_summary_limit: int = 365
    supabase_page_size: int = 1000
    http_timeout_seconds: float = 30.0


@lru_cache()
def get_settings() -> Settings:
    return Settings()
