from __future__ import annotations

from typing import Any, Dict, List

import httpx
from fastapi import Depends

from ..platform.config import Settings, get_settings
from .interfaces import QueryParams, SupabaseAPI


class SupabaseError(Exception):
    """Raised when a Supabase request fails or cannot be completed."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SupabaseClient(SupabaseAPI):
    """Minimal PostgREST client with shared error handling."""

    def __init__(self, *, settings: Settings) -> None:
        self._base_url: str = f"{settings.supabase_url.rstrip('/')}/rest/v1"
        self._headers: Dict[str, str] = {
            "apikey": settings.supabase_service_key,
            "Authorization": f"Bearer {settings.supabase_service_key}",
            "Accept": "application/json",
        }
        self._timeout: float = settings.http_timeout_seconds

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self._base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.request(method, url, headers=self._headers, **kwargs)
        except httpx.HTTPError as exc:
            raise SupabaseError(f"Request to Supabase failed: {exc}") from exc
        if resp.status_code >= 300:
            raise SupabaseError(resp.text, status_code=resp.status_code)
        return resp

    @staticmethod
    def _decode(resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            raise SupabaseError(
                f"Supabase returned a non-JSON body: {resp.text[:200]!r}",
                status_code=resp.status_code,
            ) from exc

    async def select(self, table: str, params: QueryParams) -> List[Dict[str, Any]]:
        resp = await self._request("GET", f"/{table}", params=list(params))
        return self._decode(resp)

    async def rpc(self, function: str, payload: Dict[str, Any]) -> Any:
        resp = await self._request("POST", f"/rpc/{function}", json=payload)
        return self._decode(resp)


def get_supabase_client(settings: Settings = Depends(get_settings)) -> SupabaseAPI:
    """Dependency that provides a configured Supabase API client."""

    return SupabaseClient(settings=settings)
