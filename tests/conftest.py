"""Shared test fixtures and doubles."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from src import main
from src.platform.clients import RedisClient, get_redis
from src.platform.config import Settings, get_settings
from src.services.interfaces import QueryParams, SupabaseAPI
from src.services.supabase import get_supabase_client


class RedisFake(RedisClient):
    """In-memory Redis double that records interactions."""

    def __init__(self) -> None:
        self.store: Dict[str, str] = {}
        self.expirations: Dict[str, Optional[int]] = {}
        self._last_get: str | None = None
        self._last_set: tuple[str, str, Optional[int]] | None = None

    def assert_last_get(self, key: str) -> None:
        """Assert the most recent ``get`` call was for ``key``."""

        assert self._last_get == key, f"Expected last get for {key!r}, saw {self._last_get!r}"

    def assert_last_set(self, key: str, value: Optional[str] = None) -> None:
        """Assert the most recent ``set`` call matched the provided values."""

        assert self._last_set is not None, "No set() call was recorded"
        last_key, last_value, _ = self._last_set
        assert last_key == key, f"Expected last set for {key!r}, saw {last_key!r}"
        if value is not None:
            assert (
                last_value == value
            ), f"Expected last set value {value!r}, saw {last_value!r}"

    def get(self, key: str) -> Optional[str]:
        self._last_get = key
        return self.store.get(key)

    def set(self, key: str, value: str, ex: Optional[int] = None) -> None:
        self._last_set = (key, value, ex)
        self.store[key] = value
        self.expirations[key] = ex


@dataclass
class _Expectation:
    expected: Dict[str, Any]
    returns: Any = None
    raises: Exception | None = None


class SupabaseAPIStub(SupabaseAPI):
    """Stubbed Supabase API with expectation helpers."""

    def __init__(self) -> None:
        self._expectations: Dict[str, list[_Expectation]] = {"select": [], "rpc": []}
        self._call_history: Dict[str, list[Dict[str, Any]]] = {}

    def expect_select(
        self,
        table: str | None = None,
        *,
        returns: Any = None,
        raises: Exception | None = None,
    ) -> "SupabaseAPIStub":
        self._expectations["select"].append(_Expectation({"table": table}, returns, raises))
        return self

    def expect_rpc(
        self,
        function: str | None = None,
        payload: Dict[str, Any] | None = None,
        *,
        returns: Any = None,
        raises: Exception | None = None,
    ) -> "SupabaseAPIStub":
        self._expectations["rpc"].append(
            _Expectation({"function": function, "payload": payload}, returns, raises)
        )
        return self

    def assert_last_rpc(
        self, function: str | None = None, payload: Dict[str, Any] | None = None
    ) -> None:
        calls = self._call_history.get("rpc")
        assert calls, "No rpc call was recorded"
        last = calls[-1]
        if function is not None:
            assert last["function"] == function, f"Expected last rpc {function!r}, saw {last['function']!r}"
        if payload is not None:
            assert last["payload"] == payload, "Expected last rpc payload to match"

    def select_history(self) -> List[List[tuple[str, str]]]:
        return [call["params"] for call in self._call_history.get("select", [])]

    def rpc_history(self) -> List[Dict[str, Any]]:
        return list(self._call_history.get("rpc", []))

    async def select(self, table: str, params: QueryParams) -> List[Dict[str, Any]]:
        result = await self._handle_call("select", {"table": table, "params": list(params)})
        return result if result is not None else []

    async def rpc(self, function: str, payload: Dict[str, Any]) -> Any:
        return await self._handle_call("rpc", {"function": function, "payload": payload})

    async def _handle_call(self, name: str, call: Dict[str, Any]) -> Any:
        self._call_history.setdefault(name, []).append(call)
        expectations = self._expectations[name]
        if expectations:
            expectation = expectations.pop(0)
            for key, expected_value in expectation.expected.items():
                if expected_value is not None and call.get(key) != expected_value:
                    raise AssertionError(
                        f"Expected {name} {key}={expected_value!r} but got {call.get(key)!r}"
                    )
            if expectation.raises:
                raise expectation.raises
            return expectation.returns
        return [] if name == "select" else None


@pytest.fixture
def settings() -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(
        api_key="test-key",
        supabase_url="https://project.supabase.example.com",
        supabase_service_key="service-key",
        upstash_redis_rest_url="https://redis.example.com",
        upstash_redis_rest_token="redis-token",
    )


@pytest.fixture
def redis_fake() -> RedisFake:
    return RedisFake()


@pytest.fixture
def supabase_api_stub() -> SupabaseAPIStub:
    return SupabaseAPIStub()


@pytest.fixture
def app(
    settings: Settings,
    redis_fake: RedisFake,
    supabase_api_stub: SupabaseAPIStub,
) -> Iterator[FastAPI]:
    """Configured FastAPI application instance for integration tests."""

    app = main.app
    overrides = {
        get_settings: lambda: settings,
        get_redis: lambda: redis_fake,
        get_supabase_client: lambda: supabase_api_stub,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield app
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI app."""

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as api_client:
        yield api_client
