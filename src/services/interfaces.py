"""Protocol interfaces for external service clients."""

from __future__ import annotations

from typing import Any, Dict, List, Protocol, Sequence, Tuple, runtime_checkable

QueryParams = Sequence[Tuple[str, str]]


@runtime_checkable
class SupabaseAPI(Protocol):
    """Minimal interface for Supabase (PostgREST) clients."""

    async def select(self, table: str, params: QueryParams) -> List[Dict[str, Any]]:
        """Select rows from a table using PostgREST query parameters."""

    async def rpc(self, function: str, payload: Dict[str, Any]) -> Any:
        """Invoke a database function and return its decoded JSON result."""
