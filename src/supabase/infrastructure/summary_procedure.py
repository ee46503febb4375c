from __future__ import annotations

from datetime import date
from typing import Any, Dict, List

from ...domain.nutrition.errors import RemoteAggregationError
from ...models.nutrition import PeriodKind
from ...services.interfaces import SupabaseAPI
from ...services.supabase import SupabaseError
from ..application.ports import NutritionSummaryPort


def summary_function_name(period: PeriodKind) -> str:
    return f"get_{period.value}_nutrition_summary"


class SupabaseSummaryAdapter(NutritionSummaryPort):
    """Invoke the database-side period summary functions."""

    def __init__(self, *, client: SupabaseAPI) -> None:
        self._client = client

    async def fetch_period_summary(
        self,
        period: PeriodKind,
        user_id: str,
        start_date: date,
        end_date: date,
        limit: int,
    ) -> List[Dict[str, Any]]:
        payload: Dict[str, Any] = {
            "p_user_id": user_id,
            "p_start_date": start_date.isoformat(),
            "p_end_date": end_date.isoformat(),
            "p_limit": limit,
        }
        function = summary_function_name(period)
        try:
            rows = await self._client.rpc(function, payload)
        except SupabaseError as exc:
            raise RemoteAggregationError(f"{function} failed") from exc
        if rows is None:
            return []
        if not isinstance(rows, list):
            raise RemoteAggregationError(
                f"{function} returned {type(rows).__name__}, expected a list"
            )
        return rows


def create_supabase_summary_adapter(*, client: SupabaseAPI) -> NutritionSummaryPort:
    """Create a Supabase summary adapter without relying on FastAPI wiring."""
    return SupabaseSummaryAdapter(client=client)
