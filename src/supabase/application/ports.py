from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from ...models.nutrition import MealRecord, PeriodKind


@runtime_checkable
class MealRepository(Protocol):
    """Port defining the meal record source."""

    async def list_meals(
        self,
        user_id: str,
        *,
        start_utc: Optional[datetime] = None,
        end_utc: Optional[datetime] = None,
        meal_type: Optional[str] = None,
    ) -> List[MealRecord]:
        """Return a user's meals, optionally limited to ``[start_utc, end_utc)`` and one meal type."""


@runtime_checkable
class NutritionSummaryPort(Protocol):
    """Port for the remotely computed weekly/monthly/yearly summaries."""

    async def fetch_period_summary(
        self,
        period: PeriodKind,
        user_id: str,
        start_date: date,
        end_date: date,
        limit: int,
    ) -> List[Dict[str, Any]]:
        """Return pre-bucketed rows for the period between the dates (inclusive)."""
