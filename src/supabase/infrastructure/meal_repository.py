from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from ...domain.nutrition.errors import RecordFetchError
from ...models.nutrition import MealRecord, Nutrients
from ...platform.config import Settings
from ...services.interfaces import SupabaseAPI
from ...services.supabase import SupabaseError
from ..application.ports import MealRepository

logger = logging.getLogger(__name__)

MEALS_TABLE = "meals"
MEAL_COLUMNS = (
    "id,logged_at,meal_name,meal_type,description,image_url,"
    "total_calories,total_protein,total_carbs,total_fat,total_fiber,total_sodium"
)


class SupabaseMealAdapter(MealRepository):
    """Concrete Supabase adapter reading meal records."""

    def __init__(self, *, settings: Settings, client: SupabaseAPI) -> None:
        self._settings = settings
        self._client = client

    async def list_meals(
        self,
        user_id: str,
        *,
        start_utc: Optional[datetime] = None,
        end_utc: Optional[datetime] = None,
        meal_type: Optional[str] = None,
    ) -> List[MealRecord]:
        params: List[Tuple[str, str]] = [
            ("select", MEAL_COLUMNS),
            ("user_id", f"eq.{user_id}"),
            ("order", "logged_at.desc,id.desc"),
        ]
        if meal_type is not None:
            params.append(("meal_type", f"eq.{meal_type}"))
        if start_utc is not None:
            params.append(("logged_at", f"gte.{start_utc.isoformat()}"))
        if end_utc is not None:
            params.append(("logged_at", f"lt.{end_utc.isoformat()}"))

        page_size = self._settings.supabase_page_size
        offset = 0
        meals: List[MealRecord] = []
        while True:
            page = params + [("limit", str(page_size)), ("offset", str(offset))]
            try:
                rows = await self._client.select(MEALS_TABLE, page)
            except SupabaseError as exc:
                raise RecordFetchError(f"Failed to fetch meals for user {user_id}") from exc
            if not isinstance(rows, list):
                raise RecordFetchError(
                    f"Meals query returned {type(rows).__name__}, expected a list"
                )
            for row in rows:
                meal = self._parse_row(row)
                if meal is not None:
                    meals.append(meal)
            if len(rows) < page_size:
                break
            offset += page_size
        return meals

    @staticmethod
    def _parse_row(row: Dict[str, Any]) -> Optional[MealRecord]:
        if row.get("id") is None or not row.get("logged_at"):
            logger.warning("Skipping meal row without id or logged_at: %s", row)
            return None
        try:
            return MealRecord(
                id=str(row["id"]),
                logged_at=row["logged_at"],
                meal_type=row.get("meal_type") or "snack",
                meal_name=row.get("meal_name"),
                description=row.get("description"),
                image_url=row.get("image_url"),
                nutrients=Nutrients(
                    calories=row.get("total_calories"),
                    protein_g=row.get("total_protein"),
                    carbs_g=row.get("total_carbs"),
                    fat_g=row.get("total_fat"),
                    fiber_g=row.get("total_fiber"),
                    sodium_mg=row.get("total_sodium"),
                ),
            )
        except ValidationError:
            logger.warning("Skipping unparseable meal row %s", row.get("id"), exc_info=True)
            return None


def create_supabase_meal_adapter(
    *, settings: Settings, client: SupabaseAPI
) -> MealRepository:
    """Create a Supabase meal adapter without relying on FastAPI wiring."""
    return SupabaseMealAdapter(settings=settings, client=client)
