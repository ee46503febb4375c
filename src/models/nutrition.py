from __future__ import annotations

import math
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .time import TimeContext


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class PeriodKind(str, Enum):
    """Granularity of a nutrition summary."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class Nutrients(BaseModel):
    """Additive nutrient totals shared by meals and buckets."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    fiber_g: float = 0.0
    sodium_mg: float = 0.0

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_missing(cls, value: Any) -> Any:
        if value is None or value == "":
            return 0.0
        if isinstance(value, (int, float)) and not math.isfinite(value):
            return 0.0
        return value

    def __add__(self, other: "Nutrients") -> "Nutrients":
        return Nutrients(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            carbs_g=self.carbs_g + other.carbs_g,
            fat_g=self.fat_g + other.fat_g,
            fiber_g=self.fiber_g + other.fiber_g,
            sodium_mg=self.sodium_mg + other.sodium_mg,
        )


class MealRecord(BaseModel):
    """A logged meal as stored by the record source."""

    id: str
    logged_at: datetime = Field(..., description="When the meal was logged (UTC).")
    nutrients: Nutrients = Field(default_factory=Nutrients)
    meal_type: Union[MealType, str] = MealType.SNACK
    meal_name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None

    @field_validator("logged_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class DateRange(BaseModel):
    """Inclusive calendar date range; ordering is enforced by the range policy."""

    start: date
    end: date


class BucketSummary(BaseModel):
    """Nutrition totals attributed to one calendar bucket."""

    bucket_key: str = Field(..., description="Bucket start date in YYYY-MM-DD format.")
    totals: Nutrients = Field(default_factory=Nutrients)
    meal_count: int = 0


class RollupStatistics(BaseModel):
    """Scalar statistics derived from a bucket sequence."""

    total_calories: float
    total_protein_g: float
    total_carbs_g: float
    total_fat_g: float
    total_fiber_g: float
    total_sodium_mg: float
    total_meals: int
    days_logged: int
    avg_daily_calories: float
    avg_daily_protein_g: float


class NutritionSummaryResponse(TimeContext):
    """Bucketed nutrition summary for a period and date range."""

    period: PeriodKind
    start_date: date
    end_date: date
    timezone: str = Field(..., description="Effective IANA timezone used for bucketing.")
    buckets: List[BucketSummary]
    rollup: RollupStatistics


class MealListResponse(TimeContext):
    """Meals whose local date falls within the requested range."""

    timezone: str
    meals: List[MealRecord]


class RangePolicyResponse(BaseModel):
    period: PeriodKind
    start_date: date
    end_date: date
    day_count: int
    allowed: bool
    max_daily_days: int


class QuickRange(BaseModel):
    """Preset range ending today, disabled when the period forbids its span."""

    label: str
    start_date: date
    end_date: date
    disabled: bool
