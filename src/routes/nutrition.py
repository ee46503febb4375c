from __future__ import annotations

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..application.nutrition import (
    ListMealsInRangeUseCase,
    ListQuickRangesUseCase,
    SummarizeNutritionUseCase,
)
from ..domain.nutrition.errors import NutritionAggregationError
from ..domain.nutrition.policy import describe_range
from ..models.nutrition import (
    DateRange,
    MealListResponse,
    MealType,
    NutritionSummaryResponse,
    PeriodKind,
    QuickRange,
    RangePolicyResponse,
)
from ..platform.wiring import (
    get_list_meals_use_case,
    get_quick_ranges_use_case,
    get_summarize_nutrition_use_case,
)
from .utils import end_date_query, period_query, raise_http_error, start_date_query

router: APIRouter = APIRouter()


@router.get("/nutrition-summary", response_model=NutritionSummaryResponse)
async def get_nutrition_summary(
    period: PeriodKind = period_query,
    start_date: date = start_date_query,
    end_date: date = end_date_query,
    use_case: SummarizeNutritionUseCase = Depends(get_summarize_nutrition_use_case),
) -> NutritionSummaryResponse:
    """Bucketed calorie and macro totals with rollup statistics."""
    try:
        return await use_case(period, DateRange(start=start_date, end=end_date))
    except NutritionAggregationError as exc:
        raise_http_error(exc)


@router.get("/nutrition-summary/range-policy", response_model=RangePolicyResponse)
async def get_range_policy(
    period: PeriodKind = period_query,
    start_date: date = start_date_query,
    end_date: date = end_date_query,
) -> RangePolicyResponse:
    """Check whether a range may be summarized without running the aggregation."""
    return describe_range(period, start_date, end_date)


@router.get("/nutrition-summary/quick-ranges", response_model=List[QuickRange])
async def list_quick_ranges(
    period: PeriodKind = period_query,
    today: Optional[date] = Query(
        None, description="Last day of every preset; defaults to today in the effective timezone."
    ),
    use_case: ListQuickRangesUseCase = Depends(get_quick_ranges_use_case),
) -> List[QuickRange]:
    try:
        return use_case(period, today)
    except NutritionAggregationError as exc:
        raise_http_error(exc)


@router.get("/meals", response_model=MealListResponse)
async def list_meals(
    start_date: date = start_date_query,
    end_date: date = end_date_query,
    meal_type: Optional[MealType] = Query(None, description="Only return meals of this type."),
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of meals to return."),
    use_case: ListMealsInRangeUseCase = Depends(get_list_meals_use_case),
) -> MealListResponse:
    """Meals logged on local dates within the range, newest first."""
    try:
        return await use_case(DateRange(start=start_date, end=end_date), meal_type, limit)
    except NutritionAggregationError as exc:
        raise_http_error(exc)
