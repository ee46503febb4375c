from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, List, Optional, Sequence, Tuple

from ..domain.nutrition.policy import build_quick_ranges, ensure_ordered, ensure_valid_range
from ..domain.nutrition.rollup import compute_rollup
from ..domain.nutrition.summaries import filter_records_in_range, load_zone, summarize_daily
from ..domain.nutrition.summary import normalize_remote_rows
from ..models.nutrition import (
    BucketSummary,
    DateRange,
    MealListResponse,
    MealRecord,
    MealType,
    NutritionSummaryResponse,
    PeriodKind,
    QuickRange,
)
from ..models.time import get_local_time
from ..supabase.application.ports import MealRepository, NutritionSummaryPort
from ..timezone.application.resolver import TimezoneResolver

logger = logging.getLogger(__name__)

DailySummarizer = Callable[[DateRange, Sequence[MealRecord], str], List[BucketSummary]]
TimeProvider = Callable[[str], Tuple[datetime, str]]

# Local dates span UTC-12..UTC+14, so one day of padding on each side is enough.
_UTC_PADDING = timedelta(days=1)


def padded_utc_window(date_range: DateRange) -> Tuple[datetime, datetime]:
    """Return a ``[start, end)`` UTC window covering the range in any timezone."""
    start = datetime.combine(date_range.start, time.min, tzinfo=timezone.utc) - _UTC_PADDING
    end = (
        datetime.combine(date_range.end, time.min, tzinfo=timezone.utc)
        + timedelta(days=1)
        + _UTC_PADDING
    )
    return start, end


@dataclass
class SummarizeNutritionUseCase:
    """Return bucketed nutrition totals for one user over a date range.

    Daily buckets are computed here from raw meals in the user's effective
    timezone. Weekly, monthly and yearly buckets come pre-aggregated from the
    database functions and are only normalized.
    """

    user_id: str
    meal_repository: MealRepository
    summary_port: NutritionSummaryPort
    timezone_resolver: TimezoneResolver
    remote_limit: int = 365
    daily_summarizer: DailySummarizer = summarize_daily
    time_provider: TimeProvider = get_local_time

    async def __call__(
        self, period: PeriodKind, date_range: DateRange
    ) -> NutritionSummaryResponse:
        ensure_valid_range(period, date_range)
        timezone_name = self.timezone_resolver.get_effective_timezone()
        load_zone(timezone_name)
        logger.info(
            "Summarizing %s nutrition for %s from %s to %s in %s",
            period.value,
            self.user_id,
            date_range.start,
            date_range.end,
            timezone_name,
        )

        if period is PeriodKind.DAILY:
            start_utc, end_utc = padded_utc_window(date_range)
            meals = await self.meal_repository.list_meals(
                self.user_id, start_utc=start_utc, end_utc=end_utc
            )
            buckets = self.daily_summarizer(date_range, meals, timezone_name)
        else:
            rows = await self.summary_port.fetch_period_summary(
                period,
                self.user_id,
                date_range.start,
                date_range.end,
                self.remote_limit,
            )
            buckets = normalize_remote_rows(period, rows)

        local_time, part = self.time_provider(timezone_name)
        return NutritionSummaryResponse(
            period=period,
            start_date=date_range.start,
            end_date=date_range.end,
            timezone=timezone_name,
            buckets=buckets,
            rollup=compute_rollup(buckets),
            local_time=local_time,
            part_of_day=part,
        )


@dataclass
class ListMealsInRangeUseCase:
    """Return the meals whose local date falls within a date range, newest first.

    ``meal_type`` narrows the query at the source; ``limit`` caps the result
    after local-date filtering.
    """

    user_id: str
    meal_repository: MealRepository
    timezone_resolver: TimezoneResolver
    time_provider: TimeProvider = get_local_time

    async def __call__(
        self,
        date_range: DateRange,
        meal_type: Optional[MealType] = None,
        limit: Optional[int] = None,
    ) -> MealListResponse:
        ensure_ordered(date_range)
        timezone_name = self.timezone_resolver.get_effective_timezone()
        load_zone(timezone_name)
        start_utc, end_utc = padded_utc_window(date_range)
        meals = await self.meal_repository.list_meals(
            self.user_id,
            start_utc=start_utc,
            end_utc=end_utc,
            meal_type=meal_type.value if meal_type is not None else None,
        )
        selected = filter_records_in_range(meals, date_range, timezone_name)
        if limit is not None:
            selected = selected[:limit]
        local_time, part = self.time_provider(timezone_name)
        return MealListResponse(
            timezone=timezone_name,
            meals=selected,
            local_time=local_time,
            part_of_day=part,
        )


@dataclass
class ListQuickRangesUseCase:
    """Return the preset ranges ending today in the user's timezone."""

    timezone_resolver: TimezoneResolver
    time_provider: TimeProvider = get_local_time

    def __call__(self, period: PeriodKind, today: Optional[date] = None) -> List[QuickRange]:
        if today is None:
            timezone_name = self.timezone_resolver.get_effective_timezone()
            load_zone(timezone_name)
            local_time, _ = self.time_provider(timezone_name)
            today = local_time.date()
        return build_quick_ranges(period, today)


__all__ = [
    "ListMealsInRangeUseCase",
    "ListQuickRangesUseCase",
    "SummarizeNutritionUseCase",
    "padded_utc_window",
]
