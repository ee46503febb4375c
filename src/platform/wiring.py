"""FastAPI dependency wiring for application use cases."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header

from ..application.nutrition import (
    ListMealsInRangeUseCase,
    ListQuickRangesUseCase,
    SummarizeNutritionUseCase,
)
from ..application.timezone import (
    GetTimezoneUseCase,
    ResetTimezoneUseCase,
    SetTimezoneUseCase,
)
from ..services.interfaces import SupabaseAPI
from ..services.supabase import get_supabase_client
from ..supabase.application.ports import MealRepository, NutritionSummaryPort
from ..supabase.infrastructure import (
    create_supabase_meal_adapter,
    create_supabase_summary_adapter,
)
from ..timezone.application import TimezoneResolver, TimezoneStatePort
from ..timezone.infrastructure import create_redis_timezone_store
from .clients import RedisClient, get_redis
from .config import Settings, get_settings


def get_user_id(
    x_user_id: str = Header(..., alias="X-User-Id", description="Identifier of the signed-in user."),
) -> str:
    return x_user_id


def get_device_timezone(
    x_device_timezone: Optional[str] = Header(
        None,
        alias="X-Device-Timezone",
        description="IANA timezone currently reported by the user's device.",
    ),
) -> Optional[str]:
    return x_device_timezone


def provide_meal_port(
    settings: Settings = Depends(get_settings),
    client: SupabaseAPI = Depends(get_supabase_client),
) -> MealRepository:
    return create_supabase_meal_adapter(settings=settings, client=client)


def provide_summary_port(
    client: SupabaseAPI = Depends(get_supabase_client),
) -> NutritionSummaryPort:
    return create_supabase_summary_adapter(client=client)


def provide_timezone_store(
    redis: RedisClient = Depends(get_redis),
) -> TimezoneStatePort:
    return create_redis_timezone_store(redis=redis)


def provide_timezone_resolver(
    user_id: str = Depends(get_user_id),
    device_timezone: Optional[str] = Depends(get_device_timezone),
    store: TimezoneStatePort = Depends(provide_timezone_store),
) -> TimezoneResolver:
    return TimezoneResolver(store, user_id, lambda: device_timezone)


def get_summarize_nutrition_use_case(
    user_id: str = Depends(get_user_id),
    settings: Settings = Depends(get_settings),
    meal_repository: MealRepository = Depends(provide_meal_port),
    summary_port: NutritionSummaryPort = Depends(provide_summary_port),
    resolver: TimezoneResolver = Depends(provide_timezone_resolver),
) -> SummarizeNutritionUseCase:
    return SummarizeNutritionUseCase(
        user_id=user_id,
        meal_repository=meal_repository,
        summary_port=summary_port,
        timezone_resolver=resolver,
        remote_limit=settings.remote_summary_limit,
    )


def get_list_meals_use_case(
    user_id: str = Depends(get_user_id),
    meal_repository: MealRepository = Depends(provide_meal_port),
    resolver: TimezoneResolver = Depends(provide_timezone_resolver),
) -> ListMealsInRangeUseCase:
    return ListMealsInRangeUseCase(
        user_id=user_id, meal_repository=meal_repository, timezone_resolver=resolver
    )


def get_quick_ranges_use_case(
    resolver: TimezoneResolver = Depends(provide_timezone_resolver),
) -> ListQuickRangesUseCase:
    return ListQuickRangesUseCase(resolver)


def get_timezone_use_case(
    resolver: TimezoneResolver = Depends(provide_timezone_resolver),
) -> GetTimezoneUseCase:
    return GetTimezoneUseCase(resolver)


def get_set_timezone_use_case(
    resolver: TimezoneResolver = Depends(provide_timezone_resolver),
) -> SetTimezoneUseCase:
    return SetTimezoneUseCase(resolver)


def get_reset_timezone_use_case(
    resolver: TimezoneResolver = Depends(provide_timezone_resolver),
) -> ResetTimezoneUseCase:
    return ResetTimezoneUseCase(resolver)


__all__ = [
    "get_device_timezone",
    "get_user_id",
    "provide_meal_port",
    "provide_summary_port",
    "provide_timezone_store",
    "provide_timezone_resolver",
    "get_summarize_nutrition_use_case",
    "get_list_meals_use_case",
    "get_quick_ranges_use_case",
    "get_timezone_use_case",
    "get_set_timezone_use_case",
    "get_reset_timezone_use_case",
]
