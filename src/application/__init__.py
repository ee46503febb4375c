"""Application layer use cases coordinating domain services."""

from .nutrition import (
    ListMealsInRangeUseCase,
    ListQuickRangesUseCase,
    SummarizeNutritionUseCase,
)
from .session import NutritionSummarySession, RequestSequencer
from .timezone import GetTimezoneUseCase, ResetTimezoneUseCase, SetTimezoneUseCase

__all__ = [
    "GetTimezoneUseCase",
    "ListMealsInRangeUseCase",
    "ListQuickRangesUseCase",
    "NutritionSummarySession",
    "RequestSequencer",
    "ResetTimezoneUseCase",
    "SetTimezoneUseCase",
    "SummarizeNutritionUseCase",
]
