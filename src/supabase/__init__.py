"""Supabase integration modules."""

from .application import MealRepository, NutritionSummaryPort
from .infrastructure import (
    SupabaseMealAdapter,
    SupabaseSummaryAdapter,
    create_supabase_meal_adapter,
    create_supabase_summary_adapter,
)

__all__ = [
    "MealRepository",
    "NutritionSummaryPort",
    "SupabaseMealAdapter",
    "SupabaseSummaryAdapter",
    "create_supabase_meal_adapter",
    "create_supabase_summary_adapter",
]
