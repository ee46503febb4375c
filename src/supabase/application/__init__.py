"""Application layer ports for Supabase integration."""

from .ports import MealRepository, NutritionSummaryPort

__all__ = ["MealRepository", "NutritionSummaryPort"]
