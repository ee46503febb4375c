"""Infrastructure helpers for Supabase integration."""

from .meal_repository import SupabaseMealAdapter, create_supabase_meal_adapter
from .summary_procedure import (
    SupabaseSummaryAdapter,
    create_supabase_summary_adapter,
    summary_function_name,
)

__all__ = [
    "SupabaseMealAdapter",
    "SupabaseSummaryAdapter",
    "create_supabase_meal_adapter",
    "create_supabase_summary_adapter",
    "summary_function_name",
]
