"""Rollup statistics over a bucket sequence."""

from __future__ import annotations

from typing import Iterable

from ...models.nutrition import BucketSummary, Nutrients, RollupStatistics


def compute_rollup(buckets: Iterable[BucketSummary]) -> RollupStatistics:
    """Sum bucket totals and derive per-logged-day averages.

    Averages divide by the number of buckets with at least one meal and are
    zero when nothing was logged.
    """
    totals = Nutrients()
    total_meals = 0
    days_logged = 0
    for bucket in buckets:
        totals = totals + bucket.totals
        total_meals += bucket.meal_count
        if bucket.meal_count > 0:
            days_logged += 1

    avg_calories = totals.calories / days_logged if days_logged else 0.0
    avg_protein = totals.protein_g / days_logged if days_logged else 0.0
    return RollupStatistics(
        total_calories=totals.calories,
        total_protein_g=totals.protein_g,
        total_carbs_g=totals.carbs_g,
        total_fat_g=totals.fat_g,
        total_fiber_g=totals.fiber_g,
        total_sodium_mg=totals.sodium_mg,
        total_meals=total_meals,
        days_logged=days_logged,
        avg_daily_calories=avg_calories,
        avg_daily_protein_g=avg_protein,
    )
