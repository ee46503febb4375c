from .nutrition import (
    BucketSummary,
    DateRange,
    MealListResponse,
    MealRecord,
    MealType,
    Nutrients,
    NutritionSummaryResponse,
    PeriodKind,
    QuickRange,
    RangePolicyResponse,
    RollupStatistics,
)
from .time import TimeContext
from .timezone import (
    TimezoneOption,
    TimezoneOptionsResponse,
    TimezoneResponse,
    TimezoneState,
    TimezoneUpdate,
)

__all__ = [
    'BucketSummary',
    'DateRange',
    'MealListResponse',
    'MealRecord',
    'MealType',
    'Nutrients',
    'NutritionSummaryResponse',
    'PeriodKind',
    'QuickRange',
    'RangePolicyResponse',
    'RollupStatistics',
    'TimeContext',
    'TimezoneOption',
    'TimezoneOptionsResponse',
    'TimezoneResponse',
    'TimezoneState',
    'TimezoneUpdate',
]
