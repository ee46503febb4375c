from __future__ import annotations

import logging
from typing import Dict, NoReturn, Type

from fastapi import HTTPException, Query

from ..domain.nutrition.errors import (
    InvalidRangeError,
    InvalidTimezoneError,
    NutritionAggregationError,
    RecordFetchError,
    RemoteAggregationError,
)
from ..models.nutrition import PeriodKind

logger = logging.getLogger(__name__)

period_query = Query(
    default=PeriodKind.DAILY,
    description="Bucket granularity: daily, weekly, monthly or yearly.",
)
start_date_query = Query(..., description="Start date (inclusive) in YYYY-MM-DD format.")
end_date_query = Query(..., description="End date (inclusive) in YYYY-MM-DD format.")

_STATUS_CODES: Dict[Type[NutritionAggregationError], int] = {
    InvalidRangeError: 422,
    InvalidTimezoneError: 422,
    RecordFetchError: 502,
    RemoteAggregationError: 502,
}


def raise_http_error(exc: NutritionAggregationError) -> NoReturn:
    """Translate an aggregation failure into an ``HTTPException``."""
    status_code = 500
    for error_type, code in _STATUS_CODES.items():
        if isinstance(exc, error_type):
            status_code = code
            break
    if status_code >= 500:
        logger.exception("Upstream failure while aggregating nutrition: %s", exc)
    raise HTTPException(status_code=status_code, detail={"error": str(exc)}) from exc
