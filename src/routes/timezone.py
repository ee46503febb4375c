from __future__ import annotations

from fastapi import APIRouter, Depends

from ..application.timezone import (
    GetTimezoneUseCase,
    ResetTimezoneUseCase,
    SetTimezoneUseCase,
)
from ..models.timezone import TimezoneOptionsResponse, TimezoneResponse, TimezoneUpdate
from ..platform.wiring import (
    get_reset_timezone_use_case,
    get_set_timezone_use_case,
    get_timezone_use_case,
)
from ..timezone.application.catalog import grouped_timezone_options

router: APIRouter = APIRouter()


@router.get("/timezone", response_model=TimezoneResponse)
async def get_timezone(
    use_case: GetTimezoneUseCase = Depends(get_timezone_use_case),
) -> TimezoneResponse:
    return use_case()


@router.put("/timezone", response_model=TimezoneResponse)
async def set_timezone(
    update: TimezoneUpdate,
    use_case: SetTimezoneUseCase = Depends(get_set_timezone_use_case),
) -> TimezoneResponse:
    """Pin an explicit timezone; ``"auto"`` re-enables auto-detect."""
    return use_case(update.timezone)


@router.post("/timezone/auto", response_model=TimezoneResponse)
async def reset_timezone(
    use_case: ResetTimezoneUseCase = Depends(get_reset_timezone_use_case),
) -> TimezoneResponse:
    return use_case()


@router.get("/timezones", response_model=TimezoneOptionsResponse)
async def list_timezones() -> TimezoneOptionsResponse:
    return TimezoneOptionsResponse(regions=grouped_timezone_options())
