from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class TimezoneState(BaseModel):
    """Persisted timezone preference of a single user."""

    timezone: str = Field(..., description="IANA zone, authoritative only when auto-detect is off.")
    is_auto_detect: bool = True


class TimezoneUpdate(BaseModel):
    timezone: str = Field(..., min_length=1, description="IANA timezone identifier.")


class TimezoneResponse(TimezoneState):
    """Stored preference together with the zone currently in effect."""

    effective_timezone: str
    device_timezone: str


class TimezoneOption(BaseModel):
    label: str
    value: str
    region: str


class TimezoneOptionsResponse(BaseModel):
    regions: Dict[str, List[TimezoneOption]]
