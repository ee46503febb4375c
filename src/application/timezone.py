from __future__ import annotations

from dataclasses import dataclass

from ..models.timezone import TimezoneResponse, TimezoneState
from ..timezone.application.catalog import AUTO_DETECT_VALUE
from ..timezone.application.resolver import TimezoneResolver


def _describe(resolver: TimezoneResolver, state: TimezoneState) -> TimezoneResponse:
    return TimezoneResponse(
        **state.model_dump(),
        effective_timezone=resolver.get_effective_timezone(),
        device_timezone=resolver.device_timezone(),
    )


@dataclass
class GetTimezoneUseCase:
    resolver: TimezoneResolver

    def __call__(self) -> TimezoneResponse:
        return _describe(self.resolver, self.resolver.state)


@dataclass
class SetTimezoneUseCase:
    """Pin a zone, or go back to auto-detect when the picker's auto entry is chosen."""

    resolver: TimezoneResolver

    def __call__(self, zone: str) -> TimezoneResponse:
        if zone == AUTO_DETECT_VALUE:
            state = self.resolver.reset_to_auto()
        else:
            state = self.resolver.set_timezone(zone)
        return _describe(self.resolver, state)


@dataclass
class ResetTimezoneUseCase:
    resolver: TimezoneResolver

    def __call__(self) -> TimezoneResponse:
        return _describe(self.resolver, self.resolver.reset_to_auto())


__all__ = ["GetTimezoneUseCase", "ResetTimezoneUseCase", "SetTimezoneUseCase"]
