"""Effective timezone resolution with auto-detect and explicit overrides."""

from __future__ import annotations

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ...models.timezone import TimezoneState
from .ports import DeviceZoneProvider, TimezoneStatePort

logger = logging.getLogger(__name__)

FALLBACK_TIMEZONE = "UTC"


class TimezoneResolver:
    """Owns one user's timezone preference.

    The device zone is re-read on every ``get_effective_timezone`` call while
    auto-detect is on so that travel is picked up without user action. Each
    mutation is written through to the store before returning.
    """

    def __init__(
        self,
        store: TimezoneStatePort,
        user_id: str,
        device_zone: DeviceZoneProvider,
    ) -> None:
        self._store = store
        self._user_id = user_id
        self._device_zone = device_zone
        persisted = store.load(user_id)
        if persisted is None:
            persisted = TimezoneState(timezone=self.device_timezone(), is_auto_detect=True)
        self._state = persisted

    @property
    def state(self) -> TimezoneState:
        return self._state

    def device_timezone(self) -> str:
        """Return the device zone, or UTC when it cannot be determined."""
        try:
            zone = self._device_zone()
        except Exception:
            logger.warning("Device timezone lookup failed, using %s", FALLBACK_TIMEZONE, exc_info=True)
            return FALLBACK_TIMEZONE
        if not zone:
            logger.warning("Device timezone unavailable, using %s", FALLBACK_TIMEZONE)
            return FALLBACK_TIMEZONE
        try:
            ZoneInfo(zone)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Device reported unknown timezone %r, using %s", zone, FALLBACK_TIMEZONE)
            return FALLBACK_TIMEZONE
        return zone

    def get_effective_timezone(self) -> str:
        if self._state.is_auto_detect:
            return self.device_timezone()
        return self._state.timezone

    def set_timezone(self, zone: str) -> TimezoneState:
        """Pin an explicit zone and turn auto-detect off."""
        return self._persist(TimezoneState(timezone=zone, is_auto_detect=False))

    def reset_to_auto(self) -> TimezoneState:
        """Re-enable auto-detect, snapshotting the current device zone."""
        return self._persist(TimezoneState(timezone=self.device_timezone(), is_auto_detect=True))

    def set_auto_detect(self, auto: bool) -> TimezoneState:
        if auto:
            return self.reset_to_auto()
        return self._persist(TimezoneState(timezone=self._state.timezone, is_auto_detect=False))

    def _persist(self, state: TimezoneState) -> TimezoneState:
        self._state = state
        self._store.save(self._user_id, state)
        logger.info(
            "Timezone preference for %s set to %s (auto-detect=%s)",
            self._user_id,
            state.timezone,
            state.is_auto_detect,
        )
        return state


__all__ = ["FALLBACK_TIMEZONE", "TimezoneResolver"]
