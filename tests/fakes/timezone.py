"""In-memory doubles for timezone preference tests."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from src.models.timezone import TimezoneState
from src.timezone.application.ports import TimezoneStatePort


class InMemoryTimezoneStore(TimezoneStatePort):
    """Timezone store keeping state in a dict and recording saves."""

    def __init__(self, initial: Optional[Dict[str, TimezoneState]] = None) -> None:
        self._states: Dict[str, TimezoneState] = dict(initial or {})
        self.saves: List[Tuple[str, TimezoneState]] = []

    def load(self, user_id: str) -> Optional[TimezoneState]:
        return self._states.get(user_id)

    def save(self, user_id: str, state: TimezoneState) -> None:
        self.saves.append((user_id, state))
        self._states[user_id] = state


class DeviceClock:
    """Simulated device whose reported timezone can change between calls."""

    def __init__(self, zone: Optional[str] = "UTC") -> None:
        self.zone = zone
        self.calls = 0

    def __call__(self) -> Optional[str]:
        self.calls += 1
        return self.zone
