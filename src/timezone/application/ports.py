"""Ports for persisting timezone preferences."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional

from ...models.timezone import TimezoneState

DeviceZoneProvider = Callable[[], Optional[str]]


class TimezoneStatePort(ABC):
    """Interface describing durable per-user timezone storage."""

    @abstractmethod
    def load(self, user_id: str) -> Optional[TimezoneState]:
        """Return the persisted state, or ``None`` when nothing was stored."""

    @abstractmethod
    def save(self, user_id: str, state: TimezoneState) -> None:
        """Persist the state, replacing any previous value."""
