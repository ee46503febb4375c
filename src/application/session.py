"""Latest-request-wins state holder for a single summary consumer."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

from ..domain.nutrition.policy import ensure_valid_range
from ..models.nutrition import DateRange, NutritionSummaryResponse, PeriodKind

logger = logging.getLogger(__name__)

Summarizer = Callable[[PeriodKind, DateRange], Awaitable[NutritionSummaryResponse]]


class RequestSequencer:
    """Issue monotonically increasing request tokens."""

    def __init__(self) -> None:
        self._latest = 0

    @property
    def latest(self) -> int:
        return self._latest

    def issue(self) -> int:
        self._latest += 1
        return self._latest

    def is_latest(self, token: int) -> bool:
        return token == self._latest


class NutritionSummarySession:
    """Track the summary shown by one screen while requests overlap.

    Newer refreshes supersede older ones: a result or failure arriving for a
    token that is no longer the latest is discarded. A failure of the latest
    request keeps the previously applied summary and records the error.
    """

    def __init__(self, summarizer: Summarizer) -> None:
        self._summarizer = summarizer
        self._sequencer = RequestSequencer()
        self.summary: Optional[NutritionSummaryResponse] = None
        self.error: Optional[Exception] = None
        self.is_loading: bool = False

    async def refresh(
        self, period: PeriodKind, date_range: DateRange
    ) -> Optional[NutritionSummaryResponse]:
        """Run a summary request and return its result if it is still current.

        Returns ``None`` when a newer refresh superseded this one. Failures of
        the current request are re-raised after being recorded on ``error``.
        """
        ensure_valid_range(period, date_range)
        token = self._sequencer.issue()
        self.is_loading = True
        try:
            result = await self._summarizer(period, date_range)
        except Exception as exc:
            if not self._sequencer.is_latest(token):
                logger.debug(
                    "Dropping failure of superseded request %s: %s", token, exc, exc_info=True
                )
                return None
            self.error = exc
            raise
        finally:
            if self._sequencer.is_latest(token):
                self.is_loading = False
        if not self._sequencer.is_latest(token):
            logger.debug("Discarding stale summary for request %s", token)
            return None
        self.summary = result
        self.error = None
        return result


__all__ = ["NutritionSummarySession", "RequestSequencer"]
