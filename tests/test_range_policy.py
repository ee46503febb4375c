from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.domain.nutrition.errors import InvalidRangeError
from src.domain.nutrition.policy import (
    MAX_DAILY_RANGE_DAYS,
    build_quick_ranges,
    describe_range,
    ensure_valid_range,
    is_range_allowed,
)
from src.models.nutrition import DateRange, PeriodKind

START = date(2025, 1, 1)


def test_daily_allows_twenty_nine_days() -> None:
    assert is_range_allowed(PeriodKind.DAILY, START, START + timedelta(days=28))


def test_daily_rejects_thirty_days() -> None:
    assert not is_range_allowed(PeriodKind.DAILY, START, START + timedelta(days=29))


@pytest.mark.parametrize(
    "period", [PeriodKind.WEEKLY, PeriodKind.MONTHLY, PeriodKind.YEARLY]
)
def test_coarser_periods_are_never_capped(period: PeriodKind) -> None:
    assert is_range_allowed(period, START, START + timedelta(days=3650))


def test_ensure_valid_range_rejects_reversed_range() -> None:
    with pytest.raises(InvalidRangeError):
        ensure_valid_range(PeriodKind.WEEKLY, DateRange(start=START, end=START - timedelta(days=1)))


def test_ensure_valid_range_rejects_long_daily_range() -> None:
    with pytest.raises(InvalidRangeError, match=str(MAX_DAILY_RANGE_DAYS)):
        ensure_valid_range(PeriodKind.DAILY, DateRange(start=START, end=START + timedelta(days=30)))


def test_describe_range_reports_day_count_and_limit() -> None:
    policy = describe_range(PeriodKind.DAILY, START, START + timedelta(days=29))

    assert policy.day_count == 30
    assert policy.allowed is False
    assert policy.max_daily_days == 29


def test_describe_reversed_range_is_not_allowed() -> None:
    policy = describe_range(PeriodKind.MONTHLY, START, START - timedelta(days=3))

    assert policy.allowed is False
    assert policy.day_count == 0


def test_quick_ranges_for_daily_disable_long_presets() -> None:
    today = date(2025, 5, 31)

    ranges = build_quick_ranges(PeriodKind.DAILY, today)

    assert [(r.label, r.start_date, r.disabled) for r in ranges] == [
        ("Last 7 days", date(2025, 5, 25), False),
        ("Last 30 days", date(2025, 5, 2), True),
        ("Last 90 days", date(2025, 3, 3), True),
    ]
    assert all(r.end_date == today for r in ranges)


def test_quick_ranges_for_weekly_are_all_enabled() -> None:
    ranges = build_quick_ranges(PeriodKind.WEEKLY, date(2025, 5, 31))

    assert not any(r.disabled for r in ranges)


@pytest.mark.parametrize("period", list(PeriodKind))
def test_reversed_range_is_never_allowed(period: PeriodKind) -> None:
    assert not is_range_allowed(period, START, START - timedelta(days=1))
