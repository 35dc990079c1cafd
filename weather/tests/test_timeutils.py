from __future__ import annotations

# ruff: noqa: S101
from datetime import date, timedelta

import pytest
from django.utils import timezone as dj_timezone
from rest_framework.exceptions import ValidationError

from weather.timeutils import (
    inclusive_day_count,
    is_historical,
    iter_days,
    validate_date_range,
)


def test_past_range_is_historical() -> None:
    assert is_historical(date(2020, 1, 1), date(2020, 1, 5))


def test_range_from_today_is_not_historical() -> None:
    today = dj_timezone.localdate()
    assert not is_historical(today, today + timedelta(days=7))


def test_range_ending_today_is_not_historical() -> None:
    today = date(2025, 6, 10)
    assert not is_historical(date(2025, 6, 1), today, today=today)
    assert is_historical(
        date(2025, 6, 1), today - timedelta(days=1), today=today
    )


def test_local_calendar_day_decides(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(
        "weather.timeutils.timezone.localdate", lambda: date(2025, 6, 10)
    )
    assert is_historical(date(2025, 6, 1), date(2025, 6, 9))
    assert not is_historical(date(2025, 6, 1), date(2025, 6, 10))


def test_validate_date_range() -> None:
    today = date(2025, 6, 10)
    validate_date_range(date(2025, 6, 1), date(2025, 6, 2), today=today)
    validate_date_range(today, today + timedelta(days=3), today=today)
    with pytest.raises(ValidationError):
        validate_date_range(today, today, today=today)
    with pytest.raises(ValidationError):
        validate_date_range(
            today + timedelta(days=1), today + timedelta(days=2), today=today
        )


def test_iter_days_is_inclusive_and_capped() -> None:
    start = date(2024, 2, 27)
    assert inclusive_day_count(start, date(2024, 3, 1)) == 4
    assert list(iter_days(start, date(2024, 3, 1), limit=10)) == [
        date(2024, 2, 27),
        date(2024, 2, 28),
        date(2024, 2, 29),
        date(2024, 3, 1),
    ]
    capped = list(iter_days(start, start + timedelta(days=30), limit=10))
    assert len(capped) == 10
