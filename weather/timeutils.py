"""Calendar-date helpers for weather date ranges.

Ranges are plain calendar dates compared against the local calendar day
(`TIME_ZONE`), never against UTC instants.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, timedelta

from django.utils import timezone
from rest_framework.exceptions import ValidationError


def local_today() -> date:
    """Return today's date in the configured local timezone."""

    return timezone.localdate()


def is_historical(
    start: date, end: date, *, today: date | None = None
) -> bool:
    """True when the range ends strictly before today.

    A range spanning past and future is not historical.
    """

    return end < (today or local_today())


def validate_date_range(
    start: date, end: date, *, today: date | None = None
) -> None:
    if start >= end:
        raise ValidationError("Start date must be before end date.")
    if start > (today or local_today()):
        raise ValidationError("Start date cannot be in the future.")


def inclusive_day_count(start: date, end: date) -> int:
    return (end - start).days + 1


def iter_days(start: date, end: date, *, limit: int) -> Iterator[date]:
    """Yield calendar days from `start` to `end` inclusive, at most `limit`."""

    count = min(inclusive_day_count(start, end), limit)
    for offset in range(max(0, count)):
        yield start + timedelta(days=offset)
