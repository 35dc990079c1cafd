from __future__ import annotations

# ruff: noqa: S101
import asyncio
from datetime import date, timedelta

import pytest
from django.utils import timezone as dj_timezone
from rest_framework.exceptions import ValidationError

from weather.engines.types import Condition, HistoryPayload, ProviderDay
from weather.exceptions import NoDataAvailable, ProviderError
from weather.metrics import (
    weather_history_days_skipped_total,
    weather_provider_errors_total,
    weather_provider_requests_total,
)
from weather.services import (
    DEFAULT_ICON,
    PROVIDER_REGISTRY,
    get_weather,
    resolve_query,
)
from weather.types import DateRange

from .fakes import PARIS, FakeProvider


def _range(start: date, days: int) -> DateRange:
    return DateRange(start=start, end=start + timedelta(days=days - 1))


def _install(
    monkeypatch: pytest.MonkeyPatch, provider: FakeProvider
) -> FakeProvider:
    monkeypatch.setitem(PROVIDER_REGISTRY, "weatherapi", provider)
    return provider


@pytest.mark.parametrize(
    ("start", "end"),
    [
        (date(2020, 1, 5), date(2020, 1, 5)),
        (date(2020, 1, 5), date(2020, 1, 1)),
    ],
)
def test_start_not_before_end_is_rejected_without_calls(
    fake_provider: FakeProvider, start: date, end: date
) -> None:
    with pytest.raises(ValidationError):
        asyncio.run(get_weather("Springfield", DateRange(start, end)))
    assert fake_provider.history_calls == []
    assert fake_provider.forecast_calls == []


def test_future_start_is_rejected_without_calls(
    fake_provider: FakeProvider,
) -> None:
    start = dj_timezone.localdate() + timedelta(days=2)
    with pytest.raises(ValidationError) as excinfo:
        asyncio.run(
            get_weather(
                "Springfield", DateRange(start, start + timedelta(days=3))
            )
        )
    assert "future" in str(excinfo.value.detail[0])
    assert fake_provider.forecast_calls == []


@pytest.mark.parametrize("raw", ["", "  ", "a", "91,0", "0,181"])
def test_invalid_location_is_rejected_without_calls(
    fake_provider: FakeProvider, raw: str
) -> None:
    with pytest.raises(ValidationError):
        asyncio.run(get_weather(raw))
    assert fake_provider.forecast_calls == []


def test_live_mode_converts_units_and_caps_forecast(
    fake_provider: FakeProvider,
) -> None:
    result = asyncio.run(get_weather("Springfield"))

    assert fake_provider.forecast_calls == [("Springfield", 5)]
    assert result.is_historical is False
    assert result.daily_data is None
    assert result.date_range is None
    assert result.current.temperature == 22
    assert result.current.feels_like == 20
    assert result.current.wind_speed == pytest.approx(10.0)
    assert result.current.description == "Sunny"
    assert len(result.forecast) == 5
    days = [item.day for item in result.forecast]
    assert days == sorted(days)
    assert result.forecast[0].t_min == 6
    assert result.forecast[0].t_max == 15


def test_range_ending_today_or_later_uses_live_mode(
    fake_provider: FakeProvider,
) -> None:
    today = dj_timezone.localdate()
    requested = DateRange(today, today + timedelta(days=7))
    result = asyncio.run(get_weather("Springfield", requested))

    assert result.is_historical is False
    assert result.date_range == requested
    assert len(fake_provider.forecast_calls) == 1
    assert fake_provider.history_calls == []


def test_range_spanning_past_and_future_is_live(
    fake_provider: FakeProvider,
) -> None:
    today = dj_timezone.localdate()
    requested = DateRange(today - timedelta(days=3), today + timedelta(days=3))
    result = asyncio.run(get_weather("Springfield", requested))
    assert result.is_historical is False
    assert fake_provider.history_calls == []


def test_historical_range_is_capped_at_ten_calls(
    fake_provider: FakeProvider,
) -> None:
    requested = _range(date(2020, 3, 1), 12)
    result = asyncio.run(get_weather("Springfield", requested))

    called_days = [day for _, day in fake_provider.history_calls]
    assert len(called_days) == 10
    assert called_days == [
        date(2020, 3, 1) + timedelta(days=offset) for offset in range(10)
    ]
    assert result.is_historical is True
    assert result.daily_data is not None
    assert len(result.daily_data) == 10
    assert fake_provider.forecast_calls == []


def test_partial_history_failures_are_skipped(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    failing = {date(2020, 3, 1), date(2020, 3, 4), date(2020, 3, 8)}
    provider = _install(monkeypatch, FakeProvider(failing_days=failing))
    skipped = weather_history_days_skipped_total.labels(provider="weatherapi")
    skipped_before = skipped._value.get()

    result = asyncio.run(
        get_weather("Springfield", _range(date(2020, 3, 1), 10))
    )

    assert len(provider.history_calls) == 10
    assert result.is_historical is True
    assert result.daily_data is not None
    assert len(result.daily_data) == 7
    assert [item.day for item in result.forecast] == [
        item.day for item in result.daily_data
    ]
    first = result.daily_data[0]
    assert first.day == date(2020, 3, 2)
    assert result.current == first.as_current()
    assert result.current.temperature == 2
    assert result.current.wind_speed == pytest.approx(10.0)
    assert skipped._value.get() == skipped_before + 3


def test_all_history_failures_raise_no_data(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    start = date(2020, 1, 1)
    failing = {start + timedelta(days=offset) for offset in range(5)}
    provider = _install(monkeypatch, FakeProvider(failing_days=failing))
    errors = weather_provider_errors_total.labels(
        provider="weatherapi",
        endpoint="history",
        error_type="ProviderNotFound",
    )
    before = errors._value.get()

    with pytest.raises(NoDataAvailable):
        asyncio.run(get_weather("Springfield", _range(start, 5)))
    assert len(provider.history_calls) == 5
    assert errors._value.get() == before + 5


def test_no_data_available_is_not_a_provider_error() -> None:
    assert not issubclass(NoDataAvailable, ProviderError)


def test_historical_defaults_when_fields_missing(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    provider = _install(monkeypatch, FakeProvider())

    async def sparse_history(query: str, day: date) -> HistoryPayload:
        provider.history_calls.append((query, day))
        return HistoryPayload(
            location=PARIS,
            day=ProviderDay(
                day=day,
                mintemp_c=None,
                maxtemp_c=None,
                avgtemp_c=None,
                avghumidity=None,
                avgpressure_mb=None,
                maxwind_kph=None,
                avgwind_degree=None,
                condition=Condition(),
            ),
        )

    monkeypatch.setattr(provider, "history", sparse_history)
    result = asyncio.run(
        get_weather("Springfield", _range(date(2020, 5, 1), 2))
    )
    current = result.current
    assert current.temperature == 0
    assert current.wind_speed == 0.0
    assert current.pressure == pytest.approx(1013.25)
    assert current.description == "Unknown"
    assert current.icon == DEFAULT_ICON
    assert len(provider.history_calls) == 2


def test_landmark_is_queried_by_coordinates(
    fake_provider: FakeProvider,
) -> None:
    asyncio.run(get_weather("Tour Eiffel"))
    assert fake_provider.forecast_calls[0][0] == "48.8584,2.2945"


def test_resolve_query_keeps_coordinates_and_postal_codes() -> None:
    assert resolve_query("40.7128, -74.0060") == "40.7128,-74.006"
    assert resolve_query("sw1a 1aa") == "SW1A 1AA"
    assert resolve_query("Paris, France") == "Paris, France"


def test_provider_calls_are_counted(fake_provider: FakeProvider) -> None:
    counter = weather_provider_requests_total.labels(
        provider="weatherapi", endpoint="forecast"
    )
    before = counter._value.get()
    asyncio.run(get_weather("Springfield"))
    assert counter._value.get() == before + 1


def test_unknown_provider_is_a_validation_error(
    fake_provider: FakeProvider,
) -> None:
    with pytest.raises(ValidationError):
        asyncio.run(get_weather("Springfield", provider="open_weather"))
    assert fake_provider.forecast_calls == []
