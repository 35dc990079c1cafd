from __future__ import annotations

# ruff: noqa: S101
from datetime import date
from typing import Any

import pytest
from rest_framework.test import APIClient

from weather.exceptions import NoDataAvailable, ProviderNotFound
from weather.serializers import WeatherParamsSerializer
from weather.types import DateRange

from .fakes import FakeProvider


def test_weather_view_live_mode(fake_provider: FakeProvider) -> None:
    client = APIClient()
    resp = client.get("/api/v1/weather/", {"location": "Springfield"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == 0
    assert body["errors"] is None
    data = body["data"]
    assert data["is_historical"] is False
    assert data["daily_data"] is None
    assert data["date_range"] is None
    assert data["source"] == "weatherapi"
    assert data["location"]["name"] == "Paris"
    assert data["location"]["timezone"] == "Europe/Paris"
    current = data["current"]
    assert current["temperature"] == 22
    assert current["wind_speed"] == 10.0
    assert current["wind_compass"] == "SSW"
    assert current["comfort"]["level"] == "Comfortable"
    assert len(data["forecast"]) == 5
    assert data["forecast"][0]["date"] == "2025-01-01"


def test_weather_view_historical_mode(fake_provider: FakeProvider) -> None:
    client = APIClient()
    resp = client.get(
        "/api/v1/weather/",
        {
            "location": "Springfield",
            "start": "2020-03-01",
            "end": "2020-03-03",
        },
    )

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["is_historical"] is True
    assert len(data["daily_data"]) == 3
    assert data["daily_data"][0]["date"] == "2020-03-01"
    assert data["date_range"] == {"start": "2020-03-01", "end": "2020-03-03"}
    assert len(fake_provider.history_calls) == 3


def test_weather_view_lat_lon(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, Any] = {}

    async def fake_get_weather(
        location: str,
        date_range: DateRange | None = None,
        *,
        provider: str | None = None,
    ) -> Any:
        captured["location"] = location
        captured["date_range"] = date_range
        captured["provider"] = provider
        raise ProviderNotFound()

    monkeypatch.setattr("weather.views.get_weather", fake_get_weather)
    client = APIClient()
    resp = client.get(
        "/api/v1/weather/",
        {"lat": "40.0", "lon": "-74.006", "provider": "WeatherAPI"},
    )

    assert resp.status_code == 404
    assert resp.json()["status"] == 1
    assert captured == {
        "location": "40,-74.006",
        "date_range": None,
        "provider": "weatherapi",
    }


@pytest.mark.parametrize(
    "params",
    [
        {},
        {"lat": "10"},
        {"location": "Rome", "start": "2020-01-01"},
        {"location": "Rome", "provider": "open_meteo"},
        {"lat": "95", "lon": "0"},
    ],
)
def test_weather_view_rejects_bad_params(
    fake_provider: FakeProvider, params: dict[str, str]
) -> None:
    resp = APIClient().get("/api/v1/weather/", params)
    assert resp.status_code == 400
    assert resp.json()["status"] == 1
    assert fake_provider.forecast_calls == []


def test_weather_view_rejects_inverted_range(
    fake_provider: FakeProvider,
) -> None:
    resp = APIClient().get(
        "/api/v1/weather/",
        {"location": "Rome", "start": "2020-01-05", "end": "2020-01-01"},
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "Start date must be before end date."
    assert fake_provider.history_calls == []


def test_weather_view_rejects_invalid_location(
    fake_provider: FakeProvider,
) -> None:
    resp = APIClient().get("/api/v1/weather/", {"location": "91,0"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Latitude must be between -90 and 90"


def test_weather_view_no_data(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_get_weather(*args: Any, **kwargs: Any) -> Any:
        raise NoDataAvailable()

    monkeypatch.setattr("weather.views.get_weather", fake_get_weather)
    resp = APIClient().get(
        "/api/v1/weather/",
        {"location": "Rome", "start": "2020-01-01", "end": "2020-01-03"},
    )
    assert resp.status_code == 502
    assert "No historical weather data" in resp.json()["message"]


def test_date_range_from_params() -> None:
    serializer = WeatherParamsSerializer(
        data={"location": "Rome", "start": "2020-01-01", "end": "2020-01-03"}
    )
    assert serializer.is_valid(), serializer.errors
    assert serializer.date_range() == DateRange(
        date(2020, 1, 1), date(2020, 1, 3)
    )
