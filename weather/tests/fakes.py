from __future__ import annotations

from collections.abc import Collection, Sequence
from datetime import date

from weather.engines.base import WeatherProvider
from weather.engines.types import (
    Condition,
    ForecastPayload,
    HistoryPayload,
    Location,
    ProviderCurrent,
    ProviderDay,
    ProviderName,
)
from weather.exceptions import ProviderNotFound

PARIS = Location(
    name="Paris",
    lat=48.86,
    lon=2.35,
    country="France",
    region="Ile-de-France",
    tz_id="Europe/Paris",
    localtime="2025-01-01 12:00",
)


def provider_day(day: date, avg: float = 10.0) -> ProviderDay:
    return ProviderDay(
        day=day,
        mintemp_c=avg - 4.4,
        maxtemp_c=avg + 4.6,
        avgtemp_c=avg,
        avghumidity=70.0,
        avgpressure_mb=1009.0,
        maxwind_kph=36.0,
        avgwind_degree=90.0,
        condition=Condition(text="Partly cloudy", icon="//icon/116.png"),
    )


class FakeProvider(WeatherProvider):
    """In-memory provider that records every call."""

    name: ProviderName = "weatherapi"

    def __init__(
        self,
        *,
        failing_days: Collection[date] = (),
        forecast_days: Sequence[ProviderDay] | None = None,
    ) -> None:
        self.failing_days = set(failing_days)
        self.forecast_days = forecast_days
        self.forecast_calls: list[tuple[str, int]] = []
        self.history_calls: list[tuple[str, date]] = []

    async def forecast(self, query: str, days: int) -> ForecastPayload:
        self.forecast_calls.append((query, days))
        forecast_days = self.forecast_days
        if forecast_days is None:
            forecast_days = [
                provider_day(date(2025, 1, idx + 1)) for idx in range(7)
            ]
        return ForecastPayload(
            location=PARIS,
            current=ProviderCurrent(
                temp_c=21.5,
                feelslike_c=20.4,
                humidity=55.0,
                pressure_mb=1015.0,
                wind_kph=36.0,
                wind_degree=200.0,
                condition=Condition(text="Sunny", icon="//icon/113.png"),
            ),
            days=forecast_days,
        )

    async def history(self, query: str, day: date) -> HistoryPayload:
        self.history_calls.append((query, day))
        if day in self.failing_days:
            raise ProviderNotFound()
        return HistoryPayload(
            location=PARIS, day=provider_day(day, avg=float(day.day))
        )
