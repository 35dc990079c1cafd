"""Unified weather result returned by `get_weather`.

Temperatures are whole degrees Celsius, wind speed is m/s with one decimal,
pressure is millibars.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from .engines.types import Location, ProviderName


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date


@dataclass(frozen=True)
class CurrentConditions:
    temperature: int
    feels_like: int
    humidity: float
    pressure: float
    wind_speed: float
    wind_direction: float
    description: str
    icon: str


@dataclass(frozen=True)
class ForecastDay:
    day: date
    t_min: int
    t_max: int
    description: str
    icon: str


@dataclass(frozen=True)
class HistoricalDay:
    day: date
    temperature: int
    t_min: int
    t_max: int
    feels_like: int
    humidity: float
    pressure: float
    wind_speed: float
    wind_direction: float
    description: str
    icon: str

    def as_current(self) -> CurrentConditions:
        return CurrentConditions(
            temperature=self.temperature,
            feels_like=self.feels_like,
            humidity=self.humidity,
            pressure=self.pressure,
            wind_speed=self.wind_speed,
            wind_direction=self.wind_direction,
            description=self.description,
            icon=self.icon,
        )

    def as_forecast(self) -> ForecastDay:
        return ForecastDay(
            day=self.day,
            t_min=self.t_min,
            t_max=self.t_max,
            description=self.description,
            icon=self.icon,
        )


@dataclass(frozen=True)
class WeatherResult:
    location: Location
    current: CurrentConditions
    forecast: Sequence[ForecastDay]
    is_historical: bool
    source: ProviderName
    daily_data: Sequence[HistoricalDay] | None = None
    date_range: DateRange | None = None
