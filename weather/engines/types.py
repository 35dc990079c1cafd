"""Typed shapes of the weather provider's responses.

Provider JSON is converted into these once, at the adapter boundary.
Values stay in provider units (Celsius, km/h, millibars).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Literal

ProviderName = Literal["weatherapi"]


@dataclass(frozen=True)
class Location:
    name: str
    lat: float
    lon: float
    country: str = ""
    region: str | None = None
    tz_id: str | None = None
    localtime: str | None = None

    def __post_init__(self) -> None:
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude out of range: {self.lat}")
        if not -180.0 <= self.lon <= 180.0:
            raise ValueError(f"Longitude out of range: {self.lon}")


@dataclass(frozen=True)
class Condition:
    text: str | None = None
    icon: str | None = None


@dataclass(frozen=True)
class ProviderCurrent:
    temp_c: float
    feelslike_c: float | None
    humidity: float | None
    pressure_mb: float | None
    wind_kph: float | None
    wind_degree: float | None
    condition: Condition


@dataclass(frozen=True)
class ProviderDay:
    day: date
    mintemp_c: float | None
    maxtemp_c: float | None
    avgtemp_c: float | None
    avghumidity: float | None
    avgpressure_mb: float | None
    maxwind_kph: float | None
    avgwind_degree: float | None
    condition: Condition


@dataclass(frozen=True)
class ForecastPayload:
    location: Location
    current: ProviderCurrent
    days: Sequence[ProviderDay]


@dataclass(frozen=True)
class HistoryPayload:
    location: Location
    day: ProviderDay
