"""Presentation helpers derived from current conditions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final

COMPASS_POINTS: Final[tuple[str, ...]] = (
    "N",
    "NNE",
    "NE",
    "ENE",
    "E",
    "ESE",
    "SE",
    "SSE",
    "S",
    "SSW",
    "SW",
    "WSW",
    "W",
    "WNW",
    "NW",
    "NNW",
)


@dataclass(frozen=True)
class ComfortLevel:
    level: str
    description: str


_COMFORT_BANDS: Final[tuple[tuple[float, ComfortLevel], ...]] = (
    (20.0, ComfortLevel("Cold", "Bundle up!")),
    (25.0, ComfortLevel("Cool", "Light jacket recommended")),
    (30.0, ComfortLevel("Comfortable", "Perfect weather!")),
    (35.0, ComfortLevel("Warm", "Light clothing recommended")),
    (40.0, ComfortLevel("Hot", "Stay hydrated!")),
)
_VERY_HOT = ComfortLevel("Very Hot", "Avoid outdoor activities")


def compass_point(degrees: float) -> str:
    """Map a wind bearing in degrees onto the 16-point compass rose."""

    index = math.floor(degrees / 22.5 + 0.5) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]


def comfort_level(temperature: float, humidity: float) -> ComfortLevel:
    # Simplified heat index: humidity adds up to ten degrees.
    heat_index = temperature + (humidity / 100.0) * 10.0
    for upper, level in _COMFORT_BANDS:
        if heat_index < upper:
            return level
    return _VERY_HOT
