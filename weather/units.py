"""Unit conversions applied to every provider value."""

from __future__ import annotations

import math

KPH_PER_MPS = 3.6


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def whole_degrees(celsius: float) -> int:
    """Round a temperature to the nearest whole degree (halves go up)."""

    return int(_round_half_up(celsius))


def kph_to_mps(kph: float) -> float:
    """Convert km/h to m/s, one decimal place."""

    return _round_half_up(kph / KPH_PER_MPS, 1)
