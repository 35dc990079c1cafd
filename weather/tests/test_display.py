from __future__ import annotations

# ruff: noqa: S101
import pytest

from weather.display import comfort_level, compass_point
from weather.units import kph_to_mps, whole_degrees


def test_wind_speed_conversion() -> None:
    assert kph_to_mps(36.0) == pytest.approx(10.0)
    assert kph_to_mps(0.0) == 0.0
    assert kph_to_mps(20.0) == pytest.approx(5.6)


def test_whole_degrees_rounds_halves_up() -> None:
    assert whole_degrees(21.5) == 22
    assert whole_degrees(21.49) == 21
    assert whole_degrees(-2.5) == -2
    assert whole_degrees(-2.6) == -3


@pytest.mark.parametrize(
    ("degrees", "point"),
    [
        (0, "N"),
        (11.2, "N"),
        (11.25, "NNE"),
        (90, "E"),
        (200, "SSW"),
        (348.75, "N"),
        (360, "N"),
    ],
)
def test_compass_point(degrees: float, point: str) -> None:
    assert compass_point(degrees) == point


def test_comfort_level_bands() -> None:
    assert comfort_level(10, 50).level == "Cold"
    assert comfort_level(18, 50).level == "Cool"
    assert comfort_level(22, 60).level == "Comfortable"
    assert comfort_level(28, 50).level == "Warm"
    assert comfort_level(33, 60).level == "Hot"
    assert comfort_level(38, 80).level == "Very Hot"
