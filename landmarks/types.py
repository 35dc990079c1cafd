from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class LandmarkCategory(str, Enum):
    MONUMENT = "monument"
    BUILDING = "building"
    NATURAL = "natural"
    RELIGIOUS = "religious"
    HISTORICAL = "historical"
    MODERN = "modern"


@dataclass(frozen=True)
class Landmark:
    """Curated point of interest with known coordinates."""

    name: str
    city: str
    country: str
    latitude: float
    longitude: float
    category: LandmarkCategory
    description: str
    aliases: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Invalid latitude for {self.name}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Invalid longitude for {self.name}")

    @property
    def coordinates(self) -> str:
        """Provider query string in `lat,lon` form."""
        return f"{self.latitude},{self.longitude}"
