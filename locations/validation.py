"""Classification of free-form location input.

Pure and side-effect free so it can run on every keystroke.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

EMPTY_LOCATION_ERROR: Final[str] = "Location cannot be empty"
TOO_SHORT_ERROR: Final[str] = "Location must be at least 2 characters long"
LATITUDE_RANGE_ERROR: Final[str] = "Latitude must be between -90 and 90"
LONGITUDE_RANGE_ERROR: Final[str] = "Longitude must be between -180 and 180"

_COORDINATES = re.compile(
    r"^(-?\d+(?:\.\d+)?),\s*(-?\d+(?:\.\d+)?)$", re.ASCII
)
_US_ZIP = re.compile(r"^\d{5}(?:-\d{4})?$", re.ASCII)
_CA_POSTAL = re.compile(r"^[A-Za-z]\d[A-Za-z] \d[A-Za-z]\d$", re.ASCII)
_UK_POSTAL = re.compile(
    r"^[A-Z]{1,2}\d[A-Z\d]? \d[A-Z]{2}$", re.ASCII | re.IGNORECASE
)


class LocationKind(str, Enum):
    COORDINATES = "coordinates"
    POSTAL_CODE = "postal_code"
    PLACE_NAME = "place_name"
    INVALID = "invalid"

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]


_KIND_LABELS: Final[dict[LocationKind, str]] = {
    LocationKind.COORDINATES: "Coordinates (latitude, longitude)",
    LocationKind.POSTAL_CODE: "ZIP/Postal Code",
    LocationKind.PLACE_NAME: "City or Location",
    LocationKind.INVALID: "Unknown format",
}


@dataclass(frozen=True)
class LocationClassification:
    is_valid: bool
    kind: LocationKind
    normalized: str
    error: str | None = None


def format_coordinate(value: float) -> str:
    """Shortest decimal form, integral values without a trailing `.0`."""

    if value.is_integer():
        return str(int(value))
    return repr(value)


def classify(raw: str) -> LocationClassification:
    """Classify and normalize a location string.

    Rules run in precedence order: empty, coordinate pair, US ZIP,
    Canadian postal code, UK postcode, place name (two characters or more).
    """

    trimmed = (raw or "").strip()
    if not trimmed:
        return LocationClassification(
            is_valid=False,
            kind=LocationKind.INVALID,
            normalized="",
            error=EMPTY_LOCATION_ERROR,
        )

    coords = _COORDINATES.match(trimmed)
    if coords:
        lat = float(coords.group(1))
        lon = float(coords.group(2))
        if not -90.0 <= lat <= 90.0:
            return LocationClassification(
                is_valid=False,
                kind=LocationKind.COORDINATES,
                normalized=trimmed,
                error=LATITUDE_RANGE_ERROR,
            )
        if not -180.0 <= lon <= 180.0:
            return LocationClassification(
                is_valid=False,
                kind=LocationKind.COORDINATES,
                normalized=trimmed,
                error=LONGITUDE_RANGE_ERROR,
            )
        return LocationClassification(
            is_valid=True,
            kind=LocationKind.COORDINATES,
            normalized=f"{format_coordinate(lat)},{format_coordinate(lon)}",
        )

    if _US_ZIP.match(trimmed):
        return LocationClassification(
            is_valid=True,
            kind=LocationKind.POSTAL_CODE,
            normalized=trimmed,
        )

    if _CA_POSTAL.match(trimmed) or _UK_POSTAL.match(trimmed):
        return LocationClassification(
            is_valid=True,
            kind=LocationKind.POSTAL_CODE,
            normalized=trimmed.upper(),
        )

    if len(trimmed) >= 2:
        return LocationClassification(
            is_valid=True,
            kind=LocationKind.PLACE_NAME,
            normalized=trimmed,
        )

    return LocationClassification(
        is_valid=False,
        kind=LocationKind.INVALID,
        normalized=trimmed,
        error=TOO_SHORT_ERROR,
    )
