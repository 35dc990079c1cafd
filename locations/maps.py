"""Map link generation for a resolved coordinate.

No network access; only URL building against the configured providers.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Literal, get_args

from django.conf import settings

from .exceptions import MapsConfigurationError

MapProvider = Literal["mapbox", "openstreetmap", "here"]
MAP_PROVIDERS: tuple[str, ...] = get_args(MapProvider)
DEFAULT_ZOOM = 12


@dataclass(frozen=True)
class MapLinks:
    embed_url: str
    static_map_url: str
    directions_url: str
    street_view_url: str
    maps_url: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


def _mapbox_token() -> str:
    token = str(getattr(settings, "MAPBOX_ACCESS_TOKEN", "") or "")
    if not token:
        raise MapsConfigurationError("Mapbox access token is not configured")
    return token


def _here_key() -> str:
    key = str(getattr(settings, "HERE_API_KEY", "") or "")
    if not key:
        raise MapsConfigurationError("HERE API key is not configured")
    return key


def mapbox_static_url(lat: float, lon: float, zoom: int = DEFAULT_ZOOM) -> str:
    token = _mapbox_token()
    style = getattr(settings, "MAPBOX_STYLE", "mapbox/streets-v11")
    return (
        f"https://api.mapbox.com/styles/v1/{style}/static/"
        f"pin-s+ff0000({lon},{lat})/{lon},{lat},{zoom},0/600x400@2x"
        f"?access_token={token}"
    )


def osm_embed_url(lat: float, lon: float) -> str:
    return (
        "https://www.openstreetmap.org/export/embed.html"
        f"?bbox={lon - 0.01},{lat - 0.01},{lon + 0.01},{lat + 0.01}"
        f"&layer=mapnik&marker={lat},{lon}"
    )


def osm_tile_url(lat: float, lon: float, zoom: int = DEFAULT_ZOOM) -> str:
    """Slippy-map tile containing the point (Web Mercator)."""

    scale = 2**zoom
    x = math.floor((lon + 180.0) / 360.0 * scale)
    lat_rad = math.radians(lat)
    y = math.floor(
        (1.0 - math.asinh(math.tan(lat_rad)) / math.pi) / 2.0 * scale
    )
    return f"https://tile.openstreetmap.org/{zoom}/{x}/{y}.png"


def here_map_url(lat: float, lon: float, zoom: int = DEFAULT_ZOOM) -> str:
    key = _here_key()
    return (
        "https://image.maps.ls.hereapi.com/mia/1.6/mapview"
        f"?apiKey={key}&c={lat},{lon}&z={zoom}&w=600&h=400&poi={lat},{lon}"
    )


def get_map_links(
    lat: float,
    lon: float,
    provider: MapProvider = "mapbox",
    zoom: int = DEFAULT_ZOOM,
) -> MapLinks:
    if provider == "mapbox":
        static = mapbox_static_url(lat, lon, zoom)
        return MapLinks(
            embed_url=static,
            static_map_url=static,
            directions_url=(
                f"https://www.mapbox.com/directions/?destination={lat},{lon}"
            ),
            street_view_url=f"https://www.mapbox.com/streets/{lat},{lon}",
            maps_url=f"https://www.mapbox.com/maps/{lat},{lon}",
        )
    if provider == "openstreetmap":
        return MapLinks(
            embed_url=osm_embed_url(lat, lon),
            static_map_url=osm_tile_url(lat, lon, zoom),
            directions_url=(
                f"https://www.openstreetmap.org/directions?to={lat},{lon}"
            ),
            street_view_url=(
                f"https://www.openstreetmap.org/?mlat={lat}&mlon={lon}"
                "&zoom=18"
            ),
            maps_url=(
                f"https://www.openstreetmap.org/?mlat={lat}&mlon={lon}"
                f"&zoom={zoom}"
            ),
        )
    if provider == "here":
        url = here_map_url(lat, lon, zoom)
        return MapLinks(
            embed_url=url,
            static_map_url=url,
            directions_url=(
                f"https://wego.here.com/directions/mix/{lat},{lon}"
            ),
            street_view_url=f"https://wego.here.com/location/{lat},{lon}",
            maps_url=f"https://wego.here.com/location/{lat},{lon}",
        )
    raise ValueError(f"Unsupported map provider: {provider}")
