from __future__ import annotations

# ruff: noqa: S101
import pytest
from django.conf import LazySettings
from rest_framework.test import APIClient

from locations.exceptions import MapsConfigurationError
from locations.maps import get_map_links, osm_tile_url


def test_mapbox_links_require_token(settings: LazySettings) -> None:
    settings.MAPBOX_ACCESS_TOKEN = ""
    with pytest.raises(MapsConfigurationError):
        get_map_links(48.8584, 2.2945, "mapbox")


def test_mapbox_links_embed_token(settings: LazySettings) -> None:
    settings.MAPBOX_ACCESS_TOKEN = "pk.test"
    links = get_map_links(48.8584, 2.2945, "mapbox", zoom=10)
    assert "access_token=pk.test" in links.static_map_url
    assert "2.2945,48.8584,10,0" in links.static_map_url
    assert links.directions_url.endswith("destination=48.8584,2.2945")


def test_openstreetmap_links_need_no_key(settings: LazySettings) -> None:
    settings.MAPBOX_ACCESS_TOKEN = ""
    links = get_map_links(51.5, -0.12, "openstreetmap")
    assert links.embed_url.startswith(
        "https://www.openstreetmap.org/export/embed.html"
    )
    assert "marker=51.5,-0.12" in links.embed_url
    assert links.static_map_url.startswith("https://tile.openstreetmap.org/")


def test_osm_tile_for_origin() -> None:
    assert osm_tile_url(0.0, 0.0, zoom=1) == (
        "https://tile.openstreetmap.org/1/1/1.png"
    )
    assert osm_tile_url(0.0, -180.0, zoom=2).endswith("/2/0/2.png")


def test_here_links_require_key(settings: LazySettings) -> None:
    settings.HERE_API_KEY = ""
    with pytest.raises(MapsConfigurationError):
        get_map_links(1.0, 2.0, "here")
    settings.HERE_API_KEY = "here-key"
    links = get_map_links(1.0, 2.0, "here")
    assert "apiKey=here-key" in links.embed_url


def test_maps_view(settings: LazySettings) -> None:
    settings.MAPBOX_ACCESS_TOKEN = ""
    client = APIClient()
    resp = client.get(
        "/api/v1/locations/maps/",
        {
            "location": "London",
            "latitude": "51.5",
            "longitude": "-0.12",
            "provider": "openstreetmap",
        },
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["provider"] == "openstreetmap"
    assert data["location"]["name"] == "London"
    assert "embed_url" in data["map_links"]

    resp = client.get(
        "/api/v1/locations/maps/",
        {"location": "London", "latitude": "51.5", "longitude": "-0.12"},
    )
    assert resp.status_code == 503
    assert resp.json()["message"] == "Mapbox access token is not configured"

    resp = client.get(
        "/api/v1/locations/maps/",
        {"location": "Nowhere", "latitude": "95", "longitude": "0"},
    )
    assert resp.status_code == 400
