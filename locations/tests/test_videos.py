from __future__ import annotations

# ruff: noqa: S101
import asyncio
from typing import Any

import httpx
import pytest
from django.conf import LazySettings
from rest_framework.test import APIClient

from locations.exceptions import VideoSearchError, VideoSearchNotConfigured
from locations.videos import (
    Video,
    YouTubeClient,
    format_duration,
    format_view_count,
)

SEARCH_PAYLOAD: dict[str, Any] = {
    "items": [
        {
            "id": {"videoId": "abc"},
            "snippet": {
                "title": "Paris in 4K",
                "description": "Walk",
                "thumbnails": {"medium": {"url": "https://img/abc.jpg"}},
                "channelTitle": "Walker",
                "publishedAt": "2024-01-01T00:00:00Z",
            },
        },
        {
            "id": {"videoId": "def"},
            "snippet": {
                "title": "Paris food",
                "description": "Eat",
                "thumbnails": {"default": {"url": "https://img/def.jpg"}},
                "channelTitle": "Eater",
                "publishedAt": "2024-02-01T00:00:00Z",
            },
        },
    ]
}

DETAILS_PAYLOAD: dict[str, Any] = {
    "items": [
        {
            "id": "def",
            "contentDetails": {"duration": "PT1H2M3S"},
            "statistics": {"viewCount": "2500"},
        },
        {
            "id": "abc",
            "contentDetails": {"duration": "PT4M13S"},
            "statistics": {"viewCount": "1300000"},
        },
    ]
}


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("PT4M13S", "4:13"),
        ("PT1H2M3S", "1:02:03"),
        ("PT45S", "0:45"),
        ("PT2H", "2:00:00"),
        ("", "Unknown"),
        (None, "Unknown"),
        ("P1D", "Unknown"),
    ],
)
def test_format_duration(raw: str | None, expected: str) -> None:
    assert format_duration(raw) == expected


def test_format_view_count() -> None:
    assert format_view_count("1500000") == "1.5M views"
    assert format_view_count("2500") == "2.5K views"
    assert format_view_count("12") == "12 views"
    assert format_view_count(None) == "0 views"
    assert format_view_count("n/a") == "0 views"


def test_search_joins_details_by_video_id(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: list[tuple[str, dict[str, Any]]] = []

    async def fake_request(
        self: YouTubeClient, endpoint: str, params: dict[str, Any]
    ) -> dict[str, Any]:
        calls.append((endpoint, params))
        return SEARCH_PAYLOAD if endpoint == "search" else DETAILS_PAYLOAD

    monkeypatch.setattr(YouTubeClient, "_request", fake_request)
    client = YouTubeClient(api_key="yt-key")
    videos = asyncio.run(client.search("Paris", 2))

    assert [video.id for video in videos] == ["abc", "def"]
    assert videos[0].duration == "4:13"
    assert videos[0].view_count == "1.3M views"
    assert videos[1].view_count == "2.5K views"
    assert videos[1].duration == "1:02:03"
    assert videos[1].thumbnail == "https://img/def.jpg"
    assert videos[0].url == "https://www.youtube.com/watch?v=abc"
    assert calls[0][1]["q"] == "Paris travel guide tourism"
    assert calls[1][1]["id"] == "abc,def"


def test_search_without_results_skips_details(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    endpoints: list[str] = []

    async def fake_request(
        self: YouTubeClient, endpoint: str, params: dict[str, Any]
    ) -> dict[str, Any]:
        endpoints.append(endpoint)
        return {"items": []}

    monkeypatch.setattr(YouTubeClient, "_request", fake_request)
    assert asyncio.run(YouTubeClient(api_key="k").search("Nowhere")) == []
    assert endpoints == ["search"]


def test_search_requires_api_key(settings: LazySettings) -> None:
    settings.YOUTUBE_API_KEY = ""
    with pytest.raises(VideoSearchNotConfigured):
        asyncio.run(YouTubeClient().search("Paris"))


def test_request_maps_http_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"error": "quota"})

    transport = httpx.MockTransport(handler)
    original = httpx.AsyncClient

    def client_factory(*args: Any, **kwargs: Any) -> httpx.AsyncClient:
        kwargs["transport"] = transport
        return original(*args, **kwargs)

    monkeypatch.setattr("locations.videos.httpx.AsyncClient", client_factory)
    client = YouTubeClient(api_key="k", base_url="https://yt.example")
    with pytest.raises(VideoSearchError) as excinfo:
        asyncio.run(client.search("Paris"))
    assert "403" in str(excinfo.value.detail)


def test_videos_view(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_search(
        self: YouTubeClient, location: str, max_results: int = 5
    ) -> list[Video]:
        return [
            Video(
                id="abc",
                title=f"{location} tour",
                description="",
                thumbnail=None,
                channel_title="c",
                published_at="2024-01-01T00:00:00Z",
                duration="4:13",
                view_count="10 views",
                url="https://www.youtube.com/watch?v=abc",
            )
        ][:max_results]

    monkeypatch.setattr(YouTubeClient, "search", fake_search)
    client = APIClient()
    resp = client.get(
        "/api/v1/locations/videos/", {"location": "Rome", "max_results": 1}
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["location"] == "Rome"
    assert data["videos"][0]["title"] == "Rome tour"


def test_videos_view_without_key(settings: LazySettings) -> None:
    settings.YOUTUBE_API_KEY = ""
    resp = APIClient().get("/api/v1/locations/videos/", {"location": "Rome"})
    assert resp.status_code == 503
    assert resp.json()["status"] == 1
