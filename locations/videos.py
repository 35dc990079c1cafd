"""YouTube Data API client for location travel videos."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any, cast

import httpx
from django.conf import settings

from .exceptions import VideoSearchError, VideoSearchNotConfigured

logger = logging.getLogger(__name__)

_DURATION = re.compile(r"^PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?$")


@dataclass(frozen=True)
class Video:
    id: str
    title: str
    description: str
    thumbnail: str | None
    channel_title: str
    published_at: str
    duration: str
    view_count: str
    url: str

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def format_duration(raw: str | None) -> str:
    """Render an ISO-8601 duration (`PT1H2M3S`) as `1:02:03` / `2:03`."""

    if not raw:
        return "Unknown"
    match = _DURATION.match(raw)
    if not match:
        return "Unknown"
    hours, minutes, seconds = (int(part or 0) for part in match.groups())
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def format_view_count(raw: str | int | None) -> str:
    try:
        count = int(raw) if raw is not None else 0
    except (TypeError, ValueError):
        count = 0
    if count >= 1_000_000:
        return f"{count / 1_000_000:.1f}M views"
    if count >= 1_000:
        return f"{count / 1_000:.1f}K views"
    return f"{count} views"


class YouTubeClient:
    """Search travel videos for a location and enrich them with details."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.api_key: str = api_key or cast(
            str, getattr(settings, "YOUTUBE_API_KEY", "")
        )
        self.base_url: str = (
            base_url
            or cast(
                str,
                getattr(
                    settings,
                    "YOUTUBE_API_BASE_URL",
                    "https://www.googleapis.com/youtube/v3",
                ),
            )
        ).rstrip("/")
        self.timeout = timeout or float(
            getattr(settings, "YOUTUBE_REQUEST_TIMEOUT_S", 10.0)
        )

    async def search(self, location: str, max_results: int = 5) -> list[Video]:
        if not self.api_key:
            raise VideoSearchNotConfigured()

        search_payload = await self._request(
            "search",
            {
                "part": "snippet",
                "q": f"{location} travel guide tourism",
                "type": "video",
                "maxResults": max_results,
            },
        )
        items = search_payload.get("items") or []
        if not items:
            return []

        video_ids = [
            item.get("id", {}).get("videoId")
            for item in items
            if isinstance(item, dict)
        ]
        video_ids = [vid for vid in video_ids if vid]
        if not video_ids:
            return []

        details_payload = await self._request(
            "videos",
            {"part": "contentDetails,statistics", "id": ",".join(video_ids)},
        )
        details = {
            item.get("id"): item
            for item in details_payload.get("items") or []
            if isinstance(item, dict)
        }
        videos = self._combine(items, details)
        logger.info(
            "locations.videos.found location=%s count=%s",
            location,
            len(videos),
        )
        return videos

    def _combine(
        self,
        items: Sequence[Any],
        details: dict[str, dict[str, Any]],
    ) -> list[Video]:
        videos: list[Video] = []
        for item in items:
            if not isinstance(item, dict):
                continue
            video_id = item.get("id", {}).get("videoId")
            if not video_id:
                continue
            snippet = item.get("snippet") or {}
            thumbnails = snippet.get("thumbnails") or {}
            thumb = thumbnails.get("medium") or thumbnails.get("default") or {}
            detail = details.get(video_id, {})
            videos.append(
                Video(
                    id=video_id,
                    title=str(snippet.get("title", "")),
                    description=str(snippet.get("description", "")),
                    thumbnail=thumb.get("url"),
                    channel_title=str(snippet.get("channelTitle", "")),
                    published_at=str(snippet.get("publishedAt", "")),
                    duration=format_duration(
                        (detail.get("contentDetails") or {}).get("duration")
                    ),
                    view_count=format_view_count(
                        (detail.get("statistics") or {}).get("viewCount")
                    ),
                    url=f"https://www.youtube.com/watch?v={video_id}",
                )
            )
        return videos

    async def _request(
        self, endpoint: str, params: dict[str, Any]
    ) -> dict[str, Any]:
        url = f"{self.base_url}/{endpoint}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    url, params={**params, "key": self.api_key}
                )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "locations.videos.upstream_error endpoint=%s status_code=%s",
                endpoint,
                exc.response.status_code,
            )
            raise VideoSearchError(
                f"YouTube API error: {exc.response.status_code}"
            ) from exc
        except (httpx.RequestError, ValueError) as exc:
            logger.warning(
                "locations.videos.request_failed endpoint=%s err=%s",
                endpoint,
                exc.__class__.__name__,
            )
            raise VideoSearchError(f"YouTube service error: {exc}") from exc
        if not isinstance(data, dict):
            raise VideoSearchError("Unexpected YouTube response shape")
        return data
