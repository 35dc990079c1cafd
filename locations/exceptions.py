from __future__ import annotations

from rest_framework import status
from rest_framework.exceptions import APIException


class MapsConfigurationError(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Map provider is not configured."
    default_code = "maps_not_configured"


class VideoSearchError(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "Video search failed."
    default_code = "video_search_failed"


class VideoSearchNotConfigured(VideoSearchError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "YouTube API key is not configured."
    default_code = "video_search_not_configured"
