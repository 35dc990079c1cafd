"""Errors raised while retrieving weather.

All are DRF `APIException`s so the project exception handler renders them
into the standard error envelope.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.exceptions import APIException


class ProviderError(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "Weather provider request failed."
    default_code = "provider_error"


class ProviderUnauthorized(ProviderError):
    default_detail = "Invalid API key. Please check your WeatherAPI key."
    default_code = "provider_unauthorized"


class ProviderNotFound(ProviderError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = (
        "Location not found. Please check the location and try again."
    )
    default_code = "provider_not_found"


class ProviderRateLimited(ProviderError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "API rate limit exceeded. Please try again later."
    default_code = "provider_rate_limited"


class ProviderUnknownError(ProviderError):
    default_detail = "Weather service error."
    default_code = "provider_unknown"


class NoDataAvailable(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = (
        "No historical weather data available for the specified date range."
    )
    default_code = "no_data_available"
