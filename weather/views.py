"""Weather API endpoint.

Responses are wrapped by `config.api.responses.success_response`
(status/message/data/errors).
"""

from __future__ import annotations

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from config.api.openapi import (
    error_envelope_serializer,
    success_envelope_serializer,
)
from config.api.responses import success_response

from .serializers import (
    WeatherParamsSerializer,
    WeatherResultSerializer,
    serialize_weather,
)
from .services import get_weather

weather_success_schema = success_envelope_serializer(
    "WeatherSuccess",
    data=WeatherResultSerializer(),
)
weather_error_schema = error_envelope_serializer("WeatherErrorResponse")


class WeatherView(APIView):
    """Weather for a free-text location or a lat/lon pair.

    Without `start`/`end` this is live mode (current conditions plus a short
    forecast). With a range that ends before today it is historical mode,
    one provider call per day up to the configured cap.
    """

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="location",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
                description="City, postal code, landmark or 'lat,lon'",
            ),
            OpenApiParameter(
                name="lat",
                type=OpenApiTypes.FLOAT,
                location=OpenApiParameter.QUERY,
                required=False,
            ),
            OpenApiParameter(
                name="lon",
                type=OpenApiTypes.FLOAT,
                location=OpenApiParameter.QUERY,
                required=False,
            ),
            OpenApiParameter(
                name="start",
                type=OpenApiTypes.DATE,
                location=OpenApiParameter.QUERY,
                required=False,
            ),
            OpenApiParameter(
                name="end",
                type=OpenApiTypes.DATE,
                location=OpenApiParameter.QUERY,
                required=False,
            ),
            OpenApiParameter(
                name="provider",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Weather provider (weatherapi)",
            ),
        ],
        responses={
            200: weather_success_schema,
            400: weather_error_schema,
            404: weather_error_schema,
            502: weather_error_schema,
            503: weather_error_schema,
        },
    )
    def get(self, request: Request) -> Response:
        serializer = WeatherParamsSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        params = serializer.validated_data

        result = async_to_sync(get_weather)(
            str(params["location"]),
            serializer.date_range(),
            provider=params.get("provider"),
        )
        return success_response(serialize_weather(result))
