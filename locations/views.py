"""Location helper endpoints: input validation, map links, travel videos."""

from __future__ import annotations

from typing import cast

from asgiref.sync import async_to_sync
from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiTypes,
    extend_schema,
    inline_serializer,
)
from rest_framework import serializers
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from config.api.openapi import (
    error_envelope_serializer,
    success_envelope_serializer,
)
from config.api.responses import JSONValue, success_response

from .maps import get_map_links
from .serializers import (
    LocationClassificationSerializer,
    LocationValidateParamsSerializer,
    MapLinksParamsSerializer,
    MapLinksSerializer,
    VideoParamsSerializer,
    VideoSerializer,
    serialize_classification,
)
from .validation import classify
from .videos import YouTubeClient

locations_error_schema = error_envelope_serializer("LocationsErrorResponse")

validate_success_schema = success_envelope_serializer(
    "LocationValidateSuccess", data=LocationClassificationSerializer()
)

maps_success_schema = success_envelope_serializer(
    "LocationMapsSuccess",
    data=inline_serializer(
        name="LocationMapsData",
        fields={
            "map_links": MapLinksSerializer(),
            "provider": serializers.CharField(),
            "location": inline_serializer(
                name="LocationMapsPoint",
                fields={
                    "name": serializers.CharField(),
                    "latitude": serializers.FloatField(),
                    "longitude": serializers.FloatField(),
                },
            ),
        },
    ),
)

videos_success_schema = success_envelope_serializer(
    "LocationVideosSuccess",
    data=inline_serializer(
        name="LocationVideosData",
        fields={
            "videos": VideoSerializer(many=True),
            "location": serializers.CharField(),
        },
    ),
)


class LocationValidateView(APIView):
    """Classify a raw location string (coordinates, postal code, place)."""

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="q",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=True,
            ),
        ],
        responses={200: validate_success_schema, 400: locations_error_schema},
    )
    def get(self, request: Request) -> Response:
        serializer = LocationValidateParamsSerializer(
            data=request.query_params
        )
        serializer.is_valid(raise_exception=True)
        result = classify(serializer.validated_data["q"])
        return success_response(serialize_classification(result))


class LocationMapsView(APIView):
    """Map links for a coordinate from Mapbox, OpenStreetMap or HERE."""

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="location",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=True,
            ),
            OpenApiParameter(
                name="latitude",
                type=OpenApiTypes.FLOAT,
                location=OpenApiParameter.QUERY,
                required=True,
            ),
            OpenApiParameter(
                name="longitude",
                type=OpenApiTypes.FLOAT,
                location=OpenApiParameter.QUERY,
                required=True,
            ),
            OpenApiParameter(
                name="provider",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
                description="mapbox (default), openstreetmap or here",
            ),
            OpenApiParameter(
                name="zoom",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                required=False,
            ),
        ],
        responses={
            200: maps_success_schema,
            400: locations_error_schema,
            503: locations_error_schema,
        },
    )
    def get(self, request: Request) -> Response:
        serializer = MapLinksParamsSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        params = serializer.validated_data
        lat = float(params["latitude"])
        lon = float(params["longitude"])
        links = get_map_links(
            lat, lon, provider=params["provider"], zoom=int(params["zoom"])
        )
        return success_response(
            {
                "map_links": cast(JSONValue, links.as_dict()),
                "provider": params["provider"],
                "location": {
                    "name": params["location"],
                    "latitude": lat,
                    "longitude": lon,
                },
            }
        )


class LocationVideosView(APIView):
    """Travel videos about a location from the YouTube Data API."""

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="location",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=True,
            ),
            OpenApiParameter(
                name="max_results",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                required=False,
            ),
        ],
        responses={
            200: videos_success_schema,
            400: locations_error_schema,
            502: locations_error_schema,
            503: locations_error_schema,
        },
    )
    def get(self, request: Request) -> Response:
        serializer = VideoParamsSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        params = serializer.validated_data
        videos = async_to_sync(YouTubeClient().search)(
            params["location"], int(params["max_results"])
        )
        return success_response(
            {
                "videos": cast(
                    JSONValue, [video.as_dict() for video in videos]
                ),
                "location": params["location"],
            }
        )
