"""Landmark browsing endpoints (suggestions, category lists, resolution)."""

from __future__ import annotations

from typing import cast

from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiTypes,
    extend_schema,
)
from rest_framework.exceptions import NotFound
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from config.api.openapi import (
    error_envelope_serializer,
    list_envelope_serializer,
    success_envelope_serializer,
)
from config.api.responses import JSONValue, success_response

from .serializers import (
    LandmarkQuerySerializer,
    LandmarkResolveSerializer,
    LandmarkSerializer,
    serialize_landmark,
    serialize_landmarks,
)
from .services import by_category, random_sample, resolve, search

landmark_list_schema = list_envelope_serializer(
    "LandmarkListSuccess", key="landmarks", item=LandmarkSerializer()
)
landmark_success_schema = success_envelope_serializer(
    "LandmarkResolveSuccess", data=LandmarkSerializer()
)
landmark_error_schema = error_envelope_serializer("LandmarkErrorResponse")


class LandmarkListView(APIView):
    """Search, filter by category, or sample the landmark table.

    `q` wins over `category`; with neither, a random sample is returned.
    """

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="q",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Substring over name, city, country, aliases",
            ),
            OpenApiParameter(
                name="category",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
            ),
            OpenApiParameter(
                name="limit",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                required=False,
            ),
        ],
        responses={200: landmark_list_schema, 400: landmark_error_schema},
    )
    def get(self, request: Request) -> Response:
        serializer = LandmarkQuerySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        params = serializer.validated_data
        limit = int(params["limit"])

        query = params.get("q")
        if query:
            landmarks = search(query, limit=limit)
        elif params.get("category"):
            landmarks = by_category(params["category"])[:limit]
        else:
            landmarks = random_sample(limit)

        payload = serialize_landmarks(landmarks)
        return success_response(
            {
                "landmarks": cast(JSONValue, payload),
                "count": len(payload),
            }
        )


class LandmarkResolveView(APIView):
    """Resolve free text to a single landmark."""

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="q",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=True,
            ),
        ],
        responses={
            200: landmark_success_schema,
            400: landmark_error_schema,
            404: landmark_error_schema,
        },
    )
    def get(self, request: Request) -> Response:
        serializer = LandmarkResolveSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        landmark = resolve(serializer.validated_data["q"])
        if landmark is None:
            raise NotFound("No landmark matches the query.")
        return success_response(serialize_landmark(landmark))
