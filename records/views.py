"""Saved weather record endpoints.

CRUD responses use the success envelope from
`config.api.responses.success_response`; exports are file attachments.
"""

from __future__ import annotations

import logging
from typing import Any

from django.db.models import QuerySet
from django.http import Http404, HttpResponse
from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiTypes,
    extend_schema,
    extend_schema_view,
)
from rest_framework import serializers, status
from rest_framework.exceptions import NotFound
from rest_framework.negotiation import BaseContentNegotiation
from rest_framework.parsers import BaseParser
from rest_framework.renderers import BaseRenderer, JSONRenderer
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.serializers import Serializer
from rest_framework.views import APIView
from rest_framework.viewsets import ModelViewSet

from config.api.openapi import (
    error_envelope_serializer,
    success_envelope_serializer,
)
from config.api.responses import attachment_response, success_response

from .exporters import EXPORT_FORMATS, export_filename
from .models import WeatherRecord
from .pagination import RecordPagination
from .serializers import (
    EXPORT_LIMIT,
    ExportParamsSerializer,
    RecordFilterSerializer,
    WeatherRecordCreateSerializer,
    WeatherRecordSerializer,
    WeatherRecordUpdateSerializer,
)
from .services import (
    create_record,
    filter_records,
    sort_records,
    update_record,
)

logger = logging.getLogger(__name__)

records_error_schema = error_envelope_serializer("RecordsErrorResponse")
record_success_schema = success_envelope_serializer(
    "WeatherRecordSuccess", data=WeatherRecordSerializer()
)
record_delete_schema = success_envelope_serializer(
    "WeatherRecordDeleteSuccess",
    data=serializers.JSONField(allow_null=True),
)

_filter_parameters = [
    OpenApiParameter(
        name="location",
        type=OpenApiTypes.STR,
        location=OpenApiParameter.QUERY,
        required=False,
    ),
    OpenApiParameter(
        name="start_date",
        type=OpenApiTypes.DATE,
        location=OpenApiParameter.QUERY,
        required=False,
    ),
    OpenApiParameter(
        name="end_date",
        type=OpenApiTypes.DATE,
        location=OpenApiParameter.QUERY,
        required=False,
    ),
]


@extend_schema_view(
    list=extend_schema(
        parameters=[
            *_filter_parameters,
            OpenApiParameter(
                name="sort_by",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
            ),
            OpenApiParameter(
                name="sort_order",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
                enum=["asc", "desc"],
            ),
        ],
        responses={400: records_error_schema},
    ),
    create=extend_schema(
        request=WeatherRecordCreateSerializer,
        responses={
            201: record_success_schema,
            400: records_error_schema,
            404: records_error_schema,
            502: records_error_schema,
            503: records_error_schema,
        },
    ),
    retrieve=extend_schema(
        responses={200: record_success_schema, 404: records_error_schema}
    ),
    update=extend_schema(
        request=WeatherRecordUpdateSerializer,
        responses={
            200: record_success_schema,
            400: records_error_schema,
            404: records_error_schema,
            502: records_error_schema,
        },
    ),
    partial_update=extend_schema(
        request=WeatherRecordUpdateSerializer,
        responses={
            200: record_success_schema,
            400: records_error_schema,
            404: records_error_schema,
            502: records_error_schema,
        },
    ),
    destroy=extend_schema(
        responses={200: record_delete_schema, 404: records_error_schema}
    ),
)
class WeatherRecordViewSet(ModelViewSet):
    """Create, list, read, update and delete saved weather records.

    Create and update fetch weather through `weather.services.get_weather`;
    provider failures surface with their own status codes.
    """

    queryset = WeatherRecord.objects.all()
    serializer_class = WeatherRecordSerializer
    pagination_class = RecordPagination

    def get_serializer_class(self) -> type[Serializer]:
        if self.action == "create":
            return WeatherRecordCreateSerializer
        if self.action in ("update", "partial_update"):
            return WeatherRecordUpdateSerializer
        return WeatherRecordSerializer

    def get_queryset(self) -> QuerySet[WeatherRecord]:
        queryset = WeatherRecord.objects.all()
        if self.action != "list":
            return queryset
        params = RecordFilterSerializer(data=self.request.query_params)
        params.is_valid(raise_exception=True)
        data = params.validated_data
        queryset = filter_records(
            queryset,
            location=data.get("location"),
            start_date=data.get("start_date"),
            end_date=data.get("end_date"),
        )
        return sort_records(
            queryset, sort_by=data["sort_by"], sort_order=data["sort_order"]
        )

    def get_object(self) -> WeatherRecord:
        try:
            return super().get_object()
        except Http404 as exc:
            raise NotFound("Weather record not found") from exc

    def create(self, request: Request, *args: Any, **kwargs: Any) -> Response:
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        record = create_record(
            location=data["location"],
            start_date=data["start_date"],
            end_date=data["end_date"],
        )
        return success_response(
            WeatherRecordSerializer(record).data,
            message="Weather record created successfully",
            status_code=status.HTTP_201_CREATED,
        )

    def retrieve(
        self, request: Request, *args: Any, **kwargs: Any
    ) -> Response:
        record = self.get_object()
        return success_response(
            WeatherRecordSerializer(record).data, message="Weather record"
        )

    def update(self, request: Request, *args: Any, **kwargs: Any) -> Response:
        record = self.get_object()
        serializer = self.get_serializer(record, data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        record = update_record(
            record,
            location=data.get("location"),
            start_date=data.get("start_date"),
            end_date=data.get("end_date"),
            refresh_weather=data["refresh_weather"],
        )
        return success_response(
            WeatherRecordSerializer(record).data,
            message="Weather record updated successfully",
        )

    def destroy(
        self, request: Request, *args: Any, **kwargs: Any
    ) -> Response:
        record = self.get_object()
        record_id = record.pk
        record.delete()
        logger.info("records.deleted id=%s", record_id)
        return success_response(
            None, message="Weather record deleted successfully"
        )


class ExportContentNegotiation(BaseContentNegotiation):
    """Always pick the first parser and renderer.

    The `format` query parameter names the export format, not a renderer.
    """

    def select_parser(
        self, request: Request, parsers: list[BaseParser]
    ) -> BaseParser:
        return parsers[0]

    def select_renderer(
        self,
        request: Request,
        renderers: list[BaseRenderer],
        format_suffix: str | None = None,
    ) -> tuple[BaseRenderer, str]:
        return (renderers[0], renderers[0].media_type)


class WeatherRecordExportView(APIView):
    """Download filtered records as a JSON, CSV or XML attachment."""

    content_negotiation_class = ExportContentNegotiation
    renderer_classes = [JSONRenderer]

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="format",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
                enum=list(EXPORT_FORMATS),
            ),
            *_filter_parameters,
            OpenApiParameter(
                name="limit",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                required=False,
            ),
        ],
        responses={
            (200, "application/octet-stream"): OpenApiTypes.BINARY,
            400: records_error_schema,
        },
    )
    def get(self, request: Request) -> HttpResponse:
        params = ExportParamsSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        data = params.validated_data

        queryset = filter_records(
            WeatherRecord.objects.all(),
            location=data.get("location"),
            start_date=data.get("start_date"),
            end_date=data.get("end_date"),
        )
        queryset = sort_records(queryset)[: data.get("limit", EXPORT_LIMIT)]
        rows = list(WeatherRecordSerializer(queryset, many=True).data)

        fmt = data["format"]
        export = EXPORT_FORMATS[fmt]
        logger.info("records.exported format=%s count=%s", fmt, len(rows))
        return attachment_response(
            export.render(rows),
            filename=export_filename(fmt),
            content_type=export.content_type,
        )
