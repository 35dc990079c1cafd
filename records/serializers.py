from __future__ import annotations

from datetime import date
from typing import Any, ClassVar

from django.conf import settings
from rest_framework import serializers

from weather.timeutils import validate_date_range

from .models import WeatherRecord
from .services import SORT_FIELDS

EXPORT_LIMIT = int(getattr(settings, "RECORDS_EXPORT_LIMIT", 1000))


class WeatherRecordSerializer(serializers.ModelSerializer):
    class Meta:
        model = WeatherRecord
        fields = [
            "id",
            "location",
            "query",
            "latitude",
            "longitude",
            "country",
            "start_date",
            "end_date",
            "is_historical",
            "temperature",
            "temperature_min",
            "temperature_max",
            "feels_like",
            "humidity",
            "pressure",
            "wind_speed",
            "wind_direction",
            "description",
            "icon",
            "forecast",
            "daily_data",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class WeatherRecordCreateSerializer(serializers.Serializer):
    location: ClassVar[serializers.CharField] = serializers.CharField(
        max_length=255
    )
    start_date: ClassVar[serializers.DateField] = serializers.DateField()
    end_date: ClassVar[serializers.DateField] = serializers.DateField()

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        validate_date_range(attrs["start_date"], attrs["end_date"])
        return attrs


class WeatherRecordUpdateSerializer(serializers.Serializer):
    """Changes to a saved record; omitted fields keep their stored value."""

    location: ClassVar[serializers.CharField] = serializers.CharField(
        max_length=255, required=False
    )
    start_date: ClassVar[serializers.DateField] = serializers.DateField(
        required=False
    )
    end_date: ClassVar[serializers.DateField] = serializers.DateField(
        required=False
    )
    refresh_weather: ClassVar[serializers.BooleanField] = (
        serializers.BooleanField(required=False, default=False)
    )

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        if "start_date" not in attrs and "end_date" not in attrs:
            return attrs

        def _val(key: str) -> date:
            return attrs.get(key) or getattr(self.instance, key)

        validate_date_range(_val("start_date"), _val("end_date"))
        return attrs


class RecordFilterSerializer(serializers.Serializer):
    location: ClassVar[serializers.CharField] = serializers.CharField(
        required=False, allow_blank=True
    )
    start_date: ClassVar[serializers.DateField] = serializers.DateField(
        required=False
    )
    end_date: ClassVar[serializers.DateField] = serializers.DateField(
        required=False
    )
    sort_by: ClassVar[serializers.ChoiceField] = serializers.ChoiceField(
        choices=SORT_FIELDS, default="created_at"
    )
    sort_order: ClassVar[serializers.ChoiceField] = serializers.ChoiceField(
        choices=("asc", "desc"), default="desc"
    )


class ExportParamsSerializer(serializers.Serializer):
    format: ClassVar[serializers.ChoiceField] = serializers.ChoiceField(
        choices=("json", "csv", "xml"), default="json"
    )
    location: ClassVar[serializers.CharField] = serializers.CharField(
        required=False, allow_blank=True
    )
    start_date: ClassVar[serializers.DateField] = serializers.DateField(
        required=False
    )
    end_date: ClassVar[serializers.DateField] = serializers.DateField(
        required=False
    )
    limit: ClassVar[serializers.IntegerField] = serializers.IntegerField(
        required=False, min_value=1, max_value=EXPORT_LIMIT
    )
