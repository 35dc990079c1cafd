from __future__ import annotations

from typing import ClassVar

from rest_framework import serializers

from config.api.responses import JSONValue

from .maps import DEFAULT_ZOOM, MAP_PROVIDERS
from .validation import LocationClassification


class LocationValidateParamsSerializer(serializers.Serializer):
    q: ClassVar[serializers.CharField] = serializers.CharField(
        allow_blank=True, trim_whitespace=False
    )


class LocationClassificationSerializer(serializers.Serializer):
    is_valid: ClassVar[serializers.BooleanField] = serializers.BooleanField()
    kind: ClassVar[serializers.CharField] = serializers.CharField()
    kind_label: ClassVar[serializers.CharField] = serializers.CharField()
    normalized: ClassVar[serializers.CharField] = serializers.CharField()
    error: ClassVar[serializers.CharField] = serializers.CharField(
        allow_null=True
    )


class MapLinksParamsSerializer(serializers.Serializer):
    location: ClassVar[serializers.CharField] = serializers.CharField()
    latitude: ClassVar[serializers.FloatField] = serializers.FloatField(
        min_value=-90.0, max_value=90.0
    )
    longitude: ClassVar[serializers.FloatField] = serializers.FloatField(
        min_value=-180.0, max_value=180.0
    )
    provider: ClassVar[serializers.ChoiceField] = serializers.ChoiceField(
        choices=MAP_PROVIDERS, required=False, default="mapbox"
    )
    zoom: ClassVar[serializers.IntegerField] = serializers.IntegerField(
        required=False, min_value=0, max_value=22, default=DEFAULT_ZOOM
    )


class MapLinksSerializer(serializers.Serializer):
    embed_url: ClassVar[serializers.CharField] = serializers.CharField()
    static_map_url: ClassVar[serializers.CharField] = serializers.CharField()
    directions_url: ClassVar[serializers.CharField] = serializers.CharField()
    street_view_url: ClassVar[serializers.CharField] = serializers.CharField()
    maps_url: ClassVar[serializers.CharField] = serializers.CharField()


class VideoParamsSerializer(serializers.Serializer):
    location: ClassVar[serializers.CharField] = serializers.CharField()
    max_results: ClassVar[serializers.IntegerField] = (
        serializers.IntegerField(
            required=False, min_value=1, max_value=25, default=5
        )
    )


class VideoSerializer(serializers.Serializer):
    id: ClassVar[serializers.CharField] = serializers.CharField()
    title: ClassVar[serializers.CharField] = serializers.CharField()
    description: ClassVar[serializers.CharField] = serializers.CharField()
    thumbnail: ClassVar[serializers.CharField] = serializers.CharField(
        allow_null=True
    )
    channel_title: ClassVar[serializers.CharField] = serializers.CharField()
    published_at: ClassVar[serializers.CharField] = serializers.CharField()
    duration: ClassVar[serializers.CharField] = serializers.CharField()
    view_count: ClassVar[serializers.CharField] = serializers.CharField()
    url: ClassVar[serializers.CharField] = serializers.CharField()


def serialize_classification(
    result: LocationClassification,
) -> dict[str, JSONValue]:
    return {
        "is_valid": result.is_valid,
        "kind": result.kind.value,
        "kind_label": result.kind.label,
        "normalized": result.normalized,
        "error": result.error,
    }
