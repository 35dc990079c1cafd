from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar

from rest_framework import serializers

from config.api.responses import JSONValue

from .services import SEARCH_LIMIT
from .types import Landmark, LandmarkCategory


class LandmarkQuerySerializer(serializers.Serializer):
    q: ClassVar[serializers.CharField] = serializers.CharField(
        required=False, allow_blank=True, trim_whitespace=False
    )
    category: ClassVar[serializers.ChoiceField] = serializers.ChoiceField(
        choices=[c.value for c in LandmarkCategory], required=False
    )
    limit: ClassVar[serializers.IntegerField] = serializers.IntegerField(
        required=False, min_value=1, max_value=50, default=SEARCH_LIMIT
    )


class LandmarkResolveSerializer(serializers.Serializer):
    q: ClassVar[serializers.CharField] = serializers.CharField()


class LandmarkSerializer(serializers.Serializer):
    name: ClassVar[serializers.CharField] = serializers.CharField()
    city: ClassVar[serializers.CharField] = serializers.CharField()
    country: ClassVar[serializers.CharField] = serializers.CharField()
    latitude: ClassVar[serializers.FloatField] = serializers.FloatField()
    longitude: ClassVar[serializers.FloatField] = serializers.FloatField()
    category: ClassVar[serializers.SerializerMethodField] = (
        serializers.SerializerMethodField()
    )
    description: ClassVar[serializers.CharField] = serializers.CharField()
    aliases: ClassVar[serializers.ListField] = serializers.ListField(
        child=serializers.CharField()
    )

    def get_category(self, obj: Landmark) -> str:
        return obj.category.value


def serialize_landmarks(
    landmarks: Sequence[Landmark],
) -> list[dict[str, JSONValue]]:
    return list(LandmarkSerializer(landmarks, many=True).data)


def serialize_landmark(landmark: Landmark) -> dict[str, JSONValue]:
    return dict(LandmarkSerializer(landmark).data)
