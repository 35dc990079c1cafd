from __future__ import annotations

from typing import ClassVar

from rest_framework import serializers

from config.api.responses import JSONValue
from locations.validation import format_coordinate

from .display import comfort_level, compass_point
from .engines.registry import build_registry
from .types import CurrentConditions, DateRange, WeatherResult

ALLOWED_PROVIDERS: tuple[str, ...] = tuple(build_registry())


class WeatherParamsSerializer(serializers.Serializer):
    location: ClassVar[serializers.CharField] = serializers.CharField(
        required=False, allow_blank=True
    )
    lat: ClassVar[serializers.FloatField] = serializers.FloatField(
        required=False, min_value=-90.0, max_value=90.0
    )
    lon: ClassVar[serializers.FloatField] = serializers.FloatField(
        required=False, min_value=-180.0, max_value=180.0
    )
    start: ClassVar[serializers.DateField] = serializers.DateField(
        required=False
    )
    end: ClassVar[serializers.DateField] = serializers.DateField(
        required=False
    )
    provider: ClassVar[serializers.CharField] = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )

    def validate_provider(self, value: str | None) -> str | None:
        if not value:
            return None
        normalized = value.lower()
        if normalized not in ALLOWED_PROVIDERS:
            raise serializers.ValidationError("Unknown provider.")
        return normalized

    def validate(self, attrs: dict[str, object]) -> dict[str, object]:
        attrs = super().validate(attrs)
        lat = attrs.get("lat")
        lon = attrs.get("lon")
        if (lat is None) != (lon is None):
            raise serializers.ValidationError(
                "lat and lon must be supplied together."
            )
        if isinstance(lat, float) and isinstance(lon, float):
            attrs["location"] = (
                f"{format_coordinate(lat)},{format_coordinate(lon)}"
            )
        elif "location" not in attrs:
            raise serializers.ValidationError(
                "Provide a location or lat and lon."
            )

        if ("start" in attrs) != ("end" in attrs):
            raise serializers.ValidationError(
                "start and end must be supplied together."
            )
        return attrs

    def date_range(self) -> DateRange | None:
        data = self.validated_data
        if "start" not in data:
            return None
        return DateRange(start=data["start"], end=data["end"])


class LocationSerializer(serializers.Serializer):
    name: ClassVar[serializers.CharField] = serializers.CharField()
    latitude: ClassVar[serializers.FloatField] = serializers.FloatField(
        source="lat"
    )
    longitude: ClassVar[serializers.FloatField] = serializers.FloatField(
        source="lon"
    )
    country: ClassVar[serializers.CharField] = serializers.CharField()
    state: ClassVar[serializers.CharField] = serializers.CharField(
        source="region", allow_null=True
    )
    timezone: ClassVar[serializers.CharField] = serializers.CharField(
        source="tz_id", allow_null=True
    )
    local_time: ClassVar[serializers.CharField] = serializers.CharField(
        source="localtime", allow_null=True
    )


class CurrentConditionsSerializer(serializers.Serializer):
    temperature: ClassVar[serializers.IntegerField] = (
        serializers.IntegerField()
    )
    feels_like: ClassVar[serializers.IntegerField] = (
        serializers.IntegerField()
    )
    humidity: ClassVar[serializers.FloatField] = serializers.FloatField()
    pressure: ClassVar[serializers.FloatField] = serializers.FloatField()
    wind_speed: ClassVar[serializers.FloatField] = serializers.FloatField()
    wind_direction: ClassVar[serializers.FloatField] = (
        serializers.FloatField()
    )
    wind_compass: ClassVar[serializers.SerializerMethodField] = (
        serializers.SerializerMethodField()
    )
    comfort: ClassVar[serializers.SerializerMethodField] = (
        serializers.SerializerMethodField()
    )
    description: ClassVar[serializers.CharField] = serializers.CharField()
    icon: ClassVar[serializers.CharField] = serializers.CharField()

    def get_wind_compass(self, obj: CurrentConditions) -> str:
        return compass_point(obj.wind_direction)

    def get_comfort(self, obj: CurrentConditions) -> dict[str, str]:
        level = comfort_level(obj.temperature, obj.humidity)
        return {"level": level.level, "description": level.description}


class ForecastDaySerializer(serializers.Serializer):
    date: ClassVar[serializers.DateField] = serializers.DateField(
        source="day"
    )
    t_min: ClassVar[serializers.IntegerField] = serializers.IntegerField()
    t_max: ClassVar[serializers.IntegerField] = serializers.IntegerField()
    description: ClassVar[serializers.CharField] = serializers.CharField()
    icon: ClassVar[serializers.CharField] = serializers.CharField()


class HistoricalDaySerializer(ForecastDaySerializer):
    temperature: ClassVar[serializers.IntegerField] = (
        serializers.IntegerField()
    )
    feels_like: ClassVar[serializers.IntegerField] = (
        serializers.IntegerField()
    )
    humidity: ClassVar[serializers.FloatField] = serializers.FloatField()
    pressure: ClassVar[serializers.FloatField] = serializers.FloatField()
    wind_speed: ClassVar[serializers.FloatField] = serializers.FloatField()
    wind_direction: ClassVar[serializers.FloatField] = (
        serializers.FloatField()
    )


class DateRangeSerializer(serializers.Serializer):
    start: ClassVar[serializers.DateField] = serializers.DateField()
    end: ClassVar[serializers.DateField] = serializers.DateField()


class WeatherResultSerializer(serializers.Serializer):
    location: ClassVar[LocationSerializer] = LocationSerializer()
    current: ClassVar[CurrentConditionsSerializer] = (
        CurrentConditionsSerializer()
    )
    forecast: ClassVar[ForecastDaySerializer] = ForecastDaySerializer(
        many=True
    )
    is_historical: ClassVar[serializers.BooleanField] = (
        serializers.BooleanField()
    )
    daily_data: ClassVar[HistoricalDaySerializer] = HistoricalDaySerializer(
        many=True, allow_null=True
    )
    date_range: ClassVar[DateRangeSerializer] = DateRangeSerializer(
        allow_null=True
    )
    source = serializers.CharField()  # type: ignore[assignment]


def serialize_weather(result: WeatherResult) -> dict[str, JSONValue]:
    return dict(WeatherResultSerializer(result).data)


def serialize_forecast(result: WeatherResult) -> list[dict[str, JSONValue]]:
    return list(ForecastDaySerializer(result.forecast, many=True).data)


def serialize_daily_data(
    result: WeatherResult,
) -> list[dict[str, JSONValue]] | None:
    if result.daily_data is None:
        return None
    return list(HistoricalDaySerializer(result.daily_data, many=True).data)
