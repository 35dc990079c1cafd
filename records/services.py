"""Create, update and query weather records.

Weather is fetched synchronously through `weather.services.get_weather`
and flattened onto the record.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from asgiref.sync import async_to_sync
from django.db.models import QuerySet

from weather.serializers import serialize_daily_data, serialize_forecast
from weather.services import get_weather
from weather.types import DateRange, WeatherResult

from .models import WeatherRecord

logger = logging.getLogger(__name__)

SORT_FIELDS: tuple[str, ...] = (
    "created_at",
    "updated_at",
    "location",
    "start_date",
    "end_date",
)


def weather_fields(result: WeatherResult) -> dict[str, Any]:
    """Flatten a weather result into WeatherRecord field values.

    Min and max span the whole forecast sequence.
    """

    current = result.current
    return {
        "location": result.location.name,
        "latitude": result.location.lat,
        "longitude": result.location.lon,
        "country": result.location.country,
        "is_historical": result.is_historical,
        "temperature": current.temperature,
        "temperature_min": min(day.t_min for day in result.forecast),
        "temperature_max": max(day.t_max for day in result.forecast),
        "feels_like": current.feels_like,
        "humidity": current.humidity,
        "pressure": current.pressure,
        "wind_speed": current.wind_speed,
        "wind_direction": current.wind_direction,
        "description": current.description,
        "icon": current.icon,
        "forecast": serialize_forecast(result),
        "daily_data": serialize_daily_data(result),
    }


def fetch_weather_fields(
    query: str, start_date: date, end_date: date
) -> dict[str, Any]:
    result = async_to_sync(get_weather)(
        query, DateRange(start=start_date, end=end_date)
    )
    return weather_fields(result)


def create_record(
    *, location: str, start_date: date, end_date: date
) -> WeatherRecord:
    fields = fetch_weather_fields(location, start_date, end_date)
    record = WeatherRecord.objects.create(
        query=location.strip(),
        start_date=start_date,
        end_date=end_date,
        **fields,
    )
    logger.info(
        "records.created id=%s location=%s historical=%s",
        record.pk,
        record.location,
        record.is_historical,
    )
    return record


def update_record(
    record: WeatherRecord,
    *,
    location: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    refresh_weather: bool = False,
) -> WeatherRecord:
    """Apply changes to a record, re-fetching weather when needed.

    Weather is re-fetched when the location or the date range changes, or
    when `refresh_weather` is set. The record is left untouched if the
    fetch fails.
    """

    current_query = record.query or record.location
    new_query = location.strip() if location else current_query
    new_start = start_date or record.start_date
    new_end = end_date or record.end_date

    location_changed = new_query not in (current_query, record.location)
    range_changed = (new_start, new_end) != (
        record.start_date,
        record.end_date,
    )
    if not (location_changed or range_changed or refresh_weather):
        return record

    fields = fetch_weather_fields(new_query, new_start, new_end)
    for name, value in fields.items():
        setattr(record, name, value)
    record.query = new_query
    record.start_date = new_start
    record.end_date = new_end
    record.save()
    logger.info(
        "records.updated id=%s location_changed=%s range_changed=%s",
        record.pk,
        location_changed,
        range_changed,
    )
    return record


def filter_records(
    queryset: QuerySet[WeatherRecord],
    *,
    location: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
) -> QuerySet[WeatherRecord]:
    """Filter by location substring and by the record's start date."""

    if location:
        queryset = queryset.filter(location__icontains=location)
    if start_date is not None:
        queryset = queryset.filter(start_date__gte=start_date)
    if end_date is not None:
        queryset = queryset.filter(start_date__lte=end_date)
    return queryset


def sort_records(
    queryset: QuerySet[WeatherRecord],
    *,
    sort_by: str = "created_at",
    sort_order: str = "desc",
) -> QuerySet[WeatherRecord]:
    if sort_by not in SORT_FIELDS:
        raise ValueError(f"Unsupported sort field: {sort_by}")
    prefix = "-" if sort_order == "desc" else ""
    return queryset.order_by(f"{prefix}{sort_by}", f"{prefix}id")
