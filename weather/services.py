"""Weather retrieval orchestrator.

`get_weather` validates the request, resolves landmarks to coordinates and
then runs either live mode (one forecast call) or historical mode (one
history call per day, sequentially, skipping failed days).
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable
from typing import TypeVar

from django.conf import settings
from rest_framework.exceptions import ValidationError

from landmarks.services import resolve
from locations.validation import LocationKind, classify

from .engines.registry import build_registry, validate_provider
from .engines.types import (
    Condition,
    Location,
    ProviderCurrent,
    ProviderDay,
    ProviderName,
)
from .exceptions import NoDataAvailable, ProviderError, ProviderUnknownError
from .metrics import (
    weather_history_days_skipped_total,
    weather_lookups_total,
    weather_provider_errors_total,
    weather_provider_latency_seconds,
    weather_provider_requests_total,
)
from .timeutils import is_historical, iter_days, validate_date_range
from .types import (
    CurrentConditions,
    DateRange,
    ForecastDay,
    HistoricalDay,
    WeatherResult,
)
from .units import kph_to_mps, whole_degrees

logger = logging.getLogger(__name__)

FORECAST_DAYS = int(getattr(settings, "WEATHER_FORECAST_DAYS", 5))
HISTORY_MAX_DAYS = int(getattr(settings, "WEATHER_HISTORY_MAX_DAYS", 10))
DEFAULT_DESCRIPTION = "Unknown"
DEFAULT_ICON = "//cdn.weatherapi.com/weather/64x64/day/113.png"
DEFAULT_PRESSURE_MB = 1013.25

PROVIDER_REGISTRY = build_registry()

T = TypeVar("T")


def _select_provider(name: str | None) -> ProviderName:
    try:
        return validate_provider(name, PROVIDER_REGISTRY)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc


def resolve_query(raw: str) -> str:
    """Validate a location string and return the provider query for it.

    Place names matching a landmark are replaced by its coordinates.
    """

    classification = classify(raw)
    if not classification.is_valid:
        raise ValidationError(classification.error)
    if classification.kind is LocationKind.PLACE_NAME:
        landmark = resolve(classification.normalized)
        if landmark is not None:
            logger.info(
                "weather.landmark_resolved query=%s landmark=%s",
                classification.normalized,
                landmark.name,
            )
            return landmark.coordinates
    return classification.normalized


async def _observe(
    provider_name: ProviderName, endpoint: str, call: Awaitable[T]
) -> T:
    start_time = time.perf_counter()
    weather_provider_requests_total.labels(
        provider=provider_name, endpoint=endpoint
    ).inc()
    try:
        return await call
    except Exception as exc:
        weather_provider_errors_total.labels(
            provider=provider_name,
            endpoint=endpoint,
            error_type=exc.__class__.__name__,
        ).inc()
        raise
    finally:
        duration = time.perf_counter() - start_time
        weather_provider_latency_seconds.labels(
            provider=provider_name, endpoint=endpoint
        ).observe(duration)


def _condition_text(condition: Condition) -> tuple[str, str]:
    return (
        condition.text or DEFAULT_DESCRIPTION,
        condition.icon or DEFAULT_ICON,
    )


def _current_from_provider(current: ProviderCurrent) -> CurrentConditions:
    description, icon = _condition_text(current.condition)
    feels_like = (
        current.feelslike_c
        if current.feelslike_c is not None
        else current.temp_c
    )
    return CurrentConditions(
        temperature=whole_degrees(current.temp_c),
        feels_like=whole_degrees(feels_like),
        humidity=current.humidity or 0.0,
        pressure=current.pressure_mb or DEFAULT_PRESSURE_MB,
        wind_speed=kph_to_mps(current.wind_kph or 0.0),
        wind_direction=current.wind_degree or 0.0,
        description=description,
        icon=icon,
    )


def _forecast_from_provider(day: ProviderDay) -> ForecastDay:
    description, icon = _condition_text(day.condition)
    return ForecastDay(
        day=day.day,
        t_min=whole_degrees(day.mintemp_c or 0.0),
        t_max=whole_degrees(day.maxtemp_c or 0.0),
        description=description,
        icon=icon,
    )


def _historical_from_provider(day: ProviderDay) -> HistoricalDay:
    description, icon = _condition_text(day.condition)
    average = whole_degrees(day.avgtemp_c or 0.0)
    return HistoricalDay(
        day=day.day,
        temperature=average,
        t_min=whole_degrees(day.mintemp_c or 0.0),
        t_max=whole_degrees(day.maxtemp_c or 0.0),
        feels_like=average,
        humidity=day.avghumidity or 0.0,
        pressure=day.avgpressure_mb or DEFAULT_PRESSURE_MB,
        wind_speed=kph_to_mps(day.maxwind_kph or 0.0),
        wind_direction=day.avgwind_degree or 0.0,
        description=description,
        icon=icon,
    )


async def _live_weather(
    provider_name: ProviderName,
    query: str,
    date_range: DateRange | None,
) -> WeatherResult:
    provider_impl = PROVIDER_REGISTRY[provider_name]
    payload = await _observe(
        provider_name,
        "forecast",
        provider_impl.forecast(query, FORECAST_DAYS),
    )
    forecast = [
        _forecast_from_provider(day) for day in payload.days[:FORECAST_DAYS]
    ]
    if not forecast:
        raise ProviderUnknownError("Weather service returned no forecast.")
    weather_lookups_total.labels(mode="live").inc()
    return WeatherResult(
        location=payload.location,
        current=_current_from_provider(payload.current),
        forecast=forecast,
        is_historical=False,
        source=provider_name,
        date_range=date_range,
    )


async def _historical_weather(
    provider_name: ProviderName,
    query: str,
    date_range: DateRange,
) -> WeatherResult:
    provider_impl = PROVIDER_REGISTRY[provider_name]
    location: Location | None = None
    daily: list[HistoricalDay] = []

    for day in iter_days(
        date_range.start, date_range.end, limit=HISTORY_MAX_DAYS
    ):
        try:
            payload = await _observe(
                provider_name, "history", provider_impl.history(query, day)
            )
        except ProviderError as exc:
            weather_history_days_skipped_total.labels(
                provider=provider_name
            ).inc()
            logger.warning(
                "weather.history.day_failed day=%s err=%s",
                day.isoformat(),
                exc.__class__.__name__,
            )
            continue
        if location is None:
            location = payload.location
        daily.append(_historical_from_provider(payload.day))

    if location is None or not daily:
        logger.warning(
            "weather.history.no_data start=%s end=%s",
            date_range.start.isoformat(),
            date_range.end.isoformat(),
        )
        raise NoDataAvailable()

    weather_lookups_total.labels(mode="historical").inc()
    return WeatherResult(
        location=location,
        current=daily[0].as_current(),
        forecast=[day.as_forecast() for day in daily],
        is_historical=True,
        source=provider_name,
        daily_data=daily,
        date_range=date_range,
    )


async def get_weather(
    location: str,
    date_range: DateRange | None = None,
    *,
    provider: str | None = None,
) -> WeatherResult:
    """Return weather for a location, optionally for a calendar date range.

    Raises ValidationError before any provider call for a bad location or
    range, ProviderError subclasses for failed calls and NoDataAvailable
    when every historical day failed.
    """

    query = resolve_query(location)
    if date_range is not None:
        validate_date_range(date_range.start, date_range.end)
    provider_name = _select_provider(provider)

    if date_range is not None and is_historical(
        date_range.start, date_range.end
    ):
        logger.info(
            "weather.lookup mode=historical query=%s start=%s end=%s",
            query,
            date_range.start.isoformat(),
            date_range.end.isoformat(),
        )
        return await _historical_weather(provider_name, query, date_range)

    logger.info("weather.lookup mode=live query=%s", query)
    return await _live_weather(provider_name, query, date_range)
