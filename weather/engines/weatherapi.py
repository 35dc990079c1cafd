from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import date
from typing import Any, cast

import httpx
from django.conf import settings

from ..exceptions import (
    ProviderError,
    ProviderNotFound,
    ProviderRateLimited,
    ProviderUnauthorized,
    ProviderUnknownError,
)
from .base import WeatherProvider
from .types import (
    Condition,
    ForecastPayload,
    HistoryPayload,
    Location,
    ProviderCurrent,
    ProviderDay,
    ProviderName,
)

logger = logging.getLogger(__name__)

_STATUS_ERRORS: dict[int, type[ProviderError]] = {
    401: ProviderUnauthorized,
    404: ProviderNotFound,
    429: ProviderRateLimited,
}


class WeatherApiProvider(WeatherProvider):
    """WeatherAPI.com implementation.

    Uses `forecast.json` for live mode and `history.json` for one past day.
    The API key is read from settings on every request unless passed in.
    """

    name: ProviderName = "weatherapi"

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._api_key = api_key
        self.base_url: str = (
            base_url
            or cast(
                str,
                getattr(
                    settings,
                    "WEATHER_API_BASE_URL",
                    "https://api.weatherapi.com/v1",
                ),
            )
        ).rstrip("/")
        self.timeout = timeout or float(
            getattr(settings, "WEATHER_REQUEST_TIMEOUT_S", 10.0)
        )

    @property
    def api_key(self) -> str:
        if self._api_key:
            return self._api_key
        return str(getattr(settings, "WEATHER_API_KEY", "") or "")

    async def forecast(self, query: str, days: int) -> ForecastPayload:
        payload = await self._request(
            "forecast.json", {"q": query, "days": days}
        )
        return ForecastPayload(
            location=self._parse_location(payload),
            current=self._parse_current(payload),
            days=self._parse_days(payload),
        )

    async def history(self, query: str, day: date) -> HistoryPayload:
        payload = await self._request(
            "history.json", {"q": query, "dt": day.isoformat()}
        )
        days = self._parse_days(payload)
        if not days:
            raise ProviderUnknownError(
                f"Weather service returned no data for {day.isoformat()}"
            )
        return HistoryPayload(
            location=self._parse_location(payload), day=days[0]
        )

    async def _request(
        self, endpoint: str, params: dict[str, Any]
    ) -> dict[str, Any]:
        api_key = self.api_key
        if not api_key:
            raise ProviderUnauthorized("Weather API key is not configured.")

        url = f"{self.base_url}/{endpoint}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    url, params={**params, "key": api_key}
                )
        except httpx.RequestError as exc:
            logger.warning(
                "weather.provider.request_failed endpoint=%s err=%s",
                endpoint,
                exc.__class__.__name__,
            )
            raise ProviderUnknownError(
                f"Weather service error: {exc.__class__.__name__}"
            ) from exc

        if response.status_code >= 400:
            logger.warning(
                "weather.provider.upstream_error endpoint=%s status_code=%s",
                endpoint,
                response.status_code,
            )
            error_cls = _STATUS_ERRORS.get(response.status_code)
            if error_cls is not None:
                raise error_cls()
            raise ProviderUnknownError(
                f"Weather service error: HTTP {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderUnknownError(
                "Weather service returned invalid JSON"
            ) from exc
        if not isinstance(data, dict):
            raise ProviderUnknownError("Unexpected weather response shape")
        return data

    def _parse_location(self, payload: Mapping[str, Any]) -> Location:
        raw = payload.get("location")
        if not isinstance(raw, dict):
            raise ProviderUnknownError("Weather response has no location")
        lat = self._to_float(raw.get("lat"))
        lon = self._to_float(raw.get("lon"))
        if lat is None or lon is None:
            raise ProviderUnknownError("Weather response has no coordinates")
        try:
            return Location(
                name=str(raw.get("name") or ""),
                lat=lat,
                lon=lon,
                country=str(raw.get("country") or ""),
                region=self._optional_str(raw.get("region")),
                tz_id=self._optional_str(raw.get("tz_id")),
                localtime=self._optional_str(raw.get("localtime")),
            )
        except ValueError as exc:
            raise ProviderUnknownError(str(exc)) from exc

    def _parse_current(self, payload: Mapping[str, Any]) -> ProviderCurrent:
        raw = payload.get("current")
        if not isinstance(raw, dict):
            raise ProviderUnknownError("Weather response has no current block")
        temp = self._to_float(raw.get("temp_c"))
        if temp is None:
            raise ProviderUnknownError("Weather response has no temperature")
        return ProviderCurrent(
            temp_c=temp,
            feelslike_c=self._to_float(raw.get("feelslike_c")),
            humidity=self._to_float(raw.get("humidity")),
            pressure_mb=self._to_float(raw.get("pressure_mb")),
            wind_kph=self._to_float(raw.get("wind_kph")),
            wind_degree=self._to_float(raw.get("wind_degree")),
            condition=self._parse_condition(raw.get("condition")),
        )

    def _parse_days(self, payload: Mapping[str, Any]) -> list[ProviderDay]:
        forecast = payload.get("forecast")
        entries: Sequence[Any] = []
        if isinstance(forecast, dict):
            entries = forecast.get("forecastday") or []

        days: list[ProviderDay] = []
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            day = self._parse_date(entry.get("date"))
            block = entry.get("day")
            if day is None or not isinstance(block, dict):
                continue
            days.append(
                ProviderDay(
                    day=day,
                    mintemp_c=self._to_float(block.get("mintemp_c")),
                    maxtemp_c=self._to_float(block.get("maxtemp_c")),
                    avgtemp_c=self._to_float(block.get("avgtemp_c")),
                    avghumidity=self._to_float(block.get("avghumidity")),
                    avgpressure_mb=self._to_float(
                        block.get("avgpressure_mb")
                    ),
                    maxwind_kph=self._to_float(block.get("maxwind_kph")),
                    avgwind_degree=self._to_float(
                        block.get("avgwind_degree")
                    ),
                    condition=self._parse_condition(block.get("condition")),
                )
            )
        return sorted(days, key=lambda item: item.day)

    def _parse_condition(self, raw: Any) -> Condition:
        if not isinstance(raw, dict):
            return Condition()
        return Condition(
            text=self._optional_str(raw.get("text")),
            icon=self._optional_str(raw.get("icon")),
        )

    def _parse_date(self, raw: Any) -> date | None:
        if not isinstance(raw, str):
            return None
        try:
            return date.fromisoformat(raw)
        except ValueError:
            return None

    def _optional_str(self, value: Any) -> str | None:
        if value is None or value == "":
            return None
        return str(value)

    def _to_float(self, value: Any) -> float | None:
        try:
            if value is None:
                return None
            return float(value)
        except (TypeError, ValueError):
            return None
