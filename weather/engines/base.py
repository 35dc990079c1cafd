from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from .types import ForecastPayload, HistoryPayload, ProviderName


class WeatherProvider(ABC):
    """Abstract base for weather providers."""

    name: ProviderName

    @abstractmethod
    async def forecast(self, query: str, days: int) -> ForecastPayload:
        """Return current conditions and up to `days` forecast days."""

    @abstractmethod
    async def history(self, query: str, day: date) -> HistoryPayload:
        """Return the aggregate observation for one past calendar day."""
