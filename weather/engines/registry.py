from __future__ import annotations

from typing import cast

from django.conf import settings

from .base import WeatherProvider
from .types import ProviderName
from .weatherapi import WeatherApiProvider


def build_registry() -> dict[ProviderName, WeatherProvider]:
    """Instantiate supported providers."""

    providers: dict[ProviderName, WeatherProvider] = {
        "weatherapi": WeatherApiProvider(),
    }
    return providers


def default_provider_name() -> ProviderName:
    configured = getattr(settings, "WEATHER_PROVIDER_DEFAULT", "weatherapi")
    return cast(ProviderName, configured.lower())


def validate_provider(
    provider: str | None, registry: dict[ProviderName, WeatherProvider]
) -> ProviderName:
    name = (provider or default_provider_name()).lower()
    if name not in registry:
        raise ValueError(f"Unsupported weather provider: {name}")
    return cast(ProviderName, name)
