from __future__ import annotations

from typing import Final

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

_LAT_MIN: Final[float] = -90.0
_LAT_MAX: Final[float] = 90.0
_LON_MIN: Final[float] = -180.0
_LON_MAX: Final[float] = 180.0


class WeatherRecord(models.Model):
    """Weather saved for a location and calendar date range."""

    # Resolved provider name for display; `query` is what the user typed.
    location = models.CharField(max_length=255)
    query = models.CharField(max_length=255, blank=True, default="")
    latitude = models.FloatField(
        validators=[MinValueValidator(_LAT_MIN), MaxValueValidator(_LAT_MAX)]
    )
    longitude = models.FloatField(
        validators=[MinValueValidator(_LON_MIN), MaxValueValidator(_LON_MAX)]
    )
    country = models.CharField(max_length=128, blank=True, default="")

    start_date = models.DateField()
    end_date = models.DateField()
    is_historical = models.BooleanField(default=False)

    temperature = models.IntegerField()
    temperature_min = models.IntegerField()
    temperature_max = models.IntegerField()
    feels_like = models.IntegerField()
    humidity = models.FloatField()
    pressure = models.FloatField()
    wind_speed = models.FloatField()
    wind_direction = models.FloatField()
    description = models.CharField(max_length=255)
    icon = models.CharField(max_length=255)

    forecast = models.JSONField(default=list, blank=True)
    daily_data = models.JSONField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(
                fields=["location"], name="records_wea_locatio_3c1b2e_idx"
            ),
            models.Index(
                fields=["start_date"], name="records_wea_start_d_8f2a41_idx"
            ),
            models.Index(
                fields=["created_at"], name="records_wea_created_5d7e90_idx"
            ),
        ]

    def __str__(self) -> str:
        return (
            f"{self.location} "
            f"({self.start_date.isoformat()}..{self.end_date.isoformat()})"
        )

    def clean(self) -> None:
        super().clean()
        if (
            self.start_date is not None
            and self.end_date is not None
            and self.start_date >= self.end_date
        ):
            raise ValidationError("Start date must be before end date.")
