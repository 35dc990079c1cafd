from __future__ import annotations

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="WeatherRecord",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("location", models.CharField(max_length=255)),
                (
                    "query",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                (
                    "latitude",
                    models.FloatField(
                        validators=[
                            django.core.validators.MinValueValidator(-90.0),
                            django.core.validators.MaxValueValidator(90.0),
                        ]
                    ),
                ),
                (
                    "longitude",
                    models.FloatField(
                        validators=[
                            django.core.validators.MinValueValidator(-180.0),
                            django.core.validators.MaxValueValidator(180.0),
                        ]
                    ),
                ),
                (
                    "country",
                    models.CharField(blank=True, default="", max_length=128),
                ),
                ("start_date", models.DateField()),
                ("end_date", models.DateField()),
                ("is_historical", models.BooleanField(default=False)),
                ("temperature", models.IntegerField()),
                ("temperature_min", models.IntegerField()),
                ("temperature_max", models.IntegerField()),
                ("feels_like", models.IntegerField()),
                ("humidity", models.FloatField()),
                ("pressure", models.FloatField()),
                ("wind_speed", models.FloatField()),
                ("wind_direction", models.FloatField()),
                ("description", models.CharField(max_length=255)),
                ("icon", models.CharField(max_length=255)),
                ("forecast", models.JSONField(blank=True, default=list)),
                ("daily_data", models.JSONField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["location"],
                        name="records_wea_locatio_3c1b2e_idx",
                    ),
                    models.Index(
                        fields=["start_date"],
                        name="records_wea_start_d_8f2a41_idx",
                    ),
                    models.Index(
                        fields=["created_at"],
                        name="records_wea_created_5d7e90_idx",
                    ),
                ],
            },
        ),
    ]
