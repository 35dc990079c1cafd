from __future__ import annotations

from django.apps import AppConfig


class LandmarksConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "landmarks"
    verbose_name = "Landmarks"
