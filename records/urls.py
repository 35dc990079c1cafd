# Routes (prefix: /api/v1/):
# - GET /records/export/ -> WeatherRecordExportView
# - /records/ and /records/<id>/ -> WeatherRecordViewSet

from __future__ import annotations

from django.urls import path
from rest_framework.routers import DefaultRouter

from .views import WeatherRecordExportView, WeatherRecordViewSet

router = DefaultRouter()
router.register(r"records", WeatherRecordViewSet, basename="weather-record")

urlpatterns = [
    path(
        "records/export/",
        WeatherRecordExportView.as_view(),
        name="weather-record-export",
    ),
] + router.urls
