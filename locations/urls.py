from __future__ import annotations

from django.urls import path

from .views import LocationMapsView, LocationValidateView, LocationVideosView

urlpatterns = [
    path(
        "locations/validate/",
        LocationValidateView.as_view(),
        name="location-validate",
    ),
    path(
        "locations/maps/",
        LocationMapsView.as_view(),
        name="location-maps",
    ),
    path(
        "locations/videos/",
        LocationVideosView.as_view(),
        name="location-videos",
    ),
]
