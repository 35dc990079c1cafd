from __future__ import annotations

from django.urls import path

from .views import LandmarkListView, LandmarkResolveView

urlpatterns = [
    path("landmarks/", LandmarkListView.as_view(), name="landmark-list"),
    path(
        "landmarks/resolve/",
        LandmarkResolveView.as_view(),
        name="landmark-resolve",
    ),
]
