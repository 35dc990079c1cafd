"""URL configuration for the weather-lookup project."""

# Routes:
# - GET / -> home
# - /admin/ -> Django admin
# - /metrics -> Prometheus exposition (django_prometheus)
# - /api/schema/ -> OpenAPI schema
# - /api/docs/ -> Swagger UI
# - /api/redoc/ -> ReDoc
# - /api/v1/weather/ -> weather.urls
# - /api/v1/landmarks/ -> landmarks.urls
# - /api/v1/locations/ -> locations.urls
# - /api/v1/records/ -> records.urls

from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from .views import home

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", home, name="home"),
    path("", include("django_prometheus.urls")),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path(
        "api/redoc/",
        SpectacularRedocView.as_view(url_name="schema"),
        name="redoc",
    ),
    path("api/v1/", include("weather.urls")),
    path("api/v1/", include("landmarks.urls")),
    path("api/v1/", include("locations.urls")),
    path("api/v1/", include("records.urls")),
]
