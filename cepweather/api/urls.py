"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from cepweather.api.views import CepWeatherView, RelayWeatherView

urlpatterns = [
    path("weather-service-b/<str:cep>", CepWeatherView.as_view(), name="weather-by-cep"),
    path("weather-service-a", RelayWeatherView.as_view(), name="weather-relay"),
]
