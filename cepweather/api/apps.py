from __future__ import annotations

from pathlib import Path

from django.apps import AppConfig
from django.conf import settings


class ApiConfig(AppConfig):
    """HTTP endpoints for CEP weather lookups; installs tracing on start-up."""

    name = "cepweather.api"
    label = "cepweather_api"
    # The package has no __init__.py, so Django cannot derive a single location.
    path = str(Path(__file__).resolve().parent)

    def ready(self) -> None:
        from cepweather.core.tracing import configure_tracing

        configure_tracing(settings.TRACING_SERVICE_NAME, settings.TRACING_EXPORTER)
