from __future__ import annotations

import os

import django


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "cepweather.settings")
os.environ.setdefault("WEATHER_API_KEY", "test-key")
os.environ.setdefault("TRACING_EXPORTER", "none")

django.setup()
