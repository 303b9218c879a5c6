"""Client for the direct CEP weather endpoint of another service instance."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from opentelemetry.context import Context

from .base import HttpProvider
from ..tracing import start_span


@dataclass(frozen=True)
class ForwardedResponse:
    status: int
    body: bytes
    content_type: str

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class WeatherServiceClient(HttpProvider):
    """Forward a CEP to ``/weather-service-b/{cep}`` and return the raw answer."""

    name = "weather-service"
    base_url = "http://localhost:8080"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = (base_url or self.base_url).rstrip("/")

    def fetch(self, cep: str, context: Optional[Context] = None) -> ForwardedResponse:
        with start_span("forward_weather_request", context) as span_context:
            response = self._get(f"{self.base_url}/weather-service-b/{cep}", context=span_context)
        return ForwardedResponse(
            status=response.status_code,
            body=response.content,
            content_type=response.headers.get("Content-Type", ""),
        )


__all__ = ["ForwardedResponse", "WeatherServiceClient"]
