"""WeatherAPI current-conditions provider."""
from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import quote, urlencode

from opentelemetry.context import Context

from .base import HttpProvider
from ..abstractions import WeatherConditions, WeatherResolver
from ..errors import TransportError, UpstreamError
from ..tracing import start_span


class WeatherApiResolver(HttpProvider, WeatherResolver):
    """Integration with the WeatherAPI ``/v1/current.json`` endpoint."""

    name = "weatherapi"
    base_url = "http://api.weatherapi.com"

    def __init__(self, api_key: str, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = (base_url or self.base_url).rstrip("/")

    def resolve_weather(self, location_name: str, context: Optional[Context] = None) -> WeatherConditions:
        with start_span("resolve_weather", context) as span_context:
            response = self._get(
                self.build_url(location_name),
                context=span_context,
                headers={"Accept": "application/json"},
            )

        if response.status_code != 200:
            raise UpstreamError(
                f"{self.name}: unexpected status code {response.status_code}",
                status=response.status_code,
                body=response.text,
            )
        return self._parse(self._json_object(response))

    def build_url(self, location_name: str) -> str:
        # quote() escapes spaces as %20 and every reserved character in the value.
        query = urlencode({"key": self.api_key, "q": location_name}, quote_via=quote)
        return f"{self.base_url}/v1/current.json?{query}"

    def _parse(self, data: Dict[str, Any]) -> WeatherConditions:
        location = data.get("location")
        if not isinstance(location, dict):
            location = {}
        current = data.get("current")
        if not isinstance(current, dict):
            raise TransportError(f"{self.name}: missing current in response")
        try:
            temp_c = float(current["temp_c"])
        except (KeyError, TypeError, ValueError) as exc:
            raise TransportError(f"{self.name}: missing temp_c in response", cause=exc) from exc

        condition = current.get("condition") or {}
        return WeatherConditions(
            location_name=str(location.get("name") or ""),
            region=str(location.get("region") or ""),
            country=str(location.get("country") or ""),
            temp_c=temp_c,
            temp_f=_safe_float(current.get("temp_f")),
            condition=str(condition.get("text") or "") if isinstance(condition, dict) else "",
            current=current,
        )


def _safe_float(value: Optional[object]) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


__all__ = ["WeatherApiResolver"]
