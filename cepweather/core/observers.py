"""Outcome hooks reported by the lookup and relay pipelines."""
from __future__ import annotations

import logging
from typing import Optional, Protocol

from cepweather.core.abstractions import Location, WeatherConditions
from cepweather.core.errors import ServiceError

logger = logging.getLogger(__name__)

BODY_PREVIEW_CHARS = 500


class PipelineObserver(Protocol):
    def input_rejected(self, cep: str) -> None:
        ...

    def location_resolved(self, location: Location) -> None:
        ...

    def weather_resolved(self, location: Location, weather: WeatherConditions) -> None:
        ...

    def lookup_failed(self, stage: str, error: ServiceError) -> None:
        ...

    def relay_forwarded(self, cep: str, status: int) -> None:
        ...

    def relay_failed(self, cep: str, reason: str, status: Optional[int] = None, body: Optional[str] = None) -> None:
        ...


class NullObserver:
    """Observer that ignores every outcome."""

    def input_rejected(self, cep: str) -> None:
        pass

    def location_resolved(self, location: Location) -> None:
        pass

    def weather_resolved(self, location: Location, weather: WeatherConditions) -> None:
        pass

    def lookup_failed(self, stage: str, error: ServiceError) -> None:
        pass

    def relay_forwarded(self, cep: str, status: int) -> None:
        pass

    def relay_failed(self, cep: str, reason: str, status: Optional[int] = None, body: Optional[str] = None) -> None:
        pass


class LoggingObserver:
    """Report pipeline outcomes to the operator log."""

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self._log = log or logger

    def input_rejected(self, cep: str) -> None:
        self._log.info("CEP %r is invalid", cep)

    def location_resolved(self, location: Location) -> None:
        self._log.debug("CEP %s resolved to %s/%s", location.cep, location.city, location.state)

    def weather_resolved(self, location: Location, weather: WeatherConditions) -> None:
        self._log.debug("Weather for %s: %.1fC", location.city, weather.temp_c)

    def lookup_failed(self, stage: str, error: ServiceError) -> None:
        extra = {"stage": stage, "kind": error.kind.value, "status": error.status}
        if error.body:
            extra["body"] = error.body[:BODY_PREVIEW_CHARS]
        self._log.warning("%s lookup failed: %s", stage, error, exc_info=error.cause, extra=extra)

    def relay_forwarded(self, cep: str, status: int) -> None:
        self._log.debug("CEP %s relayed with status %s", cep, status)

    def relay_failed(self, cep: str, reason: str, status: Optional[int] = None, body: Optional[str] = None) -> None:
        preview = (body or "")[:BODY_PREVIEW_CHARS]
        self._log.warning(
            "Relay for CEP %s failed: %s (status=%s, body=%r)",
            cep,
            reason,
            status,
            preview,
            extra={"stage": "relay", "status": status},
        )


__all__ = ["LoggingObserver", "NullObserver", "PipelineObserver"]
