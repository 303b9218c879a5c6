"""Core abstractions for the CEP weather domain."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

from opentelemetry.context import Context


@dataclass(frozen=True)
class Location:
    """Locality resolved from a postal code by the directory service."""

    cep: str
    city: str
    state: str = ""
    neighborhood: str = ""
    street: str = ""


@dataclass(frozen=True)
class WeatherConditions:
    """Current conditions for a locality.

    ``current`` keeps the upstream ``current`` object verbatim; only the
    temperature is read from it directly.
    """

    location_name: str
    region: str
    country: str
    temp_c: float
    temp_f: Optional[float]
    condition: str
    current: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ComposedWeatherResponse:
    """Location and weather merged into one payload."""

    cep: str
    city: str
    state: str
    temp_C: float
    temp_F: float
    temp_K: float
    condition: str
    current: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "cep": self.cep,
            "city": self.city,
            "state": self.state,
            "temp_C": self.temp_C,
            "temp_F": self.temp_F,
            "temp_K": self.temp_K,
            "condition": self.condition,
            "current": dict(self.current),
        }


class LocationResolver(Protocol):
    """A directory service capable of mapping a CEP to a locality."""

    name: str

    def resolve_location(self, cep: str, context: Optional[Context] = None) -> Location:
        """Return the locality registered for ``cep``."""
        ...


class WeatherResolver(Protocol):
    """A data source returning current conditions for a locality name."""

    name: str

    def resolve_weather(self, location_name: str, context: Optional[Context] = None) -> WeatherConditions:
        """Return the current conditions for ``location_name``."""
        ...


__all__ = [
    "ComposedWeatherResponse",
    "Location",
    "LocationResolver",
    "WeatherConditions",
    "WeatherResolver",
]
