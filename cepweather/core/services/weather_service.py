"""Weather service that chains the directory and weather providers."""
from __future__ import annotations

from typing import Optional

from opentelemetry.context import Context

from cepweather.core.abstractions import (
    ComposedWeatherResponse,
    Location,
    LocationResolver,
    WeatherConditions,
    WeatherResolver,
)
from cepweather.core.errors import MSG_INVALID_ZIPCODE, InvalidInput, ServiceError
from cepweather.core.observers import NullObserver, PipelineObserver
from cepweather.core.tracing import start_span
from cepweather.core.validation import is_cep_valid

KELVIN_OFFSET = 273


def compose(location: Location, weather: WeatherConditions) -> ComposedWeatherResponse:
    """Merge a location and its weather into the response payload."""
    temp_c = weather.temp_c
    temp_f = weather.temp_f if weather.temp_f is not None else temp_c * 1.8 + 32
    return ComposedWeatherResponse(
        cep=location.cep,
        city=location.city,
        state=location.state,
        temp_C=temp_c,
        temp_F=temp_f,
        temp_K=temp_c + KELVIN_OFFSET,
        condition=weather.condition,
        current=weather.current,
    )


class CepWeatherService:
    """Resolve a CEP to its locality, then to the locality's current weather."""

    def __init__(
        self,
        location_resolver: LocationResolver,
        weather_resolver: WeatherResolver,
        observer: Optional[PipelineObserver] = None,
    ) -> None:
        self._locations = location_resolver
        self._weather = weather_resolver
        self._observer = observer or NullObserver()

    def get_weather(self, cep: str, context: Optional[Context] = None) -> ComposedWeatherResponse:
        if not is_cep_valid(cep):
            self._observer.input_rejected(cep)
            raise InvalidInput(MSG_INVALID_ZIPCODE)

        with start_span("get_weather", context) as span_context:
            try:
                location = self._locations.resolve_location(cep, span_context)
            except ServiceError as exc:
                self._observer.lookup_failed(self._locations.name, exc)
                raise
            self._observer.location_resolved(location)

            try:
                weather = self._weather.resolve_weather(location.city, span_context)
            except ServiceError as exc:
                self._observer.lookup_failed(self._weather.name, exc)
                raise
            self._observer.weather_resolved(location, weather)

        return compose(location, weather)


__all__ = ["CepWeatherService", "compose"]
