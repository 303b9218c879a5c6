"""Upstream payloads and domain objects shared by the test modules."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from cepweather.core.abstractions import Location, WeatherConditions
from cepweather.core.errors import ServiceError

VIACEP_URL = "http://viacep.com.br/ws/01001000/json/"
WEATHER_URL = "http://api.weatherapi.com/v1/current.json"
RELAY_TARGET_URL = "http://localhost:8080/weather-service-b/01001000"

TRACE_ID = "0af7651916cd43dd8448eb211c80319c"
TRACEPARENT = f"00-{TRACE_ID}-b7ad6b7169203331-01"


def viacep_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "cep": "01001-000",
        "logradouro": "Praça da Sé",
        "complemento": "lado ímpar",
        "bairro": "Sé",
        "localidade": "São Paulo",
        "uf": "SP",
        "ibge": "3550308",
        "ddd": "11",
    }
    payload.update(overrides)
    return payload


def weather_payload(temp_c: float = 28.5, temp_f: Optional[float] = 83.3) -> Dict[str, Any]:
    current: Dict[str, Any] = {
        "temp_c": temp_c,
        "condition": {"text": "Partly cloudy", "code": 1003},
        "humidity": 62,
        "wind_kph": 11.2,
    }
    if temp_f is not None:
        current["temp_f"] = temp_f
    return {
        "location": {
            "name": "Sao Paulo",
            "region": "Sao Paulo",
            "country": "Brazil",
            "lat": -23.53,
            "lon": -46.62,
        },
        "current": current,
    }


def make_location(city: str = "São Paulo") -> Location:
    return Location(cep="01001-000", city=city, state="SP", neighborhood="Sé", street="Praça da Sé")


def make_weather(temp_c: float = 20.0, temp_f: Optional[float] = None) -> WeatherConditions:
    return WeatherConditions(
        location_name="Sao Paulo",
        region="Sao Paulo",
        country="Brazil",
        temp_c=temp_c,
        temp_f=temp_f,
        condition="Sunny",
        current={"temp_c": temp_c, "humidity": 40},
    )


class RecordingObserver:
    def __init__(self) -> None:
        self.events: List[tuple] = []

    def input_rejected(self, cep: str) -> None:
        self.events.append(("input_rejected", cep))

    def location_resolved(self, location: Location) -> None:
        self.events.append(("location_resolved", location.cep))

    def weather_resolved(self, location: Location, weather: WeatherConditions) -> None:
        self.events.append(("weather_resolved", location.city))

    def lookup_failed(self, stage: str, error: ServiceError) -> None:
        self.events.append(("lookup_failed", stage, error.kind))

    def relay_forwarded(self, cep: str, status: int) -> None:
        self.events.append(("relay_forwarded", cep, status))

    def relay_failed(self, cep, reason, status=None, body=None) -> None:
        self.events.append(("relay_failed", cep, status, body))

    def names(self) -> List[str]:
        return [event[0] for event in self.events]
