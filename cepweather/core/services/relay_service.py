"""Relay a CEP received in a request body to the direct weather endpoint."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional

from opentelemetry.context import Context

from cepweather.core.errors import (
    MSG_BAD_REQUEST,
    MSG_INTERNAL_ERROR,
    MSG_INVALID_ZIPCODE,
    MSG_ZIPCODE_NOT_FOUND,
    TransportError,
)
from cepweather.core.observers import NullObserver, PipelineObserver
from cepweather.core.providers.relay import WeatherServiceClient
from cepweather.core.validation import is_cep_valid

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


@dataclass(frozen=True)
class RelayResult:
    status: int
    body: bytes
    content_type: str = TEXT_CONTENT_TYPE

    @classmethod
    def message(cls, status: int, text: str) -> "RelayResult":
        return cls(status=status, body=text.encode("utf-8"))


class CepRelayService:
    """Validate a relay payload and forward it to the direct endpoint."""

    def __init__(self, client: WeatherServiceClient, observer: Optional[PipelineObserver] = None) -> None:
        self._client = client
        self._observer = observer or NullObserver()

    def relay(self, payload: Any, context: Optional[Context] = None) -> RelayResult:
        if not isinstance(payload, dict):
            return RelayResult.message(400, MSG_BAD_REQUEST)
        cep = payload.get("cep", "")
        if not isinstance(cep, str):
            return RelayResult.message(400, MSG_BAD_REQUEST)
        if not is_cep_valid(cep):
            self._observer.input_rejected(cep)
            return RelayResult.message(422, MSG_INVALID_ZIPCODE)

        try:
            forwarded = self._client.fetch(cep, context)
        except TransportError as exc:
            self._observer.relay_failed(cep, f"could not reach weather service: {exc}")
            return RelayResult.message(500, MSG_INTERNAL_ERROR)

        if forwarded.status == 200:
            if not is_weather_payload(forwarded.body):
                self._observer.relay_failed(cep, "malformed weather payload", forwarded.status, forwarded.text)
                return RelayResult.message(500, MSG_INTERNAL_ERROR)
            self._observer.relay_forwarded(cep, forwarded.status)
            return RelayResult(status=200, body=forwarded.body, content_type=JSON_CONTENT_TYPE)

        if forwarded.status == 404:
            self._observer.relay_failed(cep, "zipcode not found", forwarded.status, forwarded.text)
            return RelayResult.message(404, MSG_ZIPCODE_NOT_FOUND)

        self._observer.relay_failed(cep, "unexpected status", forwarded.status, forwarded.text)
        return RelayResult.message(500, MSG_INTERNAL_ERROR)


def is_weather_payload(body: bytes) -> bool:
    """Return ``True`` when ``body`` decodes to a composed weather object."""
    try:
        data = json.loads(body)
    except ValueError:
        return False
    if not isinstance(data, dict):
        return False
    temp = data.get("temp_C")
    return isinstance(data.get("city"), str) and isinstance(temp, (int, float)) and not isinstance(temp, bool)


__all__ = ["CepRelayService", "RelayResult", "is_weather_payload"]
