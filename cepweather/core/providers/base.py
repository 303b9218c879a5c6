from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import requests
from opentelemetry.context import Context
from requests import Response

from cepweather.core.errors import TransportError
from cepweather.core.tracing import inject_headers


@dataclass(frozen=True)
class RequestConfig:
    timeout: float = 5.0


class HttpProvider:
    """Base class for upstream HTTP lookups sharing one injected session."""

    name = "http"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()

    def _get(
        self,
        url: str,
        *,
        context: Optional[Context] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Response:
        try:
            response = self.session.get(
                url,
                headers=inject_headers(context, headers),
                timeout=self.request_config.timeout,
            )
        except requests.Timeout as exc:
            raise TransportError(f"{self.name}: timeout", cause=exc) from exc
        except requests.RequestException as exc:
            raise TransportError(f"{self.name}: request failed", cause=exc) from exc
        return response

    def _json_object(self, response: Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            raise TransportError(f"{self.name}: invalid json", cause=exc) from exc
        if not isinstance(data, dict):
            raise TransportError(f"{self.name}: expected a JSON object")
        return data


__all__ = ["HttpProvider", "RequestConfig"]
