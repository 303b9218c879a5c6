"""ViaCEP postal-code directory provider."""
from __future__ import annotations

from typing import Optional

from opentelemetry.context import Context

from .base import HttpProvider
from ..abstractions import Location, LocationResolver
from ..errors import NotFound, UpstreamError
from ..tracing import start_span


class ViaCepLocationResolver(HttpProvider, LocationResolver):
    """Resolve a CEP to a locality through ``/ws/{cep}/json/``."""

    name = "viacep"
    base_url = "http://viacep.com.br"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = (base_url or self.base_url).rstrip("/")

    def resolve_location(self, cep: str, context: Optional[Context] = None) -> Location:
        with start_span("resolve_location", context) as span_context:
            response = self._get(f"{self.base_url}/ws/{cep}/json/", context=span_context)

        if response.status_code == 404:
            raise NotFound(f"{self.name}: no record for {cep}", status=404)
        if response.status_code != 200:
            raise UpstreamError(
                f"{self.name}: unexpected status code {response.status_code}",
                status=response.status_code,
                body=response.text,
            )

        data = self._json_object(response)
        # ViaCEP answers unknown codes with 200 and {"erro": true}.
        if not data.get("cep"):
            raise NotFound(f"{self.name}: no record for {cep}", status=200)
        return Location(
            cep=str(data["cep"]),
            city=str(data.get("localidade") or ""),
            state=str(data.get("uf") or ""),
            neighborhood=str(data.get("bairro") or ""),
            street=str(data.get("logradouro") or ""),
        )


__all__ = ["ViaCepLocationResolver"]
