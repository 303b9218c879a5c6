"""REST API views for CEP weather lookups."""
from __future__ import annotations

import json
from functools import lru_cache

import requests
from django.conf import settings
from django.http import HttpResponse
from rest_framework import status
from rest_framework.negotiation import BaseContentNegotiation
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from cepweather.core.errors import (
    MSG_BAD_REQUEST,
    MSG_INTERNAL_ERROR,
    MSG_INVALID_ZIPCODE,
    MSG_ZIPCODE_NOT_FOUND,
    ErrorKind,
    ServiceError,
)
from cepweather.core.observers import LoggingObserver
from cepweather.core.providers.base import RequestConfig
from cepweather.core.providers.relay import WeatherServiceClient
from cepweather.core.providers.viacep import ViaCepLocationResolver
from cepweather.core.providers.weatherapi import WeatherApiResolver
from cepweather.core.services.relay_service import TEXT_CONTENT_TYPE, CepRelayService
from cepweather.core.services.weather_service import CepWeatherService
from cepweather.core.tracing import extract_context

_ERROR_RESPONSES = {
    ErrorKind.INVALID_INPUT: (status.HTTP_422_UNPROCESSABLE_ENTITY, MSG_INVALID_ZIPCODE),
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, MSG_ZIPCODE_NOT_FOUND),
}


@lru_cache(maxsize=1)
def get_http_session() -> requests.Session:
    return requests.Session()


@lru_cache(maxsize=1)
def get_weather_service() -> CepWeatherService:
    session = get_http_session()
    request_config = RequestConfig(timeout=settings.UPSTREAM_TIMEOUT)
    return CepWeatherService(
        location_resolver=ViaCepLocationResolver(
            base_url=settings.VIACEP_BASE_URL,
            session=session,
            request_config=request_config,
        ),
        weather_resolver=WeatherApiResolver(
            api_key=settings.WEATHER_API_KEY,
            base_url=settings.WEATHER_API_BASE_URL,
            session=session,
            request_config=request_config,
        ),
        observer=LoggingObserver(),
    )


@lru_cache(maxsize=1)
def get_relay_service() -> CepRelayService:
    client = WeatherServiceClient(
        base_url=settings.WEATHER_SERVICE_URL,
        session=get_http_session(),
        request_config=RequestConfig(timeout=settings.UPSTREAM_TIMEOUT),
    )
    return CepRelayService(client, observer=LoggingObserver())


def _text_response(message: str, status_code: int) -> HttpResponse:
    return HttpResponse(message, status=status_code, content_type=TEXT_CONTENT_TYPE)


class FirstRendererNegotiation(BaseContentNegotiation):
    """Always answer with the first configured renderer, whatever ``Accept`` says."""

    def select_parser(self, request, parsers):
        return parsers[0]

    def select_renderer(self, request, renderers, format_suffix=None):
        return (renderers[0], renderers[0].media_type)


class CepWeatherView(APIView):
    """Return the current weather for the locality of a CEP."""

    permission_classes = [AllowAny]
    content_negotiation_class = FirstRendererNegotiation

    def get(self, request, cep: str, *args, **kwargs):  # noqa: D401
        """Resolve the CEP, then its weather, and answer with both."""
        context = extract_context(request.headers)
        try:
            result = get_weather_service().get_weather(cep, context)
        except ServiceError as exc:
            status_code, message = _ERROR_RESPONSES.get(
                exc.kind, (status.HTTP_500_INTERNAL_SERVER_ERROR, MSG_INTERNAL_ERROR)
            )
            return _text_response(message, status_code)
        return Response(result.as_dict(), status=status.HTTP_200_OK)


class RelayWeatherView(APIView):
    """Accept ``{"cep": ...}`` and relay the direct endpoint's answer."""

    permission_classes = [AllowAny]
    content_negotiation_class = FirstRendererNegotiation

    def post(self, request, *args, **kwargs):  # noqa: D401
        """Forward the CEP from the request body to the direct endpoint."""
        context = extract_context(request.headers)
        # The body is JSON whatever the declared Content-Type.
        try:
            payload = json.loads(request.body)
        except ValueError:
            return _text_response(MSG_BAD_REQUEST, status.HTTP_400_BAD_REQUEST)

        result = get_relay_service().relay(payload, context)
        return HttpResponse(result.body, status=result.status, content_type=result.content_type)
