from __future__ import annotations

import json

import pytest
import requests
from django.test import Client

from payloads import (
    RELAY_TARGET_URL,
    TRACE_ID,
    TRACEPARENT,
    VIACEP_URL,
    WEATHER_URL,
    viacep_payload,
    weather_payload,
)


def test_weather_endpoint_returns_composed_payload(requests_mock) -> None:
    requests_mock.get(VIACEP_URL, json=viacep_payload())
    requests_mock.get(WEATHER_URL, json=weather_payload())

    response = Client().get("/weather-service-b/01001000")

    assert response.status_code == 200
    assert response["Content-Type"] == "application/json"
    payload = response.json()
    assert payload["cep"] == "01001-000"
    assert payload["city"] == "São Paulo"
    assert payload["state"] == "SP"
    assert payload["temp_C"] == 28.5
    assert payload["temp_F"] == 83.3
    assert payload["temp_K"] == 301.5
    assert payload["condition"] == "Partly cloudy"
    assert payload["current"]["humidity"] == 62
    assert "q=S%C3%A3o%20Paulo" in requests_mock.request_history[1].url
    assert "key=test-key" in requests_mock.request_history[1].url


def test_weather_endpoint_not_found(requests_mock) -> None:
    requests_mock.get("http://viacep.com.br/ws/00000000/json/", status_code=404)

    response = Client().get("/weather-service-b/00000000")

    assert response.status_code == 404
    assert response.content == b"can not find zipcode"
    assert response["Content-Type"].startswith("text/plain")


def test_weather_endpoint_not_found_on_empty_record(requests_mock) -> None:
    requests_mock.get("http://viacep.com.br/ws/99999999/json/", json={"erro": True})

    response = Client().get("/weather-service-b/99999999")

    assert response.status_code == 404
    assert response.content == b"can not find zipcode"
    assert requests_mock.call_count == 1


def test_weather_endpoint_rejects_invalid_cep(requests_mock) -> None:
    response = Client().get("/weather-service-b/abc")

    assert response.status_code == 422
    assert response.content == b"invalid zipcode"
    assert not requests_mock.called


def test_weather_endpoint_hides_upstream_failures(requests_mock) -> None:
    requests_mock.get(VIACEP_URL, json=viacep_payload())
    requests_mock.get(WEATHER_URL, status_code=403, json={"error": {"message": "API key has been disabled."}})

    response = Client().get("/weather-service-b/01001000")

    assert response.status_code == 500
    assert response.content == b"internal server error"


def test_weather_endpoint_transport_failure(requests_mock) -> None:
    requests_mock.get(VIACEP_URL, exc=requests.exceptions.ConnectTimeout)

    response = Client().get("/weather-service-b/01001000")

    assert response.status_code == 500
    assert response.content == b"internal server error"


def test_weather_endpoint_propagates_trace_context(requests_mock) -> None:
    requests_mock.get(VIACEP_URL, json=viacep_payload())
    requests_mock.get(WEATHER_URL, json=weather_payload())

    response = Client().get("/weather-service-b/01001000", HTTP_TRACEPARENT=TRACEPARENT)

    assert response.status_code == 200
    for request in requests_mock.request_history:
        assert TRACE_ID in request.headers["traceparent"]


def test_relay_endpoint_passes_through_body(requests_mock) -> None:
    body = json.dumps({"cep": "01001-000", "city": "São Paulo", "temp_C": 28.5, "temp_F": 83.3, "temp_K": 301.5}).encode()
    requests_mock.get(RELAY_TARGET_URL, content=body, headers={"Content-Type": "application/json"})

    response = Client().post(
        "/weather-service-a",
        data=json.dumps({"cep": "01001000"}),
        content_type="application/json",
        HTTP_TRACEPARENT=TRACEPARENT,
    )

    assert response.status_code == 200
    assert response.content == body
    assert response["Content-Type"] == "application/json"
    assert TRACE_ID in requests_mock.last_request.headers["traceparent"]


def test_relay_endpoint_rejects_malformed_json(requests_mock) -> None:
    response = Client().post("/weather-service-a", data='{"cep": ', content_type="application/json")

    assert response.status_code == 400
    assert not requests_mock.called


def test_relay_endpoint_rejects_empty_body(requests_mock) -> None:
    response = Client().post("/weather-service-a", data="", content_type="application/json")

    assert response.status_code == 400
    assert not requests_mock.called


def test_relay_endpoint_rejects_invalid_cep(requests_mock) -> None:
    response = Client().post("/weather-service-a", data=json.dumps({"cep": "123"}), content_type="application/json")

    assert response.status_code == 422
    assert response.content == b"invalid zipcode"
    assert not requests_mock.called


def test_relay_endpoint_maps_not_found(requests_mock) -> None:
    requests_mock.get("http://localhost:8080/weather-service-b/00000000", status_code=404, text="can not find zipcode")

    response = Client().post("/weather-service-a", data=json.dumps({"cep": "00000000"}), content_type="application/json")

    assert response.status_code == 404
    assert response.content == b"can not find zipcode"


def test_relay_endpoint_maps_server_errors(requests_mock) -> None:
    requests_mock.get(RELAY_TARGET_URL, status_code=500, text="internal server error")

    response = Client().post("/weather-service-a", data=json.dumps({"cep": "01001000"}), content_type="application/json")

    assert response.status_code == 500
    assert response.content == b"internal server error"


def test_weather_endpoint_ignores_accept_header(requests_mock) -> None:
    requests_mock.get(VIACEP_URL, json=viacep_payload())
    requests_mock.get(WEATHER_URL, json=weather_payload())

    response = Client().get("/weather-service-b/01001000", HTTP_ACCEPT="text/plain")

    assert response.status_code == 200
    assert response["Content-Type"] == "application/json"
    assert response.json()["city"] == "São Paulo"


def test_weather_endpoint_errors_ignore_accept_header(requests_mock) -> None:
    response = Client().get("/weather-service-b/abc", HTTP_ACCEPT="text/html")

    assert response.status_code == 422
    assert response.content == b"invalid zipcode"


@pytest.mark.parametrize("content_type", ["text/plain", "application/x-www-form-urlencoded"])
def test_relay_endpoint_decodes_json_whatever_the_content_type(requests_mock, content_type) -> None:
    body = json.dumps({"cep": "01001-000", "city": "São Paulo", "temp_C": 28.5}).encode()
    requests_mock.get(RELAY_TARGET_URL, content=body, headers={"Content-Type": "application/json"})

    response = Client().post("/weather-service-a", data='{"cep": "01001000"}', content_type=content_type)

    assert response.status_code == 200
    assert response.content == body


def test_relay_endpoint_rejects_non_utf8_body(requests_mock) -> None:
    response = Client().post("/weather-service-a", data=b"\xff\xfe", content_type="application/json")

    assert response.status_code == 400
    assert response.content == b"invalid request body"
    assert not requests_mock.called


def test_relay_endpoint_ignores_accept_header(requests_mock) -> None:
    response = Client().post(
        "/weather-service-a",
        data=json.dumps({"cep": "123"}),
        content_type="application/json",
        HTTP_ACCEPT="text/html",
    )

    assert response.status_code == 422
