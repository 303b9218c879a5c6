"""Trace-context propagation across the service hops.

Inbound headers are read with the globally configured OpenTelemetry
propagator (W3C ``traceparent`` and ``baggage`` by default) and written back
into every outbound request.  When no tracer provider is installed the API
falls back to no-op spans, so propagation never changes a lookup outcome.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Dict, Iterator, Mapping, Optional

from opentelemetry import propagate, trace
from opentelemetry.context import Context

logger = logging.getLogger(__name__)

TRACER_NAME = "cepweather"


def extract_context(headers: Mapping[str, str]) -> Context:
    return propagate.extract(headers)


def inject_headers(context: Optional[Context], headers: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    carrier: Dict[str, str] = dict(headers or {})
    propagate.inject(carrier, context=context)
    return carrier


@contextmanager
def start_span(name: str, context: Optional[Context] = None) -> Iterator[Optional[Context]]:
    """Open a span under ``context`` and yield the context to propagate further."""
    tracer = trace.get_tracer(TRACER_NAME)
    with tracer.start_as_current_span(name, context=context) as span:
        if span.get_span_context().is_valid:
            yield trace.set_span_in_context(span, context)
        else:
            yield context


def build_tracer_provider(service_name: str, exporter: str):
    """Build an SDK tracer provider for ``exporter`` (``console`` or ``none``)."""
    from opentelemetry.sdk.resources import SERVICE_NAME, Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

    provider = TracerProvider(resource=Resource.create({SERVICE_NAME: service_name}))
    if exporter == "console":
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    elif exporter != "none":
        raise ValueError(f"unsupported tracing exporter: {exporter}")
    return provider


def configure_tracing(service_name: str, exporter: str) -> None:
    if exporter == "none":
        return
    trace.set_tracer_provider(build_tracer_provider(service_name, exporter))
    logger.info("Tracing enabled", extra={"service": service_name, "exporter": exporter})


__all__ = [
    "build_tracer_provider",
    "configure_tracing",
    "extract_context",
    "inject_headers",
    "start_span",
]
