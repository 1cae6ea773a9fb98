"""OpenTelemetry spans around LokiStack reconciliation."""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Any, Iterator

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.trace import Span, Tracer

from . import __version__

logger = logging.getLogger(__name__)

_tracer: Tracer | None = None


def initialize_tracing(service_name: str = "lokistack-operator") -> None:
    """Export spans over OTLP/gRPC.

    Reads OTEL_TRACES_ENABLED (``false`` disables tracing),
    OTEL_SERVICE_NAME and OTEL_EXPORTER_OTLP_ENDPOINT
    (default ``http://localhost:4317``). A failing exporter setup is logged
    and leaves tracing off.
    """
    global _tracer

    if os.getenv("OTEL_TRACES_ENABLED", "true").lower() == "false":
        return

    service_name = os.getenv("OTEL_SERVICE_NAME", service_name)
    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4317")

    try:
        provider = TracerProvider(
            resource=Resource.create({"service.name": service_name, "service.version": __version__})
        )
        provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint)))
        trace.set_tracer_provider(provider)
    except Exception as e:
        logger.warning(f"Tracing disabled, exporter setup failed: {e}")
        return

    _tracer = trace.get_tracer(service_name, __version__)


def get_tracer() -> Tracer | None:
    return _tracer


@contextmanager
def trace_span(
    name: str,
    kind: str | None = None,
    attributes: dict[str, Any] | None = None,
) -> Iterator[Span | None]:
    """Run the block inside span ``name``; yields None while tracing is off.

    Exceptions escaping the block are recorded on the span and re-raised.
    """
    tracer = get_tracer()
    if tracer is None:
        yield None
        return

    attrs = dict(attributes or {})
    if kind:
        attrs["resource.kind"] = kind

    with tracer.start_as_current_span(name, attributes=attrs):
        span = trace.get_current_span()
        try:
            yield span
        except Exception as e:
            if span.is_recording():
                span.record_exception(e)
                span.set_status(trace.Status(trace.StatusCode.ERROR, str(e)))
            raise


def add_span_attribute(key: str, value: Any) -> None:
    """Tag the current span, if one is recording."""
    span = trace.get_current_span()
    if span.is_recording():
        span.set_attribute(key, value)
