"""
OpenTelemetry and Prometheus setup.

Views and handlers only call get_tracer(); until setup_opentelemetry()
runs the API hands out no-op tracers, so tests and management commands
never need a collector.
"""

import logging
import os
import socket

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.django import DjangoInstrumentor
from opentelemetry.instrumentation.psycopg2 import Psycopg2Instrumentor
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.trace import Status, StatusCode  # noqa: F401  (re-exported for views)
from prometheus_client import start_http_server

logger = logging.getLogger(__name__)

_configured = False


def _resource() -> Resource:
    return Resource.create(
        {
            "service.name": os.environ.get("OTEL_SERVICE_NAME", "activation-key-service"),
            "service.version": os.environ.get("OTEL_SERVICE_VERSION", "1.0.0"),
            "deployment.environment": os.environ.get("ENVIRONMENT", "development"),
        }
    )


def _configure_tracing() -> None:
    provider = TracerProvider(resource=_resource())
    endpoint = os.environ.get("OTEL_EXPORTER_OTLP_ENDPOINT")
    if endpoint:
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, insecure=True))
        )
        logger.info("Exporting spans to %s", endpoint)
    else:
        logger.info("OTEL_EXPORTER_OTLP_ENDPOINT not set, spans are not exported")
    trace.set_tracer_provider(provider)


def _instrument_libraries() -> None:
    """Auto-instrument request handling, Postgres queries and Redis calls."""
    DjangoInstrumentor().instrument()
    Psycopg2Instrumentor().instrument()
    RedisInstrumentor().instrument()


def _port_in_use(port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        return sock.connect_ex(("127.0.0.1", port)) == 0


def _start_metrics_server() -> None:
    """Serve /metrics unless another worker on this host already does."""
    port = int(os.environ.get("PROMETHEUS_PORT", "9090"))
    try:
        if _port_in_use(port):
            logger.info("Prometheus metrics already served on port %s", port)
            return
        start_http_server(port, addr="0.0.0.0")
        logger.info("Prometheus metrics served on 0.0.0.0:%s", port)
    except OSError as e:
        logger.warning("Could not start Prometheus metrics server: %s", e)


def setup_opentelemetry() -> None:
    """
    Configure tracing, library instrumentation and the metrics endpoint.

    Calling it again in the same process does nothing.
    """
    global _configured  # pylint: disable=global-statement
    if _configured:
        return

    _configure_tracing()
    _instrument_libraries()
    _start_metrics_server()
    _configured = True
    logger.info("OpenTelemetry instrumentation configured")


def get_tracer(name: str) -> trace.Tracer:
    """
    Get a tracer for manual spans.

    Args:
        name: Tracer name, usually the module name

    Returns:
        Tracer instance
    """
    return trace.get_tracer(name)
