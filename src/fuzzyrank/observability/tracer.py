"""
OpenTelemetry Tracer Configuration

Provides initialization and management of OpenTelemetry tracing.
"""

import logging
import os
from typing import TextIO

from opentelemetry import trace
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor

logger = logging.getLogger(__name__)

# Global state
_tracer = None
_tracer_provider = None
_tracing_enabled = False
_log_file_handle: TextIO | None = None


def is_tracing_enabled() -> bool:
    """Check if tracing is currently enabled."""
    return _tracing_enabled


def init_tracer(
    service_name: str = "fuzzyrank",
    enable_console_export: bool = False,
    log_file: str | None = None,
) -> bool:
    """
    Initialize OpenTelemetry tracer.

    Args:
        service_name: Name of the service for tracing.
        enable_console_export: If True, export spans to stderr.
        log_file: Path to a file to append spans to.

    Returns:
        True once the tracer provider is installed.
    """
    global _tracer, _tracer_provider, _tracing_enabled, _log_file_handle

    resource = Resource.create({SERVICE_NAME: service_name})
    _tracer_provider = TracerProvider(resource=resource)

    if log_file:
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        # Kept open until shutdown_tracer()
        _log_file_handle = open(log_file, "a", encoding="utf-8")
        _tracer_provider.add_span_processor(
            SimpleSpanProcessor(ConsoleSpanExporter(out=_log_file_handle))
        )
        logger.info(f"OpenTelemetry exporter enabled: {log_file}")
    elif enable_console_export:
        _tracer_provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
        logger.info("OpenTelemetry exporter enabled: console")

    # Not installed as the global provider; calling init_tracer again replaces it
    _tracer = _tracer_provider.get_tracer(__name__)
    _tracing_enabled = True

    logger.info(f"OpenTelemetry tracer initialized for service: {service_name}")
    return True


def get_tracer():
    """
    Get the OpenTelemetry tracer instance.

    Returns the API's default (no-op unless a global provider is set) tracer
    if init_tracer() has not been called.
    """
    if _tracer is not None:
        return _tracer
    return trace.get_tracer(__name__)


def shutdown_tracer():
    """Shutdown the tracer and flush any pending spans."""
    global _tracer, _tracer_provider, _tracing_enabled, _log_file_handle

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        logger.info("OpenTelemetry tracer shut down")

    if _log_file_handle:
        _log_file_handle.close()
        _log_file_handle = None

    _tracer = None
    _tracer_provider = None
    _tracing_enabled = False
