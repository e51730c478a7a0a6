"""
Tracing Decorators

Provides decorators for easy instrumentation of functions and methods.
"""

import functools
import inspect
from collections.abc import Callable
from typing import Any

from opentelemetry.trace import Status, StatusCode

from fuzzyrank.observability.tracer import get_tracer, is_tracing_enabled


def trace_span(
    name: str | None = None,
    attributes: dict[str, Any] | None = None,
    record_exception: bool = True,
):
    """
    Decorator to trace a function execution as an OpenTelemetry span.

    Args:
        name: Span name. Defaults to function name if not provided.
        attributes: Static attributes to add to the span.
        record_exception: If True, record exceptions in the span.

    Example:
        @trace_span("fuzzyrank.search", attributes={"component": "orchestrator"})
        async def search(self, descriptor, query):
            ...
    """
    def decorator(func: Callable) -> Callable:
        span_name = name or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not is_tracing_enabled():
                return func(*args, **kwargs)

            with get_tracer().start_as_current_span(span_name) as span:
                _set_attributes(span, attributes)
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    if record_exception:
                        span.record_exception(e)
                        span.set_status(Status(StatusCode.ERROR))
                    raise

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            if not is_tracing_enabled():
                return await func(*args, **kwargs)

            with get_tracer().start_as_current_span(span_name) as span:
                _set_attributes(span, attributes)
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    if record_exception:
                        span.record_exception(e)
                        span.set_status(Status(StatusCode.ERROR))
                    raise

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return wrapper

    return decorator


def _set_attributes(span, attributes: dict[str, Any] | None) -> None:
    if attributes:
        for key, value in attributes.items():
            span.set_attribute(key, value)
