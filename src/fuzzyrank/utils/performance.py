"""Performance monitoring utilities."""

import time
from contextlib import contextmanager
from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable

from loguru import logger


@dataclass
class Timing:
    """Elapsed time of a timed block, filled in when the block exits."""

    operation: str
    elapsed_ms: float = 0.0


def _log(log_level: str, message: str) -> None:
    getattr(logger, log_level.lower())(message)


@contextmanager
def timer(operation: str, log_level: str = "INFO", threshold_ms: float = 0):
    """Context manager for timing a search stage.

    Args:
        operation: Description of the operation being timed
        log_level: Log level to use ("DEBUG", "INFO", "WARNING")
        threshold_ms: Only log if operation takes longer than this (in milliseconds)

    Yields:
        Timing whose `elapsed_ms` is set once the block finishes

    Example:
        >>> with timer("Matching 500 records") as timing:
        ...     ranked, total = matcher.match(query, records, options)
        >>> timing.elapsed_ms
    """
    timing = Timing(operation)
    start = time.perf_counter()
    try:
        yield timing
    finally:
        timing.elapsed_ms = (time.perf_counter() - start) * 1000

        if timing.elapsed_ms >= threshold_ms:
            _log(log_level, f"{operation} took {timing.elapsed_ms:.2f}ms")


def timed(operation: str = None, threshold_ms: float = 100, log_level: str = "DEBUG"):
    """Decorator for timing function execution.

    Calls slower than one second are always reported at INFO.

    Args:
        operation: Description of the operation (defaults to function name)
        threshold_ms: Only log if operation takes longer than this (in milliseconds)
        log_level: Log level for calls under one second
    """
    def decorator(func: Callable) -> Callable:
        op_name = operation or f"{func.__module__}.{func.__name__}"

        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                elapsed_ms = (time.perf_counter() - start) * 1000

                if elapsed_ms >= threshold_ms:
                    if elapsed_ms > 1000:
                        _log("INFO", f"{op_name} took {elapsed_ms / 1000:.2f}s")
                    else:
                        _log(log_level, f"{op_name} took {elapsed_ms:.2f}ms")

        return wrapper
    return decorator
