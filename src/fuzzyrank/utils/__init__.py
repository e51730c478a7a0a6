"""Utility functions for FuzzyRank."""

from .async_helpers import run_async_in_sync_context
from .performance import Timing, timed, timer

__all__ = [
    "run_async_in_sync_context",
    "Timing",
    "timer",
    "timed",
]
