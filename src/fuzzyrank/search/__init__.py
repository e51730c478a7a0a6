"""Search orchestration and its collaborators."""

from .base import BaseQueryValidator, BaseRecordFetcher
from .fetcher import InMemoryRecordFetcher
from .orchestrator import SearchOrchestrator
from .validator import DescriptorQueryValidator

__all__ = [
    "BaseQueryValidator",
    "BaseRecordFetcher",
    "DescriptorQueryValidator",
    "InMemoryRecordFetcher",
    "SearchOrchestrator",
]
