"""Fuzzy matching: primitive, truncation and weighted aggregation."""

from .base import BaseFuzzyMatcher
from .matcher import WeightedMatcher
from .rapidfuzz_matcher import SCORERS, RapidFuzzMatcher
from .truncator import truncate_fields

__all__ = [
    "BaseFuzzyMatcher",
    "RapidFuzzMatcher",
    "SCORERS",
    "WeightedMatcher",
    "truncate_fields",
]
