"""Core data model: records and match results."""

from .match import NO_MATCH_SCORE, FieldMatch, RecordMatch, SearchResult
from .record import Record

__all__ = [
    "Record",
    "FieldMatch",
    "RecordMatch",
    "SearchResult",
    "NO_MATCH_SCORE",
]
