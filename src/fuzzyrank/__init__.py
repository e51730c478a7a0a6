"""
FuzzyRank - weighted multi-field fuzzy search.

Ranks multi-field records against a free-text query, combining per-field
fuzzy scores into one weighted score per record, and optionally merging a
transliterated pass to improve recall on accented or non-Latin text.
"""

__version__ = "0.1.0"

# Configuration
from .config import (
    FieldWeight,
    MatchOptions,
    MergeStrategy,
    RecordTypeDescriptor,
    Settings,
    load_descriptors,
    load_descriptors_file,
    load_settings,
)

# Core entities
from .core import NO_MATCH_SCORE, FieldMatch, Record, RecordMatch, SearchResult

# Errors
from .errors import (
    ConfigurationError,
    FetchError,
    FuzzyRankError,
    InvalidQueryError,
    NotFoundError,
    TransliterationError,
    is_retryable,
)

# Matching
from .matching import BaseFuzzyMatcher, RapidFuzzMatcher, WeightedMatcher, truncate_fields

# Search
from .search import (
    BaseQueryValidator,
    BaseRecordFetcher,
    DescriptorQueryValidator,
    InMemoryRecordFetcher,
    SearchOrchestrator,
)

# Transliteration
from .transliteration import BaseTransliterator, LatinTransliterator, TransliterationMergeEngine

__all__ = [
    # Version
    "__version__",
    # Config
    "FieldWeight",
    "MatchOptions",
    "MergeStrategy",
    "RecordTypeDescriptor",
    "Settings",
    "load_settings",
    "load_descriptors",
    "load_descriptors_file",
    # Core
    "Record",
    "FieldMatch",
    "RecordMatch",
    "SearchResult",
    "NO_MATCH_SCORE",
    # Errors
    "FuzzyRankError",
    "InvalidQueryError",
    "ConfigurationError",
    "NotFoundError",
    "FetchError",
    "TransliterationError",
    "is_retryable",
    # Matching
    "BaseFuzzyMatcher",
    "RapidFuzzMatcher",
    "WeightedMatcher",
    "truncate_fields",
    # Transliteration
    "BaseTransliterator",
    "LatinTransliterator",
    "TransliterationMergeEngine",
    # Search
    "BaseQueryValidator",
    "BaseRecordFetcher",
    "DescriptorQueryValidator",
    "InMemoryRecordFetcher",
    "SearchOrchestrator",
]
