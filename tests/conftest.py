"""Pytest configuration and global fixtures for FuzzyRank tests."""

from pathlib import Path

import pytest

from fuzzyrank.matching.matcher import WeightedMatcher
from fuzzyrank.search.fetcher import InMemoryRecordFetcher
from fuzzyrank.search.orchestrator import SearchOrchestrator
from fuzzyrank.search.validator import DescriptorQueryValidator
from fuzzyrank.transliteration.merge import TransliterationMergeEngine
from tests.utils.stub_matcher import TableMatcher

# Import shared fixtures
from tests.fixtures.common import (  # noqa: F401
    book_descriptor,
    sample_book_rows,
    sample_records,
    search_config,
    transliterated_book_descriptor,
)

# ==================== Component Fixtures ====================

@pytest.fixture
def table_matcher():
    """Deterministic primitive: exact=100, substring=60, else no match."""
    return TableMatcher()


@pytest.fixture
def weighted_matcher():
    """Weighted matcher over the real rapidfuzz primitive."""
    return WeightedMatcher()


@pytest.fixture
def merge_engine(weighted_matcher):
    return TransliterationMergeEngine(matcher=weighted_matcher)


@pytest.fixture
def book_fetcher(book_descriptor, sample_book_rows):
    return InMemoryRecordFetcher({book_descriptor.uid: sample_book_rows})


@pytest.fixture
def orchestrator(book_fetcher):
    return SearchOrchestrator(
        fetcher=book_fetcher,
        validator=DescriptorQueryValidator(supported_locales=["en", "fr", "ru"]),
    )

# ==================== Pytest Configuration ====================

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")

def pytest_collection_modifyitems(config, items):
    for item in items:
        rel_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if "unit" in rel_path.parts:
            item.add_marker(pytest.mark.unit)
        elif "integration" in rel_path.parts:
            item.add_marker(pytest.mark.integration)
