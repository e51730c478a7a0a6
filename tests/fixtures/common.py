"""Shared test fixtures for all test types."""

import pytest

from fuzzyrank.config.models import MergeStrategy
from fuzzyrank.core.record import Record
from tests.utils.builders import DescriptorBuilder


@pytest.fixture
def sample_book_rows() -> list[dict]:
    """Rows as a data store would return them."""
    return [
        {"id": 1, "title": "Café Society", "author": "Helene Dupont", "locale": "fr"},
        {"id": 2, "title": "The Cafe at the Edge", "author": "John Smith", "locale": "en"},
        {"id": 3, "title": "Москва", "author": "Иван Петров", "locale": "ru"},
        {"id": 4, "title": "Gardening Basics", "author": "Ann Cafferty", "locale": "en"},
        {"id": 5, "title": "", "author": None, "locale": "en"},
    ]


@pytest.fixture
def sample_records(sample_book_rows) -> list[Record]:
    return [Record.from_dict(row) for row in sample_book_rows]


@pytest.fixture
def book_descriptor():
    """Title weighted above author, no transliteration."""
    return (
        DescriptorBuilder()
        .with_keys(("title", 10), ("author", 0))
        .with_threshold(50)
        .with_limit(10)
        .localized()
        .build()
    )


@pytest.fixture
def transliterated_book_descriptor():
    return (
        DescriptorBuilder()
        .with_keys(("title", 10), ("author", 0))
        .with_threshold(50)
        .with_limit(10)
        .localized()
        .transliterated(MergeStrategy.UNION)
        .build()
    )


@pytest.fixture
def search_config() -> dict:
    """Plugin-style configuration mapping."""
    return {
        "contentTypes": [
            {
                "uid": "api::book.book",
                "modelName": "book",
                "transliterate": True,
                "fuzzysortOptions": {
                    "characterLimit": 300,
                    "threshold": 40,
                    "limit": 15,
                    "keys": [
                        {"name": "title", "weight": 100},
                        {"name": "description", "weight": -100},
                    ],
                },
            },
            {
                "uid": "api::author.author",
                "modelName": "author",
                "pluralName": "authors",
                "localized": True,
                "mergeStrategy": "replace_only",
                "fuzzysortOptions": {
                    "keys": [{"name": "name"}],
                },
            },
        ]
    }
