#!/usr/bin/env python3
"""
FuzzyRank Demo Application

Runs a fuzzy search over in-memory records and prints the ranking, with and
without the transliterated pass.

    python main.py cafe
    python main.py moskva --locale ru
    python main.py "zoe" --config search.json --records records.json
"""

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

from fuzzyrank import (
    FuzzyRankError,
    InMemoryRecordFetcher,
    SearchOrchestrator,
    load_descriptors,
    load_descriptors_file,
)
from fuzzyrank.config.settings import settings

SAMPLE_CONFIG = {
    "contentTypes": [
        {
            "uid": "api::book.book",
            "modelName": "book",
            "transliterate": True,
            "localized": True,
            "fuzzysortOptions": {
                "characterLimit": 200,
                "threshold": 60,
                "limit": 5,
                "keys": [
                    {"name": "title", "weight": 10},
                    {"name": "author", "weight": 0},
                ],
            },
        },
    ]
}

SAMPLE_RECORDS = {
    "api::book.book": [
        {"id": 1, "title": "Café Society", "author": "Hélène Dupont", "locale": "fr"},
        {"id": 2, "title": "The Cafe at the Edge", "author": "John Smith", "locale": "en"},
        {"id": 3, "title": "Москва", "author": "Иван Петров", "locale": "ru"},
        {"id": 4, "title": "Gardening Basics", "author": "Ann Cafferty", "locale": "en"},
        {"id": 5, "title": "Αθήνα", "author": "Νίκος Παπαδόπουλος", "locale": "el"},
    ]
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Weighted fuzzy search demo")
    parser.add_argument("query", help="Search text")
    parser.add_argument("--config", type=Path, help="Search configuration JSON (contentTypes)")
    parser.add_argument("--records", type=Path, help="JSON object mapping uid to a list of rows")
    parser.add_argument("--locale", help="Restrict candidates to a locale")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Loguru log level")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    try:
        descriptors = load_descriptors_file(args.config) if args.config else load_descriptors(SAMPLE_CONFIG)
        rows = json.loads(args.records.read_text(encoding="utf-8")) if args.records else SAMPLE_RECORDS
    except (FuzzyRankError, OSError, json.JSONDecodeError) as e:
        logger.error(f"Cannot load demo input: {e}")
        return 1

    orchestrator = SearchOrchestrator(fetcher=InMemoryRecordFetcher(rows))

    for descriptor in descriptors:
        logger.info(f"--- {descriptor.plural_name} ---")
        try:
            result = orchestrator.search_sync(descriptor, args.query, locale=args.locale)
        except FuzzyRankError as e:
            logger.error(f"Search failed: {e}")
            continue

        logger.info(f"Query '{args.query}': {result.total} match(es), showing {len(result.ranked)}")
        for i, match in enumerate(result.ranked, 1):
            targets = [m.target for m in match.field_matches if m is not None]
            logger.info(f"[{i}] id={match.record_id} score={match.aggregate_score:.1f} matched={targets}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
