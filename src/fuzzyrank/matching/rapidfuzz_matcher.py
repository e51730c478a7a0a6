"""Fuzzy-match primitive backed by rapidfuzz."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from loguru import logger
from rapidfuzz import fuzz, utils

from ..core.match import FieldMatch
from .base import BaseFuzzyMatcher

SCORERS: dict[str, Callable[..., float]] = {
    "ratio": fuzz.ratio,
    "partial_ratio": fuzz.partial_ratio,
    "token_sort_ratio": fuzz.token_sort_ratio,
    "token_set_ratio": fuzz.token_set_ratio,
    "WRatio": fuzz.WRatio,
}


class RapidFuzzMatcher(BaseFuzzyMatcher):
    """rapidfuzz-based matcher.

    Scores are in [0, 100]. Both strings are normalized with
    `rapidfuzz.utils.default_process` (lowercase, punctuation stripped) before
    scoring. A score at or below `min_score` is reported as no match.

    Args:
        scorer: Name of a rapidfuzz scorer in SCORERS
        min_score: Scores at or below this value count as no match
    """

    def __init__(self, scorer: str = "partial_ratio", min_score: float = 0.0, name: str = None):
        if scorer not in SCORERS:
            raise ValueError(f"Unknown scorer '{scorer}'. Available: {sorted(SCORERS)}")
        super().__init__(name)
        self.scorer_name = scorer
        self._scorer = SCORERS[scorer]
        self.min_score = min_score

    def _score_processed(self, query: str, text: str) -> float | None:
        if not query or not text:
            return None
        score = self._scorer(query, text, processor=None, score_cutoff=self.min_score)
        if score <= self.min_score:
            return None
        return score

    def score(self, query: str, text: str | None) -> float | None:
        if not query or not text:
            return None
        return self._score_processed(utils.default_process(query), utils.default_process(text))

    def match_all(
        self, query: str, rows: Sequence[Sequence[str | None]]
    ) -> list[list[FieldMatch | None]]:
        # Normalize the query once for the whole candidate set
        processed_query = utils.default_process(query) if query else ""
        if not processed_query:
            logger.debug("Empty query after normalization, nothing can match")
            return [[None] * len(row) for row in rows]

        results = []
        for row in rows:
            matches = []
            for text in row:
                raw = None
                if text:
                    raw = self._score_processed(processed_query, utils.default_process(text))
                matches.append(None if raw is None else FieldMatch(raw_score=raw, target=text))
            results.append(matches)
        return results
