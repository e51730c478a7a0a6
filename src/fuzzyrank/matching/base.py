"""Fuzzy-match primitive interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..core.match import FieldMatch


class BaseFuzzyMatcher(ABC):
    """Approximate string matching primitive.

    Given a query and a candidate string, a matcher reports either no match
    (None) or a numeric score where higher is better. `match_all` applies it
    to several named fields of many records at once.
    """

    def __init__(self, name: str = None):
        self.name = name or self.__class__.__name__

    @abstractmethod
    def score(self, query: str, text: str | None) -> float | None:
        """Score a single candidate string.

        Args:
            query: Search text
            text: Candidate text, None when the field is missing or empty

        Returns:
            Score (higher is better) or None when the text does not match
        """
        pass

    def match_all(
        self, query: str, rows: Sequence[Sequence[str | None]]
    ) -> list[list[FieldMatch | None]]:
        """Match the query against every key of every candidate row.

        Args:
            query: Search text
            rows: One row per record; each row holds one text per key

        Returns:
            Per-row, per-key results aligned with `rows`
        """
        results = []
        for row in rows:
            matches = []
            for text in row:
                raw = self.score(query, text)
                matches.append(None if raw is None else FieldMatch(raw_score=raw, target=text))
            results.append(matches)
        return results

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"
