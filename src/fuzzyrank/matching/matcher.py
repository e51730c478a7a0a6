"""Weighted multi-key matcher.

Runs the fuzzy primitive over every configured field of every record and
reduces the per-field scores to one aggregate score per record:

    aggregate = max(raw_score[i] + keys[i].weight)  over matched keys i

A key that did not match contributes NO_MATCH_SCORE. Records are kept when
their best raw field score reaches the threshold; the threshold is applied to
raw scores, never to the weighted aggregate.
"""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from ..config.models import FieldWeight, MatchOptions
from ..core.match import NO_MATCH_SCORE, FieldMatch, RecordMatch
from ..core.record import Record
from ..utils.performance import timed
from .base import BaseFuzzyMatcher
from .rapidfuzz_matcher import RapidFuzzMatcher


class WeightedMatcher:
    """Ranks records by their best weighted field match.

    Attributes:
        primitive: Fuzzy-match primitive used for per-field scores
    """

    def __init__(self, primitive: BaseFuzzyMatcher | None = None):
        self.primitive = primitive or RapidFuzzMatcher()

    @staticmethod
    def aggregate(
        field_matches: Sequence[FieldMatch | None], keys: Sequence[FieldWeight]
    ) -> float:
        """Best `raw_score + weight` over matched keys, NO_MATCH_SCORE if none."""
        if len(field_matches) != len(keys):
            raise ValueError(
                f"field_matches length ({len(field_matches)}) "
                f"must match keys length ({len(keys)})"
            )
        return max(
            (
                match.raw_score + key.weight if match is not None else NO_MATCH_SCORE
                for match, key in zip(field_matches, keys, strict=True)
            ),
            default=NO_MATCH_SCORE,
        )

    @timed("Weighted match", threshold_ms=50)
    def score_all(
        self,
        query: str,
        records: Sequence[Record],
        options: MatchOptions,
        use_transliterations: bool = False,
    ) -> list[RecordMatch]:
        """Score and sort every record that passes the threshold (no limit applied)."""
        key_names = options.key_names
        rows = [
            [record.text(name, transliterated=use_transliterations) for name in key_names]
            for record in records
        ]
        per_record = self.primitive.match_all(query, rows)

        matches: list[RecordMatch] = []
        for record, field_matches in zip(records, per_record, strict=True):
            raw_scores = [m.raw_score for m in field_matches if m is not None]
            if not raw_scores or max(raw_scores) < options.threshold:
                continue
            matches.append(
                RecordMatch(
                    record=record,
                    field_matches=field_matches,
                    aggregate_score=self.aggregate(field_matches, options.keys),
                )
            )

        # list.sort is stable, so equal scores keep input order
        matches.sort(key=lambda m: m.aggregate_score, reverse=True)
        return matches

    def match(
        self,
        query: str,
        records: Sequence[Record],
        options: MatchOptions,
        use_transliterations: bool = False,
    ) -> tuple[list[RecordMatch], int]:
        """Rank records against the query.

        Args:
            query: Search text
            records: Candidate records
            options: Threshold, limit and weighted keys
            use_transliterations: Match against `record.transliterations`
                instead of the original field values

        Returns:
            (ranked matches truncated to `options.limit`, count before truncation)
        """
        matches = self.score_all(query, records, options, use_transliterations)
        total = len(matches)
        ranked = matches[: options.limit]

        logger.debug(
            f"Matched {total}/{len(records)} records"
            f"{' (transliterated)' if use_transliterations else ''}, "
            f"keeping top {len(ranked)}"
        )
        return ranked, total
