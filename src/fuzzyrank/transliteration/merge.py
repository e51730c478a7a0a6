"""Transliteration merge engine.

The fuzzy primitive aligns characters literally, so accented or non-Latin
text under-scores against a plain Latin query. The merge engine runs a second
pass over Latin-normalized copies of the key fields and folds any hit that
scores at least as well as its original counterpart back into the primary
ranking. Precision of records that already matched well is preserved because
an entry is only ever replaced by an equal-or-better one.
"""

from __future__ import annotations

import concurrent.futures
from collections.abc import Sequence

from loguru import logger

from ..config.models import MatchOptions, MergeStrategy
from ..core.match import RecordMatch, SearchResult
from ..core.record import Record
from ..errors import TransliterationError
from ..matching.matcher import WeightedMatcher
from ..utils.performance import timer
from .base import BaseTransliterator
from .latin import LatinTransliterator


class TransliterationMergeEngine:
    """Computes a transliterated pass and merges it into a primary result.

    Attributes:
        matcher: Weighted matcher used for the transliterated pass
        transliterator: Text to Latin mapping
        max_workers: Threads used to transliterate records (1 = sequential)
    """

    def __init__(
        self,
        matcher: WeightedMatcher | None = None,
        transliterator: BaseTransliterator | None = None,
        max_workers: int = 1,
    ):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.matcher = matcher or WeightedMatcher()
        self.transliterator = transliterator or LatinTransliterator()
        self.max_workers = max_workers

    def _transliterate_record(self, record: Record, key_names: Sequence[str]) -> int:
        record.transliterations = {}
        skipped = 0
        for name in key_names:
            text = record.text(name)
            if text is None:
                continue
            try:
                record.transliterations[name] = self.transliterator.to_latin(text)
            except TransliterationError as e:
                skipped += 1
                logger.warning(
                    f"Skipping field '{name}' of record {record.id!r} in transliterated pass: {e}"
                )
        return skipped

    def transliterate_records(self, records: Sequence[Record], key_names: Sequence[str]) -> int:
        """Rebuild `transliterations` for every record.

        Returns:
            Number of fields that could not be transliterated
        """
        if self.max_workers > 1 and len(records) > 1:
            with concurrent.futures.ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                skipped = sum(
                    executor.map(lambda record: self._transliterate_record(record, key_names), records)
                )
        else:
            skipped = sum(self._transliterate_record(record, key_names) for record in records)
        return skipped

    def merge_transliterated(
        self,
        query: str,
        records: Sequence[Record],
        options: MatchOptions,
        primary: SearchResult,
        strategy: MergeStrategy | None = None,
    ) -> SearchResult:
        """Run the transliterated pass and merge it into `primary`.

        Args:
            query: Search text
            records: The same (already truncated) records the primary pass saw
            options: Options of the primary pass, reused unchanged
            primary: Result of the primary pass
            strategy: Overrides `primary.descriptor.merge_strategy`

        Returns:
            A new SearchResult sorted by score and cut to `options.limit`
        """
        strategy = strategy or primary.descriptor.merge_strategy

        with timer(f"Transliterating {len(records)} records", log_level="DEBUG"):
            skipped = self.transliterate_records(records, options.key_names)

        transliterated_ranked, transliterated_total = self.matcher.match(
            query, records, options, use_transliterations=True
        )

        if not primary.total:
            logger.debug("Primary pass matched nothing, using transliterated pass as-is")
            return SearchResult(
                descriptor=primary.descriptor,
                ranked=transliterated_ranked,
                total=transliterated_total,
            )

        merged: list[RecordMatch] = list(primary.ranked)
        position = {match.record_id: index for index, match in enumerate(merged)}
        replaced = inserted = 0

        for match in transliterated_ranked:
            index = position.get(match.record_id)
            if index is not None:
                if match.aggregate_score >= merged[index].aggregate_score:
                    merged[index] = match
                    replaced += 1
            elif strategy is MergeStrategy.UNION:
                position[match.record_id] = len(merged)
                merged.append(match)
                inserted += 1

        merged.sort(key=lambda m: m.aggregate_score, reverse=True)
        if strategy is MergeStrategy.UNION:
            total = max(primary.total, transliterated_total, len(merged))
        else:
            # Replacements never add identities
            total = primary.total

        logger.debug(
            f"Transliteration merge ({strategy.value}): replaced={replaced}, "
            f"inserted={inserted}, skipped_fields={skipped}"
        )
        return SearchResult(
            descriptor=primary.descriptor,
            ranked=merged[: options.limit],
            total=total,
        )
