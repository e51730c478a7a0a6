"""Search orchestrator - validate, fetch, truncate, match, merge."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any

from loguru import logger

from ..config.models import RecordTypeDescriptor
from ..config.settings import settings
from ..core.match import SearchResult
from ..matching.matcher import WeightedMatcher
from ..matching.truncator import truncate_fields
from ..observability import trace_span
from ..transliteration.merge import TransliterationMergeEngine
from ..utils import run_async_in_sync_context, timer
from .base import BaseQueryValidator, BaseRecordFetcher
from .validator import DescriptorQueryValidator


class SearchOrchestrator:
    """Runs one fuzzy search per record type.

    Flow of a single call:
    1. Validate the record type / locale (may suspend)
    2. Fetch candidate records (may suspend)
    3. Truncate configured fields when `character_limit` is set
    4. Rank with the weighted matcher
    5. Merge a transliterated pass when the record type asks for it

    Validation and fetch errors propagate unchanged; nothing is retried.
    Each call owns its fetched records, so concurrent calls share no state.

    Attributes:
        validator: Query validator collaborator
        fetcher: Record fetcher collaborator
        matcher: Weighted matcher for the primary pass
        merge_engine: Engine for the transliterated pass
    """

    def __init__(
        self,
        fetcher: BaseRecordFetcher,
        validator: BaseQueryValidator | None = None,
        matcher: WeightedMatcher | None = None,
        merge_engine: TransliterationMergeEngine | None = None,
    ):
        self.fetcher = fetcher
        self.validator = validator or DescriptorQueryValidator()
        self.matcher = matcher or WeightedMatcher()
        self.merge_engine = merge_engine or TransliterationMergeEngine(
            matcher=self.matcher, max_workers=settings.TRANSLITERATION_WORKERS
        )

    @trace_span("fuzzyrank.search", attributes={"component": "orchestrator"})
    async def search(
        self,
        descriptor: RecordTypeDescriptor,
        query: str,
        filters: dict[str, Any] | None = None,
        locale: str | None = None,
    ) -> SearchResult:
        """Search one record type.

        Args:
            descriptor: Record type to search
            query: Free-text query
            filters: Fetch-time field constraints
            locale: Fetch-time locale constraint

        Returns:
            Ranked result, merged with the transliterated pass if enabled

        Raises:
            InvalidQueryError: If the validator rejects the request
        """
        await self.validator.validate(descriptor, locale)

        records = await self.fetcher.find_many(descriptor.uid, filters=filters, locale=locale)
        options = descriptor.match_options

        with timer(f"Search '{query[:50]}' on {descriptor.plural_name}", threshold_ms=100) as timing:
            truncate_fields(records, options.key_names, options.character_limit)

            ranked, total = self.matcher.match(query, records, options)
            result = SearchResult(descriptor=descriptor, ranked=ranked, total=total)

            if descriptor.transliterate:
                result = self.merge_engine.merge_transliterated(query, records, options, result)

        logger.info(
            f"Search on {descriptor.plural_name}: {len(records)} candidates, "
            f"{result.total} matched, returning {len(result.ranked)} ({timing.elapsed_ms:.1f}ms)"
        )
        return result

    async def search_many(
        self,
        descriptors: Sequence[RecordTypeDescriptor],
        query: str,
        filters: dict[str, Any] | None = None,
        locale: str | None = None,
    ) -> dict[str, SearchResult]:
        """Search several record types concurrently.

        Returns:
            Results keyed by each descriptor's plural name, in input order
        """
        results = await asyncio.gather(
            *(self.search(d, query, filters=filters, locale=locale) for d in descriptors)
        )
        return {d.plural_name: result for d, result in zip(descriptors, results, strict=True)}

    def search_sync(
        self,
        descriptor: RecordTypeDescriptor,
        query: str,
        filters: dict[str, Any] | None = None,
        locale: str | None = None,
    ) -> SearchResult:
        """Blocking variant of `search` for synchronous callers."""
        return run_async_in_sync_context(self.search(descriptor, query, filters, locale))
