"""Tests for SearchOrchestrator.

Collaborators are mocked; the primitive is the deterministic table matcher.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from fuzzyrank.errors import FetchError, InvalidQueryError
from fuzzyrank.matching.matcher import WeightedMatcher
from fuzzyrank.search.base import BaseQueryValidator, BaseRecordFetcher
from fuzzyrank.search.orchestrator import SearchOrchestrator
from fuzzyrank.transliteration.merge import TransliterationMergeEngine
from tests.utils.assertions import assert_result_valid, ranked_ids
from tests.utils.builders import DescriptorBuilder, make_records


@pytest.fixture
def mock_validator():
    validator = MagicMock(spec=BaseQueryValidator)
    validator.validate = AsyncMock(return_value=None)
    return validator


@pytest.fixture
def mock_fetcher():
    fetcher = MagicMock(spec=BaseRecordFetcher)
    fetcher.find_many = AsyncMock(return_value=[])
    return fetcher


@pytest.fixture
def table_orchestrator(mock_fetcher, mock_validator, table_matcher):
    matcher = WeightedMatcher(table_matcher)
    return SearchOrchestrator(
        fetcher=mock_fetcher,
        validator=mock_validator,
        matcher=matcher,
        merge_engine=TransliterationMergeEngine(matcher=matcher),
    )


class TestSearchOrchestrator:

    @pytest.mark.asyncio
    async def test_ranks_fetched_records(self, table_orchestrator, mock_fetcher):
        descriptor = DescriptorBuilder().with_keys(("title", 0)).build()
        mock_fetcher.find_many.return_value = make_records(
            {"title": "the cafe"}, {"title": "garden"}, {"title": "cafe"}
        )

        result = await table_orchestrator.search(descriptor, "cafe")

        assert ranked_ids(result) == [3, 1]
        assert result.total == 2
        assert result.descriptor is descriptor
        assert_result_valid(result)

    @pytest.mark.asyncio
    async def test_passes_filters_and_locale_to_fetcher(
        self, table_orchestrator, mock_fetcher, mock_validator
    ):
        descriptor = DescriptorBuilder().localized().build()

        await table_orchestrator.search(descriptor, "cafe", filters={"published": True}, locale="fr")

        mock_validator.validate.assert_awaited_once_with(descriptor, "fr")
        mock_fetcher.find_many.assert_awaited_once_with(
            descriptor.uid, filters={"published": True}, locale="fr"
        )

    @pytest.mark.asyncio
    async def test_validation_failure_aborts_before_fetch(
        self, table_orchestrator, mock_fetcher, mock_validator
    ):
        mock_validator.validate.side_effect = InvalidQueryError("Locale 'de' is not supported")

        with pytest.raises(InvalidQueryError):
            await table_orchestrator.search(DescriptorBuilder().build(), "cafe", locale="de")

        mock_fetcher.find_many.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fetch_failure_propagates(self, table_orchestrator, mock_fetcher):
        error = FetchError("store unavailable")
        mock_fetcher.find_many.side_effect = error

        with pytest.raises(FetchError) as exc_info:
            await table_orchestrator.search(DescriptorBuilder().build(), "cafe")

        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_no_candidates_gives_empty_result(self, table_orchestrator):
        result = await table_orchestrator.search(DescriptorBuilder().build(), "cafe")

        assert result.ranked == []
        assert result.total == 0

    @pytest.mark.asyncio
    async def test_fields_truncated_before_matching(self, table_orchestrator, mock_fetcher):
        descriptor = DescriptorBuilder().with_keys(("title", 0)).with_character_limit(4).build()
        records = make_records({"title": "abcdefgh"}, {"title": "xfgh"})
        mock_fetcher.find_many.return_value = records

        result = await table_orchestrator.search(descriptor, "fgh")

        assert ranked_ids(result) == [2]
        assert records[0].fields["title"] == "abcd"

    @pytest.mark.asyncio
    async def test_transliteration_disabled_skips_merge(self, mock_fetcher, mock_validator):
        merge_engine = MagicMock(spec=TransliterationMergeEngine)
        orchestrator = SearchOrchestrator(
            fetcher=mock_fetcher, validator=mock_validator, merge_engine=merge_engine
        )
        mock_fetcher.find_many.return_value = make_records({"title": "café"})

        await orchestrator.search(DescriptorBuilder().build(), "cafe")

        merge_engine.merge_transliterated.assert_not_called()

    @pytest.mark.asyncio
    async def test_transliteration_enabled_merges(self, table_orchestrator, mock_fetcher):
        descriptor = DescriptorBuilder().with_keys(("title", 0)).transliterated().build()
        mock_fetcher.find_many.return_value = make_records({"title": "the cafe"}, {"title": "café"})

        result = await table_orchestrator.search(descriptor, "cafe")

        assert ranked_ids(result) == [2, 1]
        assert result.ranked[0].aggregate_score == 100

    @pytest.mark.asyncio
    async def test_merge_receives_primary_result(self, mock_fetcher, mock_validator, table_matcher):
        matcher = WeightedMatcher(table_matcher)
        merge_engine = MagicMock(spec=TransliterationMergeEngine)
        merge_engine.merge_transliterated.side_effect = lambda q, r, o, primary: primary
        orchestrator = SearchOrchestrator(
            fetcher=mock_fetcher, validator=mock_validator, matcher=matcher, merge_engine=merge_engine
        )
        descriptor = DescriptorBuilder().transliterated().build()
        records = make_records({"title": "cafe"})
        mock_fetcher.find_many.return_value = records

        result = await orchestrator.search(descriptor, "cafe")

        query, passed_records, options, primary = merge_engine.merge_transliterated.call_args.args
        assert query == "cafe"
        assert passed_records is records
        assert options is descriptor.match_options
        assert ranked_ids(primary) == [1]
        assert result is primary

    @pytest.mark.asyncio
    async def test_search_many_keys_by_plural_name(self, table_orchestrator, mock_fetcher):
        books = DescriptorBuilder().build()
        authors = DescriptorBuilder().with_uid("api::author.author", "author", "authors").build()

        async def find_many(uid, filters=None, locale=None):
            if uid == books.uid:
                return make_records({"title": "cafe"})
            return make_records({"title": "the cafe"}, {"title": "cafe bar"})

        mock_fetcher.find_many.side_effect = find_many

        results = await table_orchestrator.search_many([books, authors], "cafe")

        assert list(results) == ["books", "authors"]
        assert results["books"].total == 1
        assert results["authors"].total == 2

    @pytest.mark.asyncio
    async def test_concurrent_searches_are_independent(self, table_orchestrator, mock_fetcher):
        descriptor = DescriptorBuilder().with_keys(("title", 0)).with_character_limit(3).build()
        mock_fetcher.find_many.side_effect = lambda uid, filters=None, locale=None: make_records(
            {"title": "cafe"}
        )

        first, second = await asyncio.gather(
            table_orchestrator.search(descriptor, "caf"),
            table_orchestrator.search(descriptor, "caf"),
        )

        assert first.records[0] is not second.records[0]
        assert first.ranked[0].aggregate_score == second.ranked[0].aggregate_score == 100

    def test_search_sync(self, table_orchestrator, mock_fetcher):
        mock_fetcher.find_many.return_value = make_records({"title": "cafe"})

        result = table_orchestrator.search_sync(DescriptorBuilder().build(), "cafe")

        assert ranked_ids(result) == [1]

    def test_default_collaborators(self, mock_fetcher):
        orchestrator = SearchOrchestrator(fetcher=mock_fetcher)

        assert orchestrator.merge_engine.matcher is orchestrator.matcher
        assert orchestrator.merge_engine.max_workers >= 1


class TestSearchWithRealMatcher:

    @pytest.mark.asyncio
    async def test_sample_books(self, orchestrator, book_descriptor):
        result = await orchestrator.search(book_descriptor, "cafe")

        assert 2 in ranked_ids(result)
        assert 3 not in ranked_ids(result)
        assert 5 not in ranked_ids(result)
        assert_result_valid(result)

    @pytest.mark.asyncio
    async def test_unsupported_locale_rejected(self, orchestrator, book_descriptor):
        with pytest.raises(InvalidQueryError):
            await orchestrator.search(book_descriptor, "cafe", locale="de")
