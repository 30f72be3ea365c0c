"""
Tests for the retrieval orchestrator.

Covers the cache-first decision chain: hit, miss, cache failure and
registry failure.
"""

from unittest.mock import Mock

import pytest

from src.registry_directory.cache import CacheWriteOutcome
from src.registry_directory.errors import CacheUnavailable, UpstreamUnavailable
from src.registry_directory.services import FetchResult, RetrievalOrchestrator
from src.registry_directory.services.retrieval import SOURCE_CACHE, SOURCE_UPSTREAM


class FakeFetcher:
    """Fetcher that writes a fixed dataset to the cache like the real one."""

    def __init__(self, cache, dataset):
        self.cache = cache
        self.dataset = dataset
        self.error = None
        self.calls = 0

    def fetch(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        try:
            write = self.cache.set(self.dataset)
        except CacheUnavailable:
            write = CacheWriteOutcome(stored=False)
        return FetchResult(organizations=self.dataset, write=write)


class TestRetrievalOrchestrator:
    """Test cases for RetrievalOrchestrator."""

    @pytest.fixture
    def dataset(self, make_organizations):
        return make_organizations(3)

    @pytest.fixture
    def fetcher(self, cache_store, dataset):
        return FakeFetcher(cache_store, dataset)

    @pytest.fixture
    def orchestrator(self, cache_store, fetcher):
        return RetrievalOrchestrator(cache_store, fetcher, logger=Mock())

    def test_cache_hit_skips_registry(self, orchestrator, cache_store, fetcher, make_organizations):
        cached = make_organizations(5)
        cache_store.set(cached)

        result = orchestrator.retrieve()

        assert result.ok
        assert result.source == SOURCE_CACHE
        assert result.dataset == cached
        assert fetcher.calls == 0

    def test_cache_miss_fetches_and_rereads(self, orchestrator, cache_store, fetcher, dataset):
        result = orchestrator.retrieve()

        assert result.ok
        assert result.source == SOURCE_UPSTREAM
        assert result.dataset == dataset
        assert fetcher.calls == 1
        # initial read plus the re-read after the write
        assert cache_store.get_calls == 2

    def test_second_read_is_served_from_cache(self, orchestrator, fetcher, dataset):
        orchestrator.retrieve()
        result = orchestrator.retrieve()

        assert result.source == SOURCE_CACHE
        assert result.dataset == dataset
        assert fetcher.calls == 1

    def test_cached_empty_dataset_is_a_hit(self, orchestrator, cache_store, fetcher):
        cache_store.set([])

        result = orchestrator.retrieve()

        assert result.source == SOURCE_CACHE
        assert result.dataset == []
        assert fetcher.calls == 0

    def test_rejected_write_serves_fetched_data(self, orchestrator, cache_store, fetcher, dataset):
        cache_store.reject_writes = True

        result = orchestrator.retrieve()

        assert result.ok
        assert result.dataset == dataset
        assert cache_store.payload is None
        # no re-read when the write did not land
        assert cache_store.get_calls == 1

    def test_empty_reread_serves_fetched_data(self, dataset):
        cache = Mock()
        cache.get.return_value = None
        fetcher = Mock()
        fetcher.fetch.return_value = FetchResult(
            organizations=dataset,
            write=CacheWriteOutcome(stored=True)
        )
        orchestrator = RetrievalOrchestrator(cache, fetcher, logger=Mock())

        result = orchestrator.retrieve()

        assert result.ok
        assert result.dataset == dataset
        assert cache.get.call_count == 2

    def test_reread_returns_cached_value(self, make_organizations, dataset):
        newer = make_organizations(7)
        cache = Mock()
        cache.get.side_effect = [None, newer]
        fetcher = Mock()
        fetcher.fetch.return_value = FetchResult(
            organizations=dataset,
            write=CacheWriteOutcome(stored=True)
        )
        orchestrator = RetrievalOrchestrator(cache, fetcher, logger=Mock())

        result = orchestrator.retrieve()

        assert result.dataset == newer

    def test_cache_unavailable_falls_back_to_registry(self, orchestrator, cache_store, fetcher, dataset):
        cache_store.fail_get = True
        cache_store.fail_set = True

        result = orchestrator.retrieve()

        assert result.ok
        assert result.source == SOURCE_UPSTREAM
        assert result.dataset == dataset
        assert fetcher.calls == 1

    def test_cache_unavailable_on_reread_serves_fetched_data(self, dataset):
        cache = Mock()
        cache.get.side_effect = [None, CacheUnavailable("timeout")]
        fetcher = Mock()
        fetcher.fetch.return_value = FetchResult(
            organizations=dataset,
            write=CacheWriteOutcome(stored=True)
        )
        orchestrator = RetrievalOrchestrator(cache, fetcher, logger=Mock())

        result = orchestrator.retrieve()

        assert result.ok
        assert result.dataset == dataset

    def test_registry_failure_on_miss_is_reported(self, orchestrator, fetcher):
        fetcher.error = UpstreamUnavailable("503 Service Unavailable")

        result = orchestrator.retrieve()

        assert not result.ok
        assert result.error is fetcher.error
        assert result.dataset == []

    def test_registry_failure_after_cache_failure_is_reported(self, orchestrator, cache_store, fetcher):
        cache_store.fail_get = True
        fetcher.error = UpstreamUnavailable("connection refused")

        result = orchestrator.retrieve()

        assert not result.ok
        assert isinstance(result.error, UpstreamUnavailable)
        assert fetcher.calls == 1
