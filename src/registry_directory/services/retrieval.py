"""
Retrieval orchestration service.

Decides, for each read, whether the dataset comes from the cache or from a
fresh registry fetch. The service keeps no state between calls.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

from ..errors import CacheUnavailable, UpstreamUnavailable
from ..models import Organization

if TYPE_CHECKING:
    from ..cache import CacheStore
    from .fetcher import FetchResult, UpstreamFetcher


SOURCE_CACHE = "cache"
SOURCE_UPSTREAM = "upstream"


@dataclass
class RetrievalResult:
    """Either a dataset (with where it came from) or the error that stopped the read."""

    dataset: List[Organization] = field(default_factory=list)
    source: Optional[str] = None
    error: Optional[UpstreamUnavailable] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, dataset: List[Organization], source: str) -> "RetrievalResult":
        return cls(dataset=dataset, source=source)

    @classmethod
    def failure(cls, error: UpstreamUnavailable) -> "RetrievalResult":
        return cls(error=error)


class RetrievalOrchestrator:
    """
    Produce the current dataset for one read.

    The decision chain is:
        1. Read the cache.
        2. On a hit, return it without touching the registry.
        3. On a miss, fetch from the registry and re-read the cache.
        4. If the cache is unreachable, fetch from the registry directly.
        5. If the registry is unavailable, fail the read. There is no stale
           fallback and no retry.

    When the fetched data did not reach the cache, or the re-read comes back
    empty, the fetched dataset itself is returned.
    """

    def __init__(
        self,
        cache: "CacheStore",
        fetcher: "UpstreamFetcher",
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize retrieval orchestrator.

        Args:
            cache: Cache store holding the dataset
            fetcher: Upstream fetcher used on miss or cache failure
            logger: Logger instance
        """
        self.cache = cache
        self.fetcher = fetcher
        self.logger = logger or logging.getLogger(__name__)

    def retrieve(self) -> RetrievalResult:
        """
        Return the dataset for this read.

        Returns:
            Tagged result; never raises for cache or registry failures
        """
        try:
            cached = self.cache.get()
        except CacheUnavailable as e:
            self.logger.warning(f"Cache unavailable, fetching from registry directly: {e}")
            return self._refresh()

        if cached is not None:
            self.logger.debug(f"Serving {len(cached)} organizations from cache")
            return RetrievalResult.success(cached, SOURCE_CACHE)

        self.logger.info("Cache miss, fetching from registry")
        return self._refresh()

    def _refresh(self) -> RetrievalResult:
        try:
            fetched = self.fetcher.fetch()
        except UpstreamUnavailable as e:
            self.logger.error(f"Registry unavailable: {e}")
            return RetrievalResult.failure(e)

        return RetrievalResult.success(self._reread(fetched), SOURCE_UPSTREAM)

    def _reread(self, fetched: "FetchResult") -> List[Organization]:
        if not fetched.write.stored:
            return fetched.organizations

        try:
            cached = self.cache.get()
        except CacheUnavailable as e:
            self.logger.warning(f"Cache re-read failed, using fetched data: {e}")
            return fetched.organizations

        if cached is None:
            self.logger.warning("Cache re-read came back empty, using fetched data")
            return fetched.organizations

        return cached
