"""
Upstream fetching service.

Downloads the registry, normalizes it and stores the result in the cache.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, TYPE_CHECKING

import requests  # type: ignore

from ..cache import CacheWriteOutcome
from ..errors import (
    CacheUnavailable,
    MalformedRecord,
    UpstreamMalformedResponse,
    UpstreamUnavailable,
)
from ..models import Organization
from ..processing import RecordNormalizer

if TYPE_CHECKING:
    from ..api import RegistryAPI
    from ..cache import CacheStore


@dataclass
class FetchResult:
    """Organizations obtained from the registry and how the cache write went."""

    organizations: List[Organization]
    write: CacheWriteOutcome


class UpstreamFetcher:
    """Fetch the full organization list from the registry."""

    def __init__(
        self,
        api_client: "RegistryAPI",
        cache: "CacheStore",
        normalizer: Optional[RecordNormalizer] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize upstream fetcher.

        Args:
            api_client: Registry API client
            cache: Cache store that receives the fetched dataset
            normalizer: Record normalizer (created if not given)
            logger: Logger instance
        """
        self.api_client = api_client
        self.cache = cache
        self.logger = logger or logging.getLogger(__name__)
        self.normalizer = normalizer or RecordNormalizer(self.logger)

    def fetch(self) -> FetchResult:
        """
        Download and normalize the registry, then cache the dataset.

        A failed cache write never fails the fetch; it is logged and reported
        in the result.

        Returns:
            Fetched organizations and the cache write outcome

        Raises:
            UpstreamMalformedResponse: If the body or any record is malformed
            UpstreamUnavailable: On transport failure, timeout or error status
        """
        try:
            raw_objects = self.api_client.get_registry_objects()
        except UpstreamUnavailable:
            raise
        except requests.exceptions.RequestException as e:
            raise UpstreamUnavailable(f"Registry request failed: {e}") from e

        try:
            organizations = self.normalizer.normalize_all(raw_objects)
        except MalformedRecord as e:
            raise UpstreamMalformedResponse(f"Registry returned a malformed record: {e}") from e

        try:
            write = self.cache.set(organizations)
        except CacheUnavailable as e:
            self.logger.warning(f"Fetched data was not cached: {e}")
            write = CacheWriteOutcome(stored=False)

        self.logger.info(f"Fetched {len(organizations)} organizations from registry")
        return FetchResult(organizations=organizations, write=write)
