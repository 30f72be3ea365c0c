"""
Cache store for the organization dataset.

Keeps the whole dataset as one JSON document under a single Redis key.
"""

import json
import logging
from dataclasses import dataclass
from typing import List, Optional

import redis  # type: ignore
from redis.exceptions import OutOfMemoryError, RedisError  # type: ignore

from ..core import constants
from ..errors import CacheUnavailable, CacheWriteRejected
from ..models import Organization


@dataclass
class CacheWriteOutcome:
    """Result of a cache write; a rejected write carries its error."""

    stored: bool
    rejection: Optional[CacheWriteRejected] = None

    @property
    def rejected(self) -> bool:
        return self.rejection is not None


class CacheStore:
    """Single-key get/set of the organization dataset."""

    def __init__(
        self,
        client: "redis.Redis",
        key: str = constants.DEFAULT_CACHE_KEY,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize cache store.

        Args:
            client: Redis client (created with decode_responses=True)
            key: Key the dataset is stored under
            logger: Logger instance
        """
        self.client = client
        self.key = key
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_url(
        cls,
        url: str,
        key: str = constants.DEFAULT_CACHE_KEY,
        socket_timeout: float = constants.DEFAULT_CACHE_SOCKET_TIMEOUT,
        logger: Optional[logging.Logger] = None
    ) -> "CacheStore":
        """
        Create a cache store connected to the Redis server at url.

        The connection is lazy; an unreachable server surfaces as
        CacheUnavailable on the first get or set.
        """
        client = redis.Redis.from_url(
            url,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
            decode_responses=True,
        )
        return cls(client, key=key, logger=logger)

    def get(self) -> Optional[List[Organization]]:
        """
        Read the cached dataset.

        Returns:
            The dataset, or None if nothing usable is stored under the key

        Raises:
            CacheUnavailable: If the backend cannot be reached or times out
        """
        try:
            payload = self.client.get(self.key)
        except UnicodeDecodeError as e:
            self.logger.warning(f"Ignoring undecodable cache value under '{self.key}': {e}")
            return None
        except RedisError as e:
            raise CacheUnavailable(f"Cache read failed for key '{self.key}': {e}") from e

        if payload is None:
            self.logger.debug(f"Cache miss for key '{self.key}'")
            return None

        try:
            records = json.loads(payload)
            if not isinstance(records, list):
                raise ValueError(f"expected a list, got {type(records).__name__}")
            dataset = [Organization.from_dict(record) for record in records]
        except (TypeError, ValueError) as e:
            # Overwritten by the next fetch
            self.logger.warning(f"Ignoring undecodable cache value under '{self.key}': {e}")
            return None

        self.logger.debug(f"Cache hit for key '{self.key}': {len(dataset)} organizations")
        return dataset

    def set(self, dataset: List[Organization]) -> CacheWriteOutcome:
        """
        Replace the cached dataset, without expiry.

        An out-of-memory refusal from the backend is logged and reported in
        the outcome instead of being raised.

        Args:
            dataset: Organizations to store

        Returns:
            Outcome of the write

        Raises:
            CacheUnavailable: On any other backend failure
        """
        payload = json.dumps([org.to_dict() for org in dataset], ensure_ascii=False)

        try:
            self.client.set(self.key, payload)
        except OutOfMemoryError as e:
            rejection = CacheWriteRejected(
                f"Cache rejected {len(dataset)} organizations under '{self.key}': {e}"
            )
            self.logger.warning(str(rejection))
            return CacheWriteOutcome(stored=False, rejection=rejection)
        except RedisError as e:
            raise CacheUnavailable(f"Cache write failed for key '{self.key}': {e}") from e

        self.logger.info(f"Stored {len(dataset)} organizations under '{self.key}'")
        return CacheWriteOutcome(stored=True)
