"""
Error taxonomy for the registry directory.

Only UpstreamUnavailable (and its subclass) is ever raised to callers of
the directory; cache errors are absorbed by the retrieval layer.
"""

from typing import Any, Optional


class DirectoryError(Exception):
    """Base class for all registry directory errors."""


class MalformedRecord(DirectoryError):
    """A raw registry record does not have the required shape."""

    def __init__(self, message: str, record: Optional[Any] = None):
        super().__init__(message)
        self.record = record


class UpstreamUnavailable(DirectoryError):
    """The registry could not be reached or answered with an error status."""


class UpstreamMalformedResponse(UpstreamUnavailable):
    """The registry answered, but the body could not be turned into records."""


class CacheError(DirectoryError):
    """Base class for cache backend failures."""


class CacheUnavailable(CacheError):
    """The cache backend could not be reached or timed out."""


class CacheWriteRejected(CacheError):
    """The cache backend refused a write because it is out of capacity."""
