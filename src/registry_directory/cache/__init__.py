"""
Cache layer for the registry directory.
"""

from .store import CacheStore, CacheWriteOutcome

__all__ = [
    "CacheStore",
    "CacheWriteOutcome",
]
