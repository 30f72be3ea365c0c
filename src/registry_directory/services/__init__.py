"""
Business logic services for the registry directory.

Services orchestrate the API client, the cache and the query logic.
"""

from .fetcher import UpstreamFetcher, FetchResult
from .retrieval import RetrievalOrchestrator, RetrievalResult
from .query import QueryEngine, parse_page
from .directory import OrganizationDirectory

__all__ = [
    "UpstreamFetcher",
    "FetchResult",
    "RetrievalOrchestrator",
    "RetrievalResult",
    "QueryEngine",
    "parse_page",
    "OrganizationDirectory",
]
