"""
Organization directory service.

The single read operation offered to presentation layers.
"""

import logging
from typing import Optional, TYPE_CHECKING

from ..models import PageResult
from .query import QueryEngine

if TYPE_CHECKING:
    from .retrieval import RetrievalOrchestrator


class OrganizationDirectory:
    """Searchable, paginated view over the cached registry."""

    def __init__(
        self,
        retrieval: "RetrievalOrchestrator",
        query: Optional[QueryEngine] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize organization directory.

        Args:
            retrieval: Orchestrator producing the dataset for each read
            query: Query engine (created with the default page size if not given)
            logger: Logger instance
        """
        self.retrieval = retrieval
        self.logger = logger or logging.getLogger(__name__)
        self.query = query or QueryEngine(logger=self.logger)

    def get_page(self, search_term: Optional[str] = "", page: int = 1) -> PageResult:
        """
        Return one page of organizations matching the search term.

        Args:
            search_term: Case-insensitive substring to look for; empty matches all
            page: 1-based page number

        Returns:
            Page result

        Raises:
            UpstreamUnavailable: If the dataset had to be fetched and the registry failed
        """
        result = self.retrieval.retrieve()
        if not result.ok:
            raise result.error

        page_result = self.query.get_page(result.dataset, search_term, page)
        self.logger.info(
            f"Rendering page {page_result.current_page} of {page_result.total_pages} "
            f"with search query \"{page_result.search_term}\""
        )
        return page_result
