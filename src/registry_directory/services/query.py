"""
Query service.

Filters the dataset by a search term and cuts out one page of results.
"""

import logging
import math
from typing import Any, List, Optional

from ..core import constants
from ..models import Organization, PageResult


# Attributes searched in addition to every name part
SEARCH_FIELDS = (
    "bin",
    "organizational_form",
    "ownership_level0",
    "ownership_level1",
    "ownership_level2",
    "economic_activity_code",
    "state_involvement",
    "status",
    "owner_bin",
    "government_agency_bin",
)


def parse_page(value: Any, default: int = 1) -> int:
    """
    Turn caller input into a page number.

    Missing or non-numeric input gives the default; the result is never
    below 1.

    Args:
        value: Raw page value (int, numeric string or None)
        default: Page used when value is not a number

    Returns:
        Page number, 1-based
    """
    try:
        page = int(value)
    except (TypeError, ValueError):
        page = default
    return max(page, 1)


def _lower(value: Any) -> str:
    return str(value).lower() if value is not None else ""


class QueryEngine:
    """Search and paginate organizations."""

    def __init__(
        self,
        page_size: int = constants.PAGE_SIZE,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize query engine.

        Args:
            page_size: Maximum number of organizations per page
            logger: Logger instance
        """
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.page_size = page_size
        self.logger = logger or logging.getLogger(__name__)

    def matches(self, organization: Organization, term: str) -> bool:
        """
        Check whether an organization matches a lowercase search term.

        Args:
            organization: Organization to test
            term: Already lowercased search term

        Returns:
            True if the term is a substring of any searched attribute or name part
        """
        if not term:
            return True
        for attr in SEARCH_FIELDS:
            if term in _lower(getattr(organization, attr)):
                return True
        return any(term in _lower(part) for part in organization.name_parts)

    def filter(self, dataset: List[Organization], search_term: Optional[str]) -> List[Organization]:
        """
        Filter organizations by a case-insensitive search term.

        Args:
            dataset: Full dataset
            search_term: Term to look for; empty matches everything

        Returns:
            Matching organizations in dataset order
        """
        term = (search_term or "").lower()
        if not term:
            return list(dataset)
        return [org for org in dataset if self.matches(org, term)]

    def paginate(self, organizations: List[Organization], page: int) -> PageResult:
        """
        Cut one page out of a filtered list.

        Args:
            organizations: Filtered organizations
            page: 1-based page number, clamped to at least 1

        Returns:
            Page result; empty when page is past the last page
        """
        page = max(page, 1)
        start = (page - 1) * self.page_size
        end = start + self.page_size

        return PageResult(
            organizations=organizations[start:end],
            current_page=page,
            total_pages=math.ceil(len(organizations) / self.page_size),
            total_items=len(organizations),
        )

    def get_page(
        self,
        dataset: List[Organization],
        search_term: Optional[str] = "",
        page: int = 1
    ) -> PageResult:
        """
        Filter the dataset and return the requested page.

        Args:
            dataset: Full dataset
            search_term: Term to look for; empty matches everything
            page: 1-based page number

        Returns:
            Page result with pagination metadata
        """
        filtered = self.filter(dataset, search_term)
        result = self.paginate(filtered, page)
        result.search_term = search_term or ""
        return result
