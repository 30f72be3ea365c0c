"""
Page result data models.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .organization import Organization


@dataclass
class PageResult:
    """One page of a filtered dataset plus pagination metadata."""

    organizations: List[Organization] = field(default_factory=list)
    current_page: int = 1
    total_pages: int = 0
    total_items: int = 0
    search_term: str = ""

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def to_dict(self) -> Dict[str, Any]:
        return {
            "organizations": [org.to_dict() for org in self.organizations],
            "current_page": self.current_page,
            "total_pages": self.total_pages,
            "total_items": self.total_items,
            "search_term": self.search_term,
        }
