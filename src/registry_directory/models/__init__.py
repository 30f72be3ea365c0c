"""
Data models for the registry directory.

Contains DTOs for organizations and page results.
"""

from .organization import Organization
from .page import PageResult

__all__ = [
    "Organization",
    "PageResult",
]
