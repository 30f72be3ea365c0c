"""
Data processing module for the registry directory.

Provides normalization of raw registry records.
"""

from .normalizer import RecordNormalizer, split_name_parts

__all__ = [
    "RecordNormalizer",
    "split_name_parts",
]
