"""
Record normalization module.

Converts raw registry records into Organization objects.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..core import constants
from ..errors import MalformedRecord
from ..models.organization import Organization, to_str_or_none


# Registry field name -> Organization attribute
FIELD_MAP: Dict[str, str] = {
    "flBin": "bin",
    "flOpf": "organizational_form",
    "flKfsL0": "ownership_level0",
    "flKfsL1": "ownership_level1",
    "flKfsL2": "ownership_level2",
    "flOkedL0": "economic_activity_code",
    "flStateInvolvement": "state_involvement",
    "flStatus": "status",
    "flOwnerBin": "owner_bin",
    "flOguBin": "government_agency_bin",
}

NAME_FIELD = "flNameRu"


def split_name_parts(name: str) -> List[str]:
    """
    Split a hierarchical registry name into its units.

    Empty segments are kept so positions still line up with the source
    hierarchy.

    Args:
        name: Backslash-delimited display name

    Returns:
        Trimmed name segments, outermost unit first
    """
    return [part.strip() for part in name.split(constants.NAME_DELIMITER)]


class RecordNormalizer:
    """Normalize raw registry records."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize record normalizer.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def normalize(self, raw: Dict[str, Any]) -> Organization:
        """
        Convert one raw registry record into an Organization.

        Args:
            raw: Record as decoded from the registry JSON

        Returns:
            Normalized organization

        Raises:
            MalformedRecord: If the record is not a mapping or has no usable name
        """
        if not isinstance(raw, dict):
            raise MalformedRecord(
                f"Registry record must be an object, got {type(raw).__name__}", raw
            )

        name = raw.get(NAME_FIELD)
        if name is None:
            raise MalformedRecord(f"Registry record is missing '{NAME_FIELD}'", raw)
        if not isinstance(name, str):
            raise MalformedRecord(
                f"Registry record '{NAME_FIELD}' must be a string, got {type(name).__name__}",
                raw
            )

        attributes = {
            attr: to_str_or_none(raw.get(source)) for source, attr in FIELD_MAP.items()
        }
        return Organization(name_parts=split_name_parts(name), **attributes)

    def normalize_all(self, raws: Iterable[Dict[str, Any]]) -> List[Organization]:
        """
        Normalize a whole registry response.

        The batch is all-or-nothing: the first malformed record aborts it.

        Args:
            raws: Raw registry records

        Returns:
            Organizations in upstream order

        Raises:
            MalformedRecord: If any record is malformed
        """
        organizations = []
        for index, raw in enumerate(raws):
            try:
                organizations.append(self.normalize(raw))
            except MalformedRecord as e:
                self.logger.error(f"Malformed registry record at index {index}: {e}")
                raise

        self.logger.debug(f"Normalized {len(organizations)} registry records")
        return organizations
