"""
Organization data models.

Contains the DTO for a single registry organization and its cached form.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional


def to_str_or_none(value: Any) -> Optional[str]:
    """Coerce a scalar registry value to a string, keeping None."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass
class Organization:
    """Organization record from the state property registry."""

    bin: Optional[str] = None
    name_parts: List[str] = field(default_factory=list)
    organizational_form: Optional[str] = None
    ownership_level0: Optional[str] = None
    ownership_level1: Optional[str] = None
    ownership_level2: Optional[str] = None
    economic_activity_code: Optional[str] = None
    state_involvement: Optional[str] = None
    status: Optional[str] = None
    owner_bin: Optional[str] = None
    government_agency_bin: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Innermost unit of the hierarchical name."""
        return self.name_parts[-1] if self.name_parts else ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Organization":
        """
        Build an organization from its serialized dictionary.

        Unknown keys are ignored. Scalar values are coerced to strings so
        cached records have the same shape as freshly normalized ones.

        Raises:
            ValueError: If data is not a serialized organization
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        if not isinstance(data.get("name_parts"), list):
            raise ValueError("serialized organization has no 'name_parts' list")

        known = {
            name: to_str_or_none(data.get(name))
            for name in cls.__dataclass_fields__
            if name != "name_parts"
        }
        known["name_parts"] = [to_str_or_none(part) or "" for part in data["name_parts"]]
        return cls(**known)
