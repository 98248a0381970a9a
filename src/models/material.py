"""
Material model mirroring the server-owned material record.

A material is a named, toggle-able classification that alloy records
reference. The server assigns ``id`` and computes ``alloys_count``; the
client only ever edits ``name`` and ``is_active``.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping


def _to_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _to_count(value: Any) -> int:
    if value is None or value == "":
        return 0
    count = int(value)
    return count if count > 0 else 0


@dataclass
class Material:
    """
    Material as returned by the materials API.

    Attributes:
        id: Opaque server-assigned identifier, immutable
        name: Display name
        is_active: Active/inactive flag
        alloys_count: Number of alloys referencing this material (read-only)
    """

    id: Any
    name: str
    is_active: bool = True
    alloys_count: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Material":
        """
        Build a Material from an API payload.

        Unknown keys are ignored; a missing or null alloys_count becomes 0.

        Args:
            data: Mapping decoded from JSON

        Returns:
            Material instance

        Raises:
            ValueError: If the payload has no id or the alloy count is not numeric
        """
        if "id" not in data or data["id"] is None:
            raise ValueError("material payload has no id")

        try:
            alloys_count = _to_count(data.get("alloys_count"))
        except (TypeError, ValueError) as e:
            raise ValueError(f"invalid alloys_count: {data.get('alloys_count')!r}") from e

        name = data.get("name")
        return cls(
            id=data["id"],
            name="" if name is None else str(name),
            is_active=_to_bool(data.get("is_active"), True),
            alloys_count=alloys_count,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the API representation."""
        return {
            "id": self.id,
            "name": self.name,
            "is_active": self.is_active,
            "alloys_count": self.alloys_count,
        }

    def copy(self) -> "Material":
        """Return an owned copy so edits never touch the displayed row."""
        return replace(self)


@dataclass
class MaterialDraft:
    """Unsaved material used while the create dialog is open."""

    name: str = ""
    is_active: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the create-request body."""
        return {"name": self.name, "is_active": self.is_active}
