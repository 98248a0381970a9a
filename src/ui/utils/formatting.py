"""Display formatting for material rows.

Kept free of widget imports so table cell text can be tested headless.
"""

from typing import List, Optional

from src.models.material import Material
from src.utils.strings import get_string


def format_alloys(material: Material, language: Optional[str] = None) -> str:
    """Alloy count cell text, e.g. "3 alloys"."""
    return get_string("alloys_count", language, count=material.alloys_count or 0)


def format_status(material: Material, language: Optional[str] = None) -> str:
    """Status badge text."""
    key = "status_active" if material.is_active else "status_inactive"
    return get_string(key, language)


def material_row_values(
    index: int, material: Material, language: Optional[str] = None
) -> List[str]:
    """
    Cell values for one table row.

    Args:
        index: Zero-based position in the displayed (filtered) list
        material: Material for the row
        language: Optional language override

    Returns:
        [row number, name, alloy count]
    """
    return [
        str(index + 1),
        material.name,
        format_alloys(material, language),
    ]
