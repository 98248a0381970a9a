"""
Forms package for Materials Admin.

Contains form dialogs for adding and editing entities.
"""

from .material_form import MaterialFormDialog

__all__ = [
    "MaterialFormDialog",
]
