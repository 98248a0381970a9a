"""
Dialog components for the Materials Admin UI.

This module contains modal dialog components for user interactions
that require focused input before returning to the main application.
"""

from src.ui.dialogs.delete_material_dialog import DeleteMaterialDialog

__all__ = ["DeleteMaterialDialog"]
