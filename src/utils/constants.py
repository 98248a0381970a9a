"""
Constants for the Materials Admin application.

This module defines all system-wide constants including:
- Application metadata
- API defaults and endpoint paths
- UI constants (colors, sizes, padding)
"""

from typing import List, Tuple

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME = "Materials Admin"
APP_VERSION = "0.1.0"

# ============================================================================
# API Defaults
# ============================================================================

DEFAULT_API_BASE_URL = "http://localhost:5000/api"
DEVELOPMENT_API_BASE_URL = "http://127.0.0.1:5000/api"

MATERIALS_ENDPOINT = "/materials"

# Response envelope keys
MATERIALS_KEY = "materials"
MATERIAL_KEY = "material"

# Field path for the human-readable message in error bodies
SERVER_MESSAGE_KEY = "message"

# ============================================================================
# Localization
# ============================================================================

DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES: List[str] = ["en", "fa"]

# ============================================================================
# UI Constants
# ============================================================================

# Window sizing
DEFAULT_WINDOW_WIDTH = 1000
DEFAULT_WINDOW_HEIGHT = 700
MIN_WINDOW_WIDTH = 800
MIN_WINDOW_HEIGHT = 500

# Colors (CustomTkinter theme compatible)
COLOR_WARNING = "#FF9800"
COLOR_ERROR = "#F44336"

# Status badge colors: (light mode, dark mode)
BADGE_ACTIVE_COLORS: Tuple[str, str] = ("#DCFCE7", "#14532D")
BADGE_ACTIVE_TEXT: Tuple[str, str] = ("#166534", "#BBF7D0")
BADGE_INACTIVE_COLORS: Tuple[str, str] = ("#F1F5F9", "#334155")
BADGE_INACTIVE_TEXT: Tuple[str, str] = ("#1E293B", "#E2E8F0")

# Materials table column widths
MATERIAL_COLUMN_WIDTHS = {
    "index": 50,
    "name": 260,
    "alloys": 120,
    "status": 110,
    "actions": 160,
}

# Form field width
FORM_FIELD_WIDTH_LARGE = 360

# Padding
PADDING_MEDIUM = 10
PADDING_LARGE = 20
