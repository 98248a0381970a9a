"""Utilities package for the materials-admin application."""

from .config import Config, get_config, reset_config
from .strings import get_string

__all__ = [
    "Config",
    "get_config",
    "reset_config",
    "get_string",
]
