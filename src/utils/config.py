"""
Configuration management for the Materials Admin application.

This module handles:
- REST API endpoint configuration
- Environment-specific configuration (development vs. production)
- Localization, logging and UI appearance settings

All settings can be overridden with MATERIALS_ADMIN_* environment variables.
"""

import logging
import os
from typing import Optional

from .constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_API_BASE_URL,
    DEFAULT_LANGUAGE,
    DEVELOPMENT_API_BASE_URL,
    SUPPORTED_LANGUAGES,
)

logger = logging.getLogger(__name__)

ENV_PREFIX = "MATERIALS_ADMIN_"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_APPEARANCES = ("system", "light", "dark")
VALID_THEMES = ("blue", "dark-blue", "green")


class Config:
    """
    Application configuration manager.

    Handles all configuration settings including the API endpoint,
    environment settings, and user-facing preferences.
    """

    def __init__(self, environment: str = "production"):
        """
        Initialize configuration.

        Args:
            environment: Environment mode - 'production' or 'development'
        """
        self.environment = environment
        self._app_name = APP_NAME
        self._app_version = APP_VERSION

    @staticmethod
    def _env(name: str) -> Optional[str]:
        """Read a MATERIALS_ADMIN_* environment variable, treating blanks as unset."""
        value = os.environ.get(f"{ENV_PREFIX}{name}")
        if value is None or not value.strip():
            return None
        return value.strip()

    def _choice(self, name: str, valid, default: str, normalize=str.lower) -> str:
        """Read an enumerated setting, falling back to default with a warning."""
        value = self._env(name)
        if value is None:
            return default
        value = normalize(value)
        if value not in valid:
            logger.warning(
                f"Invalid {ENV_PREFIX}{name}='{value}', using default '{default}'"
            )
            return default
        return value

    @property
    def app_name(self) -> str:
        """Application name."""
        return self._app_name

    @property
    def app_version(self) -> str:
        """Application version."""
        return self._app_version

    @property
    def api_base_url(self) -> str:
        """
        Base URL of the materials REST API.

        Returns:
            URL without a trailing slash
        """
        url = self._env("API_URL")
        if url is None:
            url = DEVELOPMENT_API_BASE_URL if self.is_development else DEFAULT_API_BASE_URL
        return url.rstrip("/")

    @property
    def api_timeout(self) -> Optional[float]:
        """
        Request timeout in seconds.

        Returns:
            Timeout in seconds, or None to wait indefinitely
        """
        value = self._env("API_TIMEOUT")
        if value is None:
            return None
        try:
            timeout = float(value)
        except ValueError:
            logger.warning(f"Invalid {ENV_PREFIX}API_TIMEOUT='{value}', requests will not time out")
            return None
        if timeout <= 0:
            logger.warning(f"Invalid {ENV_PREFIX}API_TIMEOUT='{value}', requests will not time out")
            return None
        return timeout

    @property
    def language(self) -> str:
        """UI language code for message catalogs."""
        return self._choice("LANGUAGE", SUPPORTED_LANGUAGES, DEFAULT_LANGUAGE)

    @property
    def log_level(self) -> str:
        """Root log level name."""
        default = "DEBUG" if self.is_development else "INFO"
        return self._choice("LOG_LEVEL", VALID_LOG_LEVELS, default, normalize=str.upper)

    @property
    def ui_appearance(self) -> str:
        """CustomTkinter appearance mode."""
        return self._choice("UI_APPEARANCE", VALID_APPEARANCES, "system")

    @property
    def ui_theme(self) -> str:
        """CustomTkinter color theme."""
        return self._choice("UI_THEME", VALID_THEMES, "blue")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(environment='{self.environment}', " f"api_base_url='{self.api_base_url}')"


# Global configuration instance
_config_instance: Optional[Config] = None


def get_config(environment: Optional[str] = None) -> Config:
    """
    Get the global configuration instance.

    Once created, the singleton's environment cannot be changed by passing
    a different environment argument.

    Args:
        environment: Optional environment for initial creation. If None, uses
                    MATERIALS_ADMIN_ENV or defaults to production. Ignored if
                    singleton already exists.

    Returns:
        Config instance
    """
    global _config_instance

    if _config_instance is None:
        if environment is None:
            environment = os.environ.get(f"{ENV_PREFIX}ENV", "production")
        _config_instance = Config(environment)
    elif environment is not None and environment != _config_instance.environment:
        logger.warning(
            f"get_config() called with environment='{environment}' but singleton "
            f"already exists with environment='{_config_instance.environment}'. "
            f"Returning existing singleton."
        )

    return _config_instance


def reset_config():
    """
    Reset the global configuration instance.

    Useful for testing.
    """
    global _config_instance
    _config_instance = None
