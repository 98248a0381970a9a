"""Unit tests for Config class configuration properties.

Each property is tested for:
- Default values when no environment variables set
- Environment variable overrides
- Invalid value handling (fallback to defaults with warning)
"""

import logging
import pytest
from src.utils.config import Config, get_config, reset_config

ALL_VARS = (
    "MATERIALS_ADMIN_API_URL",
    "MATERIALS_ADMIN_API_TIMEOUT",
    "MATERIALS_ADMIN_LANGUAGE",
    "MATERIALS_ADMIN_LOG_LEVEL",
    "MATERIALS_ADMIN_UI_APPEARANCE",
    "MATERIALS_ADMIN_UI_THEME",
)


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for name in ALL_VARS:
        monkeypatch.delenv(name, raising=False)


class TestApiConfigProperties:
    """Tests for REST API configuration properties."""

    def test_api_base_url_default(self):
        """Production default points at the local API."""
        assert Config().api_base_url == "http://localhost:5000/api"

    def test_api_base_url_development_default(self):
        assert Config("development").api_base_url == "http://127.0.0.1:5000/api"

    def test_api_base_url_env_override(self, monkeypatch):
        """Trailing slashes are stripped from the override."""
        monkeypatch.setenv("MATERIALS_ADMIN_API_URL", "https://materials.example.com/api/")
        assert Config().api_base_url == "https://materials.example.com/api"

    def test_blank_api_url_ignored(self, monkeypatch):
        monkeypatch.setenv("MATERIALS_ADMIN_API_URL", "   ")
        assert Config().api_base_url == "http://localhost:5000/api"

    def test_api_timeout_default_none(self):
        """Requests do not time out unless configured."""
        assert Config().api_timeout is None

    def test_api_timeout_env_override(self, monkeypatch):
        monkeypatch.setenv("MATERIALS_ADMIN_API_TIMEOUT", "15")
        assert Config().api_timeout == 15.0

    def test_api_timeout_invalid_value(self, monkeypatch, caplog):
        """Non-numeric timeout falls back to None with warning."""
        monkeypatch.setenv("MATERIALS_ADMIN_API_TIMEOUT", "soon")
        with caplog.at_level(logging.WARNING):
            assert Config().api_timeout is None
        assert "Invalid MATERIALS_ADMIN_API_TIMEOUT" in caplog.text

    def test_api_timeout_non_positive(self, monkeypatch, caplog):
        monkeypatch.setenv("MATERIALS_ADMIN_API_TIMEOUT", "0")
        with caplog.at_level(logging.WARNING):
            assert Config().api_timeout is None
        assert "requests will not time out" in caplog.text


class TestLanguageConfig:
    """Tests for the UI language setting."""

    def test_language_default(self):
        assert Config().language == "en"

    def test_language_persian(self, monkeypatch):
        monkeypatch.setenv("MATERIALS_ADMIN_LANGUAGE", "FA")
        assert Config().language == "fa"

    def test_language_unsupported(self, monkeypatch, caplog):
        monkeypatch.setenv("MATERIALS_ADMIN_LANGUAGE", "de")
        with caplog.at_level(logging.WARNING):
            assert Config().language == "en"
        assert "Invalid MATERIALS_ADMIN_LANGUAGE='de'" in caplog.text


class TestLoggingConfig:
    """Tests for log level selection."""

    def test_log_level_production_default(self):
        assert Config().log_level == "INFO"

    def test_log_level_development_default(self):
        assert Config("development").log_level == "DEBUG"

    def test_log_level_override_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("MATERIALS_ADMIN_LOG_LEVEL", "warning")
        assert Config().log_level == "WARNING"

    def test_log_level_invalid(self, monkeypatch):
        monkeypatch.setenv("MATERIALS_ADMIN_LOG_LEVEL", "LOUD")
        assert Config().log_level == "INFO"


class TestUIConfigProperties:
    """Tests for UI configuration properties."""

    def test_ui_theme_default(self):
        assert Config().ui_theme == "blue"

    def test_ui_theme_env_override(self, monkeypatch):
        monkeypatch.setenv("MATERIALS_ADMIN_UI_THEME", "green")
        assert Config().ui_theme == "green"

    def test_ui_theme_invalid(self, monkeypatch, caplog):
        monkeypatch.setenv("MATERIALS_ADMIN_UI_THEME", "purple")
        with caplog.at_level(logging.WARNING):
            assert Config().ui_theme == "blue"
        assert "Invalid MATERIALS_ADMIN_UI_THEME" in caplog.text

    def test_ui_appearance_default(self):
        assert Config().ui_appearance == "system"

    def test_ui_appearance_env_override(self, monkeypatch):
        monkeypatch.setenv("MATERIALS_ADMIN_UI_APPEARANCE", "Dark")
        assert Config().ui_appearance == "dark"


class TestConfigSingleton:
    """Tests for get_config()/reset_config()."""

    def test_singleton_reused(self):
        assert get_config() is get_config()

    def test_environment_from_env_var(self, monkeypatch):
        monkeypatch.setenv("MATERIALS_ADMIN_ENV", "development")
        reset_config()
        config = get_config()
        assert config.is_development
        assert not config.is_production

    def test_environment_argument_ignored_after_creation(self, caplog):
        config = get_config("production")
        with caplog.at_level(logging.WARNING):
            assert get_config("development") is config
        assert config.is_production
        assert "singleton" in caplog.text

    def test_reset_creates_new_instance(self):
        first = get_config()
        reset_config()
        assert get_config() is not first
