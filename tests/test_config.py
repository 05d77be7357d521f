"""Tests for configuration management."""

import pytest
from pydantic import ValidationError

from editor_history.config import get_settings, reset_settings, set_settings
from editor_history.config.settings import Settings


class TestSettings:
    """Test Settings class."""

    def test_default_settings(self):
        """Test default configuration values."""
        settings = Settings(_env_file=None)

        assert settings.max_checkpoints == 50
        assert settings.initial_code == ""
        assert settings.initial_description == "Initial state"
        assert settings.diff_context_lines == 3
        assert settings.diff_max_lines == 2000
        assert settings.log_level == "INFO"

    def test_custom_settings(self):
        """Test creating settings with custom values."""
        settings = Settings(
            _env_file=None,
            max_checkpoints=200,
            initial_code="cube(1);",
            diff_context_lines=0,
            log_level="debug",
        )

        assert settings.max_checkpoints == 200
        assert settings.initial_code == "cube(1);"
        assert settings.diff_context_lines == 0
        assert settings.log_level == "DEBUG"

    def test_env_variable_override(self, monkeypatch):
        """Test that environment variables override defaults."""
        monkeypatch.setenv("EDITOR_HISTORY_MAX_CHECKPOINTS", "10")
        monkeypatch.setenv("EDITOR_HISTORY_DIFF_MAX_LINES", "500")
        monkeypatch.setenv("EDITOR_HISTORY_LOG_LEVEL", "warning")

        settings = Settings(_env_file=None)

        assert settings.max_checkpoints == 10
        assert settings.diff_max_lines == 500
        assert settings.log_level == "WARNING"

    def test_env_prefix(self, monkeypatch):
        """Test that EDITOR_HISTORY_ prefix is required."""
        monkeypatch.setenv("MAX_CHECKPOINTS", "7")

        settings = Settings(_env_file=None)

        assert settings.max_checkpoints == 50

    @pytest.mark.parametrize(
        "overrides",
        [
            {"max_checkpoints": 0},
            {"max_checkpoints": 10_001},
            {"diff_context_lines": -1},
            {"diff_max_lines": 2},
            {"initial_description": ""},
            {"log_level": "LOUD"},
        ],
    )
    def test_invalid_values(self, overrides):
        """Test that out-of-range values raise validation errors."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **overrides)


class TestSettingsSingleton:
    """Test the module-level settings accessors."""

    def test_get_settings_cached(self):
        """Test that get_settings returns the same instance."""
        assert get_settings() is get_settings()

    def test_set_and_reset(self):
        """Test overriding and reloading the global settings."""
        custom = Settings(_env_file=None, max_checkpoints=5)

        set_settings(custom)
        assert get_settings() is custom

        reset_settings()
        assert get_settings() is not custom
