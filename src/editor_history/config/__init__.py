"""Configuration module for editor-history."""

from editor_history.config.settings import Settings

# Settings of the running editor instance, loaded on first use
_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process settings, reading EDITOR_HISTORY_* on first call."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Replace the process settings (tests, embedding applications)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Forget the process settings so the next access reloads them."""
    global _settings
    _settings = None


__all__ = ["Settings", "get_settings", "set_settings", "reset_settings"]
