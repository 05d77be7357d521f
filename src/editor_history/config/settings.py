"""Application settings management using Pydantic Settings."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings.

    All settings can be configured via environment variables with the
    prefix `EDITOR_HISTORY_`. For example, `EDITOR_HISTORY_MAX_CHECKPOINTS`.
    """

    # History
    max_checkpoints: int = Field(
        default=50,
        ge=1,
        le=10_000,
        description="Maximum checkpoints kept; the oldest are evicted first",
    )
    initial_code: str = Field(
        default="",
        description="Document content recorded by the seeding checkpoint",
    )
    initial_description: str = Field(
        default="Initial state",
        min_length=1,
        description="Label of the seeding checkpoint",
    )

    # Diff
    diff_context_lines: int = Field(
        default=3,
        ge=0,
        le=100,
        description="Unchanged lines shown around each diff hunk",
    )
    diff_max_lines: int = Field(
        default=2000,
        ge=3,
        description="Maximum lines kept in a diff body (headers included)",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_prefix="EDITOR_HISTORY_", env_file=".env", env_file_encoding="utf-8"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Accept any case and reject unknown level names."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

