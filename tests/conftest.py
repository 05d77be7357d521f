"""Pytest configuration and fixtures for editor-history tests."""

from collections.abc import Iterator
from typing import Any

import pytest

from editor_history.config import reset_settings
from editor_history.config.settings import Settings
from editor_history.events import EventBus
from editor_history.services.history_service import HistoryService
from editor_history.store.checkpoint_store import CheckpointStore


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch) -> Iterator[None]:
    """Keep the environment and the settings singleton out of each test."""
    for name in [
        "EDITOR_HISTORY_MAX_CHECKPOINTS",
        "EDITOR_HISTORY_INITIAL_CODE",
        "EDITOR_HISTORY_INITIAL_DESCRIPTION",
        "EDITOR_HISTORY_DIFF_CONTEXT_LINES",
        "EDITOR_HISTORY_DIFF_MAX_LINES",
        "EDITOR_HISTORY_LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def test_settings() -> Settings:
    """Test configuration settings."""
    return Settings(
        _env_file=None,
        max_checkpoints=50,
        initial_code="",
        initial_description="Initial state",
        diff_context_lines=3,
        diff_max_lines=2000,
        log_level="DEBUG",
    )


@pytest.fixture
def checkpoint_store() -> CheckpointStore:
    """Empty checkpoint store."""
    return CheckpointStore(max_checkpoints=50)


@pytest.fixture
def history_service(checkpoint_store: CheckpointStore, test_settings: Settings) -> HistoryService:
    """History service seeded with an empty document."""
    return HistoryService(checkpoint_store, test_settings, initial_code="")


@pytest.fixture
def empty_history_service(test_settings: Settings) -> HistoryService:
    """History service that has not been seeded yet."""
    return HistoryService(settings=test_settings)


@pytest.fixture
def event_bus() -> EventBus:
    """Event bus."""
    return EventBus()


@pytest.fixture
def recorded_events(event_bus: EventBus) -> list[tuple[str, dict[str, Any]]]:
    """Every history event emitted on ``event_bus``, in order."""
    recorded: list[tuple[str, dict[str, Any]]] = []
    for name in ["history:checkpoint_created", "history:restore", "history:reset"]:
        event_bus.on(name, lambda _name=name, **data: recorded.append((_name, data)))
    return recorded

