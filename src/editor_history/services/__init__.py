"""Service layer for business logic."""

from editor_history.services.history_service import HistoryService

__all__ = ["HistoryService"]
