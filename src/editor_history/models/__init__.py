"""Data models for editor-history."""

from editor_history.models.checkpoint import (
    ChangeType,
    Checkpoint,
    CheckpointDiff,
    Diagnostic,
    DiagnosticSeverity,
    HistorySnapshot,
)

__all__ = [
    "Checkpoint",
    "CheckpointDiff",
    "HistorySnapshot",
    "Diagnostic",
    "DiagnosticSeverity",
    "ChangeType",
]
