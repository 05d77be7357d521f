"""Checkpoint storage."""

from editor_history.store.checkpoint_store import CheckpointStore

__all__ = ["CheckpointStore"]
