"""Checkpoint-based undo/redo history for a code editor."""

__version__ = "0.1.0"
