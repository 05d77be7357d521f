"""Utility helpers."""

from editor_history.utils.diff import compute_diff
from editor_history.utils.markers import extract_checkpoint_id, format_checkpoint_marker

__all__ = ["compute_diff", "extract_checkpoint_id", "format_checkpoint_marker"]
