"""Checkpoint markers embedded in AI tool output."""

import re

CHECKPOINT_MARKER_PATTERN = re.compile(r"\[CHECKPOINT:([\w-]+)\]")


def format_checkpoint_marker(checkpoint_id: str) -> str:
    """Format the marker an AI edit appends to its tool result."""
    return f"[CHECKPOINT:{checkpoint_id}]"


def extract_checkpoint_id(text: str | None) -> str | None:
    """Return the first checkpoint ID found in ``text``, if any.

    Args:
        text: Tool output that may carry a marker

    Returns:
        The checkpoint ID, or None when no marker is present
    """
    if not text:
        return None
    match = CHECKPOINT_MARKER_PATTERN.search(text)
    return match.group(1) if match else None
