"""Line-based diff between two code snapshots."""

import difflib

from editor_history.models.checkpoint import CheckpointDiff


def split_lines(code: str) -> list[str]:
    """Split code on LF only; CR and Unicode line separators stay inside the line.

    An empty document has no lines. A trailing newline ends with an empty line.
    """
    if not code:
        return []
    return code.split("\n")


def compute_diff(
    from_id: str,
    from_code: str,
    to_id: str,
    to_code: str,
    *,
    context_lines: int = 3,
    max_lines: int = 2000,
) -> CheckpointDiff:
    """Compute a unified diff from ``from_code`` (baseline) to ``to_code``.

    Pure function: the result depends on the arguments only. Swapping the
    two sides swaps ``added_lines`` and ``removed_lines``.

    Args:
        from_id: Baseline checkpoint ID (used as the ``---`` header)
        from_code: Baseline code
        to_id: Target checkpoint ID (used as the ``+++`` header)
        to_code: Target code
        context_lines: Unchanged lines around each hunk
        max_lines: Maximum lines kept in the diff body

    Returns:
        CheckpointDiff with counts taken over the full, untruncated diff
    """
    diff_lines = list(
        difflib.unified_diff(
            split_lines(from_code),
            split_lines(to_code),
            fromfile=from_id,
            tofile=to_id,
            n=context_lines,
            lineterm="",
        )
    )

    # Counts cover hunk lines only, never the ---/+++ file headers
    hunk_lines = diff_lines[2:]
    added = sum(1 for line in hunk_lines if line.startswith("+"))
    removed = sum(1 for line in hunk_lines if line.startswith("-"))

    truncated = len(diff_lines) > max_lines
    body = "\n".join(diff_lines[:max_lines])
    if body:
        body += "\n"

    return CheckpointDiff(
        from_id=from_id,
        to_id=to_id,
        diff=body,
        added_lines=added,
        removed_lines=removed,
        content_changed=from_code != to_code,
        truncated=truncated,
    )
