"""In-memory checkpoint store with a movable cursor."""

import logging

from editor_history.exceptions import (
    AtBeginningError,
    AtEndError,
    HistoryEmptyError,
    NotFoundError,
    ValidationError,
)
from editor_history.models.checkpoint import Checkpoint

logger = logging.getLogger(__name__)


class CheckpointStore:
    """Ordered checkpoints plus the index of the current one.

    Insertion order is chronological order. The cursor is ``None`` while the
    store is empty and a valid index otherwise. The store is not thread-safe;
    callers serialize access.
    """

    DEFAULT_MAX_CHECKPOINTS = 50

    def __init__(self, max_checkpoints: int = DEFAULT_MAX_CHECKPOINTS) -> None:
        """Initialize checkpoint store.

        Args:
            max_checkpoints: Capacity; the oldest checkpoints are evicted first
        """
        if max_checkpoints < 1:
            raise ValidationError("max_checkpoints must be at least 1")
        self.max_checkpoints = max_checkpoints
        self._checkpoints: list[Checkpoint] = []
        self._cursor: int | None = None

    @property
    def cursor(self) -> int | None:
        return self._cursor

    def __len__(self) -> int:
        return len(self._checkpoints)

    def checkpoints(self) -> list[Checkpoint]:
        """Return a copy of the ordered checkpoints."""
        return list(self._checkpoints)

    def append(self, checkpoint: Checkpoint) -> Checkpoint:
        """Discard everything after the cursor, then add ``checkpoint`` at the end.

        Checkpoints after the cursor are lost permanently. When the capacity is
        exceeded the oldest checkpoints are evicted from the front.

        Args:
            checkpoint: Checkpoint to append

        Returns:
            The appended checkpoint, now current
        """
        if self._cursor is not None and self._cursor < len(self._checkpoints) - 1:
            discarded = len(self._checkpoints) - self._cursor - 1
            del self._checkpoints[self._cursor + 1 :]
            logger.debug("Discarded %d redo checkpoint(s)", discarded)

        self._checkpoints.append(checkpoint)

        overflow = len(self._checkpoints) - self.max_checkpoints
        if overflow > 0:
            del self._checkpoints[:overflow]
            logger.debug("Evicted %d oldest checkpoint(s)", overflow)

        self._cursor = len(self._checkpoints) - 1
        return checkpoint

    def move_cursor(self, delta: int) -> Checkpoint:
        """Move the cursor by ``delta``, clamped to the valid range.

        Args:
            delta: Signed number of positions to move

        Returns:
            The checkpoint at the new cursor

        Raises:
            ValidationError: If delta is zero
            AtBeginningError: If no backward movement is possible
            AtEndError: If no forward movement is possible
        """
        if delta == 0:
            raise ValidationError("delta must be non-zero")

        if self._cursor is None:
            if delta < 0:
                raise AtBeginningError("History is empty")
            raise AtEndError("History is empty")

        target = max(0, min(self._cursor + delta, len(self._checkpoints) - 1))
        if target == self._cursor:
            if delta < 0:
                raise AtBeginningError("Already at the earliest checkpoint")
            raise AtEndError("Already at the latest checkpoint")

        self._cursor = target
        return self._checkpoints[target]

    def jump_to(self, checkpoint_id: str) -> Checkpoint:
        """Point the cursor at ``checkpoint_id`` without truncating anything.

        Raises:
            NotFoundError: If the id is not in the store
        """
        index = self._index_of(checkpoint_id)
        self._cursor = index
        return self._checkpoints[index]

    def current(self) -> Checkpoint:
        """Return the checkpoint under the cursor.

        Raises:
            HistoryEmptyError: If nothing has been recorded yet
        """
        if self._cursor is None:
            raise HistoryEmptyError("History is empty")
        return self._checkpoints[self._cursor]

    def get(self, checkpoint_id: str) -> Checkpoint:
        """Return the checkpoint with ``checkpoint_id``.

        Raises:
            NotFoundError: If the id is not in the store
        """
        return self._checkpoints[self._index_of(checkpoint_id)]

    def can_move_back(self) -> bool:
        return self._cursor is not None and self._cursor > 0

    def can_move_forward(self) -> bool:
        return self._cursor is not None and self._cursor < len(self._checkpoints) - 1

    def clear(self) -> None:
        """Drop every checkpoint."""
        self._checkpoints.clear()
        self._cursor = None

    def _index_of(self, checkpoint_id: str) -> int:
        for index, checkpoint in enumerate(self._checkpoints):
            if checkpoint.id == checkpoint_id:
                return index
        raise NotFoundError(f"Checkpoint not found: {checkpoint_id}")

    def __repr__(self) -> str:
        return f"CheckpointStore(checkpoints={len(self._checkpoints)}, cursor={self._cursor})"
