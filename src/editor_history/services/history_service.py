"""Service for editor undo/redo history."""

import logging
import threading
from collections.abc import Iterable

from editor_history.config import get_settings
from editor_history.config.settings import Settings
from editor_history.exceptions import ValidationError
from editor_history.models.checkpoint import (
    ChangeType,
    Checkpoint,
    CheckpointDiff,
    Diagnostic,
    HistorySnapshot,
)
from editor_history.store.checkpoint_store import CheckpointStore
from editor_history.utils.diff import compute_diff

logger = logging.getLogger(__name__)


class HistoryService:
    """Checkpoint-based undo/redo for the active document.

    Every public method holds the service lock for its whole duration, so
    concurrent callers never observe a half-applied change. Creating a new
    checkpoint discards any redo future; restoring by id does not.
    """

    def __init__(
        self,
        store: CheckpointStore | None = None,
        settings: Settings | None = None,
        initial_code: str | None = None,
    ) -> None:
        """Initialize history service.

        Args:
            store: Checkpoint store owned by this service; it keeps its own
                capacity. Built from ``settings.max_checkpoints`` when omitted.
            settings: Application settings (process settings when omitted)
            initial_code: When given, seed the history with this content
        """
        self.settings = settings or get_settings()
        if store is None:
            store = CheckpointStore(max_checkpoints=self.settings.max_checkpoints)
        self.store = store
        self._lock = threading.Lock()

        if initial_code is not None:
            self.seed(initial_code)

    def create_checkpoint(
        self,
        code: str,
        diagnostics: Iterable[Diagnostic] | None = None,
        description: str = "",
        change_type: ChangeType = ChangeType.USER,
    ) -> Checkpoint:
        """Record a new checkpoint and make it current.

        Args:
            code: Full document text
            diagnostics: Diagnostics at this point (copied)
            description: Human-readable label
            change_type: What produced this change

        Returns:
            The new checkpoint
        """
        checkpoint = Checkpoint(
            code=code,
            diagnostics=tuple(diagnostics or ()),
            description=description,
            change_type=change_type,
        )
        with self._lock:
            self.store.append(checkpoint)
            logger.debug(
                "Checkpoint created: id=%s type=%s position=%s/%d",
                checkpoint.id,
                checkpoint.change_type.value,
                self.store.cursor,
                len(self.store),
            )
        return checkpoint

    def seed(
        self,
        code: str,
        diagnostics: Iterable[Diagnostic] | None = None,
        description: str | None = None,
    ) -> Checkpoint:
        """Record the initial checkpoint of a freshly loaded document.

        Raises:
            ValidationError: If the history already has checkpoints
        """
        with self._lock:
            if len(self.store):
                raise ValidationError("History is already seeded")
            checkpoint = self._seed_locked(code, diagnostics, description)
        return checkpoint

    def reset(
        self,
        code: str,
        diagnostics: Iterable[Diagnostic] | None = None,
        description: str | None = None,
    ) -> Checkpoint:
        """Forget all checkpoints and seed again for a new document.

        Every previously issued id becomes unknown.

        Returns:
            The new seeding checkpoint
        """
        with self._lock:
            dropped = len(self.store)
            self.store.clear()
            checkpoint = self._seed_locked(code, diagnostics, description)
        logger.info("History reset, dropped %d checkpoint(s)", dropped)
        return checkpoint

    def undo(self) -> Checkpoint:
        """Step back to the previous checkpoint.

        Raises:
            AtBeginningError: If already at the earliest checkpoint
        """
        with self._lock:
            checkpoint = self.store.move_cursor(-1)
            logger.debug("Undo to %s (position %s)", checkpoint.id, self.store.cursor)
        return checkpoint

    def redo(self) -> Checkpoint:
        """Step forward to the next checkpoint.

        Raises:
            AtEndError: If already at the latest checkpoint
        """
        with self._lock:
            checkpoint = self.store.move_cursor(1)
            logger.debug("Redo to %s (position %s)", checkpoint.id, self.store.cursor)
        return checkpoint

    def can_undo(self) -> bool:
        with self._lock:
            return self.store.can_move_back()

    def can_redo(self) -> bool:
        with self._lock:
            return self.store.can_move_forward()

    def restore_to_checkpoint(self, checkpoint_id: str) -> Checkpoint:
        """Make ``checkpoint_id`` current, keeping later checkpoints reachable.

        This is a cursor move, not an edit: nothing is recorded and nothing is
        discarded.

        Raises:
            NotFoundError: If the checkpoint does not exist
        """
        with self._lock:
            checkpoint = self.store.jump_to(checkpoint_id)
            logger.debug("Restored to %s (position %s)", checkpoint.id, self.store.cursor)
        return checkpoint

    def current(self) -> Checkpoint:
        """Return the current checkpoint.

        Raises:
            HistoryEmptyError: If the history has not been seeded
        """
        with self._lock:
            return self.store.current()

    def get_history(self) -> HistorySnapshot:
        """Return every checkpoint in order plus the cursor position."""
        with self._lock:
            return HistorySnapshot(
                checkpoints=self.store.checkpoints(),
                current_index=self.store.cursor,
                can_undo=self.store.can_move_back(),
                can_redo=self.store.can_move_forward(),
            )

    def get_checkpoint_by_id(self, checkpoint_id: str) -> Checkpoint:
        """Look up a checkpoint.

        Raises:
            NotFoundError: If the checkpoint does not exist
        """
        with self._lock:
            return self.store.get(checkpoint_id)

    def get_checkpoint_diff(self, from_id: str, to_id: str) -> CheckpointDiff:
        """Diff the code of two checkpoints, ``from_id`` being the baseline.

        Raises:
            NotFoundError: If either checkpoint does not exist
        """
        with self._lock:
            source = self.store.get(from_id)
            target = self.store.get(to_id)

        # Checkpoints are immutable, so the diff runs outside the lock
        return compute_diff(
            source.id,
            source.code,
            target.id,
            target.code,
            context_lines=self.settings.diff_context_lines,
            max_lines=self.settings.diff_max_lines,
        )

    def _seed_locked(
        self,
        code: str,
        diagnostics: Iterable[Diagnostic] | None,
        description: str | None,
    ) -> Checkpoint:
        checkpoint = Checkpoint(
            code=code,
            diagnostics=tuple(diagnostics or ()),
            description=description or self.settings.initial_description,
            change_type=ChangeType.FILE_LOAD,
        )
        self.store.append(checkpoint)
        logger.info("History seeded with checkpoint %s", checkpoint.id)
        return checkpoint
