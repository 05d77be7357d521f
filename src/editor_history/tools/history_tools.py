"""Editor history MCP tools."""

import logging
import threading
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from editor_history.events import (
    CHECKPOINT_CREATED,
    HISTORY_RESET,
    HISTORY_RESTORE,
    EventBus,
)
from editor_history.exceptions import (
    AtBeginningError,
    AtEndError,
    NotFoundError,
    ValidationError,
)
from editor_history.models.checkpoint import ChangeType, Checkpoint, Diagnostic
from editor_history.services.history_service import HistoryService
from editor_history.tools import history_error_response
from editor_history.utils.markers import format_checkpoint_marker

logger = logging.getLogger(__name__)

# Held across a state change and its UI event so handlers see events in the
# order the changes were applied. Reentrant so a handler may call back in.
_event_order_lock = threading.RLock()


def _parse_diagnostics(diagnostics: list[dict[str, Any]] | None) -> list[Diagnostic]:
    try:
        return [Diagnostic.model_validate(d) for d in diagnostics or []]
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid diagnostic: {e.errors()[0]['msg']}") from e


def _parse_change_type(change_type: str) -> ChangeType:
    try:
        return ChangeType(change_type.lower())
    except ValueError as e:
        allowed = ", ".join(t.value for t in ChangeType)
        raise ValidationError(
            f"Invalid change_type: {change_type!r} (expected one of: {allowed})"
        ) from e


def _notify_restore(events: EventBus | None, checkpoint: Checkpoint) -> None:
    if events is None:
        return
    events.emit(
        HISTORY_RESTORE,
        code=checkpoint.code,
        diagnostics=[d.to_dict() for d in checkpoint.diagnostics],
        checkpoint=checkpoint,
    )


def create_checkpoint(
    service: HistoryService,
    code: str,
    diagnostics: list[dict[str, Any]] | None = None,
    description: str = "",
    change_type: str = "user",
    events: EventBus | None = None,
) -> dict[str, Any]:
    """Record a checkpoint of the current document.

    Args:
        service: History service instance
        code: Full document text
        diagnostics: Diagnostics as {severity, line?, col?, message} dicts
        description: Human-readable label
        change_type: Provenance (user/ai/fileload/undo/redo)
        events: Optional UI event bus to notify

    Returns:
        The new checkpoint and its marker for AI tool output
    """
    try:
        parsed = _parse_diagnostics(diagnostics)
        parsed_type = _parse_change_type(change_type)
    except ValidationError as e:
        logger.warning("Checkpoint rejected: %s", e)
        return history_error_response(e)

    with _event_order_lock:
        checkpoint = service.create_checkpoint(
            code=code,
            diagnostics=parsed,
            description=description,
            change_type=parsed_type,
        )
        if events is not None:
            events.emit(CHECKPOINT_CREATED, checkpoint=checkpoint)

    return {
        "checkpoint": checkpoint.to_dict(),
        "marker": format_checkpoint_marker(checkpoint.id),
    }


def undo(service: HistoryService, events: EventBus | None = None) -> dict[str, Any]:
    """Step back to the previous checkpoint.

    Args:
        service: History service instance
        events: Optional UI event bus to notify

    Returns:
        The checkpoint that is now current
    """
    with _event_order_lock:
        try:
            checkpoint = service.undo()
        except AtBeginningError as e:
            return history_error_response(e)
        _notify_restore(events, checkpoint)

    return {"checkpoint": checkpoint.to_dict()}


def redo(service: HistoryService, events: EventBus | None = None) -> dict[str, Any]:
    """Step forward to the next checkpoint.

    Args:
        service: History service instance
        events: Optional UI event bus to notify

    Returns:
        The checkpoint that is now current
    """
    with _event_order_lock:
        try:
            checkpoint = service.redo()
        except AtEndError as e:
            return history_error_response(e)
        _notify_restore(events, checkpoint)

    return {"checkpoint": checkpoint.to_dict()}


def can_undo(service: HistoryService) -> dict[str, Any]:
    """Report whether undo is possible."""
    return {"can_undo": service.can_undo()}


def can_redo(service: HistoryService) -> dict[str, Any]:
    """Report whether redo is possible."""
    return {"can_redo": service.can_redo()}


def restore_to_checkpoint(
    service: HistoryService,
    checkpoint_id: str,
    events: EventBus | None = None,
) -> dict[str, Any]:
    """Make an earlier or later checkpoint current without losing history.

    Args:
        service: History service instance
        checkpoint_id: Checkpoint to restore
        events: Optional UI event bus to notify

    Returns:
        The restored checkpoint
    """
    with _event_order_lock:
        try:
            checkpoint = service.restore_to_checkpoint(checkpoint_id)
        except NotFoundError as e:
            return history_error_response(
                e,
                details={"checkpoint_id": checkpoint_id},
            )
        _notify_restore(events, checkpoint)

    return {"checkpoint": checkpoint.to_dict()}


def get_history(service: HistoryService) -> dict[str, Any]:
    """List every checkpoint in order with the cursor position.

    Args:
        service: History service instance

    Returns:
        Checkpoints, current index and undo/redo availability
    """
    snapshot = service.get_history()
    return {
        "checkpoints": [c.to_dict() for c in snapshot.checkpoints],
        "current_index": snapshot.current_index,
        "can_undo": snapshot.can_undo,
        "can_redo": snapshot.can_redo,
    }


def get_checkpoint_by_id(service: HistoryService, checkpoint_id: str) -> dict[str, Any]:
    """Look up a single checkpoint.

    Args:
        service: History service instance
        checkpoint_id: Checkpoint ID

    Returns:
        The checkpoint, or a NotFound error
    """
    try:
        checkpoint = service.get_checkpoint_by_id(checkpoint_id)
    except NotFoundError as e:
        return history_error_response(
            e,
            details={"checkpoint_id": checkpoint_id},
        )
    return {"checkpoint": checkpoint.to_dict()}


def get_checkpoint_diff(
    service: HistoryService,
    from_id: str,
    to_id: str,
) -> dict[str, Any]:
    """Show the line diff between two checkpoints.

    Args:
        service: History service instance
        from_id: Baseline checkpoint ID
        to_id: Target checkpoint ID

    Returns:
        Unified diff text with added/removed line counts
    """
    try:
        diff = service.get_checkpoint_diff(from_id, to_id)
    except NotFoundError as e:
        return history_error_response(
            e,
            details={"from_id": from_id, "to_id": to_id},
        )
    return diff.model_dump()


def reset_history(
    service: HistoryService,
    code: str,
    diagnostics: list[dict[str, Any]] | None = None,
    description: str | None = None,
    events: EventBus | None = None,
) -> dict[str, Any]:
    """Start a fresh history for a newly opened document.

    Args:
        service: History service instance
        code: Content of the new document
        diagnostics: Diagnostics of the new document
        description: Label of the seeding checkpoint
        events: Optional UI event bus to notify

    Returns:
        The seeding checkpoint
    """
    try:
        parsed = _parse_diagnostics(diagnostics)
    except ValidationError as e:
        logger.warning("Reset rejected: %s", e)
        return history_error_response(e)

    with _event_order_lock:
        checkpoint = service.reset(code=code, diagnostics=parsed, description=description)
        if events is not None:
            events.emit(HISTORY_RESET, checkpoint=checkpoint)

    return {"checkpoint": checkpoint.to_dict()}
