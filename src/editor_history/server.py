"""MCP server implementation for editor-history."""

from typing import Any

from mcp.server.fastmcp import FastMCP

from editor_history.config.settings import Settings
from editor_history.events import EventBus
from editor_history.services.history_service import HistoryService
from editor_history.tools import history_tools

# Initialize FastMCP server
mcp = FastMCP("editor-history")

# Service instances for this process (initialized in main)
history_service: HistoryService | None = None
event_bus: EventBus | None = None


def initialize_services(settings: Settings) -> None:
    """Initialize the history engine for the running editor instance.

    Args:
        settings: Application settings
    """
    global history_service, event_bus

    history_service = HistoryService(settings=settings, initial_code=settings.initial_code)
    event_bus = EventBus()


def shutdown_services() -> None:
    """Drop the history engine; history does not outlive the process."""
    global history_service, event_bus

    if event_bus:
        event_bus.clear()
    history_service = None
    event_bus = None


def _require_service() -> HistoryService:
    if not history_service:
        raise RuntimeError("Services not initialized")
    return history_service


@mcp.tool()
def create_checkpoint(
    code: str,
    diagnostics: list[dict] | None = None,
    description: str = "",
    change_type: str = "user",
) -> dict[str, Any]:
    """Record a checkpoint of the document; discards any redo history.

    Args:
        code: Full document text
        diagnostics: List of {severity: error|warning|info, line?, col?, message}
        description: Human-readable label (e.g. "AI edit")
        change_type: Provenance (user/ai/fileload/undo/redo)

    Returns:
        The new checkpoint and its [CHECKPOINT:id] marker
    """
    return history_tools.create_checkpoint(
        _require_service(), code, diagnostics, description, change_type, event_bus
    )


@mcp.tool()
def undo() -> dict[str, Any]:
    """Step back to the previous checkpoint.

    Returns:
        The checkpoint now current, or an AtBeginning error
    """
    return history_tools.undo(_require_service(), event_bus)


@mcp.tool()
def redo() -> dict[str, Any]:
    """Step forward to the next checkpoint.

    Returns:
        The checkpoint now current, or an AtEnd error
    """
    return history_tools.redo(_require_service(), event_bus)


@mcp.tool()
def can_undo() -> dict[str, Any]:
    """Check whether an earlier checkpoint exists."""
    return history_tools.can_undo(_require_service())


@mcp.tool()
def can_redo() -> dict[str, Any]:
    """Check whether a later checkpoint exists."""
    return history_tools.can_redo(_require_service())


@mcp.tool()
def get_history() -> dict[str, Any]:
    """List all checkpoints in chronological order with the current index."""
    return history_tools.get_history(_require_service())


@mcp.tool()
def restore_to_checkpoint(checkpoint_id: str) -> dict[str, Any]:
    """Jump to a checkpoint by ID without discarding later checkpoints.

    Args:
        checkpoint_id: Checkpoint to restore

    Returns:
        The restored checkpoint, or a NotFound error
    """
    return history_tools.restore_to_checkpoint(_require_service(), checkpoint_id, event_bus)


@mcp.tool()
def get_checkpoint_by_id(checkpoint_id: str) -> dict[str, Any]:
    """Get a checkpoint by ID.

    Args:
        checkpoint_id: Checkpoint ID to look up

    Returns:
        Checkpoint info, or a NotFound error
    """
    return history_tools.get_checkpoint_by_id(_require_service(), checkpoint_id)


@mcp.tool()
def get_checkpoint_diff(from_id: str, to_id: str) -> dict[str, Any]:
    """Diff the code of two checkpoints.

    Args:
        from_id: Baseline checkpoint ID
        to_id: Target checkpoint ID

    Returns:
        Unified diff with added_lines/removed_lines counts
    """
    return history_tools.get_checkpoint_diff(_require_service(), from_id, to_id)


@mcp.tool()
def reset_history(
    code: str,
    diagnostics: list[dict] | None = None,
    description: str | None = None,
) -> dict[str, Any]:
    """Start a new history for a newly opened document.

    Args:
        code: Content of the new document
        diagnostics: Diagnostics of the new document
        description: Label of the seeding checkpoint

    Returns:
        The seeding checkpoint
    """
    return history_tools.reset_history(
        _require_service(), code, diagnostics, description, event_bus
    )


def create_server() -> FastMCP:
    """Create and return MCP server instance.

    Returns:
        FastMCP server instance
    """
    return mcp
