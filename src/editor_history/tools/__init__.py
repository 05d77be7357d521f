"""MCP tool definitions."""

from datetime import datetime, timezone
from typing import Any

from editor_history.exceptions import (
    AtBeginningError,
    AtEndError,
    HistoryEmptyError,
    HistoryError,
    NotFoundError,
    ValidationError,
)

__all__ = ["create_error_response", "history_error_response"]

# Error names as the editor surface knows them
ERROR_TYPES: dict[type[HistoryError], str] = {
    AtBeginningError: "AtBeginning",
    AtEndError: "AtEnd",
    NotFoundError: "NotFound",
    HistoryEmptyError: "HistoryEmpty",
    ValidationError: "ValidationError",
}


def create_error_response(
    message: str,
    error_type: str,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Create standardized error response for MCP tools.

    Args:
        message: User-friendly error message
        error_type: Failure reason (e.g., AtBeginning, NotFound)
        details: Optional additional details

    Returns:
        Structured error response dictionary
    """
    response = {
        "error": True,
        "message": message,
        "error_type": error_type,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if details:
        response["details"] = details
    return response


def history_error_response(
    error: HistoryError,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Convert an engine exception into an error response.

    The most specific known class in the exception's MRO names the failure;
    anything else is reported as ``HistoryError``.
    """
    error_type = next(
        (ERROR_TYPES[cls] for cls in type(error).__mro__ if cls in ERROR_TYPES),
        "HistoryError",
    )
    return create_error_response(message=str(error), error_type=error_type, details=details)
