"""Custom exceptions for editor-history."""


class HistoryError(Exception):
    """Base class for editor history errors."""

    pass


class NotFoundError(HistoryError):
    """Raised when a checkpoint id is not in the history."""

    pass


class OutOfRangeError(HistoryError):
    """Raised when the cursor cannot move in the requested direction."""

    pass


class AtBeginningError(OutOfRangeError):
    """Raised on undo when there is no earlier checkpoint."""

    pass


class AtEndError(OutOfRangeError):
    """Raised on redo when there is no later checkpoint."""

    pass


class HistoryEmptyError(HistoryError):
    """Raised when the current checkpoint is requested before seeding."""

    pass


class ValidationError(HistoryError):
    """Raised when validation fails."""

    pass
