"""Editor checkpoint models."""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DiagnosticSeverity(str, Enum):
    """Diagnostic severity classification."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ChangeType(str, Enum):
    """What kind of action produced a checkpoint."""

    USER = "user"
    AI = "ai"
    FILE_LOAD = "fileload"
    UNDO = "undo"
    REDO = "redo"


class Diagnostic(BaseModel):
    """Compiler diagnostic captured alongside the code."""

    model_config = ConfigDict(frozen=True)

    severity: DiagnosticSeverity
    line: int | None = None
    col: int | None = None
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the command boundary, omitting absent positions."""
        return self.model_dump(mode="json", exclude_none=True)


class Checkpoint(BaseModel):
    """Immutable snapshot of the document at one point in history."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    code: str
    diagnostics: tuple[Diagnostic, ...] = ()
    description: str
    change_type: ChangeType

    @property
    def timestamp_ms(self) -> int:
        """Creation time as integer epoch milliseconds."""
        return int(self.timestamp.timestamp() * 1000)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the command boundary."""
        return {
            "id": self.id,
            "timestamp": self.timestamp_ms,
            "code": self.code,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "description": self.description,
            "change_type": self.change_type.value,
        }


class CheckpointDiff(BaseModel):
    """Line diff between the code of two checkpoints."""

    from_id: str
    to_id: str
    diff: str = ""  # unified diff format
    added_lines: int = Field(default=0, ge=0)
    removed_lines: int = Field(default=0, ge=0)
    content_changed: bool = False
    truncated: bool = False


class HistorySnapshot(BaseModel):
    """Read-only view of the whole history for a timeline display."""

    checkpoints: list[Checkpoint] = Field(default_factory=list)
    current_index: int | None = None
    can_undo: bool = False
    can_redo: bool = False

    @property
    def current(self) -> Checkpoint | None:
        """Checkpoint under the cursor, if any."""
        if self.current_index is None:
            return None
        return self.checkpoints[self.current_index]
