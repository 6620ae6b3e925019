"""Error codes and exceptions raised by the roster ledger.

Ledger functions raise these; ``roster.main`` turns them into JSON responses
of the form ``{"error": {"code": ..., "message": ...}}``.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Ledger error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    DUPLICATE_NO_OP = "DUPLICATE_NO_OP"
    STORAGE_ERROR = "STORAGE_ERROR"


@dataclass(frozen=True, eq=False)
class RosterError(Exception):
    """Base ledger error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(RosterError):
    """Raised when a required field is missing or a foreign key does not resolve."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_ERROR, message=message)


class NotFound(RosterError):
    """Raised when a lookup by id yields no active record."""

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message=f"{entity} not found",
        )
        self.entity_id = entity_id


class DuplicateNoOp(RosterError):
    """Signals that an identical attendance already exists. Not a failure."""

    def __init__(self, attendance_id: int) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_NO_OP,
            message="Attendance already recorded",
        )
        self.attendance_id = attendance_id


class StorageError(RosterError):
    """Raised when the persistence call itself failed."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.STORAGE_ERROR,
            message=f"Storage failure during {operation}",
        )
