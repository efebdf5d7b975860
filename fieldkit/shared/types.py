"""Shared type definitions for FieldKit."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Error codes for structured error reporting."""

    DOCUMENT_NOT_FOUND = "DOCUMENT_NOT_FOUND"
    DOCUMENT_PARSE_ERROR = "DOCUMENT_PARSE_ERROR"
    DOCUMENT_STRUCTURE_ERROR = "DOCUMENT_STRUCTURE_ERROR"
    FILE_IO_ERROR = "FILE_IO_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"


@dataclass
class ErrorResponse:
    """Structured error payload for JSON output."""

    code: str  # ErrorCode enum value
    message: str
    details: dict[str, Any] | None = None
    recoverable: bool = True
    recovery_hint: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "recoverable": self.recoverable,
                "recovery_hint": self.recovery_hint,
            }
        }
