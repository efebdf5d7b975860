"""FieldKit error handling."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .types import ErrorCode, ErrorResponse

if TYPE_CHECKING:
    from ..schema.validation import Violation


class FieldKitError(Exception):
    """Base exception for FieldKit errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
        recoverable: bool = True,
        recovery_hint: str | None = None,
    ) -> None:
        """Initialize error."""
        super().__init__(message)
        self.code = code.value
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def to_response(self) -> ErrorResponse:
        """Convert to ErrorResponse for serialization."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details,
            recoverable=self.recoverable,
            recovery_hint=self.recovery_hint,
        )


class DocumentNotFoundError(FieldKitError):
    """Field structure document does not exist."""

    def __init__(self, path: str) -> None:
        """Initialize error."""
        super().__init__(
            code=ErrorCode.DOCUMENT_NOT_FOUND,
            message=f"Document '{path}' not found",
            details={"path": path},
            recoverable=False,
            recovery_hint="Check the path to the field structure file",
        )


class DocumentParseError(FieldKitError):
    """Document is not valid JSON."""

    def __init__(self, source: str, reason: str, line: int | None = None, column: int | None = None) -> None:
        """Initialize error."""
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(
            code=ErrorCode.DOCUMENT_PARSE_ERROR,
            message=f"Invalid JSON in {source}{location}: {reason}",
            details={"source": source, "reason": reason, "line": line, "column": column},
            recoverable=False,
            recovery_hint="Fix the JSON syntax and try again",
        )


class DocumentStructureError(FieldKitError):
    """Document decoded, but its shape does not match a field structure document."""

    def __init__(self, source: str, violations: list[Violation]) -> None:
        """Initialize error."""
        super().__init__(
            code=ErrorCode.DOCUMENT_STRUCTURE_ERROR,
            message=f"{source} is not a valid field structure document ({len(violations)} problem(s))",
            details={"source": source, "violations": [violation.to_dict() for violation in violations]},
            recoverable=False,
            recovery_hint="Every field needs 'type', 'name' and 'label'; the document needs 'default_data'",
        )
        self.violations = list(violations)


class FileIOError(FieldKitError):
    """File I/O operation failed."""

    def __init__(self, operation: str, path: str, details: dict[str, Any] | None = None) -> None:
        """Initialize error."""
        super().__init__(
            code=ErrorCode.FILE_IO_ERROR,
            message=f"File {operation} failed: {path}",
            details=details,
            recoverable=True,
            recovery_hint="Check file permissions and disk space",
        )


class ConfigError(FieldKitError):
    """Configuration error."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize error."""
        super().__init__(
            code=ErrorCode.CONFIG_ERROR,
            message=f"Configuration error: {message}",
            details=details,
            recoverable=True,
            recovery_hint="Check configuration file syntax and values",
        )
