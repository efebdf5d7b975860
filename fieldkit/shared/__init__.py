"""Shared types and errors for FieldKit."""

from .errors import (
    ConfigError,
    DocumentNotFoundError,
    DocumentParseError,
    DocumentStructureError,
    FieldKitError,
    FileIOError,
)
from .types import ErrorCode, ErrorResponse

__all__ = [
    "ConfigError",
    "DocumentNotFoundError",
    "DocumentParseError",
    "DocumentStructureError",
    "ErrorCode",
    "ErrorResponse",
    "FieldKitError",
    "FileIOError",
]
