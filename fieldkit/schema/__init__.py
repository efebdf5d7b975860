"""
FieldKit document schema package.
Typed field definitions, JSON loading and consistency validation.
"""

from .core import (
    ColorpickerField,
    FieldDefinition,
    FieldStructureDocument,
    FieldType,
    FileField,
    HtmlField,
    SelectField,
    SelectOptions,
    SwitchField,
    TextareaField,
    TextField,
)
from .loader import check_data, load_document, loads_document, parse_document
from .validation import SchemaValidator, ValidationPolicy, ValidationResult, Violation, ViolationKind, validate

__all__ = [
    "ColorpickerField",
    "FieldDefinition",
    "FieldStructureDocument",
    "FieldType",
    "FileField",
    "HtmlField",
    "SchemaValidator",
    "SelectField",
    "SelectOptions",
    "SwitchField",
    "TextField",
    "TextareaField",
    "ValidationPolicy",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "check_data",
    "load_document",
    "loads_document",
    "parse_document",
    "validate",
]
