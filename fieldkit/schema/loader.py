"""
Loading field structure documents from JSON.

Shape problems are collected for the whole document and raised together in one
DocumentStructureError, so an author sees every problem at once.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..shared.errors import DocumentNotFoundError, DocumentParseError, DocumentStructureError, FileIOError
from .core import FIELD_CLASSES, FieldDefinition, FieldStructureDocument, FieldType, SelectOptions
from .validation import SchemaValidator, ValidationPolicy, ValidationResult, Violation, ViolationKind

logger = logging.getLogger(__name__)

FIELD_KEYS = ("fields", "structure")


class _DocumentReader:
    """Walks decoded JSON, building field objects and recording shape violations."""

    def __init__(self):
        self.violations: list[Violation] = []

    def _problem(self, kind: ViolationKind, message: str, path: str, field_name: str | None = None) -> None:
        self.violations.append(Violation(kind, message, field_name, path))

    def read(self, data: Any) -> FieldStructureDocument | None:
        if not isinstance(data, Mapping):
            self._problem(
                ViolationKind.INVALID_DOCUMENT,
                f"Expected a JSON object at the top level, got {type(data).__name__}",
                "",
            )
            return None

        key = next((candidate for candidate in FIELD_KEYS if candidate in data), None)
        raw_fields: Any = []
        if key is None:
            self._problem(ViolationKind.MISSING_PROPERTY, "Document has no 'fields' array", "fields")
        else:
            raw_fields = data[key]
            if not isinstance(raw_fields, list):
                self._problem(
                    ViolationKind.INVALID_PROPERTY,
                    f"'{key}' must be an array, got {type(raw_fields).__name__}",
                    key,
                )
                raw_fields = []

        default_data = data.get("default_data")
        if default_data is None:
            self._problem(ViolationKind.MISSING_PROPERTY, "Document has no 'default_data' object", "default_data")
            default_data = {}
        elif not isinstance(default_data, Mapping):
            self._problem(
                ViolationKind.INVALID_PROPERTY,
                f"'default_data' must be an object, got {type(default_data).__name__}",
                "default_data",
            )
            default_data = {}

        fields = []
        for index, raw in enumerate(raw_fields):
            field_def = self._read_field(raw, f"{key}[{index}]")
            if field_def is not None:
                fields.append(field_def)

        if self.violations:
            return None
        return FieldStructureDocument(fields=tuple(fields), default_data=default_data)

    def _read_field(self, raw: Any, path: str) -> FieldDefinition | None:
        if not isinstance(raw, Mapping):
            self._problem(ViolationKind.INVALID_PROPERTY, f"Field must be an object, got {type(raw).__name__}", path)
            return None

        before = len(self.violations)
        name = raw.get("name")
        if name is None:
            self._problem(ViolationKind.MISSING_PROPERTY, "Field has no 'name'", f"{path}.name")
        elif not isinstance(name, str) or not name:
            self._problem(ViolationKind.INVALID_PROPERTY, "'name' must be a non-empty string", f"{path}.name")
            name = None

        field_type = None
        raw_type = raw.get("type")
        if raw_type is None:
            self._problem(ViolationKind.MISSING_PROPERTY, "Field has no 'type'", f"{path}.type", name)
        else:
            try:
                field_type = FieldType(raw_type)
            except ValueError:
                self._problem(
                    ViolationKind.UNKNOWN_FIELD_TYPE,
                    f"Unknown field type {raw_type!r}. Valid types: {', '.join(FieldType.names())}",
                    f"{path}.type",
                    name,
                )

        label = raw.get("label")
        if label is None:
            self._problem(ViolationKind.MISSING_PROPERTY, "Field has no 'label'", f"{path}.label", name)
        elif not self._is_label(label):
            self._problem(
                ViolationKind.INVALID_PROPERTY,
                "'label' must map language codes to strings",
                f"{path}.label",
                name,
            )

        required = raw.get("required", False)
        if not isinstance(required, bool):
            self._problem(ViolationKind.INVALID_PROPERTY, "'required' must be true or false", f"{path}.required", name)

        rules = raw.get("rules", "")
        if rules is None:
            rules = ""
        elif not isinstance(rules, str):
            self._problem(ViolationKind.INVALID_PROPERTY, "'rules' must be a string", f"{path}.rules", name)

        extra: dict[str, Any] = {}
        if field_type is FieldType.SELECT:
            extra["options"] = self._read_options(raw.get("options"), f"{path}.options", name)
        elif field_type is FieldType.FILE:
            extra.update(self._read_file_attributes(raw, path, name))

        if len(self.violations) > before:
            return None

        field_class = FIELD_CLASSES[field_type]
        return field_class(name=name, label=label, required=required, rules=rules, **extra)

    @staticmethod
    def _is_label(label: Any) -> bool:
        return isinstance(label, Mapping) and all(
            isinstance(language, str) and isinstance(text, str) for language, text in label.items()
        )

    def _read_options(self, raw: Any, path: str, name: str | None) -> SelectOptions | None:
        if raw is None:
            self._problem(ViolationKind.MISSING_PROPERTY, "Select field has no 'options'", path, name)
            return None
        if not isinstance(raw, Mapping):
            self._problem(ViolationKind.INVALID_PROPERTY, "'options' must be an object", path, name)
            return None

        arrays = {}
        for key in ("values", "labels"):
            value = raw.get(key)
            if value is None:
                self._problem(ViolationKind.MISSING_PROPERTY, f"Select options have no '{key}'", f"{path}.{key}", name)
            elif not isinstance(value, list):
                self._problem(ViolationKind.INVALID_PROPERTY, f"'{key}' must be an array", f"{path}.{key}", name)
            else:
                arrays[key] = value

        for index, label in enumerate(arrays.get("labels", [])):
            if not isinstance(label, str) and not self._is_label(label):
                self._problem(
                    ViolationKind.INVALID_PROPERTY,
                    "Option label must be a string or a map of language codes to strings",
                    f"{path}.labels[{index}]",
                    name,
                )

        if len(arrays) < 2:
            return None
        return SelectOptions(values=tuple(arrays["values"]), labels=tuple(arrays["labels"]))

    def _read_file_attributes(self, raw: Mapping[str, Any], path: str, name: str | None) -> dict[str, Any]:
        attributes: dict[str, Any] = {}

        accept = raw.get("accept")
        if accept is not None:
            if isinstance(accept, list) and all(isinstance(item, str) for item in accept):
                accept = ",".join(accept)
            if isinstance(accept, str):
                attributes["accept"] = accept
            else:
                self._problem(
                    ViolationKind.INVALID_PROPERTY,
                    "'accept' must be a string or an array of strings",
                    f"{path}.accept",
                    name,
                )

        size = raw.get("size")
        if size is not None:
            # bool is an int subclass
            if isinstance(size, int) and not isinstance(size, bool) and size > 0:
                attributes["size"] = size
            else:
                self._problem(ViolationKind.INVALID_PROPERTY, "'size' must be a positive integer", f"{path}.size", name)

        return attributes


def parse_document(data: Any, source: str = "<data>") -> FieldStructureDocument:
    """
    Build a FieldStructureDocument from already decoded JSON.

    Raises:
        DocumentStructureError: listing every shape problem in the document.
    """
    reader = _DocumentReader()
    document = reader.read(data)
    if document is None:
        logger.debug("%s: %d structural problem(s)", source, len(reader.violations))
        raise DocumentStructureError(source, reader.violations)
    logger.debug("%s: loaded %d field(s)", source, len(document.fields))
    return document


def loads_document(text: str, source: str = "<string>") -> FieldStructureDocument:
    """Parse a JSON string into a FieldStructureDocument."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentParseError(source, e.msg, e.lineno, e.colno) from e
    return parse_document(data, source)


def load_document(path: str | Path) -> FieldStructureDocument:
    """Read and parse a field structure JSON file."""
    path = Path(path)
    if not path.is_file():
        raise DocumentNotFoundError(str(path))
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileIOError("read", str(path), {"reason": str(e)}) from e
    return loads_document(text, str(path))


def check_data(data: Any, policy: ValidationPolicy | None = None, source: str = "<data>") -> ValidationResult:
    """
    Parse and validate decoded JSON in one step.

    Shape problems are returned as the result's violations instead of being raised.
    """
    try:
        document = parse_document(data, source)
    except DocumentStructureError as e:
        return ValidationResult(tuple(e.violations))
    return SchemaValidator(policy).validate(document)
