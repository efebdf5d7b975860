"""
Validation of field structure documents.
Collects every violation in a single pass instead of stopping at the first one.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .core import FieldStructureDocument, SelectField

logger = logging.getLogger(__name__)


class ViolationKind(Enum):
    """Kinds of problems a document can have."""

    # Cross-field consistency
    DUPLICATE_NAME = "DuplicateName"
    MISSING_DEFAULT_DATA = "MissingDefaultData"
    ORPHAN_DEFAULT_DATA = "OrphanDefaultData"
    OPTIONS_LENGTH_MISMATCH = "OptionsLengthMismatch"
    MISSING_REQUIRED_LABEL = "MissingRequiredLabel"
    EMPTY_LABEL = "EmptyLabel"
    DUPLICATE_OPTION_VALUE = "DuplicateOptionValue"
    DEFAULT_NOT_IN_OPTIONS = "DefaultNotInOptions"

    # Document shape, reported by the loader
    INVALID_DOCUMENT = "InvalidDocument"
    MISSING_PROPERTY = "MissingProperty"
    UNKNOWN_FIELD_TYPE = "UnknownFieldType"
    INVALID_PROPERTY = "InvalidProperty"


@dataclass(frozen=True)
class Violation:
    """A single problem found in a document."""

    kind: ViolationKind
    message: str
    field_name: str | None = None
    path: str = ""

    def __str__(self) -> str:
        location = f"[{self.path}] " if self.path else ""
        return f"{location}{self.kind.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "field": self.field_name,
            "path": self.path,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one document. Empty `violations` means success."""

    violations: tuple[Violation, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.violations

    def __bool__(self) -> bool:
        return self.ok

    def of_kind(self, kind: ViolationKind) -> list[Violation]:
        return [violation for violation in self.violations if violation.kind == kind]

    def to_dict(self) -> dict[str, Any]:
        return {"ok": self.ok, "violations": [violation.to_dict() for violation in self.violations]}


@dataclass(frozen=True)
class ValidationPolicy:
    """
    Switches for checks that are conventions rather than hard invariants.

    check_label_languages: every field must be labelled in every language used anywhere in the document.
    required_languages: languages every field must be labelled in, even if no field uses them.
    check_option_defaults: a select field's non-empty default must be one of its option values.
    """

    check_label_languages: bool = True
    required_languages: tuple[str, ...] = ()
    check_option_defaults: bool = True

    @classmethod
    def from_config(cls, config) -> "ValidationPolicy":
        """Build a policy from the [validation] section of a loaded Config."""
        return cls(
            check_label_languages=config.get_field_value("validation", "check_label_languages"),
            required_languages=tuple(config.get_field_value("validation", "required_languages")),
            check_option_defaults=config.get_field_value("validation", "check_option_defaults"),
        )


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def _same_value(a: Any, b: Any) -> bool:
    # JSON true/false are distinct from 1/0
    return type(a) is type(b) and a == b


class SchemaValidator:
    """Checks a FieldStructureDocument for structural and cross-referential consistency."""

    def __init__(self, policy: ValidationPolicy | None = None):
        self.policy = policy or ValidationPolicy()

    def validate(self, document: FieldStructureDocument) -> ValidationResult:
        """Validate a document and return every violation found."""
        violations: list[Violation] = []
        violations.extend(self._check_fields(document))
        violations.extend(self._check_default_data(document))
        if self.policy.check_label_languages or self.policy.required_languages:
            violations.extend(self._check_label_languages(document))

        logger.debug("Validated %d field(s): %d violation(s)", len(document.fields), len(violations))
        return ValidationResult(tuple(violations))

    def _check_fields(self, document: FieldStructureDocument) -> list[Violation]:
        violations = []
        seen: set[str] = set()
        reported: set[str] = set()

        for index, field_def in enumerate(document.fields):
            path = f"fields[{index}]"

            if field_def.name in seen and field_def.name not in reported:
                violations.append(
                    Violation(
                        ViolationKind.DUPLICATE_NAME,
                        f"Field name '{field_def.name}' is used more than once",
                        field_def.name,
                        f"{path}.name",
                    )
                )
                reported.add(field_def.name)
            seen.add(field_def.name)

            if not field_def.label:
                violations.append(
                    Violation(
                        ViolationKind.EMPTY_LABEL,
                        f"Field '{field_def.name}' has no label in any language",
                        field_def.name,
                        f"{path}.label",
                    )
                )

            if isinstance(field_def, SelectField):
                violations.extend(self._check_select(field_def, document.default_data, path))

        return violations

    def _check_select(self, field_def: SelectField, default_data: Mapping[str, Any], path: str) -> list[Violation]:
        violations = []
        options = field_def.options

        if not options.aligned:
            violations.append(
                Violation(
                    ViolationKind.OPTIONS_LENGTH_MISMATCH,
                    f"Select '{field_def.name}' has {len(options.values)} value(s) "
                    f"but {len(options.labels)} label(s)",
                    field_def.name,
                    f"{path}.options",
                )
            )

        duplicates = []
        for index, value in enumerate(options.values):
            if any(_same_value(value, earlier) for earlier in options.values[:index]) and not any(
                _same_value(value, reported) for reported in duplicates
            ):
                duplicates.append(value)
        for value in duplicates:
            violations.append(
                Violation(
                    ViolationKind.DUPLICATE_OPTION_VALUE,
                    f"Select '{field_def.name}' lists option value {value!r} more than once",
                    field_def.name,
                    f"{path}.options.values",
                )
            )

        if self.policy.check_option_defaults and field_def.name in default_data:
            default = default_data[field_def.name]
            if not _is_empty(default) and not any(_same_value(default, value) for value in options.values):
                violations.append(
                    Violation(
                        ViolationKind.DEFAULT_NOT_IN_OPTIONS,
                        f"Default {default!r} for select '{field_def.name}' is not one of its option values",
                        field_def.name,
                        f"default_data.{field_def.name}",
                    )
                )

        return violations

    def _check_default_data(self, document: FieldStructureDocument) -> list[Violation]:
        violations = []
        names = document.names

        for name in dict.fromkeys(names):
            if name not in document.default_data:
                violations.append(
                    Violation(
                        ViolationKind.MISSING_DEFAULT_DATA,
                        f"No default_data entry for field '{name}'",
                        name,
                        "default_data",
                    )
                )

        for key in document.default_data:
            if key not in names:
                violations.append(
                    Violation(
                        ViolationKind.ORPHAN_DEFAULT_DATA,
                        f"default_data entry '{key}' does not match any field",
                        key,
                        f"default_data.{key}",
                    )
                )

        return violations

    def _check_label_languages(self, document: FieldStructureDocument) -> list[Violation]:
        expected = list(self.policy.required_languages)
        if self.policy.check_label_languages:
            expected.extend(language for language in document.languages if language not in expected)

        violations = []
        for index, field_def in enumerate(document.fields):
            # Empty labels are already reported as EmptyLabel
            if not field_def.label:
                continue
            for language in expected:
                if language not in field_def.label:
                    violations.append(
                        Violation(
                            ViolationKind.MISSING_REQUIRED_LABEL,
                            f"Field '{field_def.name}' has no '{language}' label",
                            field_def.name,
                            f"fields[{index}].label",
                        )
                    )
        return violations


def validate(document: FieldStructureDocument, policy: ValidationPolicy | None = None) -> ValidationResult:
    """Validate `document` with the given policy (defaults when omitted)."""
    return SchemaValidator(policy).validate(document)
