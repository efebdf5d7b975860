"""
Core data model for field structure documents.
One frozen dataclass per field type, plus the document that groups them with their defaults.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar


class FieldType(Enum):
    """Supported component field types."""

    TEXT = "text"
    TEXTAREA = "textarea"
    SELECT = "select"
    COLORPICKER = "colorpicker"
    SWITCH = "switch"
    FILE = "file"
    HTML = "html"

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]


def _freeze(mapping: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class FieldDefinition:
    """
    A single configurable input.

    `label` maps a language code to display text. `rules` is passed through to the
    host system's validation engine untouched.
    """

    field_type: ClassVar[FieldType]

    name: str
    label: Mapping[str, str]
    required: bool = False
    rules: str = ""

    def __post_init__(self):
        object.__setattr__(self, "label", _freeze(self.label))

    @property
    def type(self) -> str:
        return self.field_type.value

    @property
    def languages(self) -> tuple[str, ...]:
        """Language codes this field is labelled in, in declaration order."""
        return tuple(self.label)

    def label_for(self, language: str | None = None) -> str:
        """Return the label in `language`, falling back to the first declared language, then the name."""
        if language and language in self.label:
            return self.label[language]
        return next(iter(self.label.values()), self.name)


@dataclass(frozen=True)
class TextField(FieldDefinition):
    field_type: ClassVar[FieldType] = FieldType.TEXT


@dataclass(frozen=True)
class TextareaField(FieldDefinition):
    field_type: ClassVar[FieldType] = FieldType.TEXTAREA


@dataclass(frozen=True)
class ColorpickerField(FieldDefinition):
    field_type: ClassVar[FieldType] = FieldType.COLORPICKER


@dataclass(frozen=True)
class SwitchField(FieldDefinition):
    field_type: ClassVar[FieldType] = FieldType.SWITCH


@dataclass(frozen=True)
class HtmlField(FieldDefinition):
    field_type: ClassVar[FieldType] = FieldType.HTML


@dataclass(frozen=True)
class SelectOptions:
    """Parallel option arrays: `values[i]` is displayed as `labels[i]`."""

    values: tuple[Any, ...] = ()
    labels: tuple[str | Mapping[str, str], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(self.values))
        object.__setattr__(
            self,
            "labels",
            tuple(_freeze(label) if isinstance(label, Mapping) else label for label in self.labels),
        )

    @property
    def aligned(self) -> bool:
        return len(self.values) == len(self.labels)

    def pairs(self) -> list[tuple[Any, str | Mapping[str, str] | None]]:
        """Zip values with labels; a value without a label is paired with None."""
        return [
            (value, self.labels[index] if index < len(self.labels) else None) for index, value in enumerate(self.values)
        ]


@dataclass(frozen=True)
class SelectField(FieldDefinition):
    field_type: ClassVar[FieldType] = FieldType.SELECT

    options: SelectOptions = field(default_factory=SelectOptions)


@dataclass(frozen=True)
class FileField(FieldDefinition):
    field_type: ClassVar[FieldType] = FieldType.FILE

    # Comma separated MIME types or extensions, e.g. "image/*,.pdf"
    accept: str | None = None
    # Maximum upload size in kilobytes
    size: int | None = None

    @property
    def accepted_types(self) -> list[str]:
        if not self.accept:
            return []
        return [item.strip() for item in self.accept.split(",") if item.strip()]


FIELD_CLASSES: dict[FieldType, type[FieldDefinition]] = {
    FieldType.TEXT: TextField,
    FieldType.TEXTAREA: TextareaField,
    FieldType.SELECT: SelectField,
    FieldType.COLORPICKER: ColorpickerField,
    FieldType.SWITCH: SwitchField,
    FieldType.FILE: FileField,
    FieldType.HTML: HtmlField,
}


@dataclass(frozen=True)
class FieldStructureDocument:
    """Ordered field definitions plus the default value for each field."""

    fields: tuple[FieldDefinition, ...]
    default_data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))
        object.__setattr__(self, "default_data", _freeze(self.default_data))

    def __iter__(self) -> Iterator[FieldDefinition]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def names(self) -> list[str]:
        return [field_def.name for field_def in self.fields]

    @property
    def languages(self) -> list[str]:
        """Every language code used by any field label, in order of first appearance."""
        seen: list[str] = []
        for field_def in self.fields:
            for language in field_def.languages:
                if language not in seen:
                    seen.append(language)
        return seen

    def get_field(self, name: str) -> FieldDefinition | None:
        """Get the first field with this name."""
        for field_def in self.fields:
            if field_def.name == name:
                return field_def
        return None
