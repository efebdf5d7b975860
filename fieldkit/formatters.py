"""Rich display formatters for FieldKit CLI."""

import json
from typing import Any

from rich.markup import escape
from rich.table import Table

from .schema.core import FieldStructureDocument, FileField, SelectField
from .schema.rules import format_rules
from .schema.validation import ValidationResult


def format_violation_table(source: str, result: ValidationResult) -> Table:
    """
    Format the violations of one document as a Rich table.

    Args:
        source: Path or name of the validated document
        result: Validation result for that document

    Returns:
        Rich Table object
    """
    table = Table(
        title=f"{escape(source)}: {len(result.violations)} problem(s)",
        show_header=True,
        header_style="bold magenta",
    )

    table.add_column("Kind", style="red", no_wrap=True)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Location", style="dim")
    table.add_column("Message", style="white")

    for violation in result.violations:
        table.add_row(
            violation.kind.value,
            escape(violation.field_name or ""),
            escape(violation.path),
            escape(violation.message),
        )

    return table


def _describe_default(value: Any) -> str:
    if value is None:
        return "[dim]null[/dim]"
    if value == "":
        return '[dim]""[/dim]'
    return escape(json.dumps(value, ensure_ascii=False))


def _describe_extra(field_def) -> str:
    if isinstance(field_def, SelectField):
        return ", ".join(str(value) for value in field_def.options.values)
    if isinstance(field_def, FileField):
        parts = []
        if field_def.accept:
            parts.append(f"accept: {field_def.accept}")
        if field_def.size:
            parts.append(f"max {field_def.size} KB")
        return "; ".join(parts)
    return ""


def format_field_table(document: FieldStructureDocument, language: str | None = None) -> Table:
    """
    Format the fields of a document as a Rich table.

    Args:
        document: Loaded field structure document
        language: Preferred label language

    Returns:
        Rich Table object
    """
    table = Table(title="Fields", show_header=True, header_style="bold magenta")

    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Type", style="yellow")
    table.add_column("Label", style="white")
    table.add_column("Required", style="green")
    table.add_column("Rules", style="blue")
    table.add_column("Options", style="dim")
    table.add_column("Default")

    for field_def in document.fields:
        table.add_row(
            escape(field_def.name),
            field_def.type,
            escape(field_def.label_for(language)),
            "yes" if field_def.required else "no",
            escape(format_rules(field_def.rules)),
            escape(_describe_extra(field_def)),
            _describe_default(document.default_data.get(field_def.name)),
        )

    return table


def result_to_dict(source: str, result: ValidationResult) -> dict[str, Any]:
    """Convert a validation result to a JSON-ready dict."""
    return {"path": source, **result.to_dict()}
