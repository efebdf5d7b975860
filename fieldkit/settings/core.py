"""
Core infrastructure for FieldKit settings.
Each setting carries the metadata needed to validate it, expose it on the command line
and document it in the generated INI template.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SettingType(Enum):
    """Supported setting value types."""

    STRING = "string"
    BOOLEAN = "boolean"
    LIST = "list"


@dataclass
class Setting:
    """Metadata for a single configuration setting."""

    name: str
    setting_type: SettingType
    default: Any
    section: str
    description: str
    cli_help: str

    # Validation
    valid_values: list[str] | None = None

    # CLI Integration
    cli_short: str | None = None
    cli_long: str | None = None

    # INI file generation
    example_values: list[str] | None = None
    ini_comment: str | None = None

    def __post_init__(self):
        """Generate derived fields after initialization."""
        if self.cli_long is None:
            self.cli_long = f"--{self.name.replace('_', '-')}"

        if self.ini_comment is None:
            comment_parts = []
            if self.description:
                comment_parts.append(self.description)
            if self.valid_values:
                comment_parts.append(f"Options: {', '.join(self.valid_values)}")
            if self.example_values:
                comment_parts.append(f"Examples: {', '.join(self.example_values)}")
            self.ini_comment = " | ".join(comment_parts)


@dataclass
class SettingSection:
    """A named group of settings, one INI section."""

    name: str
    description: str
    settings: dict[str, Setting] = field(default_factory=dict)

    def get(self, name: str) -> Setting | None:
        return self.settings.get(name)

    def add(self, setting: Setting) -> None:
        setting.section = self.name
        self.settings[setting.name] = setting
