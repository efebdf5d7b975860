"""
Configuration management for FieldKit.

Handles loading and parsing configuration from INI files; command line arguments
override file values.

Configuration file priority:
1. FIELDKIT_CONFIG environment variable path
2. XDG config directory: ~/.config/fieldkit/fieldkit.ini
3. Home directory: ~/.fieldkit.ini
4. Current directory: ./fieldkit.ini
"""

import logging
import os
from configparser import ConfigParser
from configparser import Error as ConfigParserError
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from .console import err_console
from .settings.core import SettingType
from .settings.definitions import FIELDKIT_SETTINGS, SECTION_NAMES
from .settings.validation import SettingsValidator
from .shared.errors import ConfigError, FileIOError

logger = logging.getLogger(__name__)

TRUE_STRINGS = ("true", "1", "yes", "on")


def _format_default(setting) -> str:
    if setting.setting_type == SettingType.BOOLEAN:
        return "true" if setting.default else "false"
    if setting.setting_type == SettingType.LIST:
        return ",".join(setting.default or [])
    return str(setting.default) if setting.default is not None else ""


def generate_config_template() -> str:
    """Generate the configuration file template from the settings definitions."""
    lines = [
        "# FieldKit Configuration File",
        "# Default validation policy and output options",
        "# Command line arguments will override these settings",
        "",
    ]

    for section_name in SECTION_NAMES:
        section = getattr(FIELDKIT_SETTINGS, section_name)
        lines.append(f"[{section_name}]")

        for name, setting in section.settings.items():
            if setting.ini_comment:
                lines.append(f"# {setting.ini_comment}")
            lines.append(f"{name} = {_format_default(setting)}")
            lines.append("")

        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


class Config:
    """Configuration manager for FieldKit."""

    def __init__(self):
        self.config = ConfigParser()
        self.config_path: Path | None = None
        self.validator = SettingsValidator(FIELDKIT_SETTINGS)
        self.config.read_string(generate_config_template())

    def get_config_paths(self) -> list[Path]:
        """Return configuration file paths in priority order."""
        paths = []

        env_config = os.environ.get("FIELDKIT_CONFIG")
        if env_config:
            paths.append(Path(env_config))

        paths.append(self.get_default_config_path())
        paths.append(Path.home() / ".fieldkit.ini")
        paths.append(Path("./fieldkit.ini"))

        return paths

    def get_default_config_path(self) -> Path:
        """Get the default configuration file path (XDG config directory)."""
        return Path(user_config_dir("fieldkit", "fieldkit")) / "fieldkit.ini"

    def find_config_file(self) -> Path | None:
        """Find the first existing configuration file."""
        for path in self.get_config_paths():
            if path.is_file():
                return path
        return None

    def load_config(self, verbose: bool = False) -> bool:
        """
        Load configuration from file.

        Returns:
            bool: True if config file was found and loaded, False otherwise.
        """
        config_path = self.find_config_file()
        if not config_path:
            if verbose:
                err_console.print("[dim]No configuration file found, using defaults[/dim]")
            return False

        try:
            with open(config_path, encoding="utf-8") as f:
                self.config.read_file(f)
        except (ConfigParserError, UnicodeDecodeError, OSError) as e:
            raise ConfigError(f"Error reading configuration file {config_path}: {e}", {"path": str(config_path)}) from e

        self.config_path = config_path
        logger.debug("Loaded configuration from %s", config_path)
        if verbose:
            err_console.print(f"[dim]Loaded configuration from: {config_path}[/dim]")
        return True

    def validate_config(self) -> list[str]:
        """
        Validate configuration values.

        Returns:
            List[str]: List of validation errors, empty if valid.
        """
        return [str(error) for error in self.validator.validate_config(self.to_dict())]

    def create_default_config(self, path: Path | None = None) -> Path:
        """
        Create a default configuration file.

        Args:
            path: Path to create config file. If None, uses default location.

        Returns:
            Path: The path where the config file was created.
        """
        if path is None:
            path = self.get_default_config_path()

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(generate_config_template(), encoding="utf-8")
        except OSError as e:
            raise FileIOError("write", str(path), {"reason": str(e)}) from e

        return path

    def get_field_value(self, section_name: str, name: str) -> Any:
        """Get a configuration value converted to the setting's type."""
        section = getattr(FIELDKIT_SETTINGS, section_name, None)
        setting = section.get(name) if section else None
        if not setting:
            raise ValueError(f"Unknown setting: {section_name}.{name}")

        raw_value = self.config.get(section_name, name, fallback="")

        if setting.setting_type == SettingType.BOOLEAN:
            if not raw_value:
                return setting.default
            return raw_value.lower() in TRUE_STRINGS
        if setting.setting_type == SettingType.LIST:
            if not raw_value:
                return list(setting.default or [])
            return [item.strip() for item in raw_value.split(",") if item.strip()]
        return raw_value if raw_value else setting.default

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Convert configuration to dictionary format."""
        return {section_name: dict(self.config[section_name]) for section_name in self.config.sections()}


def load_config(verbose: bool = False) -> Config:
    """
    Load configuration from file system.

    Args:
        verbose: Enable verbose output

    Returns:
        Config: Loaded configuration object

    Raises:
        ConfigError: If configuration file is malformed or holds invalid values
    """
    config = Config()
    config.load_config(verbose=verbose)

    errors = config.validate_config()
    if errors:
        raise ConfigError(
            "Configuration validation failed:\n" + "\n".join(f"  - {error}" for error in errors),
            {"errors": errors},
        )

    return config
