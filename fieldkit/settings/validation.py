"""
Validation of configuration values against the settings definitions.
"""

from typing import Any

from .core import Setting, SettingType
from .definitions import SECTION_NAMES, find_setting

BOOLEAN_STRINGS = ["true", "false", "1", "0", "yes", "no", "on", "off"]


class SettingError(Exception):
    """Invalid configuration value with context."""

    def __init__(self, setting_name: str, value: Any, message: str, section: str = ""):
        self.setting_name = setting_name
        self.value = value
        self.message = message
        self.section = section
        super().__init__(f"[{section}.{setting_name}] {message}")


class SettingsValidator:
    """Validates configuration values using the settings definitions."""

    def __init__(self, settings):
        self.settings = settings

    def validate_setting(self, setting: Setting, value: Any) -> list[SettingError]:
        """Validate a single value against its setting definition."""
        errors: list[SettingError] = []

        # Empty values fall back to the default
        if value is None or value == "":
            return errors

        type_valid, type_error = self._validate_type(setting, value)
        if not type_valid:
            errors.append(SettingError(setting.name, value, type_error, setting.section))
            return errors

        if setting.valid_values and str(value) not in setting.valid_values:
            errors.append(
                SettingError(
                    setting.name,
                    value,
                    f"Invalid value '{value}'. Valid options: {', '.join(setting.valid_values)}",
                    setting.section,
                )
            )

        return errors

    def _validate_type(self, setting: Setting, value: Any) -> tuple[bool, str]:
        if setting.setting_type == SettingType.STRING:
            if not isinstance(value, str):
                return False, f"Expected string, got {type(value).__name__}"

        elif setting.setting_type == SettingType.BOOLEAN:
            if not isinstance(value, bool) and str(value).lower() not in BOOLEAN_STRINGS:
                return False, f"Expected boolean, got '{value}'"

        elif setting.setting_type == SettingType.LIST:
            if not isinstance(value, list | tuple | str):  # Allow comma-separated strings
                return False, f"Expected list or comma-separated string, got {type(value).__name__}"

        return True, ""

    def validate_config(self, config_dict: dict[str, dict[str, Any]]) -> list[SettingError]:
        """Validate a whole configuration dictionary. Unknown sections and keys are ignored."""
        all_errors = []

        for section_name, section_config in config_dict.items():
            if section_name not in SECTION_NAMES:
                continue
            section = getattr(self.settings, section_name)
            for name, value in section_config.items():
                if name in section.settings:
                    all_errors.extend(self.validate_setting(section.settings[name], value))

        return all_errors

    def validate_cli_argument(self, name: str, value: Any) -> list[SettingError]:
        """Validate a single CLI argument by setting name."""
        setting = find_setting(name)
        if setting is None:
            return [SettingError(name, value, f"Unknown setting '{name}'", "")]
        return self.validate_setting(setting, value)
