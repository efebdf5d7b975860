"""
FieldKit settings package.
Schema-driven configuration options shared by the config file and the CLI.
"""

from .core import Setting, SettingSection, SettingType
from .definitions import FIELDKIT_SETTINGS, SECTION_NAMES, find_setting
from .validation import SettingError, SettingsValidator

__all__ = [
    "FIELDKIT_SETTINGS",
    "SECTION_NAMES",
    "Setting",
    "SettingError",
    "SettingSection",
    "SettingType",
    "SettingsValidator",
    "find_setting",
]
