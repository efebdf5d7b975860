"""
Complete FieldKit settings definition.
Centralizes every configuration option with its metadata.
"""

from .core import Setting, SettingSection, SettingType

SECTION_NAMES = ["validation", "output", "system"]


def _create_validation_section() -> SettingSection:
    section = SettingSection(name="validation", description="Document validation policy")

    section.add(
        Setting(
            name="check_label_languages",
            setting_type=SettingType.BOOLEAN,
            default=True,
            section="validation",
            description="Require every field to be labelled in every language used in the document",
            cli_help="Check that all fields share the same label languages",
            ini_comment="Report fields missing a label language used by other fields: true, false",
        )
    )

    section.add(
        Setting(
            name="required_languages",
            setting_type=SettingType.LIST,
            default=[],
            section="validation",
            description="Languages every field label must provide",
            cli_help="Language code every label must provide (repeatable)",
            example_values=["en", "en,ru"],
            ini_comment="Comma separated language codes every label must provide (leave empty for none)",
        )
    )

    section.add(
        Setting(
            name="check_option_defaults",
            setting_type=SettingType.BOOLEAN,
            default=True,
            section="validation",
            description="Require select defaults to be one of the option values",
            cli_help="Check select defaults against their option values",
            ini_comment="Report select defaults that are not option values: true, false",
        )
    )

    return section


def _create_output_section() -> SettingSection:
    section = SettingSection(name="output", description="Report formatting")

    section.add(
        Setting(
            name="format",
            setting_type=SettingType.STRING,
            default="text",
            section="output",
            description="How validation reports are printed",
            cli_help="Report format (text, json)",
            cli_short="-f",
            valid_values=["text", "json"],
            ini_comment="Report format options: text (tables), json (machine readable)",
        )
    )

    section.add(
        Setting(
            name="language",
            setting_type=SettingType.STRING,
            default="",
            section="output",
            description="Preferred language when displaying labels",
            cli_help="Language code used to display labels",
            cli_short="-l",
            example_values=["en", "ru"],
            ini_comment="Language used to display labels (leave empty for each field's first language)",
        )
    )

    return section


def _create_system_section() -> SettingSection:
    section = SettingSection(name="system", description="System behavior")

    section.add(
        Setting(
            name="verbose",
            setting_type=SettingType.BOOLEAN,
            default=False,
            section="system",
            description="Print progress details",
            cli_help="Enable verbose output",
            cli_short="-v",
            ini_comment="Enable verbose output by default: true, false",
        )
    )

    section.add(
        Setting(
            name="debug",
            setting_type=SettingType.BOOLEAN,
            default=False,
            section="system",
            description="Enable debug logging",
            cli_help="Enable debug logging",
            ini_comment="Enable debug logging by default: true, false",
        )
    )

    return section


# Global settings instance
FIELDKIT_SETTINGS = type(
    "FieldKitSettings",
    (),
    {
        "validation": _create_validation_section(),
        "output": _create_output_section(),
        "system": _create_system_section(),
    },
)()


def find_setting(name: str) -> Setting | None:
    """Find a setting by name in any section."""
    for section_name in SECTION_NAMES:
        section = getattr(FIELDKIT_SETTINGS, section_name)
        if name in section.settings:
            return section.settings[name]
    return None
