"""
Typer option generation from the settings definitions.
"""

import typer

from .definitions import FIELDKIT_SETTINGS, find_setting
from .validation import SettingsValidator


def generate_cli_option(name: str, flag_format: str | None = None):
    """Generate a typer option for a setting. `flag_format` overrides the flag, e.g. "--x/--no-x"."""
    setting = find_setting(name)
    if not setting:
        raise ValueError(f"Setting '{name}' not found")

    if flag_format:
        return typer.Option(None, flag_format, help=setting.cli_help)

    option_args = [setting.cli_long]
    if setting.cli_short:
        option_args.append(setting.cli_short)
    return typer.Option(None, *option_args, help=setting.cli_help)


def generate_multi_option(name: str, option_name: str):
    """Generate a repeatable option for a list setting, for use inside Annotated."""
    setting = find_setting(name)
    if not setting:
        raise ValueError(f"Setting '{name}' not found")
    return typer.Option(option_name, help=setting.cli_help)


def validate_cli_arguments(**kwargs) -> list[str]:
    """
    Validate CLI arguments using the settings definitions.

    Args:
        **kwargs: CLI argument values keyed by setting name

    Returns:
        List of validation error messages
    """
    validator = SettingsValidator(FIELDKIT_SETTINGS)
    errors = []

    for name, value in kwargs.items():
        if value is not None:  # Only validate provided arguments
            errors.extend(str(error) for error in validator.validate_cli_argument(name, value))

    return errors
