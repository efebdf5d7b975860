"""
FieldKit: CLI for checking component field structure documents.
Validates field definitions and their default_data, and lists the fields a document declares.
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler
from rich.markup import escape

from .config import Config, load_config
from .console import console, err_console
from .formatters import format_field_table, format_violation_table, result_to_dict
from .schema.loader import load_document
from .schema.validation import SchemaValidator, ValidationPolicy, ValidationResult
from .settings.cli_integration import generate_cli_option, generate_multi_option, validate_cli_arguments
from .settings.definitions import FIELDKIT_SETTINGS, SECTION_NAMES
from .shared.errors import DocumentStructureError, FieldKitError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_LOAD_FAILED = 2

PACKAGE_LOGGER = "fieldkit"

app = typer.Typer(
    help="FieldKit: Validate component field structure documents.\n\n"
    "Configuration: Use 'fieldkit config init' to create a config file with default values.\n"
    "Environment: Set FIELDKIT_CONFIG to use a custom config file location.",
    epilog="Examples:\n\n"
    "  # Validate one or more documents\n"
    "  fieldkit validate components/hero/fields.json\n\n"
    "  # Require English and Russian labels, print JSON\n"
    "  fieldkit validate fields.json --require-language en --require-language ru --format json\n\n"
    "  # List the fields of a document with Russian labels\n"
    "  fieldkit show fields.json --language ru",
    no_args_is_help=True,
)
config_app = typer.Typer(help="Configuration management commands")
app.add_typer(config_app, name="config")


@contextmanager
def _debug_logging(enabled: bool) -> Iterator[None]:
    """Send fieldkit debug logs to stderr for the duration of a command."""
    if not enabled:
        yield
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handler = RichHandler(console=err_console, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    previous_level = package_logger.level
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    try:
        yield
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)


def _load_config_or_exit(verbose: bool) -> Config:
    try:
        return load_config(verbose=verbose)
    except FieldKitError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(EXIT_LOAD_FAILED) from None


def _abort_on_invalid_arguments(**kwargs) -> None:
    errors = validate_cli_arguments(**kwargs)
    if errors:
        for error in errors:
            console.print(f"[red]Invalid argument:[/red] {escape(error)}")
        raise typer.Exit(EXIT_LOAD_FAILED)


@app.command(name="validate", help="Check field structure documents for consistency problems.")
def validate_command(
    paths: Annotated[list[Path], typer.Argument(help="Field structure JSON files to check")],
    output_format: str | None = generate_cli_option("format"),
    check_label_languages: bool | None = generate_cli_option(
        "check_label_languages", "--check-label-languages/--no-check-label-languages"
    ),
    check_option_defaults: bool | None = generate_cli_option(
        "check_option_defaults", "--check-option-defaults/--no-check-option-defaults"
    ),
    required_languages: Annotated[
        list[str] | None,
        generate_multi_option("required_languages", "--require-language"),
    ] = None,
    verbose: bool | None = generate_cli_option("verbose"),
    debug: bool | None = generate_cli_option("debug"),
) -> None:
    _abort_on_invalid_arguments(format=output_format, required_languages=required_languages)

    config = _load_config_or_exit(bool(verbose))
    debug = debug if debug is not None else config.get_field_value("system", "debug")
    verbose = verbose if verbose is not None else config.get_field_value("system", "verbose")

    output_format = output_format or config.get_field_value("output", "format")
    base_policy = ValidationPolicy.from_config(config)
    policy = ValidationPolicy(
        check_label_languages=(
            check_label_languages if check_label_languages is not None else base_policy.check_label_languages
        ),
        required_languages=tuple(required_languages) if required_languages else base_policy.required_languages,
        check_option_defaults=(
            check_option_defaults if check_option_defaults is not None else base_policy.check_option_defaults
        ),
    )
    with _debug_logging(debug):
        logger.debug("Validation policy: %s", policy)
        exit_code = _validate_paths(paths, SchemaValidator(policy), output_format, verbose)

    raise typer.Exit(exit_code)


def _validate_paths(paths: list[Path], validator: SchemaValidator, output_format: str, verbose: bool) -> int:
    """Validate every path, print the reports and return the exit code."""
    reports = []
    exit_code = EXIT_OK

    for path in paths:
        source = str(path)
        try:
            result = validator.validate(load_document(path))
        except DocumentStructureError as e:
            result = ValidationResult(tuple(e.violations))
        except FieldKitError as e:
            exit_code = EXIT_LOAD_FAILED
            if output_format == "json":
                reports.append({"path": source, **e.to_response().to_dict()})
            else:
                console.print(f"[red]✗ {escape(e.message)}[/red]")
            continue

        if not result.ok and exit_code == EXIT_OK:
            exit_code = EXIT_VIOLATIONS

        if output_format == "json":
            reports.append(result_to_dict(source, result))
        elif result.ok:
            console.print(f"[bold green]✓[/bold green] {escape(source)}")
        else:
            console.print(format_violation_table(source, result))

    if output_format == "json":
        typer.echo(json.dumps(reports, indent=2, ensure_ascii=False))
    if verbose:
        err_console.print(f"[dim]Checked {len(paths)} document(s)[/dim]")

    return exit_code


@app.command(name="show", help="List the fields declared in a document.")
def show_command(
    path: Annotated[Path, typer.Argument(help="Field structure JSON file")],
    language: str | None = generate_cli_option("language"),
    debug: bool | None = generate_cli_option("debug"),
) -> None:
    config = _load_config_or_exit(False)
    debug = debug if debug is not None else config.get_field_value("system", "debug")
    language = language or config.get_field_value("output", "language") or None

    try:
        with _debug_logging(debug):
            document = load_document(path)
    except DocumentStructureError as e:
        console.print(format_violation_table(str(path), ValidationResult(tuple(e.violations))))
        raise typer.Exit(EXIT_VIOLATIONS) from None
    except FieldKitError as e:
        console.print(f"[red]✗ {escape(e.message)}[/red]")
        raise typer.Exit(EXIT_LOAD_FAILED) from None

    console.print(format_field_table(document, language))
    if document.languages:
        console.print(f"[dim]Label languages: {', '.join(document.languages)}[/dim]")


@config_app.command(name="init", help="Create a default configuration file in the XDG config directory.")
def init_config(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config file"),
    config_path: str | None = typer.Option(None, "--path", "-p", help="Custom config file path"),
) -> None:
    """Create a default configuration file."""
    config = Config()
    target_path = config.get_default_config_path() if config_path is None else Path(config_path)

    if target_path.exists() and not force:
        console.print(f"[yellow]Configuration file already exists:[/yellow] {target_path}")
        console.print("[dim]Use --force to overwrite the existing configuration file[/dim]")
        raise typer.Exit(EXIT_OK)

    try:
        created_path = config.create_default_config(target_path)
    except FieldKitError as e:
        console.print(f"[red]Error creating configuration file:[/red] {escape(e.message)}", style="bold")
        raise typer.Exit(1) from None

    console.print(f"[bold green]✅ Configuration file created:[/bold green] {created_path}")
    console.print()
    console.print("[bold]Configuration file locations (in priority order):[/bold]")
    for i, search_path in enumerate(config.get_config_paths(), 1):
        if search_path == created_path:
            console.print(f"  {i}. {search_path} [bold green](created here)[/bold green]")
        else:
            console.print(f"  {i}. {search_path}")


@config_app.command(name="show", help="Print the effective configuration.")
def show_config() -> None:
    config = _load_config_or_exit(False)
    source = config.config_path or "defaults"
    console.print(f"[dim]Source: {source}[/dim]")
    for section_name in SECTION_NAMES:
        section = getattr(FIELDKIT_SETTINGS, section_name)
        console.print(f"[bold]\\[{section_name}][/bold]")
        for name in section.settings:
            console.print(f"  {name} = {config.get_field_value(section_name, name)!r}")
