"""Validate command for checking configuration files.

This module provides the `validate` command that checks a JSON layout
configuration and reports whether the bed fits the room.
"""

from pathlib import Path
from typing import Annotated

import typer

from roomdesigner.application.config import (
    ConfigError,
    config_to_session,
    load_config,
)


def validate(config_file: Path) -> None:
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    snapshot = config_to_session(config).snapshot()
    if not snapshot.room.fits(snapshot.footprint):
        typer.echo("Warnings:")
        typer.echo(
            f"  Bed footprint {snapshot.footprint.width:g} x "
            f"{snapshot.footprint.total_length:g} does not fit the room "
            f"{snapshot.room.width:g} x {snapshot.room.length:g}"
        )
        typer.echo()
        typer.echo("Validation passed with warnings.")
        raise typer.Exit(code=2)

    typer.echo("Validation passed.")


def _display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path") or "(root)"
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a layout configuration file.

    Exit codes:
        0 - Configuration is valid
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but the bed overflows the room

    Example:
        room-designer validate bedroom.json
    """
    validate(config_file)
