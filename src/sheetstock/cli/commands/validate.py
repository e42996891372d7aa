"""Validate command for checking configuration files."""

from pathlib import Path
from typing import Annotated

import typer

from sheetstock.application.config import ConfigError, load_config


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a sheetstock configuration file.

    Exit codes:
        0 - Configuration is valid
        1 - Configuration has errors

    Example:
        sheetstock validate sheetstock.json
    """
    typer.echo(f"Validating {config_file}...")

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_config_error(e)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"  Inventory file: {config.store.path}")
    typer.echo(f"  Default policy: {config.cutting.default_policy.value}")
    typer.echo("Validation passed.")


def display_config_error(error: ConfigError) -> None:
    """Print a configuration loading error to stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            typer.echo(
                f"    Line {detail.get('line', '?')}, Column {detail.get('column', '?')}: "
                f"{detail.get('message', 'Unknown error')}",
                err=True,
            )
    elif error.error_type == "validation":
        for detail in error.details:
            typer.echo(f"  {detail.get('path', 'unknown')}: {detail.get('message')}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)
