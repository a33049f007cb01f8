"""
Validators for the Clipboard OCR CLI

Typer callbacks that check option values before the command body runs.
"""

from pathlib import Path
from typing import Optional

import typer

from clippy_clippy import __version__
from clippy_clippy.cli.formatters import print_error


def validate_config_path(ctx: typer.Context, value: Optional[Path]) -> Optional[Path]:
    """
    Typer callback for validating the --config option.

    Args:
        ctx: Typer context
        value: Configuration file path from CLI

    Returns:
        Optional[Path]: Validated configuration file path
    """
    if value is None:
        return None

    if not value.exists():
        print_error(f"Specified config file does not exist: {value}")
        raise typer.Exit(1)

    if not value.is_file():
        print_error(f"Not a file: {value}")
        raise typer.Exit(1)

    return value


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"clippy-clippy {__version__}")
        raise typer.Exit()
