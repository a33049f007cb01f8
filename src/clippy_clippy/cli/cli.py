#!/usr/bin/env python3
"""
Command Line Interface for Clipboard OCR

This module provides the `clippy-clippy` command using Typer and Rich. It loads
the configuration, runs the extraction pipeline on the current clipboard image
and prints the extracted text (or a JSON envelope) to standard output.

This module is part of the Presentation Layer and should only depend on
Core Layer components.

Sample input:
- clippy-clippy
- clippy-clippy --markdown
- clippy-clippy --config ./config.yaml --json -v

Expected output:
- Extracted text on stdout, exit code 0
- Informational note on stderr for an empty clipboard, exit code 0
- Error panel on stderr for any failure, exit code 1
"""

from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from clippy_clippy.core.config import load_config
from clippy_clippy.core.errors import ConfigError, ConfigNotReady
from clippy_clippy.core.clipboard import CLIPBOARD_BACKEND_HINT
from clippy_clippy.core.log_utils import configure_logging, resolve_log_level
from clippy_clippy.core.pipeline import extract_clipboard_text
from clippy_clippy.core.types import ExtractionOutcome, OutcomeKind
from clippy_clippy.cli.formatters import (
    console,
    print_error,
    print_extracted_text,
    print_info,
    print_json,
    print_warning,
)
from clippy_clippy.cli.schemas import format_cli_response, format_outcome_response
from clippy_clippy.cli.validators import validate_config_path, version_callback


NO_IMAGE_MESSAGE = "No image found in the clipboard. Copy an image and try again."
EMPTY_IMAGE_MESSAGE = "Clipboard image data is empty. Nothing to process."


app = typer.Typer(
    help="Extract text from the clipboard image with a vision-capable chat model",
    rich_markup_mode="rich",
    add_completion=False
)


def report_outcome(outcome: ExtractionOutcome, json_output: bool = False) -> None:
    """
    Print an extraction outcome in the requested format.

    Args:
        outcome: Terminal outcome of the pipeline
        json_output: Print the JSON envelope instead of plain text
    """
    if json_output:
        print_json(format_outcome_response(outcome))
        return

    if outcome.kind == OutcomeKind.TEXT:
        print_extracted_text(outcome.text or "")
    elif outcome.kind == OutcomeKind.NO_IMAGE:
        print_warning(NO_IMAGE_MESSAGE, title="Clipboard")
    elif outcome.kind == OutcomeKind.EMPTY_IMAGE:
        print_warning(EMPTY_IMAGE_MESSAGE, title="Clipboard")
    else:
        print_error(outcome.reason or "Unknown error", title=outcome.error_type or "Error")
        if outcome.error_type == "ClipboardAccessError":
            print_info(CLIPBOARD_BACKEND_HINT)


@app.command()
def extract(
    markdown: bool = typer.Option(
        False,
        "--markdown", "-m",
        help="Generate GitHub Flavored Markdown output (e.g., for tables)"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to the configuration file",
        callback=validate_config_path
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output results as JSON"
    ),
    verbose: int = typer.Option(
        0,
        "--verbose", "-v",
        count=True,
        help="Increase log verbosity (-v for INFO, -vv for DEBUG)"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
        callback=version_callback,
        is_eager=True
    ),
):
    """
    Extract text from the image currently on the clipboard.

    The image is sent to the configured OpenAI-compatible endpoint and the
    recognised text is printed to standard output.
    """
    configure_logging(resolve_log_level(verbose))

    try:
        settings = load_config(config)
    except ConfigNotReady as e:
        # First run or unfinished template: tell the user, exit cleanly
        if json_output:
            print_json(format_cli_response(
                True, data={"kind": "config_not_ready", "message": str(e), "path": e.path}
            ))
        else:
            print_info(str(e), title="Configuration")
        return
    except ConfigError as e:
        logger.error(f"Failed to load configuration: {e}")
        if json_output:
            print_json(format_cli_response(False, error=str(e), details={"error_type": type(e).__name__}))
        else:
            print_error(str(e), title="Configuration Error")
        raise typer.Exit(1)

    try:
        if json_output:
            outcome = extract_clipboard_text(settings, markdown=markdown)
        else:
            with console.status("Processing image with AI..."):
                outcome = extract_clipboard_text(settings, markdown=markdown)
    except Exception as e:
        logger.error(f"Extract command failed: {str(e)}")
        outcome = ExtractionOutcome.failure(e)

    report_outcome(outcome, json_output=json_output)

    if outcome.exit_code:
        raise typer.Exit(outcome.exit_code)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
