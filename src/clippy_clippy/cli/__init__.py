"""
CLI Layer for Clipboard OCR

This package contains the command line interface for clipboard text
extraction, built with Typer and Rich.

The CLI layer is designed to:
1. Parse and validate command-line options
2. Keep standard output for the extracted text only
3. Report failures and informational states on standard error

Usage:
    from clippy_clippy.cli import app
    app()
"""

from clippy_clippy.cli.cli import app, main, report_outcome

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

__all__ = [
    'app',
    'main',
    'report_outcome',
    'console',
    'print_error',
    'print_extracted_text',
    'print_info',
    'print_json',
    'print_warning',
    'format_cli_response',
    'format_outcome_response',
    'validate_config_path',
    'version_callback',
]
