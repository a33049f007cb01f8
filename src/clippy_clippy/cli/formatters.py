#!/usr/bin/env python3
"""
Formatters for the Clipboard OCR CLI

This module provides Rich formatting utilities for the presentation layer.
Diagnostics (errors, warnings, informational notes) go to standard error so
that standard output carries nothing but the extracted text or JSON.

This module is part of the Presentation Layer and should only depend on
Core Layer components.

Sample input:
- Extracted text
- Error messages

Expected output:
- Plain text on stdout
- Rich formatted panels on stderr
"""

import json
from typing import Any, Dict

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text


# Diagnostics console
console = Console(stderr=True)


# Color scheme
COLORS = {
    "success": "green",
    "error": "red",
    "warning": "yellow",
    "info": "blue",
    "dim": "grey70",
}


def print_extracted_text(text: str) -> None:
    """
    Write the extracted text to standard output as a single block.

    Args:
        text: Extracted text (may be empty)
    """
    typer.echo(text)


def print_error(message: str, title: str = "Error") -> None:
    """
    Format and print error message to the console.

    Args:
        message: Error message
        title: Panel title
    """
    panel = Panel(
        Text(message, style=COLORS["error"]),
        title=f"[bold {COLORS['error']}]{title}",
        border_style=COLORS["error"],
        padding=(1, 2)
    )

    console.print(panel)


def print_warning(message: str, title: str = "Warning") -> None:
    """
    Format and print warning message to the console.

    Args:
        message: Warning message
        title: Panel title
    """
    panel = Panel(
        Text(message, style=COLORS["warning"]),
        title=f"[bold {COLORS['warning']}]{title}",
        border_style=COLORS["warning"],
        padding=(1, 2)
    )

    console.print(panel)


def print_info(message: str, title: str = "Info") -> None:
    """
    Format and print info message to the console.

    Args:
        message: Info message
        title: Panel title
    """
    panel = Panel(
        Text(message, style=COLORS["info"]),
        title=f"[bold {COLORS['info']}]{title}",
        border_style=COLORS["info"],
        padding=(1, 2)
    )

    console.print(panel)


def print_json(data: Dict[str, Any]) -> None:
    """
    Print JSON data to standard output for machine consumption.

    Args:
        data: JSON-serializable data
    """
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
