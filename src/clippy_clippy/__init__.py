"""
Clipboard OCR

Extracts text from the image currently on the system clipboard by sending it
to a vision-capable, OpenAI-compatible chat-completion endpoint.

The package has two layers:

1. Core Layer: clipboard capture, pixel validation, PNG encoding, request
   assembly, HTTP transport and response interpretation
2. CLI Layer: Typer command with Rich diagnostics

Usage:
    # Direct API usage (Core Layer)
    from clippy_clippy.core import load_config, extract_clipboard_text
    outcome = extract_clipboard_text(load_config(), markdown=True)

    # CLI usage
    # clippy-clippy --markdown
    # python -m clippy_clippy --json
"""

__version__ = "0.1.1"

from clippy_clippy.core import (
    extract_clipboard_text,
    extract_image_text,
    load_config,
    ExtractionOutcome,
    OutcomeKind,
)

__all__ = [
    'extract_clipboard_text',
    'extract_image_text',
    'load_config',
    'ExtractionOutcome',
    'OutcomeKind',
    '__version__',
]
