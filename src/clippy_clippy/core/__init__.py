"""
Core Layer for Clipboard OCR

This package contains the core logic for extracting text from the clipboard
image with a remote vision model: pixel buffer validation, PNG encoding,
request assembly, HTTP transport and response interpretation.

The core layer is designed to be:
1. Independent of UI concerns
2. Fully testable in isolation (clipboard and transport are injectable)
3. Explicit about failures (every failure is a named ClippyError)

Usage:
    from clippy_clippy.core import load_config, extract_clipboard_text
    outcome = extract_clipboard_text(load_config(), markdown=True)
    print(outcome.text)
"""

# Core constants and settings
from clippy_clippy.core.constants import (
    APP_NAME,
    DATA_URI_PREFIX,
    DEFAULT_MODEL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    MARKDOWN_PROMPT,
    PLAIN_TEXT_PROMPT,
)

# Errors
from clippy_clippy.core.errors import (
    ClippyError,
    ClipboardError,
    NoImageAvailable,
    ClipboardAccessError,
    ValidationError,
    EncodingError,
    TransportError,
    ResponseError,
    HttpError,
    ApiError,
    MalformedResponse,
    NoChoices,
    ConfigError,
    ConfigNotReady,
)

# Types and wire schemas
from clippy_clippy.core.types import (
    ChannelOrder,
    RawClipboardImage,
    PixelBufferStatus,
    OutcomeKind,
    ExtractionOutcome,
)
from clippy_clippy.core.schemas import CompletionRequest, CompletionResponse, Usage

# Pipeline stages
from clippy_clippy.core.clipboard import read_clipboard_image
from clippy_clippy.core.validation import validate_pixel_buffer
from clippy_clippy.core.image_encoding import encode_png, encode_image_to_data_uri, decode_data_uri
from clippy_clippy.core.request_builder import build_completion_request, select_prompt
from clippy_clippy.core.transport import post_completion_request
from clippy_clippy.core.response import interpret_response, check_response
from clippy_clippy.core.pipeline import extract_clipboard_text, extract_image_text

# Configuration and logging
from clippy_clippy.core.config import ClippyConfig, load_config, get_config_path
from clippy_clippy.core.log_utils import configure_logging, resolve_log_level, truncate_large_value

__all__ = [
    # Constants
    'APP_NAME',
    'DATA_URI_PREFIX',
    'DEFAULT_MODEL',
    'DEFAULT_MAX_TOKENS',
    'DEFAULT_REQUEST_TIMEOUT_SECONDS',
    'MARKDOWN_PROMPT',
    'PLAIN_TEXT_PROMPT',

    # Errors
    'ClippyError',
    'ClipboardError',
    'NoImageAvailable',
    'ClipboardAccessError',
    'ValidationError',
    'EncodingError',
    'TransportError',
    'ResponseError',
    'HttpError',
    'ApiError',
    'MalformedResponse',
    'NoChoices',
    'ConfigError',
    'ConfigNotReady',

    # Types
    'ChannelOrder',
    'RawClipboardImage',
    'PixelBufferStatus',
    'OutcomeKind',
    'ExtractionOutcome',
    'CompletionRequest',
    'CompletionResponse',
    'Usage',

    # Pipeline stages
    'read_clipboard_image',
    'validate_pixel_buffer',
    'encode_png',
    'encode_image_to_data_uri',
    'decode_data_uri',
    'build_completion_request',
    'select_prompt',
    'post_completion_request',
    'interpret_response',
    'check_response',
    'extract_clipboard_text',
    'extract_image_text',

    # Configuration and logging
    'ClippyConfig',
    'load_config',
    'get_config_path',
    'configure_logging',
    'resolve_log_level',
    'truncate_large_value',
]
