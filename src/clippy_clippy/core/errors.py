"""
Error types for Clipboard OCR.

Every failure the pipeline can name is a subclass of ClippyError. The
orchestrator turns any of them into a FAILURE outcome, except for the two
informational clipboard states (NoImageAvailable and an empty image) and
ConfigNotReady, which the CLI reports without a non-zero exit.
"""

from typing import Optional


class ClippyError(Exception):
    """Base exception for clipboard OCR errors."""

    pass


# Clipboard

class ClipboardError(ClippyError):
    """Raised when the clipboard cannot produce an image."""

    pass


class NoImageAvailable(ClipboardError):
    """The clipboard holds no raster image. Not a failure."""

    pass


class ClipboardAccessError(ClipboardError):
    """The clipboard backend is missing or refused access."""

    pass


# Pixel buffer and encoding

class ValidationError(ClippyError):
    """Raised when a raw pixel buffer does not match its dimensions."""

    def __init__(self, message: str, status: str, width: int, height: int, byte_length: int):
        super().__init__(message)
        self.status = status
        self.width = width
        self.height = height
        self.byte_length = byte_length


class EncodingError(ClippyError):
    """Raised when the PNG container or Base64 payload cannot be built."""

    pass


# Transport and response

class TransportError(ClippyError):
    """Raised when the connection fails or the timeout elapses."""

    pass


class ResponseError(ClippyError):
    """Base class for failures classified from an HTTP response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class HttpError(ResponseError):
    """Non-2xx status whose body carries no parseable error object."""

    def __init__(self, status_code: int, raw_body: str):
        super().__init__(
            f"API request failed with status {status_code}. Response body: {raw_body}",
            status_code=status_code,
        )
        self.raw_body = raw_body


class ApiError(ResponseError):
    """Explicit error object returned by the endpoint, at any status."""

    def __init__(self, message: str, kind: Optional[str], status_code: int):
        suffix = f" ({kind})" if kind else ""
        if 200 <= status_code < 300:
            text = f"API indicated an error despite success status {status_code}: {message}{suffix}"
        else:
            text = f"API request failed with status {status_code}: {message}{suffix}"
        super().__init__(text, status_code=status_code)
        self.api_message = message
        self.kind = kind


class MalformedResponse(ResponseError):
    """2xx status with a body that is not a completion document."""

    def __init__(self, raw_body: str, status_code: int, detail: str = ""):
        message = f"Failed to parse successful JSON response from API. Body: {raw_body}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, status_code=status_code)
        self.raw_body = raw_body


class NoChoices(ResponseError):
    """2xx status, parseable body, but an empty choices list."""

    def __init__(self, status_code: int):
        super().__init__("API response did not contain any choices/content.", status_code=status_code)


# Configuration

class ConfigError(ClippyError):
    """Raised when the configuration cannot be loaded."""

    pass


class ConfigNotReady(ConfigError):
    """The configuration exists only as a template. Not a failure."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path
