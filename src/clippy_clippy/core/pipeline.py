#!/usr/bin/env python3
"""
Extraction Pipeline

This module sequences one clipboard-to-text run:
clipboard read -> validate -> encode -> build request -> transport -> interpret.
Each stage runs at most once and nothing is retried. Every named failure ends
the run as a FAILURE outcome carrying the original message; "no image" and
"empty image" end it as informational outcomes.

This module is part of the Core Layer and should have no dependencies on
Presentation layer components.

Sample input:
- config: ClippyConfig(api_url=..., api_token=..., model_name=..., ...)
- markdown: False

Expected output:
- ExtractionOutcome(kind=TEXT, text="HELLO", ...)
- ExtractionOutcome(kind=NO_IMAGE)
- ExtractionOutcome(kind=FAILURE, reason="API request failed with status 401: ...")
"""

from typing import TYPE_CHECKING, Callable, Optional, Tuple

from loguru import logger

from clippy_clippy.core.clipboard import read_clipboard_image
from clippy_clippy.core.config import ClippyConfig
from clippy_clippy.core.errors import ClippyError, NoImageAvailable
from clippy_clippy.core.image_encoding import encode_image_to_data_uri
from clippy_clippy.core.request_builder import build_completion_request
from clippy_clippy.core.response import interpret_response
from clippy_clippy.core.schemas import CompletionRequest
from clippy_clippy.core.transport import post_completion_request
from clippy_clippy.core.types import ExtractionOutcome, PixelBufferStatus, RawClipboardImage
from clippy_clippy.core.validation import length_mismatch_error, validate_pixel_buffer

if TYPE_CHECKING:
    from loguru import Logger

ImageReader = Callable[..., RawClipboardImage]
Sender = Callable[..., Tuple[int, str]]


def extract_image_text(
    image: RawClipboardImage,
    config: ClippyConfig,
    markdown: bool = False,
    send: Sender = post_completion_request,
    log: "Logger" = logger
) -> ExtractionOutcome:
    """
    Runs the pipeline from validation onwards for an already captured image.

    Args:
        image: Raw clipboard image
        config: Endpoint configuration
        markdown: Whether to request GitHub Flavored Markdown
        send: Transport function (api_url, api_token, request, timeout_seconds, log)
        log: Diagnostics sink

    Returns:
        ExtractionOutcome: TEXT, EMPTY_IMAGE or FAILURE
    """
    status = validate_pixel_buffer(image, log=log.bind(stage="validate"))
    if status == PixelBufferStatus.EMPTY_DIMENSIONS:
        log.warning(
            "Clipboard provided image data but it appears empty (0 width/height). Skipping."
        )
        return ExtractionOutcome.empty_image()

    try:
        if status == PixelBufferStatus.LENGTH_MISMATCH:
            raise length_mismatch_error(image)

        encoded = encode_image_to_data_uri(image, log=log.bind(stage="encode"))

        request: CompletionRequest = build_completion_request(
            encoded,
            markdown=markdown,
            model=config.model_name,
            max_tokens=config.max_tokens,
        )
        log.info(f"Using '{config.model_name}' model for image to text...")

        status_code, body = send(
            config.api_url,
            config.api_token,
            request,
            config.request_timeout_seconds,
            log=log.bind(stage="transport"),
        )

        text, response = interpret_response(status_code, body, log=log.bind(stage="interpret"))
    except ClippyError as e:
        log.error(f"Extraction failed ({type(e).__name__}): {e}")
        return ExtractionOutcome.failure(e)

    finish_reason = response.choices[0].finish_reason
    return ExtractionOutcome.extracted(text, finish_reason=finish_reason, usage=response.usage)


def extract_clipboard_text(
    config: ClippyConfig,
    markdown: bool = False,
    read_image: Optional[ImageReader] = None,
    send: Sender = post_completion_request,
    log: "Logger" = logger
) -> ExtractionOutcome:
    """
    Extracts text from the image currently on the clipboard.

    Args:
        config: Endpoint configuration
        markdown: Whether to request GitHub Flavored Markdown
        read_image: Clipboard reader; defaults to read_clipboard_image
        send: Transport function
        log: Diagnostics sink

    Returns:
        ExtractionOutcome: TEXT, NO_IMAGE, EMPTY_IMAGE or FAILURE
    """
    read_image = read_image or read_clipboard_image

    try:
        image = read_image(log=log.bind(stage="clipboard"))
    except NoImageAvailable as e:
        log.info(f"Nothing to process: {e}")
        return ExtractionOutcome.no_image()
    except ClippyError as e:
        return ExtractionOutcome.failure(e)

    return extract_image_text(image, config, markdown=markdown, send=send, log=log)
