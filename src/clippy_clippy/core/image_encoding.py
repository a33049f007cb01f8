#!/usr/bin/env python3
"""
Image Encoding for Clipboard OCR

This module turns validated raw clipboard pixels into a PNG byte stream and
then into a Base64 data URI that can be embedded in a chat-completion request.
PNG keeps the encoding lossless, so text edges are preserved for OCR.

This module is part of the Core Layer and should have no dependencies on
Presentation layer components.

Sample input:
- RawClipboardImage(width=2, height=2, data=b"\\xff" * 16)

Expected output:
- "data:image/png;base64,iVBORw0KGgo..."
"""

import base64
import io
from typing import TYPE_CHECKING

from PIL import Image
from loguru import logger

from clippy_clippy.core.constants import DATA_URI_PREFIX
from clippy_clippy.core.errors import EncodingError
from clippy_clippy.core.types import RawClipboardImage

if TYPE_CHECKING:
    from loguru import Logger


def build_rgba_image(image: RawClipboardImage) -> Image.Image:
    """
    Interprets the raw buffer as row-major 8-bit pixels in the declared
    channel order and returns an RGBA PIL image.

    Args:
        image: Validated raw clipboard image

    Returns:
        PIL.Image: Image in RGBA mode

    Raises:
        EncodingError: If the image container cannot be constructed
    """
    try:
        # The raw decoder reorders BGRA sources into RGBA
        return Image.frombytes(
            "RGBA",
            (image.width, image.height),
            image.data,
            "raw",
            image.channel_order.value
        )
    except (ValueError, TypeError, MemoryError) as e:
        raise EncodingError(
            f"Failed to create image buffer from clipboard data ({image.width}x{image.height}, "
            f"{len(image.data)} bytes): {e}"
        ) from e


def encode_png(image: RawClipboardImage, log: "Logger" = logger) -> bytes:
    """
    Encodes a raw clipboard image as PNG in memory.

    Args:
        image: Validated raw clipboard image
        log: Diagnostics sink

    Returns:
        bytes: PNG file contents

    Raises:
        EncodingError: If the container cannot be built or serialization fails
    """
    img = build_rgba_image(image)

    buffer = io.BytesIO()
    try:
        img.save(buffer, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodingError(f"Failed to encode image to PNG format: {e}") from e

    png_bytes = buffer.getvalue()
    log.debug(f"PNG encoding complete: {len(png_bytes) / 1024:.1f} KB")
    return png_bytes


def encode_image_to_data_uri(image: RawClipboardImage, log: "Logger" = logger) -> str:
    """
    Encodes a raw clipboard image as a PNG data URI.

    Identical input bytes always yield an identical string.

    Args:
        image: Validated raw clipboard image
        log: Diagnostics sink

    Returns:
        str: "data:image/png;base64," followed by the Base64 PNG payload
    """
    log.info(f"Encoding image ({image.width}x{image.height}) to PNG and then Base64...")

    png_bytes = encode_png(image, log=log)
    encoded = base64.b64encode(png_bytes).decode("ascii")

    log.debug(f"Base64 encoding complete, length: {len(encoded)}")
    return f"{DATA_URI_PREFIX}{encoded}"


def decode_data_uri(data_uri: str) -> bytes:
    """
    Strips the PNG data URI prefix and decodes the Base64 payload.

    Args:
        data_uri: String produced by encode_image_to_data_uri

    Returns:
        bytes: PNG file contents
    """
    if not data_uri.startswith(DATA_URI_PREFIX):
        raise ValueError(f"Not a PNG data URI: {data_uri[:40]!r}")
    return base64.b64decode(data_uri[len(DATA_URI_PREFIX):], validate=True)


if __name__ == "__main__":
    """Validate image encoding functions with generated pixel data"""
    import sys

    all_validation_failures = []
    total_tests = 0

    white = RawClipboardImage(width=2, height=2, data=b"\xff" * 16)

    # Test 1: Prefix
    total_tests += 1
    uri = encode_image_to_data_uri(white)
    if not uri.startswith(DATA_URI_PREFIX):
        all_validation_failures.append(f"Data URI prefix missing: {uri[:30]}")

    # Test 2: Determinism
    total_tests += 1
    if encode_image_to_data_uri(white) != uri:
        all_validation_failures.append("Encoding the same image twice gave different results")

    # Test 3: Round trip
    total_tests += 1
    decoded = Image.open(io.BytesIO(decode_data_uri(uri)))
    if decoded.convert("RGBA").tobytes() != white.data:
        all_validation_failures.append("Round trip did not reproduce the pixel buffer")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        print("Image encoding functions are validated and ready for use")
        sys.exit(0)
