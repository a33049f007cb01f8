#!/usr/bin/env python3
"""
Pixel Buffer Validation

This module checks raw clipboard pixel data before any decoding is attempted.
A buffer whose length does not match its declared dimensions must never reach
an image decoder; it is reported as a named condition instead.

This module is part of the Core Layer and should have no dependencies on
Presentation layer components.

Sample input:
- RawClipboardImage(width=2, height=2, data=b"\\xff" * 16)
- RawClipboardImage(width=0, height=5, data=b"")
- RawClipboardImage(width=2, height=2, data=b"\\xff" * 15)

Expected output:
- PixelBufferStatus.VALID
- PixelBufferStatus.EMPTY_DIMENSIONS
- PixelBufferStatus.LENGTH_MISMATCH
"""

from typing import TYPE_CHECKING

from loguru import logger

from clippy_clippy.core.errors import ValidationError
from clippy_clippy.core.types import PixelBufferStatus, RawClipboardImage

if TYPE_CHECKING:
    from loguru import Logger


def validate_pixel_buffer(image: RawClipboardImage, log: "Logger" = logger) -> PixelBufferStatus:
    """
    Validates the dimensions and byte length of a raw clipboard image.

    Args:
        image: Raw clipboard image
        log: Diagnostics sink

    Returns:
        PixelBufferStatus: VALID, EMPTY_DIMENSIONS or LENGTH_MISMATCH
    """
    # Empty dimensions win regardless of byte length
    if image.width == 0 or image.height == 0:
        log.warning(
            f"Clipboard image has empty dimensions ({image.width}x{image.height}, "
            f"{len(image.data)} bytes)"
        )
        return PixelBufferStatus.EMPTY_DIMENSIONS

    if len(image.data) != image.expected_length:
        log.error(
            f"Clipboard buffer length {len(image.data)} does not match "
            f"{image.width}x{image.height}x4 = {image.expected_length}"
        )
        return PixelBufferStatus.LENGTH_MISMATCH

    log.debug(f"Pixel buffer valid: {image.width}x{image.height}, {len(image.data)} bytes")
    return PixelBufferStatus.VALID


def length_mismatch_error(image: RawClipboardImage) -> ValidationError:
    """Build the ValidationError reported for a LENGTH_MISMATCH buffer."""
    return ValidationError(
        f"Clipboard image data length ({len(image.data)} bytes) does not match its "
        f"dimensions {image.width}x{image.height} (expected {image.expected_length} bytes "
        f"of {image.channel_order.value}8 pixels)",
        status=PixelBufferStatus.LENGTH_MISMATCH.value,
        width=image.width,
        height=image.height,
        byte_length=len(image.data),
    )


if __name__ == "__main__":
    """Validate pixel buffer checks with sample buffers"""
    import sys

    all_validation_failures = []
    total_tests = 0

    cases = [
        (RawClipboardImage(2, 2, b"\xff" * 16), PixelBufferStatus.VALID),
        (RawClipboardImage(0, 5, b"\xff" * 16), PixelBufferStatus.EMPTY_DIMENSIONS),
        (RawClipboardImage(5, 0, b""), PixelBufferStatus.EMPTY_DIMENSIONS),
        (RawClipboardImage(2, 2, b"\xff" * 15), PixelBufferStatus.LENGTH_MISMATCH),
    ]

    for image, expected in cases:
        total_tests += 1
        result = validate_pixel_buffer(image)
        if result != expected:
            all_validation_failures.append(f"{image!r}: expected {expected}, got {result}")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        sys.exit(0)
