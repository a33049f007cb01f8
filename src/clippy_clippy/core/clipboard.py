#!/usr/bin/env python3
"""
Clipboard Access

This module reads the raster image currently held by the system clipboard and
hands it over as raw RGBA pixels. Pillow's ImageGrab picks the platform
backend (native API on Windows and macOS, wl-paste or xclip on Linux) and
normalises the pixel byte order, so images produced here always declare
ChannelOrder.RGBA.

This module is part of the Core Layer and should have no dependencies on
Presentation layer components.

Sample input:
- None (reads the live clipboard) or an injected grab function

Expected output:
- RawClipboardImage(width=..., height=..., data=b"...", channel_order=RGBA)
- NoImageAvailable when the clipboard holds no image
- ClipboardAccessError when no clipboard backend can be used
"""

from typing import TYPE_CHECKING, Any, Callable, Optional

from PIL import Image, ImageGrab
from loguru import logger

from clippy_clippy.core.errors import ClipboardAccessError, NoImageAvailable
from clippy_clippy.core.types import ChannelOrder, RawClipboardImage

if TYPE_CHECKING:
    from loguru import Logger

ClipboardGrabber = Callable[[], Any]

CLIPBOARD_BACKEND_HINT = (
    "Could not access the system clipboard. Ensure a graphical session is running "
    "and, on Linux, that wl-clipboard (Wayland) or xclip (X11) is installed."
)


def image_to_raw(img: Image.Image) -> RawClipboardImage:
    """
    Converts a PIL image to a raw RGBA clipboard image.

    Args:
        img: PIL Image in any mode

    Returns:
        RawClipboardImage: Row-major RGBA8 pixels
    """
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    width, height = img.size
    return RawClipboardImage(
        width=width,
        height=height,
        data=img.tobytes(),
        channel_order=ChannelOrder.RGBA
    )


def read_clipboard_image(
    grab: Optional[ClipboardGrabber] = None,
    log: "Logger" = logger
) -> RawClipboardImage:
    """
    Reads the current clipboard image.

    Args:
        grab: Function returning the clipboard contents; defaults to ImageGrab.grabclipboard
        log: Diagnostics sink

    Returns:
        RawClipboardImage: Raw pixels of the clipboard image

    Raises:
        NoImageAvailable: The clipboard holds no single raster image
        ClipboardAccessError: The clipboard backend failed
    """
    grab = grab or ImageGrab.grabclipboard

    try:
        content = grab()
    except Exception as e:
        log.error(f"Error checking clipboard for image: {e}")
        raise ClipboardAccessError(f"Failed to get image from clipboard: {e}") from e

    if content is None:
        log.info("No image found in the clipboard.")
        raise NoImageAvailable("No image found in the clipboard.")

    if isinstance(content, list):
        # Copied files are reported as a list of paths, not pixels
        log.info(f"Clipboard holds {len(content)} file name(s), not an image.")
        raise NoImageAvailable("Clipboard holds file names, not an image.")

    if not isinstance(content, Image.Image):
        log.warning(f"Unexpected clipboard content type: {type(content).__name__}")
        raise NoImageAvailable(f"Unsupported clipboard content: {type(content).__name__}")

    try:
        raw = image_to_raw(content)
    except (OSError, ValueError) as e:
        raise ClipboardAccessError(f"Failed to read clipboard image pixels: {e}") from e

    log.info(f"Image detected in clipboard ({raw.width}x{raw.height})")
    return raw
