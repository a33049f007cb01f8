"""
Type definitions for Clipboard OCR.

This module defines the raw clipboard image handed over by the clipboard
collaborator, the result of pixel buffer validation, and the terminal
outcome of one extraction run.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel

from clippy_clippy.core.constants import BYTES_PER_PIXEL
from clippy_clippy.core.schemas import Usage


class ChannelOrder(str, Enum):
    """Byte order of each pixel in a raw buffer, as declared by its source."""
    RGBA = "RGBA"
    BGRA = "BGRA"


@dataclass(frozen=True)
class RawClipboardImage:
    """Raw pixel data read from the clipboard. Never mutated."""
    width: int
    height: int
    data: bytes
    channel_order: ChannelOrder = ChannelOrder.RGBA

    @property
    def expected_length(self) -> int:
        return self.width * self.height * BYTES_PER_PIXEL

    def __repr__(self) -> str:
        return (
            f"RawClipboardImage(width={self.width}, height={self.height}, "
            f"bytes={len(self.data)}, channel_order={self.channel_order.value})"
        )


class PixelBufferStatus(str, Enum):
    VALID = "valid"
    EMPTY_DIMENSIONS = "empty_dimensions"
    LENGTH_MISMATCH = "length_mismatch"


class OutcomeKind(str, Enum):
    """Terminal states of one extraction run."""
    TEXT = "text"
    NO_IMAGE = "no_image"
    EMPTY_IMAGE = "empty_image"
    FAILURE = "failure"


class ExtractionOutcome(BaseModel):
    """
    Terminal result of one invocation.

    Exactly one kind is set. TEXT carries the extracted text (possibly empty),
    FAILURE carries the error message and the name of the error type.
    """
    kind: OutcomeKind
    text: Optional[str] = None
    finish_reason: Optional[str] = None
    usage: Optional[Usage] = None
    reason: Optional[str] = None
    error_type: Optional[str] = None

    @classmethod
    def extracted(
        cls,
        text: str,
        finish_reason: Optional[str] = None,
        usage: Optional[Usage] = None
    ) -> "ExtractionOutcome":
        return cls(kind=OutcomeKind.TEXT, text=text, finish_reason=finish_reason, usage=usage)

    @classmethod
    def no_image(cls) -> "ExtractionOutcome":
        return cls(kind=OutcomeKind.NO_IMAGE)

    @classmethod
    def empty_image(cls) -> "ExtractionOutcome":
        return cls(kind=OutcomeKind.EMPTY_IMAGE)

    @classmethod
    def failure(cls, error: Exception) -> "ExtractionOutcome":
        return cls(kind=OutcomeKind.FAILURE, reason=str(error), error_type=type(error).__name__)

    @property
    def is_failure(self) -> bool:
        return self.kind == OutcomeKind.FAILURE

    @property
    def exit_code(self) -> int:
        return 1 if self.is_failure else 0

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
