#!/usr/bin/env python3
"""
Response Schemas for the Clipboard OCR CLI

This module defines the JSON envelope printed by `clippy-clippy --json`, so
that scripts get the same shape for success, informational and failure runs.

This module is part of the Presentation Layer and should only depend on
Core Layer components.

Sample input:
- ExtractionOutcome(kind=TEXT, text="HELLO", usage=Usage(...))

Expected output:
- {"success": true, "data": {"kind": "text", "text": "HELLO", "usage": {...}, ...}}
- {"success": false, "error": "API request failed with status 401: ...", "details": {...}}
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel

from clippy_clippy.core.types import ExtractionOutcome


class ErrorResponse(BaseModel):
    """Error response model"""
    success: bool = False
    error: str
    details: Optional[Dict[str, Any]] = None


class SuccessResponse(BaseModel):
    """Success response model"""
    success: bool = True
    data: Dict[str, Any]


def format_cli_response(
    success: bool,
    data: Optional[Dict[str, Any]] = None,
    error: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Format a standardized CLI response.

    Args:
        success: Whether the operation was successful
        data: Response data (for successful operations)
        error: Error message (for failed operations)
        details: Extra error context

    Returns:
        Dict[str, Any]: Formatted response
    """
    if success and data is not None:
        return SuccessResponse(data=data).model_dump()
    elif not success and error is not None:
        response = ErrorResponse(error=error, details=details).model_dump()
        if response.get("details") is None:
            del response["details"]
        return response
    else:
        return {"success": success}


def format_outcome_response(outcome: ExtractionOutcome) -> Dict[str, Any]:
    """Wrap an extraction outcome in the CLI response envelope."""
    if outcome.is_failure:
        return format_cli_response(
            False,
            error=outcome.reason or "Unknown error",
            details={"kind": outcome.kind.value, "error_type": outcome.error_type},
        )

    data = outcome.to_dict()
    for key in ("reason", "error_type"):
        data.pop(key, None)
    return format_cli_response(True, data=data)
