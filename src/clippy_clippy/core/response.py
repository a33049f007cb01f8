#!/usr/bin/env python3
"""
Response Interpretation for the Chat-Completion Endpoint

This module classifies an HTTP exchange result into extracted text or a named
failure. Remote endpoints mix transport-level and application-level errors, so
the status code alone is not trusted: an embedded error object is checked at
every status and always wins.

Order of checks:
1. Parse the body as a completion document, whatever the status.
2. Non-2xx: ApiError if an error object parsed, otherwise HttpError with the raw body.
3. 2xx with an unparseable body: MalformedResponse.
4. 2xx with an error object: ApiError.
5. First choice wins; no choices is NoChoices; null content is "".

This module is part of the Core Layer and should have no dependencies on
Presentation layer components.

Sample input:
- (401, '{"error": {"message": "bad key", "type": "invalid_request_error"}}')
- (200, '{"choices": [{"message": {"content": null}}]}')
- (503, 'Service Unavailable')

Expected output:
- ApiError(message="bad key", kind="invalid_request_error")
- ""
- HttpError(503, "Service Unavailable")
"""

from typing import TYPE_CHECKING, Optional, Tuple

from loguru import logger
from pydantic import ValidationError as SchemaValidationError

from clippy_clippy.core.errors import ApiError, HttpError, MalformedResponse, NoChoices
from clippy_clippy.core.log_utils import truncate_large_value
from clippy_clippy.core.schemas import Choice, CompletionResponse

if TYPE_CHECKING:
    from loguru import Logger


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code <= 299


def parse_completion_response(body: str) -> Tuple[Optional[CompletionResponse], Optional[str]]:
    """
    Attempts to parse a response body as a completion document.

    Args:
        body: Raw response body text

    Returns:
        Tuple[Optional[CompletionResponse], Optional[str]]: (parsed document, parse error)
    """
    try:
        return CompletionResponse.model_validate_json(body), None
    except SchemaValidationError as e:
        return None, f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}"


def check_response(status_code: int, body: str, log: "Logger" = logger) -> CompletionResponse:
    """
    Applies the status and error-object checks and returns the parsed document.

    Args:
        status_code: HTTP status code
        body: Raw response body text
        log: Diagnostics sink

    Returns:
        CompletionResponse: Parsed document with no embedded error

    Raises:
        ApiError: Embedded error object, at any status
        HttpError: Non-2xx status without a parseable error object
        MalformedResponse: 2xx status with an unparseable body
    """
    parsed, parse_error = parse_completion_response(body)

    if not is_success_status(status_code):
        if parsed is not None and parsed.error is not None:
            log.error(
                f"API Error Response: Type: {parsed.error.kind}, Message: {parsed.error.message}"
            )
            raise ApiError(parsed.error.message, parsed.error.kind, status_code)
        log.error(f"API Error Response Body: {truncate_large_value(body)}")
        raise HttpError(status_code, body)

    if parsed is None:
        log.error(f"Could not parse successful API response: {parse_error}")
        raise MalformedResponse(body, status_code, detail=parse_error or "")

    if parsed.error is not None:
        log.error(
            "API returned success status but included an error object: "
            f"Type: {parsed.error.kind}, Message: {parsed.error.message}"
        )
        raise ApiError(parsed.error.message, parsed.error.kind, status_code)

    return parsed


def first_choice(response: CompletionResponse, status_code: int, log: "Logger" = logger) -> Choice:
    """Returns the first choice, raising NoChoices when there is none."""
    if not response.choices:
        log.warning("API response did not contain any choices/content, although status was success.")
        raise NoChoices(status_code)
    return response.choices[0]


def extract_text(choice: Choice, log: "Logger" = logger) -> str:
    """Returns the choice's text body; a null body becomes an empty string."""
    if choice.message.content is None:
        log.warning("API response choice message content was null.")
        return ""
    return choice.message.content


def log_usage(response: CompletionResponse, log: "Logger" = logger) -> None:
    if response.usage is not None:
        log.info(
            f"API usage: Prompt tokens={response.usage.prompt_tokens}, "
            f"Completion tokens={response.usage.completion_tokens}, "
            f"Total tokens={response.usage.total_tokens}"
        )
    else:
        log.warning("API response did not include usage information.")


def interpret_response(status_code: int, body: str, log: "Logger" = logger) -> Tuple[str, CompletionResponse]:
    """
    Classifies an HTTP exchange result and extracts the reply text.

    Args:
        status_code: HTTP status code
        body: Raw response body text
        log: Diagnostics sink

    Returns:
        Tuple[str, CompletionResponse]: Extracted text and the parsed document

    Raises:
        ApiError, HttpError, MalformedResponse, NoChoices
    """
    response = check_response(status_code, body, log=log)
    log_usage(response, log=log)

    choice = first_choice(response, status_code, log=log)
    log.info("Successfully received response from API.")
    log.debug(f"Finish reason: {choice.finish_reason or 'N/A'}")

    return extract_text(choice, log=log), response


if __name__ == "__main__":
    """Validate response interpretation with sample bodies"""
    import sys

    all_validation_failures = []
    total_tests = 0

    # Test 1: Error object at 401
    total_tests += 1
    try:
        interpret_response(401, '{"error":{"message":"bad key","type":"invalid_request_error"}}')
        all_validation_failures.append("401 with error object did not raise")
    except ApiError as e:
        if e.api_message != "bad key" or e.kind != "invalid_request_error":
            all_validation_failures.append(f"Unexpected ApiError fields: {e.api_message}, {e.kind}")

    # Test 2: Null content
    total_tests += 1
    text, _ = interpret_response(200, '{"choices":[{"message":{"content":null}}]}')
    if text != "":
        all_validation_failures.append(f"Null content: expected empty string, got {text!r}")

    # Test 3: Non-JSON error body
    total_tests += 1
    try:
        interpret_response(503, "Service Unavailable")
        all_validation_failures.append("503 plain text did not raise")
    except HttpError as e:
        if e.status_code != 503 or e.raw_body != "Service Unavailable":
            all_validation_failures.append(f"Unexpected HttpError fields: {e.status_code}, {e.raw_body}")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        sys.exit(0)
