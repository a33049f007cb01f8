#!/usr/bin/env python3
"""
HTTP Transport for the Chat-Completion Endpoint

This module posts a CompletionRequest as JSON with bearer-token authentication
and returns the HTTP status together with the full response body text. The body
is always read as text, whatever the status, so error bodies stay available for
diagnostics even when they are not JSON.

This module is part of the Core Layer and should have no dependencies on
Presentation layer components.

Sample input:
- api_url: "https://api.openai.com/v1/chat/completions"
- api_token: "sk-..."
- request: CompletionRequest(...)
- timeout_seconds: 60

Expected output:
- (200, '{"choices": [...]}')
- On connection failure or timeout: TransportError
"""

from typing import TYPE_CHECKING, Tuple

import requests
from loguru import logger

from clippy_clippy.core.errors import TransportError
from clippy_clippy.core.log_utils import truncate_large_value
from clippy_clippy.core.schemas import CompletionRequest

if TYPE_CHECKING:
    from loguru import Logger


def build_headers(api_token: str) -> dict:
    return {
        "Authorization": f"Bearer {api_token}",
        "Content-Type": "application/json",
    }


def post_completion_request(
    api_url: str,
    api_token: str,
    request: CompletionRequest,
    timeout_seconds: float,
    log: "Logger" = logger
) -> Tuple[int, str]:
    """
    Sends the request and returns the raw HTTP exchange result.

    The session, and with it the connection, is closed on every exit path.

    Args:
        api_url: Endpoint URL
        api_token: Bearer token
        request: Completion request to serialize
        timeout_seconds: Connect and read timeout
        log: Diagnostics sink

    Returns:
        Tuple[int, str]: (status code, response body text)

    Raises:
        TransportError: If the connection fails or the timeout elapses
    """
    log.info(f"Sending request to API endpoint: {api_url}")
    log.debug(f"Request payload model: {request.model}, max_tokens: {request.max_tokens}")

    try:
        with requests.Session() as session:
            response = session.post(
                api_url,
                json=request.to_payload(),
                headers=build_headers(api_token),
                timeout=timeout_seconds,
            )
            status_code = response.status_code
            body = response.text
    except requests.exceptions.Timeout as e:
        log.error(f"Request to {api_url} timed out after {timeout_seconds}s")
        raise TransportError(
            f"Request to the API timed out after {timeout_seconds} seconds: {e}"
        ) from e
    except requests.exceptions.RequestException as e:
        log.error(f"Request to {api_url} failed: {e}")
        raise TransportError(f"Failed to send request to the API: {e}") from e

    log.debug(f"API response status: {status_code}")
    log.debug(f"API response body: {truncate_large_value(body)}")
    return status_code, body
