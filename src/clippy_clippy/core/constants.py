#!/usr/bin/env python3
"""
Constants for Clipboard OCR

This module defines constants used throughout the clipboard text extraction
pipeline, ensuring consistent configuration across the application.

This module is part of the Core Layer and should have no dependencies on
Presentation layer components.

Sample input:
- None (module contains only constants)

Expected output:
- None (module contains only constants)
"""

from typing import Dict, Any

APP_NAME = "clippy-clippy"
CONFIG_FILE_NAME = "config.yaml"

# Fixed scheme marker for the PNG payload embedded in the request
DATA_URI_PREFIX = "data:image/png;base64,"

# Bytes per pixel of the raw clipboard buffer (RGBA8 / BGRA8)
BYTES_PER_PIXEL = 4

# Defaults applied when the configuration file leaves a field unset
DEFAULT_MODEL = "gpt-4-vision-preview"
DEFAULT_MAX_TOKENS = 1024
DEFAULT_REQUEST_TIMEOUT_SECONDS = 60

# Image detail requested from the vision model ("low", "high" or "auto")
IMAGE_DETAIL = "high"

PLAIN_TEXT_PROMPT = (
    "Extract all text content from this image accurately. "
    "Output *only* the extracted text and nothing else. "
    "Do not include any introductory phrases."
)

MARKDOWN_PROMPT = (
    "Extract all text from this image accurately. If the image contains tabular data, "
    "a list, code, or other structured content, format the output as GitHub Flavored Markdown. "
    "Pay attention to formatting details like spacing in tables. "
    "Don't use any image related markdown. Otherwise, return the plain text. "
    "Output *only* the extracted text or markdown content and nothing else. "
    "Do not include any introductory phrases or explanations. "
    "For bullet points, use hyphens instead of bullet characters, like a normal markdown."
)

# Configuration file handling
PLACEHOLDER_TOKEN = "YOUR_API_TOKEN_HERE"

DEFAULT_CONFIG_TEMPLATE = f"""# Configuration for {APP_NAME}
# Get API URL and Token from your OpenAI-compatible provider
api_url: "https://api.openai.com/v1/chat/completions"
api_token: "{PLACEHOLDER_TOKEN}"

# Optional: Specify the model name (defaults to {DEFAULT_MODEL} if unset)
# model_name: "{DEFAULT_MODEL}"

# Optional: Set max tokens for the response (defaults to {DEFAULT_MAX_TOKENS} if unset)
# max_tokens: {DEFAULT_MAX_TOKENS}

# Optional: Set HTTP request timeout in seconds (defaults to {DEFAULT_REQUEST_TIMEOUT_SECONDS} if unset)
# request_timeout_seconds: {DEFAULT_REQUEST_TIMEOUT_SECONDS}
"""

# Environment variables that override values from the configuration file
ENV_OVERRIDES: Dict[str, str] = {
    "api_url": "CLIPPY_API_URL",
    "api_token": "CLIPPY_API_TOKEN",
    "model_name": "CLIPPY_MODEL_NAME",
}
LOG_LEVEL_ENV = "CLIPPY_LOG_LEVEL"

# Logging settings
LOG_SETTINGS: Dict[str, Any] = {
    "DEFAULT_LEVEL": "WARNING",
    "FORMAT": "<level>{level}: {message}</level>",
}
LOG_MAX_STR_LEN: int = 100  # Maximum string length for truncated logging


if __name__ == "__main__":
    """Validate module constants"""
    import sys

    all_validation_failures = []
    total_tests = 0

    # Test 1: Data URI prefix declares PNG and ends with the base64 separator
    total_tests += 1
    if not (DATA_URI_PREFIX.startswith("data:image/png") and DATA_URI_PREFIX.endswith(",")):
        all_validation_failures.append(f"Unexpected DATA_URI_PREFIX: {DATA_URI_PREFIX}")

    # Test 2: Numeric defaults are positive
    total_tests += 1
    for name, value in [
        ("DEFAULT_MAX_TOKENS", DEFAULT_MAX_TOKENS),
        ("DEFAULT_REQUEST_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT_SECONDS),
        ("LOG_MAX_STR_LEN", LOG_MAX_STR_LEN),
    ]:
        if not isinstance(value, int) or value <= 0:
            all_validation_failures.append(f"{name} should be a positive integer, got {value}")

    # Test 3: Template carries the placeholder token
    total_tests += 1
    if PLACEHOLDER_TOKEN not in DEFAULT_CONFIG_TEMPLATE:
        all_validation_failures.append("DEFAULT_CONFIG_TEMPLATE is missing the placeholder token")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        sys.exit(0)
