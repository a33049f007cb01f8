#!/usr/bin/env python3
"""
Configuration for Clipboard OCR

Loads the endpoint settings from a YAML file in the user's configuration
directory, applies CLIPPY_* environment overrides (a local .env file is read
with python-dotenv) and fills in defaults for the optional fields.

On first run the file does not exist yet: a commented template is written and,
unless CLIPPY_API_TOKEN supplies the token, ConfigNotReady tells the user to
edit it. A token that is empty or still the placeholder is reported the same way.

Sample Input/Output:

- Loading the configuration:
  from clippy_clippy.core.config import load_config
  config = load_config()
  config.api_url, config.model_name, config.max_tokens

- Running validation:
  python -m clippy_clippy.core.config
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import typer
import yaml
from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field
from pydantic import ValidationError as SchemaValidationError

from clippy_clippy.core.constants import (
    APP_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_TEMPLATE,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    ENV_OVERRIDES,
    PLACEHOLDER_TOKEN,
)
from clippy_clippy.core.errors import ConfigError, ConfigNotReady


class ClippyConfig(BaseModel):
    """Schema for the configuration file."""
    api_url: str = Field(..., description="Chat-completion endpoint URL")
    api_token: str = Field(..., description="Bearer token for the endpoint")
    model_name: str = Field(DEFAULT_MODEL, description="Vision-capable model identifier")
    max_tokens: int = Field(DEFAULT_MAX_TOKENS, gt=0, description="Token budget for the reply")
    request_timeout_seconds: int = Field(
        DEFAULT_REQUEST_TIMEOUT_SECONDS, gt=0, description="HTTP request timeout in seconds"
    )


def get_config_path() -> Path:
    """
    Returns the default configuration file path, creating its directory.

    Returns:
        Path: <user config dir>/clippy-clippy/config.yaml
    """
    config_dir = Path(typer.get_app_dir(APP_NAME))
    if not config_dir.exists():
        try:
            config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigError(f"Failed to create config directory at {config_dir}: {e}") from e
        logger.info(f"Created config directory at: {config_dir}")
    return config_dir / CONFIG_FILE_NAME


def write_default_config(config_path: Path) -> None:
    try:
        config_path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to write default config file to {config_path}: {e}") from e


def read_config_file(config_path: Path) -> Dict[str, Any]:
    """
    Reads and parses the YAML configuration file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Dict[str, Any]: Raw configuration mapping
    """
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config file from {config_path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML config file at {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file at {config_path} must contain a mapping, got {type(data).__name__}"
        )
    return data


def apply_env_overrides(data: Dict[str, Any], environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Returns a copy of data with non-empty CLIPPY_* environment values applied."""
    environ = os.environ if environ is None else environ
    merged = dict(data)
    for field, env_name in ENV_OVERRIDES.items():
        value = environ.get(env_name, "").strip()
        if value:
            logger.debug(f"Using {env_name} from environment for '{field}'")
            merged[field] = value
    return merged


def load_config(
    config_path: Optional[Path] = None,
    environ: Optional[Dict[str, str]] = None
) -> ClippyConfig:
    """
    Loads the configuration, creating the template on first run.

    Args:
        config_path: Explicit configuration file; defaults to the user config dir
        environ: Environment mapping used for overrides; defaults to os.environ

    Returns:
        ClippyConfig: Validated configuration with defaults applied

    Raises:
        ConfigNotReady: Template just created, or token not filled in
        ConfigError: Unreadable, unparseable or invalid configuration
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    if config_path is None:
        config_path = get_config_path()
        if not config_path.exists():
            write_default_config(config_path)
            # An environment token replaces the template placeholder
            if not environ.get(ENV_OVERRIDES["api_token"], "").strip():
                raise ConfigNotReady(
                    f"Configuration file created at {config_path}. "
                    "Please edit it with your API details.",
                    path=str(config_path),
                )
    elif not config_path.exists():
        raise ConfigError(f"Specified config file does not exist: {config_path}")

    logger.info(f"Using configuration file: {config_path}")
    data = apply_env_overrides(read_config_file(config_path), environ)

    token = str(data.get("api_token") or "").strip()
    if not token or token == PLACEHOLDER_TOKEN:
        raise ConfigNotReady(
            f"Please replace '{PLACEHOLDER_TOKEN}' with your actual API token in {config_path}",
            path=str(config_path),
        )

    # Keys present but left empty fall back to defaults
    data = {key: value for key, value in data.items() if value is not None}

    try:
        return ClippyConfig(**data)
    except SchemaValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e


if __name__ == "__main__":
    """Validate configuration loading against a temporary file"""
    import sys
    import tempfile

    all_validation_failures = []
    total_tests = 0

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / CONFIG_FILE_NAME

        # Test 1: Template carries the placeholder and is rejected
        total_tests += 1
        path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
        try:
            load_config(path, environ={})
            all_validation_failures.append("Placeholder token was accepted")
        except ConfigNotReady:
            pass

        # Test 2: Defaults are applied
        total_tests += 1
        path.write_text('api_url: "http://localhost:8080/v1/chat/completions"\napi_token: "abc"\n', encoding="utf-8")
        config = load_config(path, environ={})
        if config.model_name != DEFAULT_MODEL or config.max_tokens != DEFAULT_MAX_TOKENS:
            all_validation_failures.append(f"Defaults not applied: {config}")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        sys.exit(0)
