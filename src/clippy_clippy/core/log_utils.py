"""
Logging utilities for Clipboard OCR
"""

import os
import sys
from typing import Optional

from loguru import logger

from clippy_clippy.core.constants import LOG_LEVEL_ENV, LOG_MAX_STR_LEN, LOG_SETTINGS

VERBOSITY_LEVELS = ["WARNING", "INFO", "DEBUG"]


def truncate_large_value(value, max_str_len=LOG_MAX_STR_LEN):
    """
    Truncates large string values for logging purposes.

    Args:
        value: The string value to truncate
        max_str_len: Maximum string length to allow

    Returns:
        Truncated string
    """
    if isinstance(value, str):
        if len(value) > max_str_len:
            truncated = value[:max_str_len]
            return f"{truncated}... [truncated, {len(value)} chars total]"
    return value


def resolve_log_level(verbosity: int = 0, env_level: Optional[str] = None) -> str:
    """
    Pick the log level from the environment or the --verbose count.

    Args:
        verbosity: Number of times --verbose was given
        env_level: Explicit level, normally read from CLIPPY_LOG_LEVEL

    Returns:
        Level name understood by loguru
    """
    if env_level is None:
        env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        level = env_level.strip().upper()
        try:
            logger.level(level)
            return level
        except ValueError:
            logger.warning(
                f"Unknown log level '{env_level}' in {LOG_LEVEL_ENV}, "
                f"using {LOG_SETTINGS['DEFAULT_LEVEL']}"
            )
            return LOG_SETTINGS["DEFAULT_LEVEL"]
    return VERBOSITY_LEVELS[max(0, min(verbosity, len(VERBOSITY_LEVELS) - 1))]


def configure_logging(level: str = LOG_SETTINGS["DEFAULT_LEVEL"]):
    """
    Setup the process logger with a single stderr sink.

    Args:
        level: Logging level
    """
    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        format=LOG_SETTINGS["FORMAT"],
        level=level,
        colorize=True
    )

    return logger
