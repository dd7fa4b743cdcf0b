"""Logger configuration for UnderbarLib.

The package logger carries a NullHandler so importing the library never
prints anything. Call setup_logger() to get output on stdout.
"""

import logging
import sys
from typing import Optional

from .config import get_config

__all__ = ["logger", "setup_logger"]

LOGGER_NAME = "underbarlib"


def setup_logger(
    name: str = LOGGER_NAME,
    level: Optional[str] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (defaults to the package logger)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); falls back
            to the configured log_level, then INFO
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or get_config().log_level or "INFO"
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    configured = logging.getLogger(name)

    # Only attach a stream handler once
    if not any(isinstance(h, logging.StreamHandler) for h in configured.handlers):
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        configured.addHandler(handler)
        configured.propagate = False

    configured.setLevel(getattr(logging, level.upper()))
    return configured


logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())
