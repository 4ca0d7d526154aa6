"""Logging configuration for keyescape."""

import logging
import os
import sys
import time

# Constants
ROOT_LOGGER_NAME = "keyescape"
LOG_LEVEL_ENV_VAR = "KEYESCAPE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s.%(msecs)03dZ [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
_DEFAULT_LOG_LEVEL = logging.ERROR

# Create root logger
_root_logger = logging.getLogger(ROOT_LOGGER_NAME)


def level_from_env(default: int = _DEFAULT_LOG_LEVEL) -> tuple[int, str | None]:
    """Read the numeric log level from the `KEYESCAPE_LOG_LEVEL` environment variable.

    Args:
        default: Level returned when the variable is unset or invalid.

    Returns:
        Tuple:
            1. numeric log level
            2. the invalid level name when the variable could not be parsed, otherwise `None`
    """
    env_level_name = os.environ.get(LOG_LEVEL_ENV_VAR, "").upper()
    if not env_level_name:
        return default, None
    numeric_level = getattr(logging, env_level_name, None)
    if not isinstance(numeric_level, int):
        return default, env_level_name
    return numeric_level, None


def make_stderr_handler() -> logging.Handler:
    """Create a stderr handler with UTC timestamps."""
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    # Convert timestamps to UTC
    formatter.converter = time.gmtime
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: int | None = None,
    force: bool = False,
) -> None:
    """Configure the root logger for keyescape.

    The log level is set through a cascade of options:
    1. `level` parameter (if provided).
    2. `KEYESCAPE_LOG_LEVEL` environment variable (if set).
    3. Default ERROR level.

    Args:
        level: Numeric log level override (logging.DEBUG, logging.INFO, etc.)
        force: Force reconfiguration even if already configured
    """
    # Skip if already configured unless forced
    if not force and _root_logger.handlers:
        return

    invalid_name = None
    if level is None:
        level, invalid_name = level_from_env()
    _root_logger.setLevel(level)

    # Clear existing handlers if forcing
    if force:
        for handler in _root_logger.handlers[:]:
            _root_logger.removeHandler(handler)

    if not _root_logger.handlers:
        _root_logger.addHandler(make_stderr_handler())

    # Can only report a bad level once a handler exists
    if invalid_name:
        _root_logger.error(f"Invalid {LOG_LEVEL_ENV_VAR} '{invalid_name}', using default")


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Args:
        name: Hierarchical name for the logger. Idiomatic is to pass `__name__`.

    Returns:
        Configured logger instance
    """
    setup_logging()
    return logging.getLogger(name)
