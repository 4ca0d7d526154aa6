"""Logging configuration for the keyescape CLI."""

import logging
import os
import sys

from ...utils.logger import ROOT_LOGGER_NAME, level_from_env, make_stderr_handler


def setup_cli_logging(
    log_level: int | None = None,
) -> None:
    """Configure the root logger for the keyescape CLI.

    The log level is set through a cascade of options:
    1. `log_level` parameter (if provided).
    2. `KEYESCAPE_LOG_LEVEL` environment variable (if set).
    3. `logging.ERROR` default.

    Args:
        log_level: Numeric log level override (logging.DEBUG, logging.INFO, etc.)
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)

    # remove existing handlers and add the CLI one
    root_logger.handlers.clear()
    root_logger.addHandler(make_stderr_handler())

    if log_level is None:
        log_level, invalid_name = level_from_env()
        if invalid_name:
            root_logger.error(f"Invalid KEYESCAPE_LOG_LEVEL '{invalid_name}', using ERROR.")

    root_logger.setLevel(log_level)

    # Limit traceback display to show only on debug and more verbose levels
    if log_level > logging.DEBUG:
        os.environ["_TYPER_STANDARD_TRACEBACK"] = "1"
        sys.tracebacklimit = 0
