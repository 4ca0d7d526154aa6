"""Tests for the logger module using unittest methodology."""

import io
import logging
import os
import time
import unittest
from unittest import mock

from keyescape.utils.logger import (
    LOG_LEVEL_ENV_VAR,
    ROOT_LOGGER_NAME,
    _root_logger,
    get_logger,
    level_from_env,
    make_stderr_handler,
    setup_logging,
)


class TestLogger(unittest.TestCase):
    """Test cases for the logger module."""

    def setUp(self):
        """Remove all handlers after saving the original state."""
        self.original_handlers = list(_root_logger.handlers)
        self.original_level = _root_logger.level
        for handler in _root_logger.handlers[:]:
            _root_logger.removeHandler(handler)

    def tearDown(self):
        """Restore original state after test."""
        _root_logger.setLevel(self.original_level)
        for handler in _root_logger.handlers[:]:
            _root_logger.removeHandler(handler)
        for handler in self.original_handlers:
            _root_logger.addHandler(handler)

    def test_get_logger_returns_correct_logger(self):
        """Test that get_logger returns correctly named loggers."""
        self.assertEqual(get_logger("keyescape.core").name, "keyescape.core")
        self.assertIs(get_logger(ROOT_LOGGER_NAME), _root_logger)

    def test_get_logger_configures_root(self):
        """Test that get_logger installs the stderr handler on first use."""
        self.assertEqual(len(_root_logger.handlers), 0)
        get_logger("keyescape.component")
        self.assertEqual(len(_root_logger.handlers), 1)

    def test_setup_logging_with_different_levels(self):
        """Test setup_logging with explicit levels."""
        for level in (logging.DEBUG, logging.INFO, logging.WARNING, logging.CRITICAL):
            with self.subTest(level=logging.getLevelName(level)):
                setup_logging(level=level, force=True)
                self.assertEqual(_root_logger.level, level)

    def test_setup_logging_default_level(self):
        """Test setup_logging defaults to ERROR without env var."""
        with mock.patch.dict(os.environ, {}, clear=True):
            setup_logging(force=True)
        self.assertEqual(_root_logger.level, logging.ERROR)

    def test_setup_logging_with_environment_variable(self):
        """Test setup_logging respects the environment variable."""
        with mock.patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "debug"}):
            setup_logging(force=True)
        self.assertEqual(_root_logger.level, logging.DEBUG)

    def test_setup_logging_invalid_environment_variable(self):
        """Test an invalid level name falls back to ERROR and is reported."""
        with (
            mock.patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "LOUD"}),
            mock.patch.object(_root_logger, "error") as mock_error,
        ):
            setup_logging(force=True)
            mock_error.assert_called_once()
            self.assertIn("Invalid KEYESCAPE_LOG_LEVEL 'LOUD'", mock_error.call_args[0][0])
        self.assertEqual(_root_logger.level, logging.ERROR)

    def test_level_from_env_rejects_non_level_attribute(self):
        """Test names of non-level logging attributes are rejected."""
        with mock.patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "basic_format"}):
            self.assertEqual(level_from_env(), (logging.ERROR, "BASIC_FORMAT"))

    def test_setup_logging_force_parameter(self):
        """Test that force=True reconfigures an existing logger."""
        setup_logging(level=logging.INFO)
        self.assertEqual(_root_logger.level, logging.INFO)

        # Without force, level shouldn't change
        setup_logging(level=logging.DEBUG)
        self.assertEqual(_root_logger.level, logging.INFO)

        # With force, level should change and handlers are not duplicated
        setup_logging(level=logging.DEBUG, force=True)
        self.assertEqual(_root_logger.level, logging.DEBUG)
        self.assertEqual(len(_root_logger.handlers), 1)

    def test_handler_format_is_utc(self):
        """Test the stderr handler formats with UTC timestamps."""
        handler = make_stderr_handler()
        self.assertIs(handler.formatter.converter, time.gmtime)

        log_buffer = io.StringIO()
        handler.stream = log_buffer
        _root_logger.addHandler(handler)
        _root_logger.setLevel(logging.WARNING)
        _root_logger.warning("Test message")

        self.assertRegex(
            log_buffer.getvalue(),
            r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z \[WARNING\] keyescape: Test message",
        )
