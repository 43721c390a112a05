"""Tests for logging utilities."""

import logging
from io import StringIO

import pytest

from bayeskit.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


def test_get_logger_returns_logger():
    """Test that get_logger returns a namespaced logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "bayeskit.test_module"


def test_get_logger_keeps_package_prefix():
    """Module names already under bayeskit are not prefixed twice."""
    logger = get_logger("bayeskit.exact.elimination")
    assert logger.name == "bayeskit.exact.elimination"
    assert get_logger().name == "bayeskit"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    logger1 = get_logger("test_module")
    logger2 = get_logger("test_module")
    assert logger1 is logger2


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG

        set_log_level("ERROR")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging_routes_to_stream():
    """Test configure_logging replaces handlers with the given stream."""
    stream = StringIO()
    logger = get_logger("test_module")
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        logger.debug("Debug message")
        output = stream.getvalue()
        assert "Debug message" in output
        assert "[DEBUG] bayeskit.test_module" in output
    finally:
        configure_logging(level=logging.WARNING)


def test_library_modules_log_at_debug():
    """Inference routines emit DEBUG traces through the package loggers."""
    from bayeskit import burglary_network, elimination_ask

    # Make sure the module logger exists before reconfiguring handlers
    get_logger("bayeskit.exact.elimination")
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        elimination_ask("Burglary", {"JohnCalls": True}, burglary_network())
        assert "Summed out" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    logger = get_logger("test_module")
    assert logger.propagate is False


def test_unknown_level_name_is_rejected():
    with pytest.raises(ValueError, match="Unknown logging level"):
        set_log_level("LOUD")
    with pytest.raises(ValueError):
        configure_logging(level="chatty")


def test_configure_logging_custom_format():
    stream = StringIO()
    logger = get_logger("test_module")
    try:
        configure_logging(level="INFO", format_string="%(name)s|%(message)s", stream=stream)
        logger.info("hello")
        logger.debug("hidden")
        assert stream.getvalue() == "bayeskit.test_module|hello\n"
    finally:
        configure_logging(level=logging.WARNING)


def test_new_loggers_inherit_configured_level():
    try:
        set_log_level("ERROR")
        logger = get_logger("created_after_set_level")
        assert logger.level == logging.ERROR
        assert all(handler.level == logging.ERROR for handler in logger.handlers)
    finally:
        set_log_level(logging.WARNING)
