"""Unit tests for logging configuration."""

import logging

import pytest

from leetpatch.config import ParserSettings
from leetpatch.logging import get_logger, setup_logging


@pytest.fixture
def package_logger():
    """Restore the leetpatch logger after each test."""
    logger = logging.getLogger("leetpatch")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate

    yield logger

    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_creates_handler(self, package_logger):
        """setup_logging attaches a handler to the leetpatch logger."""
        initial_handlers = len(package_logger.handlers)

        setup_logging()

        assert len(package_logger.handlers) == initial_handlers + 1

    def test_setup_logging_twice_does_not_stack_handlers(self, package_logger):
        setup_logging()
        count = len(package_logger.handlers)

        setup_logging(level=logging.DEBUG)

        assert len(package_logger.handlers) == count
        assert package_logger.level == logging.DEBUG

    def test_setup_logging_with_custom_level(self, package_logger):
        """setup_logging respects custom log level."""
        setup_logging(level=logging.DEBUG)

        assert package_logger.level == logging.DEBUG

    def test_setup_logging_from_settings(self, package_logger):
        setup_logging(settings=ParserSettings(log_level="error"))

        assert package_logger.level == logging.ERROR

    def test_logger_propagate_is_false(self, package_logger):
        """Logger propagation is disabled to avoid duplicate logs."""
        setup_logging()

        assert package_logger.propagate is False

    def test_setup_logging_formatter(self, package_logger):
        """setup_logging configures formatter with timestamp and level."""
        setup_logging()

        formats = [
            h.formatter._fmt for h in package_logger.handlers if h.formatter
        ]
        assert any("asctime" in f and "levelname" in f for f in formats)


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_returns_logger_instance(self):
        result = get_logger("test.module")
        assert isinstance(result, logging.Logger)

    def test_get_logger_uses_provided_name(self):
        result = get_logger("leetpatch.patches.parser")
        assert result.name == "leetpatch.patches.parser"

    def test_get_logger_same_name_returns_same_logger(self):
        assert get_logger("shared.module") is get_logger("shared.module")


def test_logging_helpers_are_exported():
    import leetpatch

    assert leetpatch.setup_logging is setup_logging
    assert leetpatch.get_logger is get_logger
    assert {"setup_logging", "get_logger"} <= set(leetpatch.__all__)
