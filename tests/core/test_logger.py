"""Tests for the logger module."""

import logging
from logging.handlers import RotatingFileHandler

import pytest
from rich.logging import RichHandler

from getstream.core import logger as logger_module
from getstream.core.config import LoggingConfig
from getstream.core.logger import ROOT_LOGGER_NAME, get_logger, is_configured, setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Fixture to reset the SDK logger before and after each test."""
    sdk_logger = logging.getLogger(ROOT_LOGGER_NAME)
    original_handlers = sdk_logger.handlers[:]
    original_level = sdk_logger.level

    yield

    for handler in sdk_logger.handlers:
        handler.close()
    sdk_logger.handlers = original_handlers
    sdk_logger.setLevel(original_level)
    for named_logger in logger_module._loggers.values():
        named_logger.setLevel(logging.NOTSET)
    logger_module._loggers.clear()
    logger_module._configured = False


class TestGetLogger:
    """Tests for the get_logger function."""

    def test_namespaced_name(self):
        logger = get_logger("client")
        assert logger.name == "getstream.client"

    def test_is_cached(self):
        assert get_logger("cached") is get_logger("cached")


class TestSetupLogging:
    """Tests for the setup_logging function."""

    def test_default_uses_rich_handler(self):
        setup_logging()

        sdk_logger = logging.getLogger(ROOT_LOGGER_NAME)
        assert sdk_logger.level == logging.WARNING
        assert len(sdk_logger.handlers) == 1
        assert isinstance(sdk_logger.handlers[0], RichHandler)
        assert is_configured()

    def test_plain_console_handler(self):
        setup_logging(LoggingConfig(level="debug", rich_console=False))

        handler = logging.getLogger(ROOT_LOGGER_NAME).handlers[0]
        assert not isinstance(handler, RichHandler)
        assert isinstance(handler, logging.StreamHandler)
        assert handler.level == logging.DEBUG

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "sdk.log"
        setup_logging(LoggingConfig(level="INFO", log_file=str(log_file)))

        get_logger("test").info("written to file")

        handlers = logging.getLogger(ROOT_LOGGER_NAME).handlers
        file_handlers = [h for h in handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        file_handlers[0].flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_reconfigure_replaces_handlers(self):
        setup_logging()
        setup_logging()

        assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 1

    def test_existing_loggers_follow_level(self):
        logger = get_logger("early")
        setup_logging(LoggingConfig(level="ERROR"))

        assert logger.level == logging.ERROR

    def test_root_logger_untouched(self):
        root_handlers = logging.root.handlers[:]
        setup_logging()

        assert logging.root.handlers == root_handlers
