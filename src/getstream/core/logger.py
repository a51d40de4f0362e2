"""Logging utilities for the Stream SDK.

This module provides centralized logging configuration with support for:
- Rich formatting for console output
- Optional rotating log file
"""

from __future__ import annotations

import logging
from contextlib import suppress
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .config import LoggingConfig

ROOT_LOGGER_NAME = "getstream"

# Global logger registry
_loggers: dict[str, logging.Logger] = {}
_configured = False
_current_level: int = logging.WARNING

console = Console(stderr=True)


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure the ``getstream`` logger namespace.

    The SDK is a library, so only the ``getstream`` namespace logger is
    touched; the root logger of the host application is left alone.

    Args:
        config: LoggingConfig instance. If None, uses defaults.
    """
    global _configured, _current_level

    if config is None:
        config = LoggingConfig()

    sdk_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(sdk_logger.handlers):
        with suppress(Exception):
            handler.flush()
        with suppress(Exception):
            handler.close()
    sdk_logger.handlers.clear()

    level_value = getattr(logging, config.level)
    sdk_logger.setLevel(level_value)

    if config.rich_console:
        console_handler: logging.Handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(config.format))
    console_handler.setLevel(level_value)
    sdk_logger.addHandler(console_handler)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
            delay=True,
        )
        file_handler.setLevel(level_value)
        file_handler.setFormatter(logging.Formatter(config.format))
        sdk_logger.addHandler(file_handler)

    _configured = True
    _current_level = level_value

    for lg in _loggers.values():
        lg.setLevel(level_value)

    get_logger("setup").debug("Logging configured: level=%s", config.level)


def get_logger(name: str) -> logging.Logger:
    """Get or create a logger under the ``getstream`` namespace.

    Args:
        name: Logger name (typically the component name)

    Returns:
        Logger instance
    """
    if name not in _loggers:
        logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
        if _configured:
            logger.setLevel(_current_level)
        _loggers[name] = logger

    return _loggers[name]


def is_configured() -> bool:
    """Return True once :func:`setup_logging` has run."""
    return _configured
