"""Logging configuration for talent-match."""

import logging
import sys

from talent_match.config.settings import get_settings

# Logger name for the application
LOGGER_NAME = "talent_match"

# Default log format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Track if logging has been configured
_configured = False


def configure_logging(
    level: str | None = None,
    format_string: str = LOG_FORMAT,
    date_format: str = DATE_FORMAT,
) -> logging.Logger:
    """Configure and return the ``talent_match`` package logger.

    Module loggers are created with ``logging.getLogger(__name__)`` and sit
    under the ``talent_match`` namespace, so they inherit the handler and
    level set here. Calling again only changes the level.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to ``Settings.log_level``.
        format_string: Format string for log messages.
        date_format: Format string for timestamps.

    Returns:
        The package logger.
    """
    global _configured

    if level is None:
        level = get_settings().log_level
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    if _configured:
        for handler in logger.handlers:
            handler.setLevel(log_level)
        return logger

    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(format_string, datefmt=date_format))
    logger.addHandler(handler)
    logger.propagate = False

    _configured = True
    return logger


def reset_logging() -> None:
    """Undo ``configure_logging`` (useful for testing)."""
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

    _configured = False
