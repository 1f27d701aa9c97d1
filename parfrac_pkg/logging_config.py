"""Structured logging configuration for parfrac.

The engine is used both as a library and through its CLI. Library callers
get a silent ``parfrac`` logger (a ``NullHandler`` only) and decide where
records go; the CLI calls ``setup_logging`` to attach stderr and file output.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

ROOT_LOGGER_NAME = "parfrac"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs structured log entries with timestamp, module, level, and message.

    Records logged with ``extra={"code": ...}`` (a rejected expression's
    error code) carry the code after the level.
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        code = getattr(record, "code", None)
        level = f"{record.levelname}:{code}" if code else record.levelname
        message = f"{timestamp} [{level}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def _detach_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def reset_logging() -> logging.Logger:
    """Close and detach every output handler, leaving only a NullHandler."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    _detach_handlers(logger)
    logger.addHandler(logging.NullHandler())
    return logger


def setup_logging(
    level: str = "WARNING", log_file: Optional[str] = None
) -> logging.Logger:
    """Set up structured logging for the application.

    Calling it again replaces the previous handlers; file handlers from the
    earlier call are closed.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs (if None, logs to stderr)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    _detach_handlers(logger)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (typically module name); None returns the
            package's root logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
