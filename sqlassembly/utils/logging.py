"""Centralized logging configuration for sqlassembly.

Every logger handed out by :func:`get_logger` lives under the ``sqlassembly``
namespace so applications can tune the whole library from one place.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from sqlassembly._serialization import encode_json

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = (
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
)

ROOT_LOGGER_NAME = "sqlassembly"


class StructuredFormatter(logging.Formatter):
    """Structured JSON formatter."""

    def format(self, record: LogRecord) -> str:
        """Format log record as structured JSON.

        Args:
            record: The log record to format

        Returns:
            JSON formatted log entry
        """
        log_entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if hasattr(record, "extra_fields"):
            log_entry.update(record.extra_fields)  # pyright: ignore

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return encode_json(log_entry)


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance under the sqlassembly namespace.

    Args:
        name: Logger name. If not provided, returns the root sqlassembly logger.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: str = "INFO",
    format_style: str = "structured",
    log_to_file: str | None = None,
    extra_handlers: list[logging.Handler] | None = None,
) -> None:
    """Configure logging for the entire sqlassembly library.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: Log format style ("structured" for JSON, "simple" for text)
        log_to_file: Optional file path to log to
        extra_handlers: Additional handlers to add
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    formatter: logging.Formatter
    if format_style == "structured":
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        file_handler = logging.FileHandler(log_to_file)
        # files always get structured output
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    if extra_handlers:
        for handler in extra_handlers:
            root_logger.addHandler(handler)

    root_logger.propagate = False

    root_logger.debug(
        "sqlassembly logging configured",
        extra={
            "extra_fields": {
                "level": level,
                "format_style": format_style,
                "handlers_count": len(root_logger.handlers),
            }
        },
    )
