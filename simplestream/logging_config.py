"""Logging configuration for simplestream."""

import logging
import os
import sys
from typing import Any, Dict

LOGGER_NAME = "simplestream"
DEFAULT_LOG_LEVEL = "WARNING"


def resolve_level(level: str) -> int:
    """Map a level name to its number, falling back to DEFAULT_LOG_LEVEL for unknown names."""
    value = logging.getLevelName(level.upper())
    if isinstance(value, int):
        return value
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def setup_logging(level: str = DEFAULT_LOG_LEVEL, structured: bool = False) -> logging.Logger:
    """
    Set up logging configuration.

    Records go to stderr so they never mix with query output on stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        structured: Whether to use structured JSON logging

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(resolve_level(level))

    handler = logging.StreamHandler(sys.stderr)

    if structured:
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s - %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def set_level(level: str) -> None:
    """Change the level of the package logger after setup."""
    logging.getLogger(LOGGER_NAME).setLevel(resolve_level(level))


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        import json
        from datetime import datetime

        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


# Global logger instance
logger = setup_logging(
    level=os.getenv("SIMPLESTREAM_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    structured=os.getenv("SIMPLESTREAM_LOG_FORMAT", "").lower() == "json",
)
