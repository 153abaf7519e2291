"""Structured logging configuration.

Modules log through ``logging.getLogger(__name__)``; this module only
attaches a handler to the package logger. Structured fields are passed as
``extra={...}`` and rendered by JSONFormatter.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

LOGGER_NAME = "payment_initiation"
STRUCTURED_FIELDS = ("order_id", "reference", "idempotency_key", "action")

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in STRUCTURED_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_entry[field] = value

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level: str = "INFO", log_format: str = "json") -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: "json" for one JSON object per line, "text" otherwise.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Calling twice must not duplicate output
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    if log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False

    return logger
