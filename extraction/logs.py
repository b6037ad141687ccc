"""Structured JSON logging for the strip-tags entry points.

Every record becomes one JSON object per line on stderr.  Only the
fields listed in ``EXTRA_FIELDS`` are lifted from ``extra=``; anything
else passed that way stays out of the output.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

LOGGER_NAME = "striptags"

EXTRA_FIELDS = ("selector", "matches", "removed", "replaced", "error_kind", "chars")


def _utc_timestamp(record: logging.LogRecord) -> str:
    return datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
        timespec="milliseconds"
    )


class StructuredFormatter(logging.Formatter):
    """Render a record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": _utc_timestamp(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (name, getattr(record, name))
            for name in EXTRA_FIELDS
            if getattr(record, name, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _has_structured_handler(logger: logging.Logger) -> bool:
    return any(isinstance(h.formatter, StructuredFormatter) for h in logger.handlers)


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Route the ``striptags`` logger to stderr as JSON lines.

    Idempotent; repeated calls only adjust the level.  Records do not
    reach the root logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not _has_structured_handler(logger):
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.propagate = False
    return logger
