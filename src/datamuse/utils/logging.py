"""Structured JSON logging for applications using the client.

The library only logs through module loggers under ``datamuse`` and never
touches handlers itself; call setup_structured_logging() from the
application to get one JSON object per log line, with the ``extra``
fields (url, status_code, word_count, ...) as top-level keys.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord carries; anything else came in through extra=
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict[str, Any] = {
            "timestamp": timestamp.isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not callable(value)
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str, ensure_ascii=False)


def setup_structured_logging(level: int = logging.INFO) -> logging.Handler:
    """Route all logging through a single JSON handler on the root logger.

    httpx logs every request at INFO, so its logger is raised to WARNING;
    the ``datamuse`` loggers follow ``level``.

    Returns:
        The installed handler.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("datamuse").setLevel(level)
    return handler
