"""
Secret-safe logging for redacted.

Log records render ``Redacted`` arguments through their ``str``/``repr``
hooks already. This module adds a structured JSON formatter whose encoder
also redacts containers passed through ``extra=``.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from redacted.serialization import RedactedJSONEncoder

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

logger = logging.getLogger("redacted")
logger.addHandler(logging.NullHandler())

# Attributes every LogRecord carries; anything else came from ``extra=``
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
    | {"message", "asctime", "taskName"}
)


class _RecordEncoder(RedactedJSONEncoder):
    def default(self, o: Any) -> Any:
        try:
            return super().default(o)
        except TypeError:
            return str(o)


class RedactedJSONFormatter(logging.Formatter):
    """Format each record as a single JSON object.

    Keys: ``timestamp``, ``level``, ``logger``, ``message``, ``exception``
    (when ``exc_info`` is set), ``stack`` (when ``stack_info`` is set), plus
    any ``extra=`` fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                payload[key] = value
        return json.dumps(payload, cls=_RecordEncoder)


def configure_logging(level: int | str = "INFO", json_format: bool = False) -> logging.Handler:
    """Attach a stderr handler to the package logger.

    Args:
        level: Logging level for the package logger.
        json_format: Emit JSON lines instead of plain text.

    Returns:
        The installed handler.
    """
    handler = logging.StreamHandler(sys.stderr)
    if json_format:
        handler.setFormatter(RedactedJSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


__all__ = [
    "PLAIN_FORMAT",
    "RedactedJSONFormatter",
    "configure_logging",
    "logger",
]
