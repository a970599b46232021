"""Structured Logging: JSON formatter and setup for the API process.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (error_code, error_kind, trace_id, entity ids) surfaced when present
    - JSON format in production, human-readable text in development
    - setup_logging is idempotent: calling it twice never duplicates handlers

Design Decisions:
    - stdlib logging + small JSONFormatter: no extra dependency for one formatter
    - setup_logging called once from create_app
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "error_code", "error_kind", "trace_id", "path", "method",
    "user_id", "product_id", "order_id",
)

_HANDLER_NAME = "resultpattern"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure root logging for the application."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
