"""Structured Logging — JSON and text formatters for both services.

Invariants:
    - Every record carries timestamp, level, logger name and message
    - Registry and housing context (dept_code, course_code, user_id, ...) is
      surfaced in both formats when the call site passes it via `extra`
    - setup_logging replaces previously installed handlers, so repeated lifespans
      (tests, reloads) never duplicate output
"""

import logging
import json
from datetime import datetime, timezone

_CONTEXT_KEYS = (
    "dept_code", "course_code", "user_id", "building_id",
    "housing_unit_id", "error_code", "path", "outcome",
)


def _record_context(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in _CONTEXT_KEYS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_record_context(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class ContextTextFormatter(logging.Formatter):
    """Human-readable lines with context appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _record_context(record)
        if not context:
            return line
        pairs = " ".join(f"{k}={v}" for k, v in context.items())
        return f"{line} [{pairs}]"


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else ContextTextFormatter())
    logging.root.handlers = [handler]
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
