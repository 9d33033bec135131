"""Structured Logging — context fields reach both output formats."""

import json
import logging

from campus_api.infrastructure.observability import (
    ContextTextFormatter, JSONFormatter,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "campus_api.test", logging.INFO, __file__, 1, "Major count changed", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_context():
    out = json.loads(JSONFormatter().format(_record(dept_code="COMS", outcome="incremented")))
    assert out["message"] == "Major count changed"
    assert out["level"] == "INFO"
    assert out["dept_code"] == "COMS"
    assert out["outcome"] == "incremented"
    assert "user_id" not in out


def test_text_formatter_appends_context():
    line = ContextTextFormatter().format(_record(course_code=4156))
    assert line.endswith("Major count changed [course_code=4156]")


def test_text_formatter_without_context():
    line = ContextTextFormatter().format(_record())
    assert line.endswith("Major count changed")
