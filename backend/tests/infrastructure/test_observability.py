"""Structured Logging: JSON formatter output."""

import json
import logging

from taskboard.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "taskboard.test", logging.INFO, __file__, 1, "Board deleted", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "taskboard.test"
    assert log["message"] == "Board deleted"
    assert "timestamp" in log


def test_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(board_id="b1", cascaded_tasks=3, unrelated="x"),
    ))
    assert log["board_id"] == "b1"
    assert log["cascaded_tasks"] == 3
    assert "unrelated" not in log
