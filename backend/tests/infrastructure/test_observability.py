"""Structured logging: JSON shape, extras, idempotent setup."""

import json
import logging

from hospital.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "hospital.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "WARNING"
    assert out["logger"] == "hospital.test"
    assert out["message"] == "hello world"
    assert "timestamp" in out


def test_json_formatter_includes_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(error_kind="store", path="/api/doctors", password="secret"),
    ))
    assert out["error_kind"] == "store"
    assert out["path"] == "/api/doctors"
    assert "password" not in out


def test_setup_logging_does_not_stack_handlers():
    before = len(logging.root.handlers)
    first = setup_logging("DEBUG", "text")
    second = setup_logging("INFO", "json")
    try:
        assert len(logging.root.handlers) == before + 1
        assert first not in logging.root.handlers
        assert isinstance(second.formatter, JSONFormatter)
        assert logging.root.level == logging.INFO
    finally:
        logging.root.removeHandler(second)
