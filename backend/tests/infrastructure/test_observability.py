"""Structured logging: JSON lines with domain extras."""

import json
import logging

from aqua_stark.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "aqua_stark.test", logging.WARNING, __file__, 1, "fish %s fed", ("7",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "WARNING"
    assert out["logger"] == "aqua_stark.test"
    assert out["message"] == "fish 7 fed"
    assert "timestamp" in out


def test_json_formatter_surfaces_extras():
    tx = "0x" + "e" * 64
    out = json.loads(JSONFormatter().format(
        _record(tx_hash=tx, entity_type="fish", path="/api/fish/feed", unrelated="x"),
    ))
    assert out["tx_hash"] == tx
    assert out["entity_type"] == "fish"
    assert out["path"] == "/api/fish/feed"
    assert "unrelated" not in out
    assert "error_type" not in out


def test_json_formatter_tags_service():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["service"] == "aqua-stark-api"


def test_setup_logging_replaces_its_own_handler():
    root = logging.getLogger()
    level = root.level
    try:
        first = setup_logging("DEBUG", "json")
        second = setup_logging("WARNING", "text")

        assert first not in root.handlers
        assert second in root.handlers
        assert isinstance(second.formatter, logging.Formatter)
        assert not isinstance(second.formatter, JSONFormatter)
        assert root.level == logging.WARNING
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
    finally:
        root.removeHandler(second)
        root.setLevel(level)
