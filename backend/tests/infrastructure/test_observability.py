"""Structured logging — JSON formatter fields and setup idempotency."""

import json
import logging

from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.services.user_service", logging.INFO, __file__, 1,
        "User created", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "app.services.user_service"
    assert payload["message"] == "User created"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(user_id="u-1", error_code="EMAIL_CONFLICT", unrelated="x"),
    ))
    assert payload["user_id"] == "u-1"
    assert payload["error_code"] == "EMAIL_CONFLICT"
    assert "unrelated" not in payload


def test_json_formatter_keeps_non_ascii():
    record = _record()
    record.msg = "Meikäläinen"
    assert "Meikäläinen" in JSONFormatter().format(record)


def _drop_roster_handlers():
    for handler in list(logging.root.handlers):
        if handler.get_name() == "roster":
            logging.root.removeHandler(handler)


def test_setup_logging_does_not_stack_handlers():
    _drop_roster_handlers()
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")
    try:
        assert len(logging.root.handlers) == before + 1
        assert logging.root.level == logging.WARNING
    finally:
        _drop_roster_handlers()
        logging.root.setLevel(logging.WARNING)
