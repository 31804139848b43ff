from __future__ import annotations

import json
import logging
import sys

from sitekit.logging_conf import JsonFormatter, get_logger


def _record(msg, **extra) -> logging.LogRecord:
    record = logging.LogRecord("sitekit.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_one_json_object_with_extras() -> None:
    line = JsonFormatter().format(_record("redirect", event="redirect", status_code=301))
    payload = json.loads(line)
    assert payload["message"] == "redirect"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "sitekit.test"
    assert payload["event"] == "redirect"
    assert payload["status_code"] == 301
    assert "lineno" not in payload


def test_dict_message_is_merged() -> None:
    payload = json.loads(JsonFormatter().format(_record({"event": "summary", "count": 3})))
    assert payload["event"] == "summary"
    assert payload["count"] == 3
    assert "message" not in payload


def test_extras_do_not_overwrite_core_keys() -> None:
    payload = json.loads(JsonFormatter().format(_record("x", level="spoofed")))
    assert payload["level"] == "INFO"


def test_exception_info_included() -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record("failed")
        record.exc_info = sys.exc_info()
    payload = json.loads(JsonFormatter().format(record))
    assert "ValueError: boom" in payload["exc_info"]


def test_get_logger_default_name() -> None:
    assert get_logger().name == "sitekit"
    assert get_logger("api").name == "api"
