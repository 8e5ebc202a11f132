import json
import logging

from essay_router.infrastructure.logging.logger import JsonFormatter


def _record(msg):
    record = logging.LogRecord("essay_router", logging.ERROR, __file__, 1, msg, None, None)
    record.extra = {"code": "API_ERROR", "http_status": 502}
    return record


def test_json_formatter_merges_extra():
    data = json.loads(JsonFormatter().format(_record("Error processing chat request: boom")))
    assert data["level"] == "ERROR"
    assert data["name"] == "essay_router"
    assert data["msg"] == "Error processing chat request: boom"
    assert data["code"] == "API_ERROR"
    assert data["ts"].endswith("Z")


def test_json_formatter_redacts():
    data = json.loads(JsonFormatter(redact_content=True).format(_record("x" * 200)))
    assert data["msg"] == "x" * 64
