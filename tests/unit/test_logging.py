"""
Unit tests for utils/logging.py

Tests logging setup and the default request log sink.
"""
import logging

import structlog
from structlog.testing import capture_logs

from mock_http.utils.logging import setup_logging, structlog_request_sink


def test_setup_logging_sets_root_level():
    setup_logging(level="WARNING", json_logs=True)
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1


def test_setup_logging_file_handler(tmp_path):
    log_dir = tmp_path / "logs"
    setup_logging(level="INFO", json_logs=True, log_dir=log_dir)
    assert log_dir.exists()
    assert len(logging.getLogger().handlers) == 2


def test_request_sink_emits_one_event():
    with capture_logs() as logs:
        sink = structlog_request_sink(structlog.get_logger("test"))
        sink("GET", "/contact", 2000, 200)

    assert len(logs) == 1
    event = logs[0]
    assert event["event"] == "request_served"
    assert event["method"] == "GET"
    assert event["path"] == "/contact"
    assert event["delay_ms"] == 2000
    assert event["status"] == 200


def test_request_sink_omits_zero_delay():
    with capture_logs() as logs:
        sink = structlog_request_sink(structlog.get_logger("test"))
        sink("POST", "/anything?status=500", 0, 500)

    assert "delay_ms" not in logs[0]
    assert logs[0]["status"] == 500
