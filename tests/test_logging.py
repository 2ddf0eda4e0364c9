"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers
from datetime import date

import pytest

from finwise.config import BaseConfig
from finwise.logging_config import JSONFormatter, get_logger, setup_logging


def _record(**kwargs) -> logging.LogRecord:
    defaults = dict(
        name="finwise.test",
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg="Test message",
        args=(),
        exc_info=None,
    )
    defaults.update(kwargs)
    return logging.LogRecord(**defaults)


def test_json_formatter():
    formatter = JSONFormatter()
    record = _record()
    record.funcName = "test_function"

    log_data = json.loads(formatter.format(record))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "finwise.test"
    assert log_data["message"] == "Test message"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_includes_extra_fields():
    record = _record()
    record.installment_id = 7
    record.due_date = date(2026, 2, 17)

    log_data = json.loads(JSONFormatter().format(record))

    assert log_data["extra"] == {"installment_id": 7, "due_date": "2026-02-17"}


def test_json_formatter_with_exception():
    try:
        raise ValueError("Test error")
    except ValueError:
        import sys

        exc_info = sys.exc_info()

    log_data = json.loads(
        JSONFormatter().format(_record(level=logging.ERROR, msg="Error occurred", exc_info=exc_info))
    )

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"]


def test_setup_logging(tmp_path, monkeypatch):
    monkeypatch.setenv("FINWISE_DATA_DIR", str(tmp_path))
    config = BaseConfig()
    config.DEV_MODE = True

    logger = setup_logging(config)

    assert logger.name == "finwise"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    log_file = tmp_path / "logs" / "finwise.log"
    assert log_file.exists()

    get_logger("services.bills").info("Bill paid", extra={"bill_id": 3})
    for handler in logger.handlers:
        handler.flush()

    lines = [line for line in log_file.read_text().splitlines() if line.strip()]
    entries = [json.loads(line) for line in lines]
    assert entries[0]["message"] == "Logging initialized"
    assert entries[-1]["logger"] == "finwise.services.bills"
    assert entries[-1]["extra"] == {"bill_id": 3}


def test_setup_logging_twice_does_not_duplicate_handlers(tmp_path, monkeypatch):
    monkeypatch.setenv("FINWISE_DATA_DIR", str(tmp_path))
    config = BaseConfig()

    setup_logging(config)
    logger = setup_logging(config)

    assert len(logger.handlers) == 2


def test_get_logger():
    assert get_logger("module1").name == "finwise.module1"
    assert get_logger("finwise.services.installments").name == "finwise.services.installments"
    assert get_logger("finwise").name == "finwise"


@pytest.mark.parametrize("dev_mode", [True, False])
def test_logging_levels_by_mode(tmp_path, monkeypatch, dev_mode):
    monkeypatch.setenv("FINWISE_DATA_DIR", str(tmp_path))
    config = BaseConfig()
    config.DEV_MODE = dev_mode

    logger = setup_logging(config)

    console_handler = next(
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.handlers.RotatingFileHandler)
    )
    assert console_handler.level == (logging.INFO if dev_mode else logging.WARNING)
    assert logger.level == (logging.DEBUG if dev_mode else logging.INFO)
