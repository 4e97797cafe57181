"""Tests for logging configuration and the JSON formatter."""

import json
import logging

from catalog.infrastructure.logging_setup import (
    JsonFormatter,
    _json_formatter,
    configure_logging,
)


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestJsonFormatter:

    def test_standard_fields(self):
        payload = json.loads(_json_formatter(_record()))
        assert payload == {"level": "INFO", "logger": "test.logger", "message": "hello"}

    def test_extra_fields_promoted(self):
        record = _record()
        record.product_id = 3
        record.category = "Office"

        payload = json.loads(_json_formatter(record))

        assert payload["product_id"] == 3
        assert payload["category"] == "Office"

    def test_formatter_class_delegates(self):
        assert json.loads(JsonFormatter().format(_record("x")))["message"] == "x"


class TestConfigureLogging:

    def teardown_method(self):
        configure_logging(level="WARNING")

    def test_sets_root_level(self):
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_json_handler(self):
        configure_logging(level="INFO", json_logs=True)
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, JsonFormatter)
