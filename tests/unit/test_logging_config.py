"""Unit tests for rectquad logging configuration."""

from __future__ import annotations

import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from unittest import mock

import rectquad
from rectquad.logging_config import (
    LOGGER_NAME,
    JsonFormatter,
    _clear_handlers,
    _get_level,
    _get_logger,
)


class TestSilentByDefault:
    def test_logger_has_null_handler(self):
        logger = logging.getLogger(LOGGER_NAME)
        null_handlers = [h for h in logger.handlers if isinstance(h, logging.NullHandler)]
        assert len(null_handlers) >= 1

    def test_integration_produces_no_output(self, capfd):
        rectquad.compute_integral(rectquad.Interval(0.0, 1.0), 0.1, lambda x: x, lambda x: 1.0)
        captured = capfd.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestEnableConsoleLogging:
    def test_sets_level(self):
        rectquad.enable_console_logging(level="DEBUG")
        assert _get_logger().level == logging.DEBUG

    def test_outputs_to_stderr(self, capfd):
        rectquad.enable_console_logging(level="INFO")
        logging.getLogger(f"{LOGGER_NAME}.test").info("test message")
        assert "test message" in capfd.readouterr().err

    def test_custom_format(self, capfd):
        rectquad.enable_console_logging(level="INFO", format="[CUSTOM] %(message)s")
        logging.getLogger(f"{LOGGER_NAME}.test").info("hello")
        assert "[CUSTOM] hello" in capfd.readouterr().err

    def test_debug_shows_partition_estimate(self, capfd):
        rectquad.enable_console_logging(level="DEBUG")
        rectquad.compute_integral(rectquad.Interval(0.0, 1.0), 0.01, lambda x: x, lambda x: 1.0)
        err = capfd.readouterr().err
        assert "rectquad.core.partition" in err
        assert "using 50" in err


class TestEnableFileLogging:
    def test_creates_parent_directories_and_writes(self, tmp_path):
        log_file = tmp_path / "nested" / "rq.log"
        handler = rectquad.enable_file_logging(log_file, max_bytes=1024, backup_count=3)

        logging.getLogger(f"{LOGGER_NAME}.test").info("file test message")
        handler.flush()

        assert isinstance(handler, RotatingFileHandler)
        assert handler.maxBytes == 1024
        assert handler.backupCount == 3
        assert "file test message" in log_file.read_text()


class TestJsonLogging:
    def test_outputs_valid_json(self, capfd):
        rectquad.enable_json_logging(level="INFO")
        logging.getLogger(f"{LOGGER_NAME}.test").info("json test")

        data = json.loads(capfd.readouterr().err.strip())
        assert data["message"] == "json test"
        assert data["level"] == "INFO"
        assert data["logger"] == f"{LOGGER_NAME}.test"
        assert "timestamp" in data

    def test_formatter_includes_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                LOGGER_NAME, logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
            )
        data = json.loads(JsonFormatter().format(record))
        assert "ValueError" in data["exception"]


class TestConfigureFromEnv:
    def test_no_env_does_nothing(self):
        with mock.patch.dict("os.environ", {}, clear=True):
            rectquad.configure_from_env()
        handlers = [h for h in _get_logger().handlers if not isinstance(h, logging.NullHandler)]
        assert handlers == []

    def test_level_enables_console(self):
        with mock.patch.dict("os.environ", {"RQ_LOGGING": "debug"}, clear=True):
            rectquad.configure_from_env()
        assert _get_logger().level == logging.DEBUG
        assert any(type(h) is logging.StreamHandler for h in _get_logger().handlers)

    def test_json_file(self, tmp_path):
        log_file = tmp_path / "rq.json"
        env = {"RQ_LOG_FILE": str(log_file), "RQ_LOG_JSON": "1"}
        with mock.patch.dict("os.environ", env, clear=True):
            rectquad.configure_from_env()

        logging.getLogger(f"{LOGGER_NAME}.test").info("to file")
        for handler in _get_logger().handlers:
            handler.flush()

        data = json.loads(log_file.read_text().strip())
        assert data["message"] == "to file"


class TestLevelsAndDisable:
    def test_get_level(self):
        assert _get_level("warning") == logging.WARNING
        assert _get_level(logging.ERROR) == logging.ERROR
        assert _get_level("nonsense") == logging.INFO

    def test_set_level(self):
        rectquad.set_level("ERROR")
        assert _get_logger().level == logging.ERROR

    def test_disable_logging(self, capfd):
        rectquad.enable_console_logging()
        rectquad.disable_logging()
        logging.getLogger(f"{LOGGER_NAME}.test").error("should not appear")
        assert "should not appear" not in capfd.readouterr().err

    def test_clear_handlers_keeps_null_handler(self):
        rectquad.enable_console_logging()
        _clear_handlers()
        assert all(isinstance(h, logging.NullHandler) for h in _get_logger().handlers)
