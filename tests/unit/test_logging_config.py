"""Unit tests for happypoisson logging configuration."""

from __future__ import annotations

import json
import logging
import sys

import pytest

import happypoisson
from happypoisson.core.clock import TickClock
from happypoisson.logging_config import LOGGER_NAME, JsonFormatter, _get_level, _get_logger


class TestSilentByDefault:

    def test_import_produces_no_log_output(self, capfd):
        import importlib

        importlib.reload(happypoisson)

        captured = capfd.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_logger_has_null_handler(self):
        logger = logging.getLogger(LOGGER_NAME)
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


class TestHandlers:

    def test_console_logging_writes_to_stderr(self, capfd):
        happypoisson.enable_console_logging(level="INFO", format="[HP] %(message)s")

        logging.getLogger(f"{LOGGER_NAME}.test").info("hello")

        assert "[HP] hello" in capfd.readouterr().err

    def test_console_logging_sets_level(self):
        happypoisson.enable_console_logging(level="DEBUG")
        assert _get_logger().level == logging.DEBUG

    def test_file_logging_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "nested" / "poisson.log"
        handler = happypoisson.enable_file_logging(path, level="INFO")

        logging.getLogger(f"{LOGGER_NAME}.test").info("to file")
        handler.flush()

        assert "to file" in path.read_text()

    def test_json_file_logging(self, tmp_path):
        path = tmp_path / "poisson.json"
        handler = happypoisson.enable_file_logging(path, json_lines=True)

        logging.getLogger(f"{LOGGER_NAME}.test").warning("structured")
        handler.flush()

        record = json.loads(path.read_text().splitlines()[0])
        assert record["message"] == "structured"
        assert record["level"] == "WARNING"
        assert record["logger"] == f"{LOGGER_NAME}.test"

    def test_json_formatter_includes_exception(self):
        try:
            raise OverflowError("boom")
        except OverflowError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
        payload = json.loads(JsonFormatter().format(record))
        assert "OverflowError: boom" in payload["exception"]

    def test_disable_logging(self, capfd):
        happypoisson.enable_console_logging()
        happypoisson.disable_logging()

        logging.getLogger(f"{LOGGER_NAME}.test").error("hidden")

        assert "hidden" not in capfd.readouterr().err
        assert all(isinstance(h, logging.NullHandler) for h in _get_logger().handlers)


class TestConfigureFromEnv:

    def test_noop_without_env(self, monkeypatch):
        monkeypatch.delenv("HP_LOGGING", raising=False)
        monkeypatch.delenv("HP_LOG_FILE", raising=False)
        happypoisson.configure_from_env()
        assert all(isinstance(h, logging.NullHandler) for h in _get_logger().handlers)

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("HP_LOGGING", "warning")
        monkeypatch.delenv("HP_LOG_FILE", raising=False)
        happypoisson.configure_from_env()
        assert _get_logger().level == logging.WARNING

    def test_file_from_env(self, monkeypatch, tmp_path):
        path = tmp_path / "env.log"
        monkeypatch.delenv("HP_LOGGING", raising=False)
        monkeypatch.setenv("HP_LOG_FILE", str(path))
        happypoisson.configure_from_env()
        assert path.exists()


def test_get_level():
    assert _get_level("debug") == logging.DEBUG
    assert _get_level(logging.ERROR) == logging.ERROR
    assert _get_level("nonsense") == logging.INFO


def test_build_and_reset_log_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    clock = TickClock(10)
    happypoisson.GeneratorBuilder(3, "minute_1").with_clock(clock).with_buffering(4).build()

    assert "Built generator: rate=3 unit=MINUTE_1 buffer_size=4" in caplog.text
    assert "Generator reset" in caplog.text
    assert "Filled gap buffer: size=4" in caplog.text


def test_overflow_logged_at_error(caplog):
    caplog.set_level(logging.ERROR, logger=LOGGER_NAME)
    clock = TickClock(10, start_nanos=happypoisson.INT64_MAX)
    with pytest.raises(OverflowError):
        clock.advance_tick()
    assert "Tick clock overflow" in caplog.text
