"""Tests for structured logging, log context, and performance timing."""

import json
import logging
import sys
import time

import pytest

from src.logging_config.config import LogFormat, LoggingConfig, LogLevel
from src.logging_config.context import (
    LogContext,
    generate_run_id,
    get_context_dict,
)
from src.logging_config.performance import PerformanceTimer, log_performance
from src.logging_config.setup import (
    ConsoleFormatter,
    StructuredFormatter,
    configure_logging,
)


def _record(msg="test", level=logging.INFO, name="test", lineno=1, exc_info=None):
    return logging.LogRecord(
        name=name, level=level, pathname="test.py",
        lineno=lineno, msg=msg, args=(), exc_info=exc_info,
    )


def _current_run_id():
    return get_context_dict().get("run_id", "")


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLoggingConfig:
    """Tests for logging configuration dataclasses."""

    def test_default_config_values(self):
        config = LoggingConfig()
        assert config.level == LogLevel.INFO
        assert config.format == LogFormat.JSON
        assert config.include_caller is True
        assert config.slow_threshold_ms == 1000.0
        assert config.service_name == "dividend-tracker"

    def test_log_format_enum_values(self):
        assert LogFormat.JSON.value == "json"
        assert LogFormat.CONSOLE.value == "console"


class TestLogContext:
    """Tests for log context management."""

    def test_generate_run_id_unique(self):
        ids = {generate_run_id() for _ in range(100)}
        assert len(ids) == 100

    def test_context_sets_run_id(self):
        with LogContext(run_id="run-123"):
            assert _current_run_id() == "run-123"
        assert _current_run_id() == ""

    def test_auto_generates_run_id(self):
        with LogContext() as ctx:
            assert ctx.run_id != ""
            assert _current_run_id() == ctx.run_id

    def test_bind_extra_context(self):
        with LogContext(run_id="r1") as ctx:
            ctx.bind(activities=120, records=4)
            d = get_context_dict()
            assert d == {"run_id": "r1", "activities": 120, "records": 4}

    def test_context_dict_empty_outside(self):
        assert get_context_dict() == {}

    def test_nested_contexts_restore_outer(self):
        with LogContext(run_id="outer"):
            with LogContext(run_id="inner"):
                assert _current_run_id() == "inner"
            assert _current_run_id() == "outer"
        assert _current_run_id() == ""


class TestStructuredFormatter:
    """Tests for JSON structured log formatting."""

    def test_formats_as_json(self):
        parsed = json.loads(StructuredFormatter().format(_record("hello world")))
        assert parsed["message"] == "hello world"
        assert parsed["level"] == "INFO"
        assert parsed["logger"] == "test"
        assert "timestamp" in parsed
        assert parsed["service"] == "dividend-tracker"

    def test_includes_caller_info(self):
        parsed = json.loads(StructuredFormatter(include_caller=True).format(_record(lineno=42)))
        assert parsed["line"] == 42
        assert "module" in parsed

    def test_excludes_caller_when_disabled(self):
        parsed = json.loads(StructuredFormatter(include_caller=False).format(_record()))
        assert "line" not in parsed
        assert "function" not in parsed

    def test_includes_bound_context(self):
        formatter = StructuredFormatter()
        with LogContext(run_id="ctx-test") as ctx:
            ctx.bind(records=3)
            parsed = json.loads(formatter.format(_record()))
        assert parsed["run_id"] == "ctx-test"
        assert parsed["records"] == 3

    def test_formats_exception(self):
        try:
            raise ValueError("test error")
        except ValueError:
            record = _record("failed", level=logging.ERROR, exc_info=sys.exc_info())
        parsed = json.loads(StructuredFormatter().format(record))
        assert parsed["exception"]["type"] == "ValueError"
        assert "test error" in parsed["exception"]["message"]

    def test_includes_duration(self):
        record = _record()
        record.duration_ms = 42.5
        parsed = json.loads(StructuredFormatter().format(record))
        assert parsed["duration_ms"] == 42.5


class TestConsoleFormatter:
    """Tests for colored console log formatting."""

    def test_formats_readable_output(self):
        output = ConsoleFormatter().format(_record("hello", name="test.module"))
        assert "test.module" in output
        assert "hello" in output

    def test_includes_context_info(self):
        with LogContext(run_id="abc"):
            output = ConsoleFormatter().format(_record())
        assert "run_id=abc" in output

    def test_has_color_codes(self):
        output = ConsoleFormatter().format(_record(level=logging.ERROR))
        assert "\033[31m" in output  # Red for ERROR


class TestConfigureLogging:
    """Tests for the configure_logging setup function."""

    def test_configures_root_logger(self):
        configure_logging(LoggingConfig(format=LogFormat.CONSOLE))
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ConsoleFormatter)

    def test_json_format(self):
        configure_logging(LoggingConfig(format=LogFormat.JSON))
        assert isinstance(logging.getLogger().handlers[0].formatter, StructuredFormatter)

    def test_sets_log_level(self):
        configure_logging(LoggingConfig(level=LogLevel.DEBUG))
        assert logging.getLogger().level == logging.DEBUG

    def test_env_var_override_level(self, monkeypatch):
        monkeypatch.setenv("DIVIDEND_TRACKER_LOG_LEVEL", "debug")
        config = configure_logging(LoggingConfig(level=LogLevel.ERROR))
        assert config.level == LogLevel.DEBUG
        assert logging.getLogger().level == logging.DEBUG

    def test_env_var_override_format(self, monkeypatch):
        monkeypatch.setenv("DIVIDEND_TRACKER_LOG_FORMAT", "CONSOLE")
        configure_logging(LoggingConfig(format=LogFormat.JSON))
        assert isinstance(logging.getLogger().handlers[0].formatter, ConsoleFormatter)

    def test_invalid_env_value_ignored(self, monkeypatch):
        monkeypatch.setenv("DIVIDEND_TRACKER_LOG_LEVEL", "LOUD")
        config = configure_logging(LoggingConfig(level=LogLevel.WARNING))
        assert config.level == LogLevel.WARNING


class TestPerformanceLogging:
    """Tests for performance timing decorator and context manager."""

    def test_log_performance_returns_result(self):
        @log_performance(threshold_ms=10000)
        def fast_func():
            return 42

        assert fast_func() == 42

    def test_log_performance_preserves_name(self):
        @log_performance()
        def my_function():
            """My docstring."""

        assert my_function.__name__ == "my_function"
        assert my_function.__doc__ == "My docstring."

    def test_log_performance_with_exception(self, caplog):
        @log_performance(threshold_ms=10000, logger_name="perf.test")
        def failing_func():
            raise ValueError("test error")

        with caplog.at_level(logging.ERROR, logger="perf.test"):
            with pytest.raises(ValueError, match="test error"):
                failing_func()
        assert "failed after" in caplog.records[0].getMessage()

    def test_slow_operation_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="perf.slow"):
            with PerformanceTimer("slow_op", threshold_ms=1, log=logging.getLogger("perf.slow")):
                time.sleep(0.01)
        assert "Slow operation: slow_op" in caplog.records[0].getMessage()

    def test_performance_timer_records_duration(self):
        with PerformanceTimer("fast_op", threshold_ms=10000) as timer:
            pass
        assert 0 <= timer.duration_ms < 1000

    def test_performance_timer_with_exception(self):
        with pytest.raises(ValueError):
            with PerformanceTimer("failing_op") as timer:
                raise ValueError("oops")
        assert timer.duration_ms >= 0

    def test_default_threshold(self):
        assert PerformanceTimer("op").threshold_ms == 1000.0
