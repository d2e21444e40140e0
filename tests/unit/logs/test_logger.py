"""Unit tests for LiquidLogger."""

import io
import json

import pytest

from liquid_core.errors import FilterRegistrationError
from liquid_core.filterbank import Filterbank
from liquid_core.logging import RESET, LiquidLogger, LogConfig
from liquid_core.types import LogFormat, LogLevel


def read_entries(buffer: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in buffer.getvalue().splitlines() if line]


class TestLiquidLogger:
    """Tests for formatting and filtering."""

    def test_level_filtering(self, log_output):
        logger = LiquidLogger(LogConfig(level=LogLevel.WARN, format=LogFormat.JSON, output=log_output))
        logger._log(LogLevel.INFO, "filterbank", "hidden")
        logger._log(LogLevel.ERROR, "filterbank", "shown")
        assert [e["message"] for e in read_entries(log_output)] == ["shown"]

    def test_component_switch(self, log_output):
        config = LogConfig(
            format=LogFormat.JSON,
            components={"filterbank": False, "config": True},
            output=log_output,
        )
        logger = LiquidLogger(config)
        logger._log(LogLevel.INFO, "filterbank", "hidden")
        logger._log(LogLevel.INFO, "config", "shown")
        assert [e["component"] for e in read_entries(log_output)] == ["config"]

    def test_colored_format(self, log_output):
        logger = LiquidLogger(LogConfig(output=log_output))
        logger._log(LogLevel.INFO, "filterbank", "hello", {"key": "x" * 500})
        line = log_output.getvalue()
        assert "[FILTERBANK]" in line
        assert RESET in line
        assert "..." in line

    def test_string_levels_accepted(self, log_output):
        logger = LiquidLogger(LogConfig(format=LogFormat.JSON, output=log_output))
        logger._log("INFO", "config", "loaded")
        assert read_entries(log_output)[0]["level"] == "INFO"

    def test_configure(self, log_output):
        logger = LiquidLogger()
        logger.configure(LogConfig(format=LogFormat.JSON, output=log_output))
        logger._log(LogLevel.INFO, "config", "after")
        assert read_entries(log_output)[0]["message"] == "after"


class TestFilterbankLogging:
    """Tests for events emitted by Filterbank."""

    def test_registration_events(self, json_logger, log_output):
        bank = Filterbank(packs=(), logger=json_logger)
        bank.add_filter("shout", str.upper)

        entries = read_entries(log_output)
        assert entries[-1]["event"] == "filter_registered"
        assert entries[-1]["key"] == "shout"
        assert entries[-1]["kind"] == "callback"

    def test_provider_event(self, json_logger, log_output):
        class Provider:
            def one(self, value):
                return value

        bank = Filterbank(packs=(), logger=json_logger)
        bank.add_filter(Provider())
        bank.add_filter(Provider())

        providers = [e for e in read_entries(log_output) if e["event"] == "provider_registered"]
        assert [p["replaced"] for p in providers] == [False, True]
        assert providers[0]["filter_count"] == 1

    def test_rejected_event(self, json_logger, log_output):
        bank = Filterbank(packs=(), logger=json_logger)
        with pytest.raises(FilterRegistrationError):
            bank.add_filter(42)

        entries = read_entries(log_output)
        assert entries[-1]["event"] == "filter_rejected"
        assert entries[-1]["error_type"] == "FilterRegistrationError"

    def test_unresolved_is_debug_by_default(self, json_logger, log_output):
        bank = Filterbank(packs=(), logger=json_logger)
        assert bank.invoke("missing", "v") == "v"

        entry = read_entries(log_output)[-1]
        assert entry["event"] == "filter_unresolved"
        assert entry["level"] == "DEBUG"
        assert entry["value"] == "'v'"

    def test_unresolved_warn(self, json_logger, log_output):
        bank = Filterbank(packs=(), logger=json_logger, warn_unresolved=True)
        bank.invoke("missing", "v")
        assert read_entries(log_output)[-1]["level"] == "WARN"

    def test_frozen_event(self, json_logger, log_output):
        bank = Filterbank(packs=(), logger=json_logger)
        bank.freeze()
        entry = read_entries(log_output)[-1]
        assert entry["event"] == "filterbank_frozen"
        assert entry["filter_count"] == 0
