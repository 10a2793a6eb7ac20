"""Tests for ConsoleConfig env-driven settings and configure()."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

import logconsole
from logconsole.config import ConsoleConfig, configure
from logconsole.handlers.file import OutputHandlerFile
from logconsole.models.levels import LogLevel


class TestConsoleConfig:
    def test_defaults(self):
        config = ConsoleConfig()
        assert config.log_level is LogLevel.DEBUG
        assert config.show_line_numbers is False
        assert config.log_file is None
        assert config.max_message_length == 1023

    def test_env_overrides(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("LOGCONSOLE_LOG_LEVEL", "warning")
        monkeypatch.setenv("LOGCONSOLE_SHOW_LINE_NUMBERS", "true")
        monkeypatch.setenv("LOGCONSOLE_LOG_FILE", str(tmp_path / "env.log"))
        monkeypatch.setenv("LOGCONSOLE_MAX_MESSAGE_LENGTH", "80")

        config = ConsoleConfig()

        assert config.log_level is LogLevel.WARN
        assert config.show_line_numbers is True
        assert config.log_file == tmp_path / "env.log"
        assert config.max_message_length == 80

    def test_level_by_number(self, monkeypatch):
        monkeypatch.setenv("LOGCONSOLE_LOG_LEVEL", "4")
        assert ConsoleConfig().log_level is LogLevel.NONE

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            ConsoleConfig(log_level="chatty")

    def test_non_positive_length_rejected(self):
        with pytest.raises(ValidationError):
            ConsoleConfig(max_message_length=0)

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_log_file_means_no_file(self, monkeypatch, value):
        monkeypatch.setenv("LOGCONSOLE_LOG_FILE", value)
        assert ConsoleConfig().log_file is None


class TestConfigure:
    def test_applies_options(self, dispatcher, memory_handler):
        result = configure(
            ConsoleConfig(log_level="error", show_line_numbers=True, max_message_length=3),
            dispatcher=dispatcher,
        )

        assert result is None
        assert dispatcher.get_output_handler() is memory_handler
        assert dispatcher.get_log_level() is LogLevel.ERROR
        assert dispatcher.get_show_line_numbers() is True
        assert dispatcher.get_max_message_length() == 3

    def test_installs_file_handler(self, dispatcher, memory_handler, tmp_path: Path):
        handler = configure(ConsoleConfig(log_file=tmp_path / "app.log"), dispatcher=dispatcher)
        try:
            assert isinstance(handler, OutputHandlerFile)
            assert handler.is_open
            state = dispatcher.snapshot()
            assert state.output_handler is handler
            assert state.previous_output_handler is memory_handler
        finally:
            handler.close()

    def test_blank_log_file_keeps_current_handler(self, monkeypatch, dispatcher, memory_handler):
        monkeypatch.setenv("LOGCONSOLE_LOG_FILE", "")

        assert configure(dispatcher=dispatcher) is None
        assert dispatcher.get_output_handler() is memory_handler

    def test_reads_environment_for_process_dispatcher(self, monkeypatch):
        monkeypatch.setenv("LOGCONSOLE_LOG_LEVEL", "info")
        configure()
        assert logconsole.get_log_level() is LogLevel.INFO
