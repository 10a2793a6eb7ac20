"""Shared test fixtures for logconsole."""

from __future__ import annotations

import pytest

from logconsole.core import dispatcher as dispatcher_module
from logconsole.core.dispatcher import OutputDispatcher
from logconsole.handlers.memory import OutputHandlerMemory

_CONFIG_ENV_VARS = (
    "LOGCONSOLE_LOG_LEVEL",
    "LOGCONSOLE_SHOW_LINE_NUMBERS",
    "LOGCONSOLE_LOG_FILE",
    "LOGCONSOLE_MAX_MESSAGE_LENGTH",
)


@pytest.fixture(autouse=True)
def fresh_process_dispatcher(monkeypatch: pytest.MonkeyPatch) -> None:
    """Give every test its own process-wide dispatcher, built on first use."""
    monkeypatch.setattr(dispatcher_module, "_DISPATCHER", None)
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def memory_handler() -> OutputHandlerMemory:
    """Provide an empty recording handler."""
    return OutputHandlerMemory()


@pytest.fixture
def dispatcher(memory_handler: OutputHandlerMemory) -> OutputDispatcher:
    """Provide a standalone dispatcher writing to ``memory_handler``."""
    return OutputDispatcher(memory_handler)
