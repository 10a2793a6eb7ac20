"""In-memory handler that records every message it receives."""

from __future__ import annotations

import threading

from logconsole.models.levels import LogLevel


class OutputHandlerMemory:
    """Keeps ``(level, text)`` pairs in arrival order.

    Useful for tests and for applications that want to show recent
    diagnostics themselves.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.records: list[tuple[LogLevel, str]] = []

    def error(self, text: str) -> None:
        self._record(LogLevel.ERROR, text)

    def warn(self, text: str) -> None:
        self._record(LogLevel.WARN, text)

    def inform(self, text: str) -> None:
        self._record(LogLevel.INFO, text)

    def debug(self, text: str) -> None:
        self._record(LogLevel.DEBUG, text)

    def messages(self, level: LogLevel | None = None) -> list[str]:
        """Return recorded texts, optionally only those at *level*."""
        with self._lock:
            return [text for lvl, text in self.records if level is None or lvl is level]

    def clear(self) -> None:
        with self._lock:
            self.records.clear()

    def _record(self, level: LogLevel, text: str) -> None:
        with self._lock:
            self.records.append((level, text))
