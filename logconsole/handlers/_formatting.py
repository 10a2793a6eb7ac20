"""Shared text helpers for logconsole handlers and the dispatcher.

Keeps the severity prefixes and the source-location prefix in one place
so the standard-stream and file handlers emit identical lines.
"""

from __future__ import annotations

import os

from logconsole.models.levels import LogLevel

# Prefixes are padded to the same width so message text lines up.
LEVEL_PREFIXES: dict[LogLevel, str] = {
    LogLevel.ERROR: "Error:   ",
    LogLevel.WARN: "Warning: ",
    LogLevel.INFO: "Info:    ",
    LogLevel.DEBUG: "Debug:   ",
}


def format_line(level: LogLevel, text: str) -> str:
    """Return *text* with its severity prefix, without a trailing newline.

    >>> format_line(LogLevel.WARN, "disk almost full")
    'Warning: disk almost full'
    """
    return LEVEL_PREFIXES[level] + text


def location_prefix(file: str | os.PathLike[str] | None, line: int) -> str:
    """Return the ``"line <N> in <basename>: "`` prefix for a call site."""
    name = os.path.basename(os.fspath(file)) if file else "<unknown>"
    return f"line {line} in {name}: "
