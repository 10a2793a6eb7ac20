"""Severity shortcuts that record where they were called from.

``inform("loaded %d states", n)`` is ``log(<this file>, <this line>,
LogLevel.INFO, "loaded %d states", n)``.  The source location only shows
up in output when line numbers are turned on, but it is always captured.

Wrappers around these functions can pass ``stacklevel=2`` (or more) so
the location reported is their caller's, as with ``logging``.
"""

from __future__ import annotations

import sys
from typing import Any

from logconsole.core.dispatcher import get_dispatcher
from logconsole.models.levels import LogLevel


def error(fmt: object, *args: Any, stacklevel: int = 1) -> None:
    _emit(LogLevel.ERROR, fmt, args, stacklevel)


def warn(fmt: object, *args: Any, stacklevel: int = 1) -> None:
    _emit(LogLevel.WARN, fmt, args, stacklevel)


def inform(fmt: object, *args: Any, stacklevel: int = 1) -> None:
    _emit(LogLevel.INFO, fmt, args, stacklevel)


def debug(fmt: object, *args: Any, stacklevel: int = 1) -> None:
    _emit(LogLevel.DEBUG, fmt, args, stacklevel)


def _emit(level: LogLevel, fmt: object, args: tuple[Any, ...], stacklevel: int) -> None:
    # Frame 0 is this function, frame 1 the public shortcut.
    try:
        frame = sys._getframe(stacklevel + 1)
    except ValueError:
        file, line = None, 0
    else:
        file, line = frame.f_code.co_filename, frame.f_lineno
    get_dispatcher().log(file, line, level, fmt, *args)
