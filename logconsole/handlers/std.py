"""Standard-stream handler: errors and warnings to stderr, the rest to stdout.

Rich consoles pick the stream; lines are written to it unchanged and
flushed after every write, so message text reaches the terminal exactly
as formatted.
"""

from __future__ import annotations

import threading

from rich.console import Console

from logconsole.handlers._formatting import format_line
from logconsole.models.levels import LogLevel


def _plain_console(*, stderr: bool) -> Console:
    # No file argument: Rich resolves sys.stdout / sys.stderr on every write.
    return Console(
        stderr=stderr,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


class OutputHandlerSTD:
    """Writes messages to the process's standard streams.

    Parameters
    ----------
    out_console:
        Console used for info and debug messages.  Defaults to stdout.
    err_console:
        Console used for errors and warnings.  Defaults to stderr.
    """

    def __init__(
        self,
        out_console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self._out = out_console or _plain_console(stderr=False)
        self._err = err_console or _plain_console(stderr=True)

    def error(self, text: str) -> None:
        self._write(self._err, LogLevel.ERROR, text)

    def warn(self, text: str) -> None:
        self._write(self._err, LogLevel.WARN, text)

    def inform(self, text: str) -> None:
        self._write(self._out, LogLevel.INFO, text)

    def debug(self, text: str) -> None:
        self._write(self._out, LogLevel.DEBUG, text)

    @staticmethod
    def _write(console: Console, level: LogLevel, text: str) -> None:
        # Console.out would expand tabs and strip control codes; write raw.
        stream = console.file
        stream.write(format_line(level, text) + "\n")
        stream.flush()


_DEFAULT_HANDLER: OutputHandlerSTD | None = None
_DEFAULT_HANDLER_LOCK = threading.Lock()


def default_output_handler() -> OutputHandlerSTD:
    """Return the process-wide standard-stream handler, creating it once."""
    global _DEFAULT_HANDLER
    handler = _DEFAULT_HANDLER
    if handler is None:
        with _DEFAULT_HANDLER_LOCK:
            if _DEFAULT_HANDLER is None:
                _DEFAULT_HANDLER = OutputHandlerSTD()
            handler = _DEFAULT_HANDLER
    return handler
