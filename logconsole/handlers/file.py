"""File handler: appends every message to a log file.

The file is opened once, in append mode, when the handler is built.  If
it cannot be opened the failure is reported on the standard-stream
handler's error path and the handler silently drops everything it is
given.  Each write is flushed so the log survives a crash.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import IO

from logconsole.handlers._formatting import format_line
from logconsole.handlers.std import default_output_handler
from logconsole.models.levels import LogLevel

logger = logging.getLogger(__name__)


class OutputHandlerFile:
    """Appends prefixed messages to a file.

    Parameters
    ----------
    path:
        Log file location.  Parent directories are not created.
    encoding:
        Text encoding for the file.  Defaults to UTF-8.  Characters the
        encoding cannot represent are written as backslash escapes.

    The handler can be closed explicitly, used as a context manager, or
    left to close itself when garbage collected.
    """

    def __init__(self, path: str | os.PathLike[str], encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._lock = threading.Lock()
        self._file: IO[str] | None = None
        try:
            self._file = open(
                self._path, "a", encoding=encoding, errors="backslashreplace"
            )
        except OSError as exc:
            logger.debug("OutputHandlerFile: cannot open %s: %s", self._path, exc)
            default_output_handler().error(f"Unable to open log file: '{path}'")
        else:
            logger.debug("OutputHandlerFile: appending to %s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_open(self) -> bool:
        """Whether messages are currently being written to the file."""
        return self._file is not None

    def error(self, text: str) -> None:
        self._write(LogLevel.ERROR, text)

    def warn(self, text: str) -> None:
        self._write(LogLevel.WARN, text)

    def inform(self, text: str) -> None:
        self._write(LogLevel.INFO, text)

    def debug(self, text: str) -> None:
        self._write(LogLevel.DEBUG, text)

    def close(self) -> None:
        """Close the log file.  Safe to call more than once.

        A failure to close is reported on the standard-stream handler's
        error path and otherwise ignored.
        """
        with self._lock:
            handle, self._file = self._file, None
        if handle is None:
            return
        try:
            handle.close()
        except OSError as exc:
            logger.debug("OutputHandlerFile: close of %s failed: %s", self._path, exc)
            default_output_handler().error("Error closing logfile")

    def __enter__(self) -> OutputHandlerFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __del__(self) -> None:
        # Partially constructed instances have no lock yet.
        if getattr(self, "_lock", None) is not None:
            self.close()

    def __repr__(self) -> str:
        state = "open" if self.is_open else "closed"
        return f"OutputHandlerFile({str(self._path)!r}, {state})"

    def _write(self, level: LogLevel, text: str) -> None:
        with self._lock:
            if self._file is None:
                return
            self._file.write(format_line(level, text) + "\n")
            self._file.flush()
