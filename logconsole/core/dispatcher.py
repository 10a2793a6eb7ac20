"""OutputDispatcher: the single point every logconsole message passes through.

The dispatcher owns the process-wide logging state: the active output
handler, the previously active handler (one level of undo), the minimum
severity, and whether messages carry their source location.  One lock
guards all of it, and the handler is called while the lock is held, so
messages from concurrent threads are never interleaved and configuration
changes never race an in-flight message.

A handler that blocks stalls every other logging thread, and a handler
that logs through logconsole deadlocks.  Handlers must be quick and must
not call back in.

The module-level functions operate on a lazily created process-wide
dispatcher, so logging works before anything has been configured.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterator, Mapping
from contextlib import AbstractContextManager, contextmanager
from typing import Any

from logconsole.handlers import OutputHandler
from logconsole.handlers._formatting import location_prefix
from logconsole.handlers.std import default_output_handler
from logconsole.models.levels import LogLevel, message_level
from logconsole.models.state import DispatchState

logger = logging.getLogger(__name__)

# Formatted messages are cut to this many characters.
DEFAULT_MAX_MESSAGE_LENGTH = 1023

_HANDLER_METHODS: dict[LogLevel, str] = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "inform",
    LogLevel.WARN: "warn",
    LogLevel.ERROR: "error",
}


def render_message(fmt: object, args: tuple[Any, ...]) -> str:
    """Apply printf-style *args* to *fmt* without ever raising.

    With no arguments *fmt* is used verbatim, so literal ``%`` signs are
    safe.  A single non-empty mapping argument supplies named fields, as
    with the standard ``logging`` module.  If the arguments do not fit
    the format, the format and the argument tuple are shown side by side.
    """
    text = str(fmt)
    if not args:
        return text
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values: Any = args[0]
    else:
        values = args
    try:
        return text % values
    except (TypeError, ValueError, KeyError):
        return f"{text} {args!r}"


class OutputDispatcher:
    """Level-filtering, lock-serialized front end to one output handler.

    Parameters
    ----------
    output_handler:
        Initially active handler.  Defaults to the shared standard-stream
        handler.  It is also the initial "previous" handler.
    log_level:
        Minimum level that reaches the handler.  Defaults to DEBUG.
    show_line_numbers:
        Prefix messages with ``"line <N> in <file>: "``.  Off by default.
    max_message_length:
        Formatted messages longer than this are cut short before the
        location prefix is added.

    The dispatcher never closes or otherwise manages the handlers it
    references; their owners do.
    """

    def __init__(
        self,
        output_handler: OutputHandler | None = None,
        *,
        log_level: LogLevel = LogLevel.DEBUG,
        show_line_numbers: bool = False,
        max_message_length: int = DEFAULT_MAX_MESSAGE_LENGTH,
    ) -> None:
        if output_handler is None:
            output_handler = default_output_handler()
        self._lock = threading.Lock()
        self._output_handler: OutputHandler | None = output_handler
        self._previous_output_handler: OutputHandler | None = output_handler
        self._log_level = LogLevel.parse(log_level)
        self._show_line_numbers = bool(show_line_numbers)
        self._max_message_length = _check_length(max_message_length)

    # ------------------------------------------------------------------
    # Handler selection
    # ------------------------------------------------------------------

    def disable_output(self) -> None:
        """Drop all messages until a handler is restored or installed.

        The active handler is remembered and comes back with
        :meth:`restore_previous_output_handler`.
        """
        with self._lock:
            self._previous_output_handler = self._output_handler
            self._output_handler = None

    def restore_previous_output_handler(self) -> None:
        """Swap the active and previous handlers.

        Calling it twice in a row leaves the state unchanged.  Only one
        earlier handler is remembered: after two installs, the first of
        them is what comes back, and anything older is gone.
        """
        with self._lock:
            self._output_handler, self._previous_output_handler = (
                self._previous_output_handler,
                self._output_handler,
            )

    def use_output_handler(self, handler: OutputHandler | None) -> None:
        """Make *handler* active, remembering the current one.

        Passing ``None`` is the same as :meth:`disable_output`.
        """
        with self._lock:
            self._previous_output_handler = self._output_handler
            self._output_handler = handler

    def get_output_handler(self) -> OutputHandler | None:
        # A single attribute read is atomic; no lock needed.
        return self._output_handler

    # ------------------------------------------------------------------
    # Filtering and formatting options
    # ------------------------------------------------------------------

    def set_log_level(self, level: LogLevel | int | str) -> None:
        """Set the minimum level that reaches the handler.

        ``LogLevel.NONE`` suppresses everything.

        Raises
        ------
        ValueError
            If *level* does not name a level.
        """
        resolved = LogLevel.parse(level)
        with self._lock:
            self._log_level = resolved

    def get_log_level(self) -> LogLevel:
        with self._lock:
            return self._log_level

    def show_line_numbers(self, show: bool) -> None:
        """Turn the ``"line <N> in <file>: "`` message prefix on or off."""
        with self._lock:
            self._show_line_numbers = bool(show)

    def get_show_line_numbers(self) -> bool:
        with self._lock:
            return self._show_line_numbers

    def set_max_message_length(self, length: int) -> None:
        """Set how many characters of a formatted message are kept."""
        length = _check_length(length)
        with self._lock:
            self._max_message_length = length

    def get_max_message_length(self) -> int:
        with self._lock:
            return self._max_message_length

    def snapshot(self) -> DispatchState:
        """Return a consistent copy of the dispatcher's state."""
        with self._lock:
            return DispatchState(
                output_handler=self._output_handler,
                previous_output_handler=self._previous_output_handler,
                log_level=self._log_level,
                show_line_numbers=self._show_line_numbers,
            )

    # ------------------------------------------------------------------
    # Emit
    # ------------------------------------------------------------------

    def log(
        self,
        file: str | os.PathLike[str] | None,
        line: int,
        level: LogLevel | int,
        fmt: object,
        *args: Any,
    ) -> None:
        """Format a message and hand it to the active handler.

        Nothing is formatted when there is no active handler or *level*
        is below the threshold.  ``NONE`` and unknown levels are treated
        as ERROR.  This method never raises: a failing handler is
        reported through the standard ``logging`` module instead, as is
        an argument that cannot be converted to text.
        """
        effective = message_level(level)
        failure: Exception | None = None

        with self._lock:
            handler = self._output_handler
            if handler is None or effective < self._log_level:
                return

            try:
                text = render_message(fmt, args)[: self._max_message_length]
                if self._show_line_numbers:
                    text = location_prefix(file, line) + text
                getattr(handler, _HANDLER_METHODS[effective])(text)
            except Exception as exc:  # noqa: BLE001
                failure = exc

        # Reported outside the lock: stdlib logging may be bridged back here.
        if failure is not None:
            logger.error(
                "Could not emit %s message through %r: %s",
                effective.name,
                handler,
                failure,
            )

    # ------------------------------------------------------------------
    # Scoped helpers
    # ------------------------------------------------------------------

    @contextmanager
    def suppressed_output(self) -> Iterator[None]:
        """Silence output for the duration of a ``with`` block."""
        self.disable_output()
        try:
            yield
        finally:
            self.restore_previous_output_handler()

    @contextmanager
    def using_output_handler(self, handler: OutputHandler | None) -> Iterator[None]:
        """Route output to *handler* for the duration of a ``with`` block."""
        self.use_output_handler(handler)
        try:
            yield
        finally:
            self.restore_previous_output_handler()


def _check_length(length: int) -> int:
    length = int(length)
    if length < 1:
        raise ValueError(f"max_message_length must be positive, got {length}")
    return length


# ---------------------------------------------------------------------------
# Process-wide dispatcher
# ---------------------------------------------------------------------------

_DISPATCHER: OutputDispatcher | None = None
_DISPATCHER_LOCK = threading.Lock()


def get_dispatcher() -> OutputDispatcher:
    """Return the process-wide dispatcher, creating it on first use."""
    global _DISPATCHER
    dispatcher = _DISPATCHER
    if dispatcher is None:
        with _DISPATCHER_LOCK:
            if _DISPATCHER is None:
                _DISPATCHER = OutputDispatcher()
                logger.debug("Created process-wide OutputDispatcher")
            dispatcher = _DISPATCHER
    return dispatcher


def disable_output() -> None:
    get_dispatcher().disable_output()


def restore_previous_output_handler() -> None:
    get_dispatcher().restore_previous_output_handler()


def use_output_handler(handler: OutputHandler | None) -> None:
    get_dispatcher().use_output_handler(handler)


def get_output_handler() -> OutputHandler | None:
    return get_dispatcher().get_output_handler()


def set_log_level(level: LogLevel | int | str) -> None:
    get_dispatcher().set_log_level(level)


def get_log_level() -> LogLevel:
    return get_dispatcher().get_log_level()


def show_line_numbers(show: bool) -> None:
    get_dispatcher().show_line_numbers(show)


def get_show_line_numbers() -> bool:
    return get_dispatcher().get_show_line_numbers()


def log(
    file: str | os.PathLike[str] | None,
    line: int,
    level: LogLevel | int,
    fmt: object,
    *args: Any,
) -> None:
    """Emit one message through the process-wide dispatcher."""
    get_dispatcher().log(file, line, level, fmt, *args)


def suppressed_output() -> AbstractContextManager[None]:
    return get_dispatcher().suppressed_output()


def using_output_handler(handler: OutputHandler | None) -> AbstractContextManager[None]:
    return get_dispatcher().using_output_handler(handler)
