"""Bridge from the standard ``logging`` module into logconsole.

Libraries that log through ``logging`` can be shown alongside logconsole
output by attaching a :class:`ConsoleBridgeHandler`.  Records from
logconsole's own loggers are never forwarded, so a failing output handler
cannot feed its own error report back into the dispatcher.
"""

from __future__ import annotations

import logging

from logconsole.core.dispatcher import OutputDispatcher, get_dispatcher
from logconsole.models.levels import LogLevel

_OWN_LOGGER = "logconsole"


def to_log_level(levelno: int) -> LogLevel:
    """Map a ``logging`` level number onto a logconsole level."""
    if levelno < logging.INFO:
        return LogLevel.DEBUG
    if levelno < logging.WARNING:
        return LogLevel.INFO
    if levelno < logging.ERROR:
        return LogLevel.WARN
    return LogLevel.ERROR


class ConsoleBridgeHandler(logging.Handler):
    """``logging.Handler`` that emits records through a logconsole dispatcher.

    Parameters
    ----------
    level:
        Minimum ``logging`` level to forward.  The dispatcher's own
        threshold is applied on top of it.
    dispatcher:
        Target dispatcher.  Defaults to the process-wide one, looked up
        on every record.
    """

    def __init__(
        self,
        level: int = logging.NOTSET,
        dispatcher: OutputDispatcher | None = None,
    ) -> None:
        super().__init__(level)
        self._dispatcher = dispatcher

    def emit(self, record: logging.LogRecord) -> None:
        if record.name == _OWN_LOGGER or record.name.startswith(_OWN_LOGGER + "."):
            return
        try:
            message = self.format(record)
        except Exception:  # noqa: BLE001
            self.handleError(record)
            return
        dispatcher = self._dispatcher or get_dispatcher()
        dispatcher.log(record.pathname, record.lineno, to_log_level(record.levelno), message)


def install_bridge(
    target: logging.Logger | None = None,
    level: int = logging.NOTSET,
) -> ConsoleBridgeHandler:
    """Attach a :class:`ConsoleBridgeHandler` to *target* (the root logger by default)."""
    handler = ConsoleBridgeHandler(level)
    (target or logging.getLogger()).addHandler(handler)
    return handler
