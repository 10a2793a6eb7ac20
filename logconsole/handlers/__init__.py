"""Output handler protocol for logconsole.

An output handler is the destination of every message that passes the
dispatcher's level filter.  Each handler implements four operations, one
per severity, each taking the already formatted message text.

The dispatcher calls exactly one of them per message while holding its
lock, so handlers must be quick and must never call back into logconsole.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputHandler(Protocol):
    """Protocol that every logconsole output handler must implement."""

    def error(self, text: str) -> None:
        """Emit an error message."""
        ...

    def warn(self, text: str) -> None:
        """Emit a warning message."""
        ...

    def inform(self, text: str) -> None:
        """Emit an informational message."""
        ...

    def debug(self, text: str) -> None:
        """Emit a debug message."""
        ...
