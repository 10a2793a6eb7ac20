"""logconsole data models: severity levels and dispatcher snapshots."""

from logconsole.models.levels import LogLevel, message_level
from logconsole.models.state import DispatchState

__all__ = [
    "LogLevel",
    "message_level",
    "DispatchState",
]
