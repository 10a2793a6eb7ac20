"""Snapshot of the dispatch core's configuration at one instant."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from logconsole.models.levels import LogLevel


class DispatchState(BaseModel):
    """Immutable view of the dispatcher fields guarded by its lock.

    Handlers are held by reference; comparing two snapshots compares
    handler identity through ``==`` on the handler objects.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    output_handler: Any = None
    previous_output_handler: Any = None
    log_level: LogLevel = LogLevel.DEBUG
    show_line_numbers: bool = False

    @property
    def output_enabled(self) -> bool:
        """Whether messages currently have somewhere to go."""
        return self.output_handler is not None
