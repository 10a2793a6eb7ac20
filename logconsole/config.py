"""Process configuration: env-driven defaults for the dispatch core.

Settings are read from ``LOGCONSOLE_*`` environment variables or a
``.env`` file in the working directory.  Nothing is read at import time;
call :func:`configure` to apply them.

Examples
--------
Override via environment::

    export LOGCONSOLE_LOG_LEVEL=warn
    export LOGCONSOLE_SHOW_LINE_NUMBERS=true
    export LOGCONSOLE_LOG_FILE=/var/log/planner.log
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from logconsole.core.dispatcher import (
    DEFAULT_MAX_MESSAGE_LENGTH,
    OutputDispatcher,
    get_dispatcher,
)
from logconsole.handlers.file import OutputHandlerFile
from logconsole.models.levels import LogLevel

logger = logging.getLogger(__name__)


class ConsoleConfig(BaseSettings):
    """Dispatcher settings with environment variable overrides."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LOGCONSOLE_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevel = LogLevel.DEBUG
    show_line_numbers: bool = False
    log_file: Path | None = None  # when set, output goes to this file instead
    max_message_length: int = Field(default=DEFAULT_MAX_MESSAGE_LENGTH, ge=1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> LogLevel:
        return LogLevel.parse(value)

    @field_validator("log_file", mode="before")
    @classmethod
    def _blank_log_file(cls, value: Any) -> Any:
        # An empty LOGCONSOLE_LOG_FILE means "no file", not Path(".").
        if isinstance(value, str) and not value.strip():
            return None
        return value


def configure(
    config: ConsoleConfig | None = None,
    dispatcher: OutputDispatcher | None = None,
) -> OutputHandlerFile | None:
    """Apply *config* to *dispatcher* (the process-wide one by default).

    When ``log_file`` is set, an :class:`OutputHandlerFile` is installed
    as the active handler and returned; the caller owns it and should
    close it when done.  The handler that was active before becomes the
    "previous" handler.
    """
    config = config or ConsoleConfig()
    target = dispatcher or get_dispatcher()

    target.set_log_level(config.log_level)
    target.show_line_numbers(config.show_line_numbers)
    target.set_max_message_length(config.max_message_length)

    file_handler: OutputHandlerFile | None = None
    if config.log_file is not None:
        file_handler = OutputHandlerFile(config.log_file)
        target.use_output_handler(file_handler)

    logger.debug(
        "Configured dispatcher: level=%s line_numbers=%s log_file=%s",
        config.log_level.name,
        config.show_line_numbers,
        config.log_file,
    )
    return file_handler
