"""Severity levels: ordered so that filtering is a plain comparison."""

from __future__ import annotations

from enum import IntEnum


class LogLevel(IntEnum):
    """Ordered message severity.

    ``NONE`` is a threshold-only sentinel: setting it as the minimum level
    suppresses every message.  It is never a valid level for a message.
    """

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    NONE = 4

    @classmethod
    def parse(cls, value: LogLevel | int | str) -> LogLevel:
        """Coerce a level name, integer value, or ``LogLevel`` to ``LogLevel``.

        Names are case-insensitive and ``"WARNING"`` is accepted for WARN.

        Raises
        ------
        ValueError
            If *value* does not name a level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name.isdigit():
                return cls.parse(int(name))
            name = _LEVEL_ALIASES.get(name, name)
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"Unknown log level: {value!r}") from None
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"Log level out of range: {value!r}") from None
        raise ValueError(f"Cannot interpret {value!r} as a log level")


_LEVEL_ALIASES: dict[str, str] = {
    "WARNING": "WARN",
    "INFORM": "INFO",
}


def message_level(level: object) -> LogLevel:
    """Return the level a message is actually dispatched at.

    Anything other than DEBUG, INFO, WARN or ERROR (including ``NONE`` and
    values outside the enumeration) is treated as ERROR.
    """
    try:
        resolved = LogLevel(level)
    except (TypeError, ValueError):
        return LogLevel.ERROR
    if resolved is LogLevel.NONE:
        return LogLevel.ERROR
    return resolved
