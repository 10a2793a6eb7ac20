"""logconsole dispatch core: level filtering, handler selection and emit."""

from logconsole.core.dispatcher import (
    DEFAULT_MAX_MESSAGE_LENGTH,
    OutputDispatcher,
    disable_output,
    get_dispatcher,
    get_log_level,
    get_output_handler,
    get_show_line_numbers,
    log,
    render_message,
    restore_previous_output_handler,
    set_log_level,
    show_line_numbers,
    suppressed_output,
    use_output_handler,
    using_output_handler,
)
from logconsole.core.messages import debug, error, inform, warn

__all__ = [
    "DEFAULT_MAX_MESSAGE_LENGTH",
    "OutputDispatcher",
    "get_dispatcher",
    # handler selection
    "disable_output",
    "restore_previous_output_handler",
    "use_output_handler",
    "get_output_handler",
    "suppressed_output",
    "using_output_handler",
    # options
    "set_log_level",
    "get_log_level",
    "show_line_numbers",
    "get_show_line_numbers",
    # emit
    "log",
    "render_message",
    "error",
    "warn",
    "inform",
    "debug",
]
