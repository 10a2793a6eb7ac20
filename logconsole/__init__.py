"""logconsole: process-wide console logging with swappable output handlers.

Every message goes through one dispatcher that filters by severity and
hands the text to the active output handler under a single lock:
  - Works before any setup: the default handler writes to stdout/stderr
  - Swap handlers at runtime; one level of undo via restore
  - Silence output temporarily with disable/restore or ``suppressed_output``
  - Optional ``"line <N> in <file>: "`` source prefix
  - File and in-memory handlers, plus any object with error/warn/inform/debug
  - Env-driven configuration (LOGCONSOLE_*) and a bridge from ``logging``
"""

__version__ = "0.1.0"
__description__ = "Process-wide console logging with swappable output handlers"

from logconsole.bridge import ConsoleBridgeHandler, install_bridge
from logconsole.config import ConsoleConfig, configure
from logconsole.core import (
    OutputDispatcher,
    debug,
    disable_output,
    error,
    get_dispatcher,
    get_log_level,
    get_output_handler,
    get_show_line_numbers,
    inform,
    log,
    restore_previous_output_handler,
    set_log_level,
    show_line_numbers,
    suppressed_output,
    use_output_handler,
    using_output_handler,
    warn,
)
from logconsole.handlers import OutputHandler
from logconsole.handlers.file import OutputHandlerFile
from logconsole.handlers.memory import OutputHandlerMemory
from logconsole.handlers.std import OutputHandlerSTD, default_output_handler
from logconsole.models import DispatchState, LogLevel

__all__ = [
    "__version__",
    # levels and state
    "LogLevel",
    "DispatchState",
    # handlers
    "OutputHandler",
    "OutputHandlerSTD",
    "OutputHandlerFile",
    "OutputHandlerMemory",
    "default_output_handler",
    # dispatch core
    "OutputDispatcher",
    "get_dispatcher",
    "disable_output",
    "restore_previous_output_handler",
    "use_output_handler",
    "get_output_handler",
    "suppressed_output",
    "using_output_handler",
    "set_log_level",
    "get_log_level",
    "show_line_numbers",
    "get_show_line_numbers",
    "log",
    "error",
    "warn",
    "inform",
    "debug",
    # configuration
    "ConsoleConfig",
    "configure",
    "ConsoleBridgeHandler",
    "install_bridge",
]
