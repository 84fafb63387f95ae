"""Template-driven console log-line formatting."""

from conlog.lib.console import Console
from conlog.lib.format import format_line, render
from conlog.lib.types import ContextId, LogLevel, ValueCategory
from conlog.lib.value import HostValue, Value, wrap_args

__version__ = "0.1.0"

__all__ = [
    "Console",
    "ContextId",
    "HostValue",
    "LogLevel",
    "Value",
    "ValueCategory",
    "__version__",
    "format_line",
    "render",
    "wrap_args",
]
