"""Console facade: leveled logging calls routed through the line formatter."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from conlog.lib.format.compose import format_line
from conlog.lib.sinks import StructlogSink
from conlog.lib.types import ContextId, LogLevel, parse_log_level
from conlog.lib.value import wrap_args

if TYPE_CHECKING:
    from conlog.lib.config.settings import ConlogConfig
    from conlog.lib.ports import LineSink
    from conlog.lib.types import UnterminatedPolicy


class Console:
    """`console.log`-style entry points bound to one context and one sink.

    Formatting only happens for levels the sink accepts.
    """

    def __init__(
        self,
        sink: LineSink,
        context_id: ContextId | str,
        *,
        unterminated: UnterminatedPolicy = "drop",
    ) -> None:
        self.sink = sink
        self.context_id = ContextId(str(context_id))
        self.unterminated: UnterminatedPolicy = unterminated

    @classmethod
    def from_config(cls, config: ConlogConfig, sink: LineSink | None = None) -> Console:
        if sink is None:
            sink = StructlogSink(parse_log_level(config.level), context_id=config.context_id)
        unterminated = cast("UnterminatedPolicy", config.unterminated)
        return cls(sink, config.context_id, unterminated=unterminated)

    def format(self, *values: object) -> str:
        return format_line(wrap_args(values), self.context_id, unterminated=self.unterminated)

    def emit(self, level: LogLevel, *values: object) -> None:
        if not self.sink.is_enabled(level):
            return
        line = self.format(*values)
        match level:
            case LogLevel.TRACE:
                self.sink.trace(line)
            case LogLevel.DEBUG:
                self.sink.debug(line)
            case LogLevel.INFO:
                self.sink.info(line)
            case LogLevel.WARN:
                self.sink.warn(line)
            case LogLevel.ERROR:
                self.sink.error(line)

    def log(self, *values: object) -> None:
        self.emit(LogLevel.INFO, *values)

    def trace(self, *values: object) -> None:
        self.emit(LogLevel.TRACE, *values)

    def debug(self, *values: object) -> None:
        self.emit(LogLevel.DEBUG, *values)

    def info(self, *values: object) -> None:
        self.emit(LogLevel.INFO, *values)

    def warn(self, *values: object) -> None:
        self.emit(LogLevel.WARN, *values)

    def error(self, *values: object) -> None:
        self.emit(LogLevel.ERROR, *values)
