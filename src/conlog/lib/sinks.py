"""Line sink implementations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import structlog

from conlog.lib.types import LogLevel


class StructlogSink:
    """Forward console lines to a structlog logger.

    structlog has no trace method, so trace lines go out through `debug`
    tagged with `console_level="trace"`.
    """

    def __init__(
        self,
        min_level: LogLevel = LogLevel.INFO,
        logger: Any | None = None,
        **context: Any,
    ) -> None:
        self.min_level = min_level
        self._logger = logger if logger is not None else structlog.get_logger("conlog.console")
        self._context = context

    def is_enabled(self, level: LogLevel) -> bool:
        return level >= self.min_level

    def trace(self, line: str) -> None:
        self._logger.debug(line, console_level="trace", **self._context)

    def debug(self, line: str) -> None:
        self._logger.debug(line, **self._context)

    def info(self, line: str) -> None:
        self._logger.info(line, **self._context)

    def warn(self, line: str) -> None:
        self._logger.warning(line, **self._context)

    def error(self, line: str) -> None:
        self._logger.error(line, **self._context)


@dataclass(slots=True)
class CollectingSink:
    """Keep emitted lines in memory, e.g. for embedding hosts and tests."""

    min_level: LogLevel = LogLevel.TRACE
    records: list[tuple[LogLevel, str]] = field(default_factory=list)

    def is_enabled(self, level: LogLevel) -> bool:
        return level >= self.min_level

    def trace(self, line: str) -> None:
        self.records.append((LogLevel.TRACE, line))

    def debug(self, line: str) -> None:
        self.records.append((LogLevel.DEBUG, line))

    def info(self, line: str) -> None:
        self.records.append((LogLevel.INFO, line))

    def warn(self, line: str) -> None:
        self.records.append((LogLevel.WARN, line))

    def error(self, line: str) -> None:
        self.records.append((LogLevel.ERROR, line))

    def lines(self) -> list[str]:
        return [line for _, line in self.records]
