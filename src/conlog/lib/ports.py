"""Sink protocol interfaces for dependency inversion."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from conlog.lib.types import LogLevel


class LineSink(Protocol):
    """Destination for formatted console lines, one method per severity."""

    def is_enabled(self, level: LogLevel) -> bool: ...

    def trace(self, line: str) -> None: ...

    def debug(self, line: str) -> None: ...

    def info(self, line: str) -> None: ...

    def warn(self, line: str) -> None: ...

    def error(self, line: str) -> None: ...
