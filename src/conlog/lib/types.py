"""Stable domain identifier newtypes and closed enumerations."""

from enum import IntEnum, StrEnum
from typing import Literal, NewType

ContextId = NewType("ContextId", str)

UnterminatedPolicy = Literal["drop", "flush"]


class ValueCategory(StrEnum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    FUNCTION = "function"
    OTHER = "other"


STRUCTURED_CATEGORIES = frozenset(
    {ValueCategory.OBJECT, ValueCategory.ARRAY, ValueCategory.FUNCTION}
)


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40


def parse_log_level(raw: str) -> LogLevel:
    """Resolve a case-insensitive level name (``warning`` is accepted for ``warn``)."""

    normalized = raw.strip().upper()
    if normalized == "WARNING":
        normalized = "WARN"
    try:
        return LogLevel[normalized]
    except KeyError:
        raise ValueError(
            f"Unknown log level {raw!r}; expected one of "
            f"{[level.name.lower() for level in LogLevel]}."
        ) from None
