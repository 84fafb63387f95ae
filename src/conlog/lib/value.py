"""Value protocol consumed by the formatter, plus an adapter for Python objects."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, is_dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from conlog.lib.serialization import to_compact_json
from conlog.lib.types import ValueCategory

if TYPE_CHECKING:
    from collections.abc import Iterable


class CoercionError(ValueError):
    """A value could not produce a display or structured string."""


@runtime_checkable
class Value(Protocol):
    """Opaque handle to one logging argument.

    Both string accessors may raise; callers are expected to absorb failures.
    """

    def category(self) -> ValueCategory: ...

    def to_display_string(self) -> str: ...

    def to_structured_string(self) -> str: ...


def _number_text(number: int | float) -> str:
    if isinstance(number, int):
        return str(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    return repr(number)


def classify(raw: object) -> ValueCategory:
    """Map a native Python object onto the closed category set."""

    # bool is a subclass of int, so it has to be checked first.
    if isinstance(raw, bool):
        return ValueCategory.BOOLEAN
    if isinstance(raw, (int, float)):
        return ValueCategory.NUMBER
    if isinstance(raw, str):
        return ValueCategory.STRING
    if isinstance(raw, Mapping) or (is_dataclass(raw) and not isinstance(raw, type)):
        return ValueCategory.OBJECT
    if isinstance(raw, (list, tuple)):
        return ValueCategory.ARRAY
    if callable(raw):
        return ValueCategory.FUNCTION
    return ValueCategory.OTHER


@dataclass(frozen=True, slots=True)
class HostValue:
    """Wrap a native Python object with console-style renderings."""

    raw: object

    def category(self) -> ValueCategory:
        return classify(self.raw)

    def to_display_string(self) -> str:
        raw = self.raw
        match self.category():
            case ValueCategory.STRING:
                return str(raw)
            case ValueCategory.BOOLEAN:
                return "true" if raw else "false"
            case ValueCategory.NUMBER:
                return _number_text(raw)  # type: ignore[arg-type]
            case ValueCategory.OBJECT:
                return "[object Object]"
            case ValueCategory.ARRAY:
                return ",".join(
                    "" if item is None else HostValue(item).to_display_string()
                    for item in raw  # type: ignore[attr-defined]
                )
            case ValueCategory.FUNCTION:
                name = getattr(raw, "__name__", "")
                return f"function {name}() {{ [native code] }}"
            case ValueCategory.OTHER:
                if raw is None:
                    return "null"
                try:
                    return str(raw)
                except Exception as exc:
                    raise CoercionError(
                        f"cannot convert {type(raw).__name__} to string: {exc}"
                    ) from exc

    def to_structured_string(self) -> str:
        raw = self.raw
        if self.category() is ValueCategory.FUNCTION:
            raise CoercionError(f"{type(raw).__name__} is not serializable")
        if isinstance(raw, Mapping) and not isinstance(raw, dict):
            raw = dict(raw)
        try:
            return to_compact_json(raw)
        except (TypeError, ValueError, RecursionError) as exc:
            raise CoercionError(
                f"cannot serialize {type(raw).__name__}: {exc}"
            ) from exc


def wrap_args(values: Iterable[object]) -> tuple[Value, ...]:
    """Freeze one call's arguments, wrapping non-Value objects as `HostValue`."""

    return tuple(
        value if isinstance(value, Value) else HostValue(value) for value in values
    )
