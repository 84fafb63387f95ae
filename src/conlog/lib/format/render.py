"""Substitution rendering for single values.

Numeric directives work on the value's display text, never on the number:
`%i` truncates at the first `.` and `%.Nf` pads or cuts the fractional digits.
Callers depend on truncation rather than rounding, so keep it textual.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from conlog.lib.types import STRUCTURED_CATEGORIES, ValueCategory

if TYPE_CHECKING:
    from conlog.lib.value import Value

logger = logging.getLogger(__name__)


def display_text(value: Value) -> str:
    """Plain display coercion; failures become an empty string."""

    try:
        return value.to_display_string()
    except Exception:
        logger.debug("display coercion failed", exc_info=True)
        return ""


def structured_text(value: Value) -> str:
    """Structured serialization; failures become an empty string."""

    try:
        return value.to_structured_string()
    except Exception:
        logger.debug("structured serialization failed", exc_info=True)
        return ""


def _category(value: Value) -> ValueCategory:
    try:
        return value.category()
    except Exception:
        logger.debug("category lookup failed", exc_info=True)
        return ValueCategory.OTHER


def format_integer(text: str, precision: int | None) -> str:
    dot_index = text.find(".")
    if dot_index != -1:
        text = text[:dot_index]
    if precision is not None:
        text = text.rjust(precision, "0")
    return text


def format_float(text: str, precision: int | None) -> str:
    if precision is None or precision <= 0:
        return text
    if "." not in text:
        text += "."
    dot_index = text.index(".")
    fraction = text[dot_index + 1 :]
    return text[: dot_index + 1] + fraction[:precision].ljust(precision, "0")


def render(kind: str, precision: int | None, value: Value) -> str:
    """Render `value` for a directive of `kind` with optional `precision`."""

    match kind:
        case "d" | "i":
            return format_integer(display_text(value), precision)
        case "f":
            return format_float(display_text(value), precision)
        case "o" | "O":
            return structured_text(value)
        case _:
            return display_text(value)


def render_default(value: Value) -> str:
    """Rendering used for non-template first arguments and leftovers."""

    if _category(value) in STRUCTURED_CATEGORIES:
        return structured_text(value)
    return display_text(value)


def is_template(value: Value) -> bool:
    return _category(value) is ValueCategory.STRING
