"""`%`-directive scanning over console templates."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from conlog.lib.types import UnterminatedPolicy

DIRECTIVE_KINDS = frozenset("sdifoO")

# A zero-decimal float request degrades to integer formatting.
_ZERO_DECIMAL_FLOAT = "%.0f"


@dataclass(frozen=True, slots=True)
class Directive:
    """One parsed `%...<kind>` run."""

    kind: str
    precision: int | None
    field_code: str


def parse_directive(field_code: str) -> Directive:
    """Build a directive from a complete field code such as `%.3i`."""

    if field_code == _ZERO_DECIMAL_FLOAT:
        return Directive(kind="i", precision=None, field_code=field_code)

    kind = field_code[-1]
    precision: int | None = None
    dot_index = field_code.find(".")
    if dot_index != -1:
        digits = field_code[dot_index + 1 : -1]
        if digits and digits.isascii() and digits.isdigit():
            precision = int(digits)
    return Directive(kind=kind, precision=precision, field_code=field_code)


Resolver = Callable[[Directive], str | None]


def scan_template(
    template: str,
    resolve: Resolver,
    *,
    unterminated: UnterminatedPolicy = "drop",
) -> str:
    """Copy `template`, replacing each completed directive with `resolve(directive)`.

    `resolve` returns None once arguments are exhausted; the directive's field
    code is then written out literally. A directive still open at end of input
    is dropped, or written literally when `unterminated` is `"flush"`.
    """

    output: list[str] = []
    field_code: list[str] = []
    in_directive = False

    for char in template:
        if not in_directive:
            if char == "%":
                in_directive = True
                field_code = ["%"]
            else:
                output.append(char)
            continue

        field_code.append(char)
        if char not in DIRECTIVE_KINDS:
            continue

        code = "".join(field_code)
        rendered = resolve(parse_directive(code))
        output.append(code if rendered is None else rendered)
        in_directive = False
        field_code = []

    if in_directive and unterminated == "flush":
        output.append("".join(field_code))
    return "".join(output)
