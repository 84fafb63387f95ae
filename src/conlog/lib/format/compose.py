"""Console line composition."""

from __future__ import annotations

from typing import TYPE_CHECKING

from conlog.lib.format.directive import Directive, scan_template
from conlog.lib.format.render import display_text, is_template, render, render_default

if TYPE_CHECKING:
    from collections.abc import Sequence

    from conlog.lib.types import ContextId, UnterminatedPolicy
    from conlog.lib.value import Value


def context_prefix(context_id: ContextId | str) -> str:
    return f"CONTEXT:[{context_id}]: "


def format_line(
    args: Sequence[Value],
    context_id: ContextId | str,
    *,
    unterminated: UnterminatedPolicy = "drop",
) -> str:
    """Compose one console line from a logging call's arguments.

    A textual first argument is a template whose directives consume the
    following arguments in order. Whatever is left over is appended, each
    preceded by one space.
    """

    output = [context_prefix(context_id)]
    if not args:
        return output[0]

    head = args[0]
    filled = 1

    if is_template(head):

        def resolve(directive: Directive) -> str | None:
            nonlocal filled
            if filled >= len(args):
                return None
            rendered = render(directive.kind, directive.precision, args[filled])
            filled += 1
            return rendered

        output.append(scan_template(display_text(head), resolve, unterminated=unterminated))
    else:
        output.append(render_default(head))

    for leftover in args[filled:]:
        output.append(" ")
        output.append(render_default(leftover))

    return "".join(output)
