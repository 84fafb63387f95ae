"""End-to-end line composition."""

from __future__ import annotations

import pytest
from stub_values import StubValue, number, obj, text

from conlog.lib.format.compose import format_line
from conlog.lib.types import ContextId, ValueCategory
from conlog.lib.value import wrap_args

CTX = ContextId("ctx1")
PREFIX = "CONTEXT:[ctx1]: "


def test_empty_arguments_yield_prefix_only() -> None:
    assert format_line((), CTX) == PREFIX


def test_template_substitution_with_leftover() -> None:
    args = (text("one %s"), text("two"), number("3"))
    assert format_line(args, CTX) == f"{PREFIX}one two 3"


def test_integer_precision_in_template() -> None:
    assert format_line((text("val: %.3i"), number("7")), CTX) == f"{PREFIX}val: 007"


def test_objects_are_serialized_and_not_scanned() -> None:
    args = (obj('{"a":1}'), obj('{"b":2}'))
    assert format_line(args, CTX) == PREFIX + '{"a":1} {"b":2}'


def test_structured_first_argument_with_percent_is_not_a_template() -> None:
    args = (obj('{"p":"%s"}'), text("x"))
    assert format_line(args, CTX) == PREFIX + '{"p":"%s"} x'


@pytest.mark.parametrize(
    "head",
    [
        StubValue(ValueCategory.NUMBER, display="4.5 %s", structured="4.5"),
        StubValue(ValueCategory.BOOLEAN, display="true %d", structured="true"),
        StubValue(ValueCategory.OTHER, display="null %s", structured="null"),
    ],
)
def test_non_textual_first_argument_is_not_scanned(head: StubValue) -> None:
    args = (head, text("rest"))
    assert format_line(args, CTX) == f"{PREFIX}{head.display} rest"


def test_template_without_directives_appends_all_others() -> None:
    args = (text("hello"), text("a"), number("2"), obj("[1]"))
    assert format_line(args, CTX) == f"{PREFIX}hello a 2 [1]"


def test_leftovers_use_default_rendering_in_order() -> None:
    array = StubValue(ValueCategory.ARRAY, display="1,2", structured="[1,2]")
    fn = StubValue(ValueCategory.FUNCTION, display="function f() {}", structured="")
    args = (text("%s:"), text("k"), array, number("9"), fn)
    assert format_line(args, CTX) == f"{PREFIX}k: [1,2] 9 "


def test_directives_beyond_arguments_stay_literal() -> None:
    args = (text("%s %s %.2f"), text("only"))
    assert format_line(args, CTX) == f"{PREFIX}only %s %.2f"


def test_unterminated_directive_policy() -> None:
    args = (text("at 50%"), number("1"))
    assert format_line(args, CTX) == f"{PREFIX}at 50 1"
    assert format_line(args, CTX, unterminated="flush") == f"{PREFIX}at 50% 1"


def test_failed_coercions_leave_blank_segments() -> None:
    broken = StubValue(ValueCategory.OBJECT, display=None, structured=None)
    args = (text("[%s]"), broken, broken)
    assert format_line(args, CTX) == f"{PREFIX}[] "


def test_template_display_failure_still_appends_leftovers() -> None:
    head = StubValue(ValueCategory.STRING, display=None, structured=None)
    assert format_line((head, number("1")), CTX) == f"{PREFIX} 1"


def test_mixed_directive_kinds() -> None:
    args = wrap_args(
        [
            "the %s %s %s jumped over %i fences with a accuracy of %.2f",
            "quick",
            "brown",
            "fox",
            32,
            0.512,
        ]
    )
    assert format_line(args, "rt") == (
        "CONTEXT:[rt]: the quick brown fox jumped over 32 fences with a accuracy of 0.51"
    )


def test_host_values_end_to_end() -> None:
    args = wrap_args(["%o and %O", {"a": 1}, [1, "x"], {"b": None}, (True, None)])
    assert format_line(args, CTX) == PREFIX + '{"a":1} and [1,"x"] {"b":null} [true,null]'
