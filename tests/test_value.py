"""Host value adapter for native Python objects."""

from __future__ import annotations

import math
from dataclasses import dataclass

import pytest
from stub_values import text

from conlog.lib.types import ValueCategory
from conlog.lib.value import CoercionError, HostValue, Value, classify, wrap_args


@dataclass
class Point:
    x: int
    y: int


def _named() -> None:
    return None


class Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("no")


@pytest.mark.parametrize(
    ("raw", "category"),
    [
        ("s", ValueCategory.STRING),
        (True, ValueCategory.BOOLEAN),
        (0, ValueCategory.NUMBER),
        (1.5, ValueCategory.NUMBER),
        ({"a": 1}, ValueCategory.OBJECT),
        (Point(1, 2), ValueCategory.OBJECT),
        ([1], ValueCategory.ARRAY),
        ((1,), ValueCategory.ARRAY),
        (_named, ValueCategory.FUNCTION),
        (None, ValueCategory.OTHER),
        (object(), ValueCategory.OTHER),
    ],
)
def test_classify(raw: object, category: ValueCategory) -> None:
    assert classify(raw) is category


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("plain", "plain"),
        (True, "true"),
        (False, "false"),
        (3, "3"),
        (3.0, "3"),
        (1.1, "1.1"),
        (-0.5, "-0.5"),
        (math.nan, "NaN"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (None, "null"),
        ({"a": 1}, "[object Object]"),
        ([1, None, "x", [2, 3]], "1,,x,2,3"),
        (_named, "function _named() { [native code] }"),
    ],
)
def test_display_string(raw: object, expected: str) -> None:
    assert HostValue(raw).to_display_string() == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("a\"b", '"a\\"b"'),
        (2.5, "2.5"),
        (math.nan, "null"),
        (None, "null"),
        ({"a": [1, {"b": True}]}, '{"a":[1,{"b":true}]}'),
        (Point(1, 2), '{"x":1,"y":2}'),
        (("é",), '["é"]'),
    ],
)
def test_structured_string(raw: object, expected: str) -> None:
    assert HostValue(raw).to_structured_string() == expected


def test_functions_are_not_serializable() -> None:
    with pytest.raises(CoercionError):
        HostValue(_named).to_structured_string()


def test_unserializable_nested_value_raises_coercion_error() -> None:
    with pytest.raises(CoercionError):
        HostValue({"f": _named}).to_structured_string()


def test_failing_str_raises_coercion_error() -> None:
    with pytest.raises(CoercionError):
        HostValue(Unprintable()).to_display_string()


def test_wrap_args_keeps_existing_values() -> None:
    stub = text("kept")
    wrapped = wrap_args([stub, 1])
    assert wrapped[0] is stub
    assert wrapped[1] == HostValue(1)
    assert all(isinstance(item, Value) for item in wrapped)
