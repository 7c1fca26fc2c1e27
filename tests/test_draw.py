from __future__ import annotations

import math
import typing

import pytest

from decoders import (
    DefinitionError,
    DrawPolicy,
    Failure,
    Success,
    Warning,
    draw,
    draw_error,
    lazy,
    nullable,
    number,
    string,
    struct,
    sum_,
    literal,
    tuple_,
    array,
    union,
)
from decoders import error as de
from decoders.draw import to_tree_builtin

pytestmark = pytest.mark.unit


def rendered(outcome: typing.Any) -> str:
    drawn = draw(outcome)
    assert isinstance(drawn, (Failure, Warning))
    return drawn.error


def test_struct_errors() -> None:
    result = struct({"a": string, "b": number}).decode({"a": 1, "b": "x"})

    assert rendered(result) == "\n".join(
        [
            "2 error(s) found while decoding (struct)",
            '├─ 1 error(s) found while decoding required key "a"',
            "│  └─ cannot decode 1, expected a string",
            '└─ 1 error(s) found while decoding required key "b"',
            '   └─ cannot decode "x", expected a number',
        ]
    )


def test_composition_with_several_errors_is_shown() -> None:
    result = struct({"a": number}).decode({"a": "x", "c": 1})

    assert rendered(result) == "\n".join(
        [
            "2 error(s) found while decoding (composition)",
            "├─ 1 error(s) found while checking keys",
            '│  └─ unexpected key "c"',
            "└─ 1 error(s) found while decoding (struct)",
            '   └─ 1 error(s) found while decoding required key "a"',
            '      └─ cannot decode "x", expected a number',
        ]
    )


def test_missing_keys() -> None:
    assert rendered(struct({"a": string, "b": string}).decode({})) == "\n".join(
        [
            "2 error(s) found while checking keys",
            '├─ missing required key "a"',
            '└─ missing required key "b"',
        ]
    )


def test_tuple_indexes() -> None:
    assert rendered(tuple_(string, number).decode(["a"])) == "\n".join(
        [
            "1 error(s) found while checking indexes",
            "└─ missing required index 1",
        ]
    )
    assert rendered(tuple_(string, number).decode(["a", "b"])) == "\n".join(
        [
            "1 error(s) found while decoding (tuple)",
            "└─ 1 error(s) found while decoding required component 1",
            '   └─ cannot decode "b", expected a number',
        ]
    )


def test_array_indexes() -> None:
    assert rendered(array(string).decode([1])) == "\n".join(
        [
            "1 error(s) found while decoding (array)",
            "└─ 1 error(s) found while decoding optional index 0",
            "   └─ cannot decode 1, expected a string",
        ]
    )


def test_union_members() -> None:
    assert rendered(union(string, number).decode(True)) == "\n".join(
        [
            "2 error(s) found while decoding (union)",
            "├─ 1 error(s) found while decoding member \"0\"",
            "│  └─ cannot decode True, expected a string",
            "└─ 1 error(s) found while decoding member \"1\"",
            "   └─ cannot decode True, expected a number",
        ]
    )


def test_sum_member() -> None:
    shape = sum_("type")({"square": struct({"type": literal("square"), "side": number})})

    assert rendered(shape.decode({"type": "square", "side": None})) == "\n".join(
        [
            "1 error(s) found while decoding a sum",
            '└─ 1 error(s) found while decoding member "square"',
            "   └─ 1 error(s) found while decoding (struct)",
            '      └─ 1 error(s) found while decoding required key "side"',
            "         └─ cannot decode None, expected a number",
        ]
    )


def test_nullable_and_lazy() -> None:
    assert rendered(nullable(string).decode(1)) == "\n".join(
        [
            "1 error(s) found while decoding a nullable",
            "└─ cannot decode 1, expected a string",
        ]
    )
    assert rendered(lazy("Name", lambda: string).decode(1)) == "\n".join(
        [
            "1 error(s) found while decoding lazy decoder Name",
            "└─ cannot decode 1, expected a string",
        ]
    )


def test_values_are_untouched() -> None:
    assert draw(Success(1)) == Success(1)

    drawn = draw(number.decode(float("nan")))
    assert isinstance(drawn, Warning)
    assert drawn.error == "value is NaN"
    assert math.isnan(drawn.value)


def test_drawing_is_deterministic() -> None:
    result = struct({"a": string, "b": number}).decode({"a": 1, "b": "x", "c": None})

    assert draw(result) == draw(result)


@pytest.mark.parametrize(
    ("leaf", "expected"),
    [
        (de.StringExpected(None), "cannot decode None, expected a string"),
        (de.BooleanExpected("x"), 'cannot decode "x", expected a boolean'),
        (de.ArrayExpected({}), "cannot decode {}, expected an array"),
        (de.RecordExpected(None), "cannot decode None, expected an object"),
        (de.LiteralExpected(True, ("a", 1)), 'cannot decode True, expected one of "a", 1'),
        (de.Message("custom"), "custom"),
        (de.NaNValue(), "value is NaN"),
        (de.InfinityValue(), "value is Infinity"),
        (
            de.TagMismatch("type", ("circle", "square")),
            '1 error(s) found while decoding sum tag "type", expected one of "circle", "square"',
        ),
        (de.NoMembers(), "no members"),
    ],
)
def test_builtin_leaves(leaf: de.BuiltinLeaf, expected: str) -> None:
    assert to_tree_builtin(leaf).value == expected


def test_custom_stringify() -> None:
    policy = DrawPolicy(stringify=lambda _: "<value>")

    assert draw_error(de.string_le(1), policy) == "cannot decode <value>, expected a string"


def test_ascii_policy() -> None:
    result = struct({"a": string, "b": number}).decode({"a": 1, "b": "x"})
    assert isinstance(result, Failure)

    assert draw_error(result.error, DrawPolicy.ascii()) == "\n".join(
        [
            "2 error(s) found while decoding (struct)",
            '|- 1 error(s) found while decoding required key "a"',
            "|  `- cannot decode 1, expected a string",
            '`- 1 error(s) found while decoding required key "b"',
            '   `- cannot decode "x", expected a number',
        ]
    )


def test_policy_validates_connector_widths() -> None:
    with pytest.raises(DefinitionError):
        DrawPolicy(pipe="|", blank="   ")
    with pytest.raises(DefinitionError):
        DrawPolicy(branch="+ ", last="`- ")
