from __future__ import annotations

import typing

import pytest

from decoders import (
    Failure,
    Success,
    Warning,
    intersect,
    intersect_values,
    number,
    record,
    string,
    struct,
    unknown_record,
)
from decoders import error as de
from decoders.intersection import collect_prunable, prune, prune_all_unexpected

pytestmark = pytest.mark.unit


def members(error: de.Compound[typing.Any]) -> list[typing.Any]:
    assert error.name == "intersection"
    return [m.member for m in error.errors]


# =============================================================================
# Decoding
# =============================================================================


def test_compatible_structs_prune_each_other(nodes: typing.Any) -> None:
    first, second = struct({"a": number}), struct({"b": number})
    i = {"a": 1, "b": 2}

    # each side alone flags the other's key
    w1, w2 = first.decode(i), second.decode(i)
    assert isinstance(w1, Warning) and isinstance(w2, Warning)
    assert nodes(w1.error, de.UnexpectedKeys) == [de.UnexpectedKeys(("b",))]
    assert nodes(w2.error, de.UnexpectedKeys) == [de.UnexpectedKeys(("a",))]

    assert intersect(first, second).decode(i) == Success({"a": 1, "b": 2})


def test_genuinely_unexpected_keys_survive(nodes: typing.Any) -> None:
    d = intersect(struct({"a": number}), struct({"b": number}))

    result = d.decode({"a": 1, "b": 2, "c": 3})

    assert isinstance(result, Warning)
    assert result.value == {"a": 1, "b": 2}
    assert members(result.error) == [0, 1]
    assert nodes(result.error, de.UnexpectedKeys) == [
        de.UnexpectedKeys(("c",)),
        de.UnexpectedKeys(("c",)),
    ]


def test_fluent_intersect() -> None:
    d = struct({"a": number}).intersect(struct({"b": string}))

    assert d.decode({"a": 1, "b": "x"}) == Success({"a": 1, "b": "x"})


def test_nested_intersection_uses_anticollision_prefix() -> None:
    d = intersect(
        struct({"x": struct({"a": number})}),
        struct({"x": struct({"b": number})}),
    )

    assert d.decode({"x": {"a": 1, "b": 2}}) == Success({"x": {"a": 1, "b": 2}})


def test_failure_failure() -> None:
    assert intersect(string, number).decode(True) == Failure(
        de.Compound(
            "intersection",
            (
                de.Member(0, de.string_le(True)),
                de.Member(1, de.number_le(True)),
            ),
        )
    )


def test_success_failure_reports_only_the_failing_side() -> None:
    result = intersect(struct({"a": number}), struct({"b": number})).decode({"a": 1})

    assert isinstance(result, Failure)
    assert members(result.error) == [1]


def test_failure_success_reports_only_the_failing_side() -> None:
    result = intersect(struct({"b": number}), struct({"a": number})).decode({"a": 1})

    assert isinstance(result, Failure)
    assert members(result.error) == [0]


def test_failure_warning_drops_unexpected_noise() -> None:
    # second side only warns about "a", which the first side declares
    result = intersect(struct({"a": string}), struct({"b": number})).decode({"a": 1, "b": 2})

    assert isinstance(result, Failure)
    assert members(result.error) == [0]


def test_failure_warning_keeps_genuine_warnings(nodes: typing.Any) -> None:
    result = intersect(struct({"a": string}), struct({"b": number})).decode(
        {"a": 1, "b": float("inf")}
    )

    assert isinstance(result, Failure)
    assert members(result.error) == [0, 1]
    (second,) = [m for m in result.error.errors if m.member == 1]
    assert nodes(second, de.UnexpectedKeys) == []
    assert nodes(second, de.Leaf) == [de.INFINITY_LE]


def test_success_warning_with_only_unexpected_noise() -> None:
    d = intersect(record(number), struct({"a": number}))

    assert d.decode({"a": 1, "b": 2}) == Success({"a": 1, "b": 2})


def test_success_warning_with_genuine_warning(nodes: typing.Any) -> None:
    inf = float("inf")
    d = intersect(unknown_record, struct({"a": number}))

    result = d.decode({"a": inf, "b": 1})

    assert isinstance(result, Warning)
    assert result.value == {"a": inf, "b": 1}
    assert members(result.error) == [1]
    assert nodes(result.error, de.UnexpectedKeys) == []
    assert nodes(result.error, de.RequiredKey) == [de.RequiredKey("a", de.INFINITY_LE)]


def test_warning_success_is_symmetric() -> None:
    d = intersect(struct({"a": number}), record(number))

    assert d.decode({"a": 1, "b": 2}) == Success({"a": 1, "b": 2})


def test_warning_warning_keeps_one_side() -> None:
    inf = float("inf")
    d = intersect(struct({"a": number}), struct({"b": number}))

    result = d.decode({"a": inf, "b": 2})

    assert isinstance(result, Warning)
    assert members(result.error) == [0]
    assert result.value == {"a": inf, "b": 2}


# =============================================================================
# Pruning
# =============================================================================


def test_collect_prunable_accumulates_paths() -> None:
    error = de.Compound(
        "struct",
        (
            de.RequiredKey("x", de.UnexpectedKeys(("a", "b"))),
            de.OptionalIndex(0, de.RequiredKey("y", de.UnexpectedIndexes((3,)))),
            de.RequiredKey("z", de.string_le(1)),
            de.MissingKeys(("m",)),
        ),
    )

    assert collect_prunable(error) == ("x.a", "x.b", "0.y.3")


def test_prune_keeps_entries_the_peer_also_rejects() -> None:
    error = de.RequiredKey("x", de.UnexpectedKeys(("a", "b")))

    assert prune(("x.a",), "")(error) == de.RequiredKey("x", de.UnexpectedKeys(("a",)))
    assert prune(("a",), "")(error) is None


def test_prune_propagates_emptiness_through_wrappers() -> None:
    error = de.Compound(
        "composition",
        (
            de.Prev(de.Lazy("L", de.Member(0, de.UnexpectedKeys(("a",))))),
            de.Next(de.Nullable(de.string_le(1))),
        ),
    )

    assert prune_all_unexpected(error) == de.Compound(
        "composition", (de.Next(de.Nullable(de.string_le(1))),)
    )


def test_prune_keeps_terminal_diagnostics() -> None:
    assert prune_all_unexpected(de.MissingKeys(("a",))) == de.MissingKeys(("a",))
    assert prune_all_unexpected(de.UnexpectedIndexes((1,))) is None


# =============================================================================
# Merging
# =============================================================================


def test_intersect_values() -> None:
    assert intersect_values({"a": {"x": 1}}, {"a": {"y": 2}, "b": 3}) == {"a": {"x": 1, "y": 2}, "b": 3}
    assert intersect_values([1, {"a": 1}], [2, {"b": 2}, 3]) == [2, {"a": 1, "b": 2}, 3]
    assert intersect_values(1, 2) == 2
    assert intersect_values({"a": 1}, [1]) == [1]
