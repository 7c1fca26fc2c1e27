from __future__ import annotations

import math

import pytest

from decoders import (
    DefinitionError,
    Failure,
    Success,
    Warning,
    boolean,
    literal,
    number,
    string,
    unknown_array,
    unknown_record,
)
from decoders import error as de

pytestmark = pytest.mark.unit


def test_string() -> None:
    assert string.decode("a") == Success("a")
    assert string.decode(1) == Failure(de.string_le(1))


@pytest.mark.parametrize("value", [0, -3, 1.5, 10**20])
def test_number_accepts_finite_numbers(value: float) -> None:
    assert number.decode(value) == Success(value)


@pytest.mark.parametrize("value", [True, "1", None, [1]])
def test_number_rejects_non_numbers(value: object) -> None:
    assert number.decode(value) == Failure(de.number_le(value))


def test_number_nan_is_a_warning() -> None:
    result = number.decode(float("nan"))

    assert isinstance(result, Warning)
    assert result.error == de.NAN_LE
    assert math.isnan(result.value)


@pytest.mark.parametrize("value", [float("inf"), float("-inf")])
def test_number_infinity_is_a_warning(value: float) -> None:
    assert number.decode(value) == Warning(de.INFINITY_LE, value)


def test_boolean() -> None:
    assert boolean.decode(False) == Success(False)
    assert boolean.decode(0) == Failure(de.boolean_le(0))


def test_unknown_array() -> None:
    assert unknown_array.decode([1, "a"]) == Success([1, "a"])
    assert unknown_array.decode((1, 2)) == Failure(de.array_le((1, 2)))
    assert unknown_array.decode({}) == Failure(de.array_le({}))


def test_unknown_record() -> None:
    assert unknown_record.decode({"a": 1}) == Success({"a": 1})
    assert unknown_record.decode([]) == Failure(de.record_le([]))
    assert unknown_record.decode(None) == Failure(de.record_le(None))


def test_literal_matches_value_and_type() -> None:
    d = literal("a", 1, None)

    assert d.decode("a") == Success("a")
    assert d.decode(1) == Success(1)
    assert d.decode(None) == Success(None)
    assert d.decode(True) == Failure(de.literal_le(True, ("a", 1, None)))
    assert d.decode(1.0) == Failure(de.literal_le(1.0, ("a", 1, None)))


def test_literal_requires_values() -> None:
    with pytest.raises(DefinitionError):
        literal()


def test_definition_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="literal"):
        literal()
