from __future__ import annotations

import pytest
from kungfu import Error, Ok

from decoders import (
    Failure,
    Success,
    Warning,
    failure,
    from_result,
    is_failure,
    is_success,
    is_warning,
    success,
    warning,
)

pytestmark = pytest.mark.unit


def test_map_touches_value_side_only() -> None:
    assert success(1).map(lambda a: a + 1) == Success(2)
    assert warning("w", 1).map(lambda a: a + 1) == Warning("w", 2)
    assert failure("e").map(lambda a: a + 1) == Failure("e")


def test_map_error_touches_error_side_only() -> None:
    assert failure("e").map_error(str.upper) == Failure("E")
    assert warning("w", 1).map_error(str.upper) == Warning("W", 1)
    assert success(1).map_error(str.upper) == Success(1)


def test_bimap() -> None:
    assert warning("w", 1).bimap(str.upper, lambda a: a * 10) == Warning("W", 10)


def test_fold_is_total() -> None:
    def describe(outcome: Failure[str] | Success[int] | Warning[str, int]) -> str:
        return outcome.fold(
            lambda e: f"failure:{e}",
            lambda a: f"success:{a}",
            lambda e, a: f"warning:{e}:{a}",
        )

    assert describe(failure("e")) == "failure:e"
    assert describe(success(1)) == "success:1"
    assert describe(warning("w", 1)) == "warning:w:1"


def test_predicates_classify_exactly_one_state() -> None:
    for outcome, expected in (
        (failure("e"), (True, False, False)),
        (success(1), (False, True, False)),
        (warning("w", 1), (False, False, True)),
    ):
        assert (is_failure(outcome), is_success(outcome), is_warning(outcome)) == expected


def test_to_result_keeps_warning_value_by_default() -> None:
    match warning("w", 1).to_result():
        case Ok(value):
            assert value == 1
        case _:
            pytest.fail("warning should convert to Ok")


def test_to_result_strict_promotes_warning_to_error() -> None:
    match warning("w", 1).to_result(strict=True):
        case Error(err):
            assert err == "w"
        case _:
            pytest.fail("strict warning should convert to Error")


def test_failure_and_success_to_result() -> None:
    match failure("e").to_result():
        case Error(err):
            assert err == "e"
        case _:
            pytest.fail("failure should convert to Error")
    match success(1).to_result():
        case Ok(value):
            assert value == 1
        case _:
            pytest.fail("success should convert to Ok")


def test_from_result() -> None:
    assert from_result(Ok(1)) == Success(1)
    assert from_result(Error("e")) == Failure("e")
