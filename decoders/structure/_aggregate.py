"""
Aggregation rule
================

Per-member decode with error accumulation, shared by every structural
combinator. Накопление ошибок без short-circuit.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable
from typing import assert_never

from .. import error as de
from ..these import Failure, Outcome, Success, Warning, failure, success, warning


def aggregate[K, V, E](
    outcomes: Iterable[tuple[K, Outcome[E, V]]],
    *,
    wrap: Callable[[K, E], de.DecodeError[typing.Any]],
    put: Callable[[K, V], None],
) -> tuple[list[de.DecodeError[typing.Any]], bool]:
    """
    Run every member, never stop at the first error.

    - Failure: is_both becomes False, error is wrapped and kept, slot stays empty
    - Success: slot is populated
    - Warning: error is wrapped and kept, slot is populated anyway

    Returns (errors, is_both).
    """
    errors: list[de.DecodeError[typing.Any]] = []
    is_both = True
    for key, outcome in outcomes:
        match outcome:
            case Failure(e):
                is_both = False
                errors.append(wrap(key, e))
            case Success(value):
                put(key, value)
            case Warning(e, value):
                errors.append(wrap(key, e))
                put(key, value)
            case _ as unreachable:
                assert_never(unreachable)
    return errors, is_both


def conclude[T](
    name: str,
    errors: list[de.DecodeError[typing.Any]],
    is_both: bool,
    out: T,
) -> Outcome[de.Compound[typing.Any], T]:
    """
    No errors: Success(out). Only warnings: Warning(Compound, out).
    Any hard failure: Failure(Compound), the partial output is withheld.
    """
    if not errors:
        return success(out)
    if is_both:
        return warning(de.compound(name, errors), out)
    return failure(de.compound(name, errors))


__all__ = ("aggregate", "conclude")
