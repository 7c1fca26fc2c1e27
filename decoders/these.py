"""
These - ternary decode outcome
==============================

Outcome[E, A] is exactly one of:
- Failure(error): no value was produced
- Success(value): a value with no issues
- Warning(error, value): a usable value plus non-fatal diagnostics

Warning is the "both" case: a Result that also carries a log of problems.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

from kungfu import Error, Ok, Result


@dataclass(frozen=True, slots=True)
class Failure[E]:
    """Decoding did not produce a value."""

    error: E

    def map[B](self, f: Callable[[typing.Any], B], /) -> Failure[E]:
        _ = f
        return self

    def map_error[F](self, f: Callable[[E], F], /) -> Failure[F]:
        return Failure(f(self.error))

    def bimap[F, B](self, f: Callable[[E], F], g: Callable[[typing.Any], B], /) -> Failure[F]:
        _ = g
        return Failure(f(self.error))

    def fold[R](
        self,
        on_failure: Callable[[E], R],
        on_success: Callable[[typing.Any], R],
        on_warning: Callable[[E, typing.Any], R],
    ) -> R:
        return on_failure(self.error)

    def to_result(self, *, strict: bool = False) -> Result[typing.Never, E]:
        _ = strict
        return Error(self.error)


@dataclass(frozen=True, slots=True)
class Success[A]:
    """Decoding produced a value with no issues."""

    value: A

    def map[B](self, f: Callable[[A], B], /) -> Success[B]:
        return Success(f(self.value))

    def map_error[F](self, f: Callable[[typing.Any], F], /) -> Success[A]:
        _ = f
        return self

    def bimap[F, B](self, f: Callable[[typing.Any], F], g: Callable[[A], B], /) -> Success[B]:
        _ = f
        return Success(g(self.value))

    def fold[R](
        self,
        on_failure: Callable[[typing.Any], R],
        on_success: Callable[[A], R],
        on_warning: Callable[[typing.Any, A], R],
    ) -> R:
        return on_success(self.value)

    def to_result(self, *, strict: bool = False) -> Result[A, typing.Never]:
        _ = strict
        return Ok(self.value)


@dataclass(frozen=True, slots=True)
class Warning[E, A]:
    """Decoding produced a usable value and non-fatal diagnostics."""

    error: E
    value: A

    def map[B](self, f: Callable[[A], B], /) -> Warning[E, B]:
        return Warning(self.error, f(self.value))

    def map_error[F](self, f: Callable[[E], F], /) -> Warning[F, A]:
        return Warning(f(self.error), self.value)

    def bimap[F, B](self, f: Callable[[E], F], g: Callable[[A], B], /) -> Warning[F, B]:
        return Warning(f(self.error), g(self.value))

    def fold[R](
        self,
        on_failure: Callable[[E], R],
        on_success: Callable[[A], R],
        on_warning: Callable[[E, A], R],
    ) -> R:
        return on_warning(self.error, self.value)

    def to_result(self, *, strict: bool = False) -> Result[A, E]:
        """
        Drop the warning side.

        NOTE: with strict=True warnings are promoted to Error and the value is lost.
        """
        if strict:
            return Error(self.error)
        return Ok(self.value)


type Outcome[E, A] = Failure[E] | Success[A] | Warning[E, A]


# ============================================================================
# Constructors
# ============================================================================


def success[A](value: A) -> Success[A]:
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    return Failure(error)


def warning[E, A](error: E, value: A) -> Warning[E, A]:
    return Warning(error, value)


def from_result[A, E](result: Result[A, E]) -> Outcome[E, A]:
    """Lift a kungfu Result: Ok becomes Success, Error becomes Failure."""
    match result:
        case Ok(value):
            return Success(value)
        case Error(err):
            return Failure(err)
        case _ as unreachable:
            assert_never(unreachable)


# ============================================================================
# Predicates
# ============================================================================


def is_failure(o: Outcome[typing.Any, typing.Any]) -> typing.TypeGuard[Failure[typing.Any]]:
    return isinstance(o, Failure)


def is_success(o: Outcome[typing.Any, typing.Any]) -> typing.TypeGuard[Success[typing.Any]]:
    return isinstance(o, Success)


def is_warning(o: Outcome[typing.Any, typing.Any]) -> typing.TypeGuard[Warning[typing.Any, typing.Any]]:
    return isinstance(o, Warning)


__all__ = (
    "Failure",
    "Success",
    "Warning",
    "Outcome",
    "success",
    "failure",
    "warning",
    "from_result",
    "is_failure",
    "is_success",
    "is_warning",
)
