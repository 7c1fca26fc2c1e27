"""
Decoder model and composition
=============================

A decoder is a value with a `decode(i) -> Outcome[E, A]` method. Every
combinator is its own frozen dataclass holding references to the decoders
it is built from, so a decoder graph can be walked (the class is the tag).

Fluent methods on Decoder lower into the module-level combinators:

    string.compose(refine(lambda s: s != "", "empty")).map(str.upper)
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

from kungfu import Result

from . import error as de
from ._types import Predicate
from .these import Failure, Outcome, Success, Warning, failure, from_result, success, warning


class Decoder[I, E, A]:
    """
    Base class for every decoder.

    Subclasses implement decode(); the fluent helpers below only build new
    decoders and never run anything.
    """

    __slots__ = ()

    def decode(self, i: I, /) -> Outcome[E, A]:
        raise NotImplementedError

    # Functor operations

    def map[B](self, f: Callable[[A], B], /) -> Mapped[I, E, A, B]:
        return Mapped(self, f)

    def map_error[F](self, f: Callable[[E], F], /) -> MappedError[I, E, F, A]:
        return MappedError(self, f)

    # Pipeline operations

    def compose[E2, B](self, next: Decoder[A, E2, B], /) -> Composition[I, E, E2, A, B]:
        return compose(self, next)

    def refine(self, predicate: Predicate[A], message: str, /) -> Composition[I, E, typing.Any, A, A]:
        return compose(self, refine(predicate, message))

    def parse[B, E2](self, f: Callable[[A], Result[B, E2]], /) -> Composition[I, E, E2, A, B]:
        return compose(self, parse(f))

    def nullable(self) -> NullableDecoder[I, E, A]:
        return nullable(self)

    def intersect(self, second: Decoder[typing.Any, typing.Any, typing.Any], /) -> Decoder[typing.Any, typing.Any, typing.Any]:
        from .intersection import intersect
        return intersect(self, second)


# ============================================================================
# Constructors
# ============================================================================


@dataclass(frozen=True, slots=True)
class FromDecode[I, E, A](Decoder[I, E, A]):
    fn: Callable[[I], Outcome[E, A]]

    def decode(self, i: I, /) -> Outcome[E, A]:
        return self.fn(i)


def from_decode[I, E, A](fn: Callable[[I], Outcome[E, A]]) -> FromDecode[I, E, A]:
    """Wrap a plain function returning an Outcome."""
    return FromDecode(fn)


@dataclass(frozen=True, slots=True)
class Identity[A](Decoder[A, typing.Never, A]):
    def decode(self, i: A, /) -> Outcome[typing.Never, A]:
        return success(i)


def identity[A]() -> Identity[A]:
    return Identity()


# ============================================================================
# Mapping
# ============================================================================


@dataclass(frozen=True, slots=True)
class Mapped[I, E, A, B](Decoder[I, E, B]):
    decoder: Decoder[I, E, A]
    f: Callable[[A], B]

    def decode(self, i: I, /) -> Outcome[E, B]:
        return self.decoder.decode(i).map(self.f)


@dataclass(frozen=True, slots=True)
class MappedError[I, E, F, A](Decoder[I, F, A]):
    decoder: Decoder[I, E, A]
    f: Callable[[E], F]

    def decode(self, i: I, /) -> Outcome[F, A]:
        return self.decoder.decode(i).map_error(self.f)


# ============================================================================
# Composition
# ============================================================================


@dataclass(frozen=True, slots=True)
class Composition[I, E1, E2, X, A](Decoder[I, de.Compound[typing.Any], A]):
    """
    prev then next.

    Errors are always Compound("composition", ...) of Prev/Next so it is
    recoverable which stage produced them. Warnings of prev are never
    dropped, even when next fails.
    """

    prev: Decoder[I, E1, X]
    next: Decoder[X, E2, A]

    def decode(self, i: I, /) -> Outcome[de.Compound[typing.Any], A]:
        match self.prev.decode(i):
            case Failure(e1):
                return failure(de.composition_e([de.Prev(e1)]))
            case Success(x):
                match self.next.decode(x):
                    case Failure(e2):
                        return failure(de.composition_e([de.Next(e2)]))
                    case Success() as ok:
                        return ok
                    case Warning(w2, a):
                        return warning(de.composition_e([de.Next(w2)]), a)
                    case _ as unreachable:
                        assert_never(unreachable)
            case Warning(w1, x):
                match self.next.decode(x):
                    case Failure(e2):
                        return failure(de.composition_e([de.Prev(w1), de.Next(e2)]))
                    case Success(a):
                        return warning(de.composition_e([de.Prev(w1)]), a)
                    case Warning(w2, a):
                        return warning(de.composition_e([de.Prev(w1), de.Next(w2)]), a)
                    case _ as unreachable:
                        assert_never(unreachable)
            case _ as unreachable:
                assert_never(unreachable)


def compose[I, E1, E2, X, A](
    prev: Decoder[I, E1, X],
    next: Decoder[X, E2, A],
) -> Composition[I, E1, E2, X, A]:
    return Composition(prev, next)


# ============================================================================
# Refinement / parse
# ============================================================================


@dataclass(frozen=True, slots=True)
class Refinement[A](Decoder[A, de.Leaf[de.Message], A]):
    predicate: Predicate[A]
    message: str

    def decode(self, i: A, /) -> Outcome[de.Leaf[de.Message], A]:
        if self.predicate(i):
            return success(i)
        return failure(de.message_le(self.message))


def refine[A](predicate: Predicate[A], message: str) -> Refinement[A]:
    """
    Keep values satisfying predicate, fail with a Message leaf otherwise.

    Usually placed after a shape decoder:

        non_empty = string.refine(lambda s: len(s) > 0, "expected a non-empty string")
    """
    return Refinement(predicate, message)


@dataclass(frozen=True, slots=True)
class Parse[A, E, B](Decoder[A, E, B]):
    f: Callable[[A], Result[B, E]]

    def decode(self, i: A, /) -> Outcome[E, B]:
        return from_result(self.f(i))


def parse[A, E, B](f: Callable[[A], Result[B, E]]) -> Parse[A, E, B]:
    """Decoder from a function returning kungfu Result (Error becomes Failure)."""
    return Parse(f)


# ============================================================================
# Nullable
# ============================================================================


@dataclass(frozen=True, slots=True)
class NullableDecoder[I, E, A](Decoder[I | None, de.Nullable[E], A | None]):
    or_: Decoder[I, E, A]

    def decode(self, i: I | None, /) -> Outcome[de.Nullable[E], A | None]:
        if i is None:
            return success(None)
        return self.or_.decode(i).map_error(de.Nullable)


def nullable[I, E, A](or_: Decoder[I, E, A]) -> NullableDecoder[I, E, A]:
    """None decodes to None, everything else goes through `or_`."""
    return NullableDecoder(or_)


__all__ = (
    "Decoder",
    "FromDecode",
    "from_decode",
    "Identity",
    "identity",
    "Mapped",
    "MappedError",
    "Composition",
    "compose",
    "Refinement",
    "refine",
    "Parse",
    "parse",
    "NullableDecoder",
    "nullable",
)
