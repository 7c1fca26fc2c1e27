"""
Decode error tree
=================

Closed set of node kinds. Every consumer (drawing, pruning) matches on all
of them and ends with assert_never, so adding a kind means touching each one.

Узлы дерева ошибок декодирования.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from .._types import Key


# ============================================================================
# Leaf
# ============================================================================


@dataclass(frozen=True, slots=True)
class Leaf[E]:
    """Terminal diagnostic carrying a domain payload."""

    error: E


# ============================================================================
# Wrappers (one child plus an address fragment)
# ============================================================================


@dataclass(frozen=True, slots=True)
class RequiredKey[E]:
    key: Key
    error: DecodeError[E]


@dataclass(frozen=True, slots=True)
class OptionalKey[E]:
    key: Key
    error: DecodeError[E]


@dataclass(frozen=True, slots=True)
class RequiredIndex[E]:
    index: int
    error: DecodeError[E]


@dataclass(frozen=True, slots=True)
class OptionalIndex[E]:
    index: int
    error: DecodeError[E]


@dataclass(frozen=True, slots=True)
class Member[E]:
    """Branch of a union (position as str), sum (discriminant) or intersection (0/1)."""

    member: typing.Any
    error: DecodeError[E]


@dataclass(frozen=True, slots=True)
class Prev[E]:
    """Error raised by the first stage of a composition."""

    error: DecodeError[E]


@dataclass(frozen=True, slots=True)
class Next[E]:
    """Error raised by the second stage of a composition."""

    error: DecodeError[E]


@dataclass(frozen=True, slots=True)
class Nullable[E]:
    error: DecodeError[E]


@dataclass(frozen=True, slots=True)
class Lazy[E]:
    id: str
    error: DecodeError[E]


@dataclass(frozen=True, slots=True)
class Sum[E]:
    """Error of the single tagged-union member selected by the discriminant."""

    error: DecodeError[E]


# ============================================================================
# Terminal collections
# ============================================================================


@dataclass(frozen=True, slots=True)
class UnexpectedKeys:
    keys: tuple[Key, ...]


@dataclass(frozen=True, slots=True)
class MissingKeys:
    keys: tuple[Key, ...]


@dataclass(frozen=True, slots=True)
class UnexpectedIndexes:
    indexes: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class MissingIndexes:
    indexes: tuple[int, ...]


# ============================================================================
# Compound
# ============================================================================


@dataclass(frozen=True, slots=True)
class Compound[E]:
    """
    Named aggregation of child errors from one combinator invocation.

    name is one of "struct", "partial", "tuple", "array", "record",
    "composition", "intersection", "union".
    """

    name: str
    errors: tuple[DecodeError[E], ...]

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("Compound.errors must be non-empty")


type DecodeError[E] = (
    Leaf[E]
    | RequiredKey[E]
    | OptionalKey[E]
    | RequiredIndex[E]
    | OptionalIndex[E]
    | Member[E]
    | Prev[E]
    | Next[E]
    | Nullable[E]
    | Lazy[E]
    | Sum[E]
    | UnexpectedKeys
    | MissingKeys
    | UnexpectedIndexes
    | MissingIndexes
    | Compound[E]
)


# ============================================================================
# Compound shortcuts
# ============================================================================


def compound[E](name: str, errors: typing.Iterable[DecodeError[E]]) -> Compound[E]:
    return Compound(name, tuple(errors))


def struct_e[E](errors: typing.Iterable[DecodeError[E]]) -> Compound[E]:
    return compound("struct", errors)


def partial_e[E](errors: typing.Iterable[DecodeError[E]]) -> Compound[E]:
    return compound("partial", errors)


def tuple_e[E](errors: typing.Iterable[DecodeError[E]]) -> Compound[E]:
    return compound("tuple", errors)


def array_e[E](errors: typing.Iterable[DecodeError[E]]) -> Compound[E]:
    return compound("array", errors)


def record_e[E](errors: typing.Iterable[DecodeError[E]]) -> Compound[E]:
    return compound("record", errors)


def composition_e[E](errors: typing.Iterable[DecodeError[E]]) -> Compound[E]:
    return compound("composition", errors)


def intersection_e[E](errors: typing.Iterable[DecodeError[E]]) -> Compound[E]:
    return compound("intersection", errors)


def union_e[E](errors: typing.Iterable[DecodeError[E]]) -> Compound[E]:
    return compound("union", errors)


__all__ = (
    "Leaf",
    "RequiredKey",
    "OptionalKey",
    "RequiredIndex",
    "OptionalIndex",
    "Member",
    "Prev",
    "Next",
    "Nullable",
    "Lazy",
    "Sum",
    "UnexpectedKeys",
    "MissingKeys",
    "UnexpectedIndexes",
    "MissingIndexes",
    "Compound",
    "DecodeError",
    "compound",
    "struct_e",
    "partial_e",
    "tuple_e",
    "array_e",
    "record_e",
    "composition_e",
    "intersection_e",
    "union_e",
)
