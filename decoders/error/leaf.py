"""
Builtin leaf payloads
=====================

Payloads carried by Leaf nodes produced by the builtin decoders, plus the
shortcuts used to build `Leaf(payload)` in one call.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from .._types import Literal
from .tree import Leaf


@dataclass(frozen=True, slots=True)
class StringExpected:
    actual: object


@dataclass(frozen=True, slots=True)
class NumberExpected:
    actual: object


@dataclass(frozen=True, slots=True)
class BooleanExpected:
    actual: object


@dataclass(frozen=True, slots=True)
class ArrayExpected:
    actual: object


@dataclass(frozen=True, slots=True)
class RecordExpected:
    actual: object


@dataclass(frozen=True, slots=True)
class LiteralExpected:
    actual: object
    literals: tuple[Literal, ...]


@dataclass(frozen=True, slots=True)
class Message:
    """Free-form diagnostic, used by refinements and custom decoders."""

    message: str


@dataclass(frozen=True, slots=True)
class NaNValue:
    pass


@dataclass(frozen=True, slots=True)
class InfinityValue:
    pass


@dataclass(frozen=True, slots=True)
class TagMismatch:
    tag: str | int
    literals: tuple[typing.Any, ...]


@dataclass(frozen=True, slots=True)
class NoMembers:
    pass


type BuiltinLeaf = (
    StringExpected
    | NumberExpected
    | BooleanExpected
    | ArrayExpected
    | RecordExpected
    | LiteralExpected
    | Message
    | NaNValue
    | InfinityValue
    | TagMismatch
    | NoMembers
)


# ============================================================================
# Leaf shortcuts
# ============================================================================


def string_le(actual: object) -> Leaf[StringExpected]:
    return Leaf(StringExpected(actual))


def number_le(actual: object) -> Leaf[NumberExpected]:
    return Leaf(NumberExpected(actual))


def boolean_le(actual: object) -> Leaf[BooleanExpected]:
    return Leaf(BooleanExpected(actual))


def array_le(actual: object) -> Leaf[ArrayExpected]:
    return Leaf(ArrayExpected(actual))


def record_le(actual: object) -> Leaf[RecordExpected]:
    return Leaf(RecordExpected(actual))


def literal_le(actual: object, literals: typing.Iterable[Literal]) -> Leaf[LiteralExpected]:
    return Leaf(LiteralExpected(actual, tuple(literals)))


def message_le(message: str) -> Leaf[Message]:
    return Leaf(Message(message))


def tag_le(tag: str | int, literals: typing.Iterable[typing.Any]) -> Leaf[TagMismatch]:
    return Leaf(TagMismatch(tag, tuple(literals)))


NAN_LE: typing.Final = Leaf(NaNValue())
INFINITY_LE: typing.Final = Leaf(InfinityValue())
NO_MEMBERS_LE: typing.Final = Leaf(NoMembers())


__all__ = (
    "StringExpected",
    "NumberExpected",
    "BooleanExpected",
    "ArrayExpected",
    "RecordExpected",
    "LiteralExpected",
    "Message",
    "NaNValue",
    "InfinityValue",
    "TagMismatch",
    "NoMembers",
    "BuiltinLeaf",
    "string_le",
    "number_le",
    "boolean_le",
    "array_le",
    "record_le",
    "literal_le",
    "message_le",
    "tag_le",
    "NAN_LE",
    "INFINITY_LE",
    "NO_MEMBERS_LE",
)
