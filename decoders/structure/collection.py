"""
Array and record combinators
============================

Homogeneous containers: every index/key is optional, so there is no
missing or unexpected check.

array  = unknown_array  -> from_array
record = unknown_record -> from_record
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from .. import error as de
from ..decoder import Composition, Decoder, compose
from ..primitives import unknown_array, unknown_record
from ..these import Outcome
from ._aggregate import aggregate, conclude


@dataclass(frozen=True, slots=True)
class FromArray[I, E, A](Decoder[list[I], de.Compound[E], list[A]]):
    item: Decoder[I, E, A]

    def decode(self, i: list[I], /) -> Outcome[de.Compound[E], list[A]]:
        out: list[A] = []
        errors, is_both = aggregate(
            ((index, self.item.decode(u)) for index, u in enumerate(i)),
            wrap=de.OptionalIndex,
            put=lambda _, value: out.append(value),
        )
        return conclude("array", errors, is_both, out)


def from_array[I, E, A](item: Decoder[I, E, A]) -> FromArray[I, E, A]:
    return FromArray(item)


def array[E, A](item: Decoder[typing.Any, E, A]) -> Composition[object, typing.Any, typing.Any, typing.Any, list[A]]:
    """List where every item goes through `item`."""
    return compose(unknown_array, from_array(item))


@dataclass(frozen=True, slots=True)
class FromRecord[I, E, A](Decoder[dict[typing.Any, I], de.Compound[E], dict[typing.Any, A]]):
    codomain: Decoder[I, E, A]

    def decode(self, i: dict[typing.Any, I], /) -> Outcome[de.Compound[E], dict[typing.Any, A]]:
        out: dict[typing.Any, A] = {}
        errors, is_both = aggregate(
            ((k, self.codomain.decode(u)) for k, u in i.items()),
            wrap=de.OptionalKey,
            put=out.__setitem__,
        )
        return conclude("record", errors, is_both, out)


def from_record[I, E, A](codomain: Decoder[I, E, A]) -> FromRecord[I, E, A]:
    return FromRecord(codomain)


def record[E, A](codomain: Decoder[typing.Any, E, A]) -> Composition[object, typing.Any, typing.Any, typing.Any, dict[typing.Any, A]]:
    """Dict with arbitrary keys where every value goes through `codomain`."""
    return compose(unknown_record, from_record(codomain))


__all__ = (
    "FromArray",
    "from_array",
    "array",
    "FromRecord",
    "from_record",
    "record",
)
