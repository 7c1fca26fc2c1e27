"""
Tuple combinator
================

tuple_ = unknown_array -> unexpected_indexes -> missing_indexes -> from_tuple
"""

from __future__ import annotations

import typing
from collections.abc import Sequence
from dataclasses import dataclass

from .. import error as de
from ..decoder import Composition, Decoder, compose
from ..primitives import unknown_array
from ..these import Outcome, failure, success, warning
from ._aggregate import aggregate, conclude

type Components = Sequence[Decoder[typing.Any, typing.Any, typing.Any]]
type Items = list[typing.Any]


@dataclass(frozen=True, slots=True)
class UnexpectedIndexesDecoder(Decoder[Items, de.UnexpectedIndexes, Items]):
    components: Components

    def decode(self, i: Items, /) -> Outcome[de.UnexpectedIndexes, Items]:
        declared = len(self.components)
        unexpected = tuple(range(declared, len(i)))
        if unexpected:
            return warning(de.UnexpectedIndexes(unexpected), i[:declared])
        return success(i)


def unexpected_indexes(*components: Decoder[typing.Any, typing.Any, typing.Any]) -> UnexpectedIndexesDecoder:
    return UnexpectedIndexesDecoder(components)


@dataclass(frozen=True, slots=True)
class MissingIndexesDecoder(Decoder[Items, de.MissingIndexes, Items]):
    components: Components

    def decode(self, i: Items, /) -> Outcome[de.MissingIndexes, Items]:
        missing = tuple(range(len(i), len(self.components)))
        if missing:
            return failure(de.MissingIndexes(missing))
        return success(i)


def missing_indexes(*components: Decoder[typing.Any, typing.Any, typing.Any]) -> MissingIndexesDecoder:
    return MissingIndexesDecoder(components)


@dataclass(frozen=True, slots=True)
class FromTuple(Decoder[Items, de.Compound[typing.Any], Items]):
    components: Components

    def decode(self, i: Items, /) -> Outcome[de.Compound[typing.Any], Items]:
        out: Items = []
        errors, is_both = aggregate(
            (
                (index, d.decode(i[index] if index < len(i) else None))
                for index, d in enumerate(self.components)
            ),
            wrap=de.RequiredIndex,
            put=lambda _, value: out.append(value),
        )
        return conclude("tuple", errors, is_both, out)


def from_tuple(*components: Decoder[typing.Any, typing.Any, typing.Any]) -> FromTuple:
    return FromTuple(components)


def tuple_(*components: Decoder[typing.Any, typing.Any, typing.Any]) -> Composition[typing.Any, typing.Any, typing.Any, typing.Any, Items]:
    """
    Fixed-length array. Extra trailing items are a warning, missing ones fail.

        point = tuple_(number, number)
    """
    return compose(
        compose(
            compose(unknown_array, unexpected_indexes(*components)),
            missing_indexes(*components),
        ),
        from_tuple(*components),
    )


__all__ = (
    "UnexpectedIndexesDecoder",
    "unexpected_indexes",
    "MissingIndexesDecoder",
    "missing_indexes",
    "FromTuple",
    "from_tuple",
    "tuple_",
)
