"""
Struct and partial combinators
==============================

struct  = unknown_record -> unexpected_keys -> missing_keys -> from_struct
partial = unknown_record -> unexpected_keys -> from_partial

Unexpected keys are a warning (the extras are dropped), missing keys are
always fatal.
"""

from __future__ import annotations

import typing
from collections.abc import Mapping
from dataclasses import dataclass

from .. import error as de
from .._types import Key
from ..decoder import Composition, Decoder, compose
from ..primitives import unknown_record
from ..these import Outcome, failure, success, warning
from ._aggregate import aggregate, conclude

type Properties = Mapping[Key, Decoder[typing.Any, typing.Any, typing.Any]]
type Record = dict[typing.Any, typing.Any]


# ============================================================================
# Key checks
# ============================================================================


@dataclass(frozen=True, slots=True)
class UnexpectedKeysDecoder(Decoder[Record, de.UnexpectedKeys, Record]):
    properties: Properties

    def decode(self, i: Record, /) -> Outcome[de.UnexpectedKeys, Record]:
        out = {k: i[k] for k in self.properties if k in i}
        unexpected = tuple(k for k in i if k not in out)
        if unexpected:
            return warning(de.UnexpectedKeys(unexpected), out)
        return success(i)


def unexpected_keys(properties: Properties) -> UnexpectedKeysDecoder:
    return UnexpectedKeysDecoder(properties)


@dataclass(frozen=True, slots=True)
class MissingKeysDecoder(Decoder[Record, de.MissingKeys, Record]):
    properties: Properties

    def decode(self, i: Record, /) -> Outcome[de.MissingKeys, Record]:
        missing = tuple(k for k in self.properties if k not in i)
        if missing:
            return failure(de.MissingKeys(missing))
        return success(i)


def missing_keys(properties: Properties) -> MissingKeysDecoder:
    return MissingKeysDecoder(properties)


# ============================================================================
# Member decoding
# ============================================================================


@dataclass(frozen=True, slots=True)
class FromStruct(Decoder[Record, de.Compound[typing.Any], Record]):
    properties: Properties

    def decode(self, i: Record, /) -> Outcome[de.Compound[typing.Any], Record]:
        out: Record = {}
        errors, is_both = aggregate(
            ((k, d.decode(i.get(k))) for k, d in self.properties.items()),
            wrap=de.RequiredKey,
            put=out.__setitem__,
        )
        return conclude("struct", errors, is_both, out)


def from_struct(properties: Properties) -> FromStruct:
    return FromStruct(properties)


@dataclass(frozen=True, slots=True)
class FromPartial(Decoder[Record, de.Compound[typing.Any], Record]):
    """
    Like FromStruct but absent keys are simply omitted, and a key that is
    present with None is passed through as None without running its decoder.
    """

    properties: Properties

    def decode(self, i: Record, /) -> Outcome[de.Compound[typing.Any], Record]:
        out: Record = {}

        def present() -> typing.Iterator[tuple[Key, Outcome[typing.Any, typing.Any]]]:
            for k, d in self.properties.items():
                if k not in i:
                    continue
                if i[k] is None:
                    out[k] = None
                    continue
                yield k, d.decode(i[k])

        errors, is_both = aggregate(present(), wrap=de.OptionalKey, put=out.__setitem__)
        return conclude("partial", errors, is_both, out)


def from_partial(properties: Properties) -> FromPartial:
    return FromPartial(properties)


# ============================================================================
# Pipelines
# ============================================================================


type StructDecoder = Composition[typing.Any, typing.Any, typing.Any, typing.Any, Record]


def struct(properties: Properties) -> StructDecoder:
    """
    Closed object: every declared key is required, undeclared keys are
    reported as a warning and dropped.

        user = struct({"name": string, "age": number})
    """
    return compose(
        compose(
            compose(unknown_record, unexpected_keys(properties)),
            missing_keys(properties),
        ),
        from_struct(properties),
    )


def partial(properties: Properties) -> StructDecoder:
    """Object where every declared key is optional."""
    return compose(
        compose(unknown_record, unexpected_keys(properties)),
        from_partial(properties),
    )


__all__ = (
    "Properties",
    "UnexpectedKeysDecoder",
    "unexpected_keys",
    "MissingKeysDecoder",
    "missing_keys",
    "FromStruct",
    "from_struct",
    "FromPartial",
    "from_partial",
    "struct",
    "partial",
)
