"""
Primitive decoders
==================

Leaf checks against an unknown value. Each returns Success(value) or
Failure(Leaf(...)); `number` additionally reports NaN and infinities as
warnings because they are numbers, just suspicious ones.
"""

from __future__ import annotations

import math
import typing
from collections.abc import Callable
from dataclasses import dataclass

from . import error as de
from ._errors import DefinitionError
from ._helpers import is_number, is_unknown_array, is_unknown_record
from ._types import Literal
from .decoder import Decoder
from .these import Outcome, failure, success, warning


@dataclass(frozen=True, slots=True)
class Primitive[A, L](Decoder[object, de.Leaf[L], A]):
    """Shape check: predicate on the runtime value plus the leaf to report."""

    kind: str
    is_: Callable[[object], bool]
    leaf: Callable[[object], de.Leaf[L]]

    def decode(self, i: object, /) -> Outcome[de.Leaf[L], A]:
        if self.is_(i):
            return success(typing.cast(A, i))
        return failure(self.leaf(i))


@dataclass(frozen=True, slots=True)
class NumberDecoder(Decoder[object, de.Leaf[de.NumberExpected | de.NaNValue | de.InfinityValue], float]):
    def decode(
        self, i: object, /
    ) -> Outcome[de.Leaf[de.NumberExpected | de.NaNValue | de.InfinityValue], float]:
        if not is_number(i):
            return failure(de.number_le(i))
        if isinstance(i, float):
            if math.isnan(i):
                return warning(de.NAN_LE, i)
            if math.isinf(i):
                return warning(de.INFINITY_LE, i)
        return success(i)


def _is_string(u: object) -> bool:
    return isinstance(u, str)


def _is_boolean(u: object) -> bool:
    return isinstance(u, bool)


string: typing.Final[Primitive[str, de.StringExpected]] = Primitive("string", _is_string, de.string_le)
number: typing.Final = NumberDecoder()
boolean: typing.Final[Primitive[bool, de.BooleanExpected]] = Primitive("boolean", _is_boolean, de.boolean_le)
unknown_array: typing.Final[Primitive[list[typing.Any], de.ArrayExpected]] = Primitive(
    "unknown_array", is_unknown_array, de.array_le
)
unknown_record: typing.Final[Primitive[dict[typing.Any, typing.Any], de.RecordExpected]] = Primitive(
    "unknown_record", is_unknown_record, de.record_le
)


# ============================================================================
# Literal
# ============================================================================


@dataclass(frozen=True, slots=True)
class LiteralDecoder[A: Literal](Decoder[object, de.Leaf[de.LiteralExpected], A]):
    literals: tuple[A, ...]

    def is_(self, u: object) -> bool:
        # type must match too: 1 == True and 1 == 1.0 in Python
        return any(type(u) is type(literal) and u == literal for literal in self.literals)

    def decode(self, i: object, /) -> Outcome[de.Leaf[de.LiteralExpected], A]:
        if self.is_(i):
            return success(typing.cast(A, i))
        return failure(de.literal_le(i, self.literals))


def literal[A: Literal](*literals: A) -> LiteralDecoder[A]:
    """Accept exactly one of the given values."""
    if not literals:
        raise DefinitionError("literal()", "requires at least one value")
    return LiteralDecoder(literals)


__all__ = (
    "Primitive",
    "NumberDecoder",
    "LiteralDecoder",
    "string",
    "number",
    "boolean",
    "unknown_array",
    "unknown_record",
    "literal",
)
