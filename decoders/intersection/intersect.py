"""
Intersection combinator
=======================

Decodes the same input with two decoders and merges both values. Each
side's "unexpected" diagnostics are pruned against the other side, so two
compatible schemas over one object do not complain about each other.
"""

from __future__ import annotations

import logging
import typing
from dataclasses import dataclass
from typing import assert_never

from .. import error as de
from ..decoder import Decoder
from ..these import Failure, Outcome, Success, Warning, failure, success, warning
from .merge import intersect_values
from .prune import prune_all_unexpected, prune_difference

log = logging.getLogger(__name__)

type AnyDecoder = Decoder[typing.Any, de.DecodeError[typing.Any], typing.Any]
type IntersectE = de.Compound[typing.Any]


def _members(*members: tuple[int, de.DecodeError[typing.Any] | None]) -> IntersectE | None:
    kept = [de.Member(m, e) for m, e in members if e is not None]
    return de.intersection_e(kept) if kept else None


@dataclass(frozen=True, slots=True)
class IntersectDecoder(Decoder[typing.Any, IntersectE, typing.Any]):
    first: AnyDecoder
    second: AnyDecoder

    def decode(self, i: typing.Any, /) -> Outcome[IntersectE, typing.Any]:
        first = self.first.decode(i)
        second = self.second.decode(i)
        match first, second:
            # no value to merge: both failures are reported as-is
            case Failure(e1), Failure(e2):
                return failure(_members((0, e1), (1, e2)))
            case Failure(e1), Success():
                return failure(_members((0, e1)))
            case Failure(e1), Warning(w2, _):
                return failure(_members((0, e1), (1, prune_all_unexpected(w2))))
            case Success(), Failure(e2):
                return failure(_members((1, e2)))
            case Warning(w1, _), Failure(e2):
                return failure(_members((0, prune_all_unexpected(w1)), (1, e2)))
            # both produced a value
            case Success(a1), Success(a2):
                return success(intersect_values(a1, a2))
            case Success(a1), Warning(w2, a2):
                return _with_warning(_members((1, prune_all_unexpected(w2))), intersect_values(a1, a2))
            case Warning(w1, a1), Success(a2):
                return _with_warning(_members((0, prune_all_unexpected(w1))), intersect_values(a1, a2))
            case Warning(w1, a1), Warning(w2, a2):
                return _with_warning(prune_difference(w1, w2), intersect_values(a1, a2))
            case _ as unreachable:
                assert_never(unreachable)


def _with_warning(error: IntersectE | None, value: typing.Any) -> Outcome[IntersectE, typing.Any]:
    if error is None:
        log.debug("intersection warnings fully pruned")
        return success(value)
    return warning(error, value)


def intersect(first: AnyDecoder, second: AnyDecoder) -> IntersectDecoder:
    """
    Both decoders must accept the input; values are merged depth-first.

        named_and_aged = intersect(struct({"name": string}), struct({"age": number}))
    """
    return IntersectDecoder(first, second)


__all__ = ("IntersectDecoder", "intersect")
