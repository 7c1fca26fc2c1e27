"""
Tagged union (sum) combinator
=============================

The discriminant picks exactly one member, no alternatives are tried.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from .. import error as de
from .._helpers import MISSING, is_unknown_array, is_unknown_record
from ..decoder import Composition, Decoder, compose
from ..primitives import unknown_array, unknown_record
from ..these import Outcome, failure
from .union import union

log = logging.getLogger(__name__)

type Tag = str | int
type SumMembers = Mapping[typing.Any, Decoder[typing.Any, typing.Any, typing.Any]]


def _read_tag(i: object, tag: Tag) -> object:
    """Discriminant of a tagged object (by key) or tagged tuple (by position)."""
    if is_unknown_record(i):
        return i.get(tag, MISSING)
    if is_unknown_array(i):
        if isinstance(tag, str):
            # ascii digits only
            if not (tag.isascii() and tag.isdecimal()):
                return MISSING
            tag = int(tag)
        return i[tag] if 0 <= tag < len(i) else MISSING
    return MISSING


def _has_member(members: SumMembers, v: object) -> bool:
    if v is MISSING:
        return False
    try:
        return v in members
    except TypeError:
        # unhashable discriminant, e.g. [1] or (1, [2])
        return False


@dataclass(frozen=True, slots=True)
class FromSum(Decoder[typing.Any, typing.Any, typing.Any]):
    tag: Tag
    members: SumMembers

    def decode(self, i: typing.Any, /) -> Outcome[typing.Any, typing.Any]:
        v = _read_tag(i, self.tag)
        if _has_member(self.members, v):
            return self.members[v].decode(i).map_error(
                lambda e: de.Sum(de.Member(v, e))
            )
        log.debug("sum tag %r has no member for %r", self.tag, v)
        return failure(de.tag_le(self.tag, self.members.keys()))


def from_sum(tag: Tag) -> Callable[[SumMembers], FromSum]:
    """Sum over input already known to be a dict or a list."""
    def build(members: SumMembers) -> FromSum:
        return FromSum(tag, members)
    return build


# tagged objects --v               v-- tagged tuples
unknown_record_array: typing.Final = union(unknown_record, unknown_array)


def sum_(tag: Tag) -> Callable[[SumMembers], Composition[typing.Any, typing.Any, typing.Any, typing.Any, typing.Any]]:
    """
    Tagged union keyed by the discriminant value.

        shape = sum_("type")({
            "circle": struct({"type": literal("circle"), "radius": number}),
            "square": struct({"type": literal("square"), "side": number}),
        })
    """
    build = from_sum(tag)

    def build_sum(members: SumMembers) -> Composition[typing.Any, typing.Any, typing.Any, typing.Any, typing.Any]:
        return compose(unknown_record_array, build(members))

    return build_sum


__all__ = ("FromSum", "from_sum", "sum_", "unknown_record_array")
