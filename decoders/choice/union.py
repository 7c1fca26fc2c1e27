"""
Union combinator
================

Try members in declaration order, the first one that does not fail wins.
Callers declare members from most to least specific.
"""

from __future__ import annotations

import logging
import typing
from dataclasses import dataclass
from typing import assert_never

from .. import error as de
from ..decoder import Decoder
from ..these import Failure, Outcome, Success, Warning, failure, warning

log = logging.getLogger(__name__)

type Members = tuple[Decoder[typing.Any, typing.Any, typing.Any], ...]


@dataclass(frozen=True, slots=True)
class UnionDecoder(Decoder[typing.Any, typing.Any, typing.Any]):
    members: Members

    def decode(self, i: typing.Any, /) -> Outcome[typing.Any, typing.Any]:
        errors: list[de.Member[typing.Any]] = []
        for m, member in enumerate(self.members):
            match member.decode(i):
                case Failure(e):
                    errors.append(de.Member(str(m), e))
                case Success() as ok:
                    return ok
                case Warning(e, a):
                    # earlier failures are kept as context for the warning
                    return warning(de.union_e([*errors, de.Member(str(m), e)]), a)
                case _ as unreachable:
                    assert_never(unreachable)
        if errors:
            return failure(de.union_e(errors))
        log.debug("union decoded with no members")
        return failure(de.NO_MEMBERS_LE)


def union(*members: Decoder[typing.Any, typing.Any, typing.Any]) -> UnionDecoder:
    """
    Alternation.

        id_ = union(number, string)

    NOTE: declaration order is authoritative, a later member is never tried
          once an earlier one succeeds.
    """
    return UnionDecoder(members)


__all__ = ("UnionDecoder", "union")
