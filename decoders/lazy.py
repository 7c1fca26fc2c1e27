"""
Lazy (recursive) decoder
========================

Defers construction so a schema can refer to itself:

    category = lazy("Category", lambda: struct({
        "name": string,
        "children": array(category),
    }))

The thunk runs at most once, on first decode.
"""

from __future__ import annotations

import logging
import typing
from dataclasses import dataclass, field

from . import error as de
from ._helpers import memoize
from ._types import Thunk
from .decoder import Decoder
from .these import Outcome

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LazyDecoder[I, E, A](Decoder[I, de.Lazy[E], A]):
    id: str
    f: Thunk[Decoder[I, E, A]]
    get: Thunk[Decoder[I, E, A]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        def construct() -> Decoder[I, E, A]:
            log.debug("constructing lazy decoder %s", self.id)
            return self.f()

        # frozen dataclass: the write-once cell is installed once, here
        object.__setattr__(self, "get", memoize(construct))

    def decode(self, i: I, /) -> Outcome[de.Lazy[E], A]:
        return self.get().decode(i).map_error(lambda e: de.Lazy(self.id, e))


def lazy[I, E, A](id: str, f: Thunk[Decoder[I, E, A]]) -> LazyDecoder[I, E, A]:
    """`id` only labels diagnostics, it has no effect on decoding."""
    return LazyDecoder(id, f)


__all__ = ("LazyDecoder", "lazy")
