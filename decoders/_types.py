"""
Aliases shared by decoders, error trees and renderers.

Алиасы для предикатов, ключей и разбираемых значений.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Hashable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Thunk = deferred zero-argument constructor (used by lazy decoders)
type Thunk[T] = Callable[[], T]

# Stringify = renders an arbitrary runtime value inside a leaf diagnostic
type Stringify = Callable[[object], str]

# Literal = values accepted by the literal decoder
type Literal = str | int | float | bool | None

# Intersecable = values the intersection combinator knows how to merge
type Intersecable = str | int | float | bool | None | dict[typing.Any, Intersecable] | list[Intersecable]

# Key = address fragment of a keyed wrapper (dict keys are usually str)
type Key = Hashable

__all__ = (
    "Predicate",
    "Thunk",
    "Stringify",
    "Literal",
    "Intersecable",
    "Key",
)
