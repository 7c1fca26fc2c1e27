"""
Pruning
=======

Each side of an intersection only knows its own schema, so it reports the
other side's fields as unexpected. Pruning removes those complaints.

- collect_prunable(e): dot-joined addresses of every unexpected key/index in e
- prune(prunable, anticollision)(e): keep an unexpected entry only when its
  address is also in `prunable` (the peer does not expect it either); a node
  left empty is dropped and the emptiness propagates up through wrappers
- anticollision is the address accumulated so far, so "a.x" and "b.x" never
  collide

Path accumulation goes through keyed/indexed wrappers only and stops at
terminals (Leaf, Missing*, Unexpected*).
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Collection
from typing import assert_never

from .. import error as de

type Prunable = tuple[str, ...]
type Pruned[E] = de.DecodeError[E] | None


def collect_prunable[E](error: de.DecodeError[E]) -> Prunable:
    match error:
        case de.Compound(_, errors):
            return tuple(path for child in errors for path in collect_prunable(child))
        case (
            de.Lazy(_, child)
            | de.Member(_, child)
            | de.Next(child)
            | de.Nullable(child)
            | de.Prev(child)
            | de.Sum(child)
        ):
            return collect_prunable(child)
        case de.Leaf() | de.MissingIndexes() | de.MissingKeys():
            return ()
        case de.OptionalIndex(index, child) | de.RequiredIndex(index, child):
            return tuple(f"{index}.{path}" for path in collect_prunable(child))
        case de.OptionalKey(key, child) | de.RequiredKey(key, child):
            return tuple(f"{key}.{path}" for path in collect_prunable(child))
        case de.UnexpectedIndexes(indexes):
            return tuple(str(index) for index in indexes)
        case de.UnexpectedKeys(keys):
            return tuple(str(key) for key in keys)
        case _ as unreachable:
            assert_never(unreachable)


def prune(prunable: Collection[str], anticollision: str) -> Callable[[de.DecodeError[typing.Any]], Pruned[typing.Any]]:
    def go(error: de.DecodeError[typing.Any]) -> Pruned[typing.Any]:
        match error:
            case de.Compound(name, errors):
                kept = [p for p in map(go, errors) if p is not None]
                return de.compound(name, kept) if kept else None
            case de.Sum(child):
                return _wrap(go(child), de.Sum)
            case de.Next(child):
                return _wrap(go(child), de.Next)
            case de.Nullable(child):
                return _wrap(go(child), de.Nullable)
            case de.Prev(child):
                return _wrap(go(child), de.Prev)
            case de.Lazy(id, child):
                return _wrap(go(child), lambda p: de.Lazy(id, p))
            case de.Member(member, child):
                return _wrap(go(child), lambda p: de.Member(member, p))
            case de.Leaf() | de.MissingIndexes() | de.MissingKeys():
                return error
            case de.OptionalIndex(index, child):
                return _wrap(prune(prunable, f"{anticollision}{index}.")(child), lambda p: de.OptionalIndex(index, p))
            case de.OptionalKey(key, child):
                return _wrap(prune(prunable, f"{anticollision}{key}.")(child), lambda p: de.OptionalKey(key, p))
            case de.RequiredIndex(index, child):
                return _wrap(prune(prunable, f"{anticollision}{index}.")(child), lambda p: de.RequiredIndex(index, p))
            case de.RequiredKey(key, child):
                return _wrap(prune(prunable, f"{anticollision}{key}.")(child), lambda p: de.RequiredKey(key, p))
            case de.UnexpectedIndexes(indexes):
                pindexes = tuple(index for index in indexes if f"{anticollision}{index}" in prunable)
                return de.UnexpectedIndexes(pindexes) if pindexes else None
            case de.UnexpectedKeys(keys):
                pkeys = tuple(key for key in keys if f"{anticollision}{key}" in prunable)
                return de.UnexpectedKeys(pkeys) if pkeys else None
            case _ as unreachable:
                assert_never(unreachable)

    return go


def _wrap[E](
    pruned: Pruned[E],
    rewrap: Callable[[de.DecodeError[E]], de.DecodeError[E]],
) -> Pruned[E]:
    return None if pruned is None else rewrap(pruned)


prune_all_unexpected: typing.Final = prune((), "")


def prune_difference[E1, E2](
    error1: de.DecodeError[E1],
    error2: de.DecodeError[E2],
) -> de.Compound[typing.Any] | None:
    """Prune each side against the other's prunable set (Warning/Warning case)."""
    pruned1 = prune(frozenset(collect_prunable(error2)), "")(error1)
    pruned2 = prune(frozenset(collect_prunable(error1)), "")(error2)
    members = [
        de.Member(m, pruned)
        for m, pruned in ((0, pruned1), (1, pruned2))
        if pruned is not None
    ]
    return de.intersection_e(members) if members else None


__all__ = (
    "Prunable",
    "collect_prunable",
    "prune",
    "prune_all_unexpected",
    "prune_difference",
)
