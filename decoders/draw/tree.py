"""
Error trees
===========

DecodeError -> Tree[str] -> multi-line string.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import assert_never

from .. import error as de
from .._helpers import quote


@dataclass(frozen=True, slots=True)
class Tree:
    value: str
    forest: tuple[Tree, ...] = ()


def tree(value: str, forest: Sequence[Tree] = ()) -> Tree:
    return Tree(value, tuple(forest))


def _one(message: str, child: Tree) -> Tree:
    return tree(f"1 error(s) found while {message}", [child])


def to_tree_with[E](leaf_to_tree: Callable[[E], Tree]) -> Callable[[de.DecodeError[E]], Tree]:
    """Build a DecodeError renderer, leaf payloads are delegated to `leaf_to_tree`."""

    def go(error: de.DecodeError[E]) -> Tree:
        match error:
            case de.MissingIndexes(indexes):
                return tree(
                    f"{len(indexes)} error(s) found while checking indexes",
                    [tree(f"missing required index {quote(index)}") for index in indexes],
                )
            case de.MissingKeys(keys):
                return tree(
                    f"{len(keys)} error(s) found while checking keys",
                    [tree(f"missing required key {quote(key)}") for key in keys],
                )
            case de.UnexpectedIndexes(indexes):
                return tree(
                    f"{len(indexes)} error(s) found while checking indexes",
                    [tree(f"unexpected index {quote(index)}") for index in indexes],
                )
            case de.UnexpectedKeys(keys):
                return tree(
                    f"{len(keys)} error(s) found while checking keys",
                    [tree(f"unexpected key {quote(key)}") for key in keys],
                )
            case de.Leaf(payload):
                return leaf_to_tree(payload)
            case de.Nullable(child):
                return _one("decoding a nullable", go(child))
            case de.Prev(child) | de.Next(child):
                return go(child)
            case de.RequiredIndex(index, child):
                return _one(f"decoding required component {index}", go(child))
            case de.OptionalIndex(index, child):
                return _one(f"decoding optional index {index}", go(child))
            case de.RequiredKey(key, child):
                return _one(f"decoding required key {quote(key)}", go(child))
            case de.OptionalKey(key, child):
                return _one(f"decoding optional key {quote(key)}", go(child))
            case de.Member(member, child):
                return _one(f"decoding member {quote(member)}", go(child))
            case de.Lazy(id, child):
                return _one(f"decoding lazy decoder {id}", go(child))
            case de.Sum(child):
                return _one("decoding a sum", go(child))
            case de.Compound(name, errors):
                if name == "composition" and len(errors) == 1:
                    # less noise in the output if there's only one error
                    return go(errors[0])
                return tree(
                    f"{len(errors)} error(s) found while decoding ({name})",
                    [go(child) for child in errors],
                )
            case _ as unreachable:
                assert_never(unreachable)

    return go


def draw_forest(
    indentation: str,
    forest: Sequence[Tree],
    *,
    branch: str = "├─ ",
    last: str = "└─ ",
    pipe: str = "│  ",
    blank: str = "   ",
) -> str:
    out: list[str] = []
    for n, node in enumerate(forest):
        is_last = n == len(forest) - 1
        out.append(indentation + (last if is_last else branch) + node.value)
        nested = indentation + (pipe if len(forest) > 1 and not is_last else blank)
        out.append(draw_forest(nested, node.forest, branch=branch, last=last, pipe=pipe, blank=blank))
    return "".join(out)


def draw_tree(t: Tree, **connectors: typing.Any) -> str:
    """
    Root line, then one line per node:

        2 error(s) found while decoding (struct)
        ├─ 1 error(s) found while decoding required key "a"
        │  └─ cannot decode 1, expected a string
        └─ 1 error(s) found while decoding required key "b"
           └─ cannot decode "x", expected a number
    """
    return t.value + draw_forest("\n", t.forest, **connectors)


__all__ = ("Tree", "tree", "to_tree_with", "draw_forest", "draw_tree")
