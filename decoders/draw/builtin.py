"""Rendering of the builtin leaf payloads."""

from __future__ import annotations

from typing import assert_never

from .. import error as de
from .._helpers import format_value, quote
from .._types import Stringify
from .tree import Tree, tree


def to_tree_builtin(leaf: de.BuiltinLeaf, stringify: Stringify = format_value) -> Tree:
    match leaf:
        case de.StringExpected(actual):
            return tree(f"cannot decode {stringify(actual)}, expected a string")
        case de.NumberExpected(actual):
            return tree(f"cannot decode {stringify(actual)}, expected a number")
        case de.BooleanExpected(actual):
            return tree(f"cannot decode {stringify(actual)}, expected a boolean")
        case de.ArrayExpected(actual):
            return tree(f"cannot decode {stringify(actual)}, expected an array")
        case de.RecordExpected(actual):
            return tree(f"cannot decode {stringify(actual)}, expected an object")
        case de.LiteralExpected(actual, literals):
            expected = ", ".join(quote(literal) for literal in literals)
            return tree(f"cannot decode {stringify(actual)}, expected one of {expected}")
        case de.Message(message):
            return tree(message)
        case de.NaNValue():
            return tree("value is NaN")
        case de.InfinityValue():
            return tree("value is Infinity")
        case de.TagMismatch(tag, literals):
            expected = ", ".join(quote(literal) for literal in literals)
            return tree(f"1 error(s) found while decoding sum tag {quote(tag)}, expected one of {expected}")
        case de.NoMembers():
            return tree("no members")
        case _ as unreachable:
            assert_never(unreachable)


__all__ = ("to_tree_builtin",)
