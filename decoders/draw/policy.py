"""
Draw policy
===========

Rendering configuration: how leaf values are stringified and which
connectors draw the tree.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._errors import DefinitionError
from .._helpers import format_value
from .._types import Stringify
from .builtin import to_tree_builtin
from .tree import Tree

# LeafRenderer = (payload, stringify) -> Tree
type LeafRenderer = Callable[[typing.Any, Stringify], Tree]


@dataclass(frozen=True, slots=True)
class DrawPolicy:
    """
    Rendering configuration.

    stringify: embeds the offending value inside leaf messages
    leaf: renders leaf payloads (defaults to the builtin leaves)
    branch/last: connectors before a non-last/last child
    pipe/blank: continuation under a non-last/last child
    """

    stringify: Stringify = format_value
    leaf: LeafRenderer = to_tree_builtin
    branch: str = "├─ "
    last: str = "└─ "
    pipe: str = "│  "
    blank: str = "   "

    def __post_init__(self) -> None:
        if len(self.pipe) != len(self.blank):
            raise DefinitionError("DrawPolicy", "pipe and blank must have the same width")
        if len(self.branch) != len(self.last):
            raise DefinitionError("DrawPolicy", "branch and last must have the same width")

    @classmethod
    def ascii(cls, stringify: Stringify = format_value) -> DrawPolicy:
        """Plain ASCII connectors, for terminals without box-drawing glyphs."""
        return cls(stringify=stringify, branch="|- ", last="`- ", pipe="|  ", blank="   ")

    @property
    def connectors(self) -> dict[str, str]:
        return {"branch": self.branch, "last": self.last, "pipe": self.pipe, "blank": self.blank}


DEFAULT_DRAW_POLICY: typing.Final = DrawPolicy()


__all__ = ("DrawPolicy", "LeafRenderer", "DEFAULT_DRAW_POLICY")
