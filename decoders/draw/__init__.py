"""
Drawing
=======

Human-readable rendering of decode errors.

    match draw(decoder.decode(payload)):
        case Failure(message):
            print(message)
"""

from __future__ import annotations

import typing

from .. import error as de
from ..these import Outcome
from .builtin import to_tree_builtin
from .policy import DEFAULT_DRAW_POLICY, DrawPolicy, LeafRenderer
from .tree import Tree, draw_forest, draw_tree, to_tree_with, tree


def to_tree(error: de.DecodeError[typing.Any], policy: DrawPolicy = DEFAULT_DRAW_POLICY) -> Tree:
    """Render an error tree with the policy's leaf renderer."""
    return to_tree_with(lambda payload: policy.leaf(payload, policy.stringify))(error)


def draw_error(error: de.DecodeError[typing.Any], policy: DrawPolicy = DEFAULT_DRAW_POLICY) -> str:
    return draw_tree(to_tree(error, policy), **policy.connectors)


def draw[A](
    outcome: Outcome[de.DecodeError[typing.Any], A],
    policy: DrawPolicy = DEFAULT_DRAW_POLICY,
) -> Outcome[str, A]:
    """Same outcome shape, error side replaced by the rendered string."""
    return outcome.map_error(lambda error: draw_error(error, policy))


__all__ = (
    "Tree",
    "tree",
    "to_tree_with",
    "to_tree_builtin",
    "to_tree",
    "draw_forest",
    "draw_tree",
    "draw_error",
    "draw",
    "DrawPolicy",
    "LeafRenderer",
    "DEFAULT_DRAW_POLICY",
)
