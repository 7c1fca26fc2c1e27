"""Pytest configuration and fixtures.

Provides helpers for searching decode error trees and a few shared
decoders used across test modules.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

import pytest

from decoders import error as de
from decoders import number, string, struct

# =============================================================================
# Error tree search
# =============================================================================


def walk(error: de.DecodeError[typing.Any]) -> typing.Iterator[de.DecodeError[typing.Any]]:
    """Pre-order traversal over every node of an error tree."""
    yield error
    match error:
        case de.Compound(_, errors):
            for child in errors:
                yield from walk(child)
        case (
            de.RequiredKey(_, child)
            | de.OptionalKey(_, child)
            | de.RequiredIndex(_, child)
            | de.OptionalIndex(_, child)
            | de.Member(_, child)
            | de.Lazy(_, child)
            | de.Prev(child)
            | de.Next(child)
            | de.Nullable(child)
            | de.Sum(child)
        ):
            yield from walk(child)
        case _:
            pass


type FindNodes = Callable[[de.DecodeError[typing.Any], type], list[typing.Any]]


@pytest.fixture
def nodes() -> FindNodes:
    """nodes(error, cls) -> every node of kind cls, in tree order."""

    def find(error: de.DecodeError[typing.Any], cls: type) -> list[typing.Any]:
        return [node for node in walk(error) if isinstance(node, cls)]

    return find


# =============================================================================
# Shared decoders
# =============================================================================


@pytest.fixture
def person() -> typing.Any:
    return struct({"name": string, "age": number})
