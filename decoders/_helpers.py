"""Internal helpers for decoders.

Common functions used across multiple decoder modules.
These are not part of the public API but can be used for writing custom decoders."""

from __future__ import annotations

import json
import threading
import typing

from ._types import Thunk

# Sentinel for "no value at this address" (distinct from None)
MISSING: typing.Final = object()

# Shape predicates
def is_unknown_record(u: object) -> typing.TypeGuard[dict[typing.Any, typing.Any]]:
    """True for dict-shaped values (the decoded form of a JSON object)."""
    return isinstance(u, dict)

def is_unknown_array(u: object) -> typing.TypeGuard[list[typing.Any]]:
    """True for list-shaped values (the decoded form of a JSON array)."""
    return isinstance(u, list)

def is_number(u: object) -> typing.TypeGuard[int | float]:
    """True for int and float, but not bool (bool is an int subclass)."""
    return isinstance(u, (int, float)) and not isinstance(u, bool)

# Value formatting
def format_value(u: object) -> str:
    """
    Default "stringify unknown value" used inside leaf diagnostics.
    
    Strings are JSON-quoted so that `"1"` and `1` stay distinguishable,
    everything else uses repr.
    """
    if isinstance(u, str):
        return json.dumps(u, ensure_ascii=False)
    return repr(u)

def quote(u: object) -> str:
    """JSON-quote an address fragment (key, index, member, literal)."""
    return json.dumps(u, ensure_ascii=False, default=repr)

# Memoization
def memoize[T](f: Thunk[T]) -> Thunk[T]:
    """
    Write-once cache for a zero-argument constructor.
    
    The first call runs `f` under a lock, every later call returns the
    cached value without locking.
    """
    lock = threading.Lock()
    cell: list[T] = []

    def get() -> T:
        if not cell:
            with lock:
                if not cell:
                    cell.append(f())
        return cell[0]

    return get

__all__ = (
    "MISSING",
    # Shape predicates
    "is_unknown_record",
    "is_unknown_array",
    "is_number",
    # Formatting
    "format_value",
    "quote",
    # Memoization
    "memoize",
)
