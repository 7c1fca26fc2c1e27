"""Depth-first merge of two decoded views of the same input."""

from __future__ import annotations

import typing

from .._helpers import is_unknown_array, is_unknown_record
from .._types import Intersecable


def intersect_values[A: Intersecable, B: Intersecable](a: A, b: B) -> typing.Any:
    """
    - dict/dict: keys of one side pass through, shared keys are merged
    - list/list: positions merged, the longer tail passes through
    - anything else: b wins
    """
    if is_unknown_record(a) and is_unknown_record(b):
        out = dict(a)
        for k, v in b.items():
            out[k] = intersect_values(out[k], v) if k in out else v
        return out
    if is_unknown_array(a) and is_unknown_array(b):
        merged = list(a)
        for index, v in enumerate(b):
            if index < len(a):
                merged[index] = intersect_values(merged[index], v)
            else:
                merged.append(v)
        return merged
    return b


__all__ = ("intersect_values",)
