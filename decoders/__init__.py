"""
Decoders library for turning untrusted input into typed values.

Every decoder returns one of three outcomes:
- Failure(error): no value
- Success(value): a value, no issues
- Warning(error, value): a value plus non-fatal diagnostics

Architecture:
- Primitive decoders check one runtime shape (string, number, ...)
- Structural combinators (struct, partial, tuple_, array, record) are pipelines
  of smaller decoders glued with compose
- union/sum_/intersect/lazy/nullable combine decoders
- draw renders the error tree for humans
"""

# Core types
from ._types import Intersecable, Literal, Predicate, Stringify, Thunk

# Ternary outcome
from . import these
from .these import (
    Failure,
    Outcome,
    Success,
    Warning,
    failure,
    from_result,
    is_failure,
    is_success,
    is_warning,
    success,
    warning,
)

# Error tree (namespace import - preferred)
from . import error

# Decoder model and composition
from .decoder import (
    Composition,
    Decoder,
    compose,
    from_decode,
    identity,
    nullable,
    parse,
    refine,
)

# Primitives
from .primitives import boolean, literal, number, string, unknown_array, unknown_record

# Structure
from .structure import (
    array,
    from_array,
    from_partial,
    from_record,
    from_struct,
    from_tuple,
    missing_indexes,
    missing_keys,
    partial,
    record,
    struct,
    tuple_,
    unexpected_indexes,
    unexpected_keys,
)

# Choice
from .choice import from_sum, sum_, union

# Intersection
from .intersection import intersect, intersect_values

# Recursion
from .lazy import lazy

# Drawing
from .draw import DEFAULT_DRAW_POLICY, DrawPolicy, Tree, draw, draw_error, draw_tree, to_tree, to_tree_with

# Errors
from ._errors import DefinitionError

__all__ = (
    # Types
    "Intersecable",
    "Literal",
    "Predicate",
    "Stringify",
    "Thunk",
    # Outcome
    "these",
    "Outcome",
    "Failure",
    "Success",
    "Warning",
    "failure",
    "success",
    "warning",
    "from_result",
    "is_failure",
    "is_success",
    "is_warning",
    # Error tree
    "error",
    # Decoder model
    "Decoder",
    "Composition",
    "compose",
    "from_decode",
    "identity",
    "nullable",
    "parse",
    "refine",
    # Primitives
    "string",
    "number",
    "boolean",
    "unknown_array",
    "unknown_record",
    "literal",
    # Structure
    "struct",
    "partial",
    "tuple_",
    "array",
    "record",
    "from_struct",
    "from_partial",
    "from_tuple",
    "from_array",
    "from_record",
    "unexpected_keys",
    "missing_keys",
    "unexpected_indexes",
    "missing_indexes",
    # Choice
    "union",
    "sum_",
    "from_sum",
    # Intersection
    "intersect",
    "intersect_values",
    # Recursion
    "lazy",
    # Drawing
    "draw",
    "draw_error",
    "draw_tree",
    "to_tree",
    "to_tree_with",
    "Tree",
    "DrawPolicy",
    "DEFAULT_DRAW_POLICY",
    # Errors
    "DefinitionError",
)
