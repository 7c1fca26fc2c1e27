"""
Decode errors
=============

Дерево ошибок декодирования и встроенные листовые ошибки.
"""

from .leaf import (
    INFINITY_LE,
    NAN_LE,
    NO_MEMBERS_LE,
    ArrayExpected,
    BooleanExpected,
    BuiltinLeaf,
    InfinityValue,
    LiteralExpected,
    Message,
    NaNValue,
    NoMembers,
    NumberExpected,
    RecordExpected,
    StringExpected,
    TagMismatch,
    array_le,
    boolean_le,
    literal_le,
    message_le,
    number_le,
    record_le,
    string_le,
    tag_le,
)
from .tree import (
    Compound,
    DecodeError,
    Lazy,
    Leaf,
    Member,
    MissingIndexes,
    MissingKeys,
    Next,
    Nullable,
    OptionalIndex,
    OptionalKey,
    Prev,
    RequiredIndex,
    RequiredKey,
    Sum,
    UnexpectedIndexes,
    UnexpectedKeys,
    array_e,
    composition_e,
    compound,
    intersection_e,
    partial_e,
    record_e,
    struct_e,
    tuple_e,
    union_e,
)

__all__ = (
    # Tree nodes
    "DecodeError",
    "Leaf",
    "RequiredKey",
    "OptionalKey",
    "RequiredIndex",
    "OptionalIndex",
    "Member",
    "Prev",
    "Next",
    "Nullable",
    "Lazy",
    "Sum",
    "UnexpectedKeys",
    "MissingKeys",
    "UnexpectedIndexes",
    "MissingIndexes",
    "Compound",
    # Compound shortcuts
    "compound",
    "struct_e",
    "partial_e",
    "tuple_e",
    "array_e",
    "record_e",
    "composition_e",
    "intersection_e",
    "union_e",
    # Builtin leaves
    "BuiltinLeaf",
    "StringExpected",
    "NumberExpected",
    "BooleanExpected",
    "ArrayExpected",
    "RecordExpected",
    "LiteralExpected",
    "Message",
    "NaNValue",
    "InfinityValue",
    "TagMismatch",
    "NoMembers",
    # Leaf shortcuts
    "string_le",
    "number_le",
    "boolean_le",
    "array_le",
    "record_le",
    "literal_le",
    "message_le",
    "tag_le",
    "NAN_LE",
    "INFINITY_LE",
    "NO_MEMBERS_LE",
)
