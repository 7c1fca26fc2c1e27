from .collection import FromArray, FromRecord, array, from_array, from_record, record
from .struct import (
    FromPartial,
    FromStruct,
    MissingKeysDecoder,
    Properties,
    UnexpectedKeysDecoder,
    from_partial,
    from_struct,
    missing_keys,
    partial,
    struct,
    unexpected_keys,
)
from .tuple import (
    FromTuple,
    MissingIndexesDecoder,
    UnexpectedIndexesDecoder,
    from_tuple,
    missing_indexes,
    tuple_,
    unexpected_indexes,
)

__all__ = (
    # Objects
    "Properties",
    "struct",
    "partial",
    "from_struct",
    "from_partial",
    "unexpected_keys",
    "missing_keys",
    "FromStruct",
    "FromPartial",
    "UnexpectedKeysDecoder",
    "MissingKeysDecoder",
    # Tuples
    "tuple_",
    "from_tuple",
    "unexpected_indexes",
    "missing_indexes",
    "FromTuple",
    "UnexpectedIndexesDecoder",
    "MissingIndexesDecoder",
    # Containers
    "array",
    "record",
    "from_array",
    "from_record",
    "FromArray",
    "FromRecord",
)
