from .sum import FromSum, from_sum, sum_, unknown_record_array
from .union import UnionDecoder, union

__all__ = (
    "union",
    "UnionDecoder",
    "sum_",
    "from_sum",
    "FromSum",
    "unknown_record_array",
)
