from .intersect import IntersectDecoder, intersect
from .merge import intersect_values
from .prune import Prunable, collect_prunable, prune, prune_all_unexpected, prune_difference

__all__ = (
    "intersect",
    "IntersectDecoder",
    "intersect_values",
    "Prunable",
    "collect_prunable",
    "prune",
    "prune_all_unexpected",
    "prune_difference",
)
