"""Union-Find partition tables over a fixed range of integers."""

from union_find.config import PartitionConfig
from union_find.table import PartitionView, UnionFind

__version__ = "0.1.0"

__all__ = [
    "PartitionConfig",
    "PartitionView",
    "UnionFind",
]
