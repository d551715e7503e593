"""
Algorithm adapters for border routing.
"""

from src.border_router.adapters.algorithms.bfs_adapter import (
    BreadthFirstRouteFinder,
)
from src.border_router.adapters.algorithms.immutability import (
    freeze_adjacency,
    is_immutable,
    thaw_adjacency,
)

__all__ = [
    "BreadthFirstRouteFinder",
    "freeze_adjacency",
    "is_immutable",
    "thaw_adjacency",
]
