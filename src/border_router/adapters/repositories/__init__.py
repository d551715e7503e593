"""
Repository adapters for border graph and route caching.
"""

from src.border_router.adapters.repositories.border_graph_repo import (
    BorderGraph,
    BorderGraphRepository,
    build_adjacency_graph,
    compute_graph_version,
)
from src.border_router.adapters.repositories.route_cache import (
    CachedRoutingService,
    RouteCacheStats,
)

__all__ = [
    "BorderGraph",
    "BorderGraphRepository",
    "CachedRoutingService",
    "RouteCacheStats",
    "build_adjacency_graph",
    "compute_graph_version",
]
