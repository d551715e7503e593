"""
Route Finder port interface.

Defines the abstract contract for routing algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.border_router.adapters.repositories.border_graph_repo import (
        BorderGraph,
    )
    from src.border_router.schemas.route import RoutePath


class RouteFinder(ABC):
    """
    Abstract interface for route finding algorithms.

    Algorithm adapters receive the full BorderGraph and treat it as
    read-only. They validate codes against the graph themselves.

    Implementations:
    - BreadthFirstRouteFinder: fewest border crossings via BFS
    """

    @abstractmethod
    def find_route(
        self,
        graph: BorderGraph,
        origin: str,
        destination: str,
    ) -> RoutePath:
        """
        Find the shortest land route between two countries.

        Args:
            graph: Pre-built immutable BorderGraph.
            origin: Origin country code.
            destination: Destination country code.

        Returns:
            RoutePath from origin to destination.

        Raises:
            UnknownCountryError: If origin or destination is not in the graph
                (origin is checked first).
            NoRouteFoundError: If the countries are not connected.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
