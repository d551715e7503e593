"""
Breadth-First Search Adapter - fewest border crossings.

The border graph is unweighted, so BFS from the origin reaches every
country along a path with the minimum number of edges. The adapter
validates codes against the graph, handles the same-country case
without traversal, and converts the predecessor chain to a RoutePath.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Deque, Dict, List, Optional, Set

from src.border_router.exceptions import NoRouteFoundError, UnknownCountryError
from src.border_router.ports.route_finder import RouteFinder
from src.border_router.schemas.route import RoutePath

if TYPE_CHECKING:
    from src.border_router.adapters.repositories.border_graph_repo import (
        BorderGraph,
    )


class BreadthFirstRouteFinder(RouteFinder):
    """
    Shortest land route finder using breadth-first search.

    Stateless and thread-safe: all search state is local to each call
    and the graph is only read.
    """

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Breadth-First Search"

    def find_route(
        self,
        graph: BorderGraph,
        origin: str,
        destination: str,
    ) -> RoutePath:
        """
        Find the route with the fewest border crossings.

        Among several shortest routes, the one returned depends on the
        iteration order of neighbor sets.

        Args:
            graph: Immutable BorderGraph.
            origin: Origin country code.
            destination: Destination country code.

        Returns:
            RoutePath starting at origin and ending at destination.

        Raises:
            UnknownCountryError: If origin, then destination, is not in graph.
            NoRouteFoundError: If destination is unreachable from origin.
        """
        if not graph.country_exists(origin):
            raise UnknownCountryError(origin)
        if not graph.country_exists(destination):
            raise UnknownCountryError(destination)

        if origin == destination:
            return RoutePath(countries=(origin,))

        predecessors = self._search(graph, origin, destination)
        if predecessors is None:
            raise NoRouteFoundError(origin, destination)

        return RoutePath.from_codes(
            self._reconstruct_path(predecessors, origin, destination)
        )

    def _search(
        self,
        graph: BorderGraph,
        origin: str,
        destination: str,
    ) -> Optional[Dict[str, str]]:
        """
        Run BFS from origin until destination is dequeued.

        Nodes are marked visited when enqueued, not when dequeued, so no
        node enters the frontier twice and the first path found to each
        node is a shortest one.

        Returns:
            Predecessor map covering the destination, or None if the
            frontier empties first.
        """
        frontier: Deque[str] = deque([origin])
        visited: Set[str] = {origin}
        predecessors: Dict[str, str] = {}

        while frontier:
            current = frontier.popleft()
            if current == destination:
                return predecessors

            for neighbor in graph.neighbors(current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    predecessors[neighbor] = current
                    frontier.append(neighbor)

        return None

    def _reconstruct_path(
        self,
        predecessors: Dict[str, str],
        origin: str,
        destination: str,
    ) -> List[str]:
        """Walk predecessor links back from destination, then reverse."""
        path = [destination]
        current = destination
        while current != origin:
            current = predecessors[current]
            path.append(current)
        path.reverse()
        return path
