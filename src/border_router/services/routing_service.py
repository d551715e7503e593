"""
Routing Service - Domain orchestrator for border routing.

Coordinates the interaction between:
- BorderGraphRepository (build-once country graph)
- RouteFinder (algorithm adapter)
- RoutingMetrics (side-channel counters and timings)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Optional

from src.border_router.monitoring.metrics import RoutingMetrics
from src.border_router.schemas.route import RoutePath

if TYPE_CHECKING:
    from src.border_router.ports.graph_repository import BorderGraphSource
    from src.border_router.ports.route_finder import RouteFinder

logger = logging.getLogger(__name__)


class RoutingService:
    """
    Domain service for calculating land routes.

    Orchestrates each calculation:
    1. Retrieves the shared border graph (non-blocking after load)
    2. Delegates the search to the algorithm adapter
    3. Records success/error counts and duration in RoutingMetrics
    4. Logs the outcome and re-raises failures unchanged

    This service is stateless apart from the metrics and thread-safe.

    Attributes:
        _graph_repo: Source of the border graph.
        _route_finder: Algorithm adapter for route finding.
        _metrics: Metrics recorder.
    """

    def __init__(
        self,
        graph_repo: BorderGraphSource,
        route_finder: RouteFinder,
        metrics: Optional[RoutingMetrics] = None,
    ) -> None:
        """
        Initialize the routing service.

        Args:
            graph_repo: Repository for border graph access.
            route_finder: Algorithm adapter (e.g., BreadthFirstRouteFinder).
            metrics: Metrics recorder. If None, a private one is created.
        """
        self._graph_repo = graph_repo
        self._route_finder = route_finder
        self._metrics = metrics or RoutingMetrics()

    def calculate_route(self, origin: str, destination: str) -> RoutePath:
        """
        Calculate the shortest land route between two countries.

        Args:
            origin: Origin country code (already normalized by the caller).
            destination: Destination country code.

        Returns:
            RoutePath from origin to destination.

        Raises:
            UnknownCountryError: If a code is not in the graph.
            NoRouteFoundError: If the countries are not connected.
            GraphNotInitializedError: If the graph cannot be loaded.
        """
        logger.info("Calculating route from %s to %s", origin, destination)

        start_time = time.perf_counter()
        try:
            graph = self._graph_repo.get_graph()
            route = self._route_finder.find_route(
                graph=graph,
                origin=origin,
                destination=destination,
            )
        except Exception as e:
            elapsed = time.perf_counter() - start_time
            self._metrics.record_error(elapsed)
            logger.warning(
                "Route calculation %s -> %s failed in %.3fms: %s",
                origin,
                destination,
                elapsed * 1000,
                e,
            )
            raise

        elapsed = time.perf_counter() - start_time
        self._metrics.record_success(elapsed)

        logger.info(
            "Route found: %s (%d borders) in %.3fms",
            "->".join(route.countries),
            route.crossings,
            elapsed * 1000,
        )
        return route

    @property
    def metrics(self) -> RoutingMetrics:
        """Metrics recorder fed by this service."""
        return self._metrics

    @property
    def algorithm_name(self) -> str:
        """Get name of the underlying algorithm."""
        return self._route_finder.name

    @property
    def is_ready(self) -> bool:
        """Check if service is ready to handle requests."""
        return self._graph_repo.is_initialized
