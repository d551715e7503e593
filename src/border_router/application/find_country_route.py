"""
FindCountryRoute Use Case - Public API for border routing.

This module provides the main entry point for the border routing engine.
It acts as a Facade/Factory, handling dependency initialization and
providing a clean interface for consumers (HTTP layer, scripts, tests).
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from src.border_router.adapters.algorithms.bfs_adapter import (
    BreadthFirstRouteFinder,
)
from src.border_router.adapters.data_providers.countries_provider import (
    HttpCountryDataProvider,
    JsonFileCountryDataProvider,
)
from src.border_router.adapters.repositories.border_graph_repo import (
    BorderGraph,
    BorderGraphRepository,
)
from src.border_router.adapters.repositories.route_cache import (
    CachedRoutingService,
    RouteCacheStats,
)
from src.border_router.config import RouterSettings
from src.border_router.monitoring.health import HealthReport, check_country_data
from src.border_router.monitoring.metrics import MetricsSnapshot, RoutingMetrics
from src.border_router.ports.country_data_provider import CountryDataProvider
from src.border_router.ports.route_finder import RouteFinder
from src.border_router.ports.routing_service import RoutingCalculator
from src.border_router.schemas.route import RoutePath
from src.border_router.services.routing_service import RoutingService

logger = logging.getLogger(__name__)


def normalize_country_code(code: str) -> str:
    """Normalize user input to the dataset's code format (trimmed, upper-case)."""
    return code.strip().upper()


def build_data_provider(settings: RouterSettings) -> CountryDataProvider:
    """Create the data provider selected by the settings."""
    if settings.countries_file:
        return JsonFileCountryDataProvider(settings.countries_file)
    return HttpCountryDataProvider(
        url=settings.countries_api_url,
        connect_timeout=settings.connect_timeout,
        read_timeout=settings.read_timeout,
    )


class FindCountryRoute:
    """
    Public API for finding land routes between countries.

    Example usage:
        >>> router = FindCountryRoute()
        >>> router.load()
        >>> router.route("CZE", "ITA").as_list()
        ['CZE', 'AUT', 'ITA']

    Attributes:
        _graph_repo: Border graph repository.
        _service: Underlying RoutingService.
        _calculator: Service, optionally wrapped by the route cache.
    """

    def __init__(
        self,
        settings: Optional[RouterSettings] = None,
        data_provider: Optional[CountryDataProvider] = None,
        route_finder: Optional[RouteFinder] = None,
        metrics: Optional[RoutingMetrics] = None,
    ) -> None:
        """
        Initialize the router with optional custom dependencies.

        Nothing is fetched here; call ``load()`` at startup, or the first
        route request loads the graph.

        Args:
            settings: Router settings. Defaults to RouterSettings().
            data_provider: Custom data provider. If None, built from settings.
            route_finder: Custom algorithm. If None, uses BreadthFirstRouteFinder.
            metrics: Metrics recorder. If None, a new one is created.
        """
        self._settings = settings or RouterSettings()
        self._started_at = datetime.now()

        self._data_provider = data_provider or build_data_provider(self._settings)
        self._graph_repo = BorderGraphRepository(data_provider=self._data_provider)

        self._route_finder = route_finder or BreadthFirstRouteFinder()
        self._metrics = metrics or RoutingMetrics()

        self._service = RoutingService(
            graph_repo=self._graph_repo,
            route_finder=self._route_finder,
            metrics=self._metrics,
        )

        self._cache: Optional[CachedRoutingService] = None
        self._calculator: RoutingCalculator = self._service
        if self._settings.route_cache_enabled:
            self._cache = CachedRoutingService(self._service)
            self._calculator = self._cache

        logger.info(
            "FindCountryRoute initialized with %s algorithm (data: %s, cache: %s)",
            self._route_finder.name,
            self._data_provider.name,
            "on" if self._cache is not None else "off",
        )

    def load(self) -> BorderGraph:
        """
        Load the border graph now (startup hook).

        Raises:
            GraphNotInitializedError: If the dataset cannot be loaded.
        """
        return self._graph_repo.load()

    def route(self, origin: str, destination: str) -> RoutePath:
        """
        Find the shortest land route between two countries.

        Codes are used as given; see normalize_country_code for user input.

        Args:
            origin: Origin country code (e.g., 'CZE').
            destination: Destination country code (e.g., 'ITA').

        Returns:
            RoutePath from origin to destination.

        Raises:
            UnknownCountryError: If a code is not in the dataset.
            NoRouteFoundError: If no land route exists.
        """
        return self._calculator.calculate_route(origin, destination)

    def get_available_countries(self) -> List[str]:
        """Sorted codes of all countries in the dataset."""
        return sorted(self._graph_repo.get_graph().countries)

    def has_border(self, origin: str, destination: str) -> bool:
        """Check if ``origin`` declares a land border with ``destination``."""
        return self._graph_repo.get_graph().has_border(origin, destination)

    def health(self) -> HealthReport:
        """Health of the loaded country data."""
        return check_country_data(self._graph_repo, started_at=self._started_at)

    def metrics_snapshot(self) -> MetricsSnapshot:
        """Current routing metrics."""
        return self._metrics.snapshot()

    @property
    def cache_stats(self) -> Optional[RouteCacheStats]:
        """Route cache counters, None when the cache is disabled."""
        return self._cache.stats if self._cache is not None else None

    @property
    def is_ready(self) -> bool:
        """Check if the router is ready to handle requests."""
        return self._service.is_ready

    @property
    def algorithm_name(self) -> str:
        """Get the name of the routing algorithm being used."""
        return self._service.algorithm_name
