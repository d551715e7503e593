"""
Tests for the FindCountryRoute facade.

Tests cover:
- Code normalization
- Data provider selection from settings
- Routing with and without the route cache
- Country listing, border lookup, health and metrics
"""

from unittest.mock import MagicMock

import pytest

from src.border_router.adapters.data_providers.countries_provider import (
    HttpCountryDataProvider,
    JsonFileCountryDataProvider,
)
from src.border_router.application import FindCountryRoute, normalize_country_code
from src.border_router.application.find_country_route import build_data_provider
from src.border_router.config import RouterSettings
from src.border_router.exceptions import NoRouteFoundError, UnknownCountryError
from src.border_router.ports.graph_repository import GraphNotInitializedError
from src.border_router.ports.route_finder import RouteFinder
from src.border_router.schemas.route import RoutePath


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def europe_router(provider_factory, europe_borders) -> FindCountryRoute:
    return FindCountryRoute(data_provider=provider_factory(europe_borders))


@pytest.fixture
def uncached_router(provider_factory, europe_borders) -> FindCountryRoute:
    return FindCountryRoute(
        settings=RouterSettings(route_cache_enabled=False),
        data_provider=provider_factory(europe_borders),
    )


# =============================================================================
# HELPERS
# =============================================================================


class TestNormalizeCountryCode:
    """Tests for normalize_country_code."""

    @pytest.mark.parametrize("raw,expected", [
        ("cze", "CZE"),
        ("  ita ", "ITA"),
        ("Usa", "USA"),
        ("AUT", "AUT"),
    ])
    def test_normalizes(self, raw, expected):
        assert normalize_country_code(raw) == expected


class TestBuildDataProvider:
    """Tests for build_data_provider."""

    def test_http_by_default(self):
        provider = build_data_provider(RouterSettings())
        assert isinstance(provider, HttpCountryDataProvider)

    def test_file_when_configured(self):
        provider = build_data_provider(RouterSettings(countries_file="countries.json"))
        assert isinstance(provider, JsonFileCountryDataProvider)
        assert provider.name == "File countries.json"


# =============================================================================
# ROUTING
# =============================================================================


class TestRouting:
    """Tests for FindCountryRoute.route."""

    def test_route(self, europe_router):
        route = europe_router.route("CZE", "ITA")
        assert route.as_list() == ["CZE", "AUT", "ITA"]

    def test_same_country(self, europe_router):
        assert europe_router.route("ISL", "ISL").as_list() == ["ISL"]

    def test_unknown_country(self, europe_router):
        with pytest.raises(UnknownCountryError):
            europe_router.route("ZZZ", "ITA")

    def test_no_route(self, europe_router):
        with pytest.raises(NoRouteFoundError):
            europe_router.route("PRT", "ISL")

    def test_codes_not_normalized_by_route(self, europe_router):
        with pytest.raises(UnknownCountryError):
            europe_router.route("cze", "ITA")

    def test_lazy_load_on_first_route(self, provider_factory, europe_borders):
        provider = provider_factory(europe_borders)
        router = FindCountryRoute(data_provider=provider)

        assert not router.is_ready
        router.route("PRT", "ESP")
        assert router.is_ready
        assert provider.call_count == 1

    def test_load_failure(self, provider_factory):
        router = FindCountryRoute(data_provider=provider_factory(error=RuntimeError("x")))
        with pytest.raises(GraphNotInitializedError):
            router.load()

    def test_custom_route_finder(self, provider_factory, europe_borders):
        finder = MagicMock(spec=RouteFinder)
        finder.name = "Stub"
        finder.find_route.return_value = RoutePath.from_codes(["PRT", "ESP"])

        router = FindCountryRoute(
            data_provider=provider_factory(europe_borders), route_finder=finder
        )

        assert router.algorithm_name == "Stub"
        assert router.route("PRT", "ESP").as_list() == ["PRT", "ESP"]


class TestRouteCaching:
    """Tests for the cache wiring."""

    def test_cache_enabled_by_default(self, europe_router):
        first = europe_router.route("PRT", "UKR")
        second = europe_router.route("PRT", "UKR")

        assert first is second
        stats = europe_router.cache_stats
        assert stats.hits == 1
        assert stats.misses == 1
        # Cache hits are not calculations
        assert europe_router.metrics_snapshot().calculations_total == 1

    def test_cache_disabled(self, uncached_router):
        uncached_router.route("PRT", "UKR")
        uncached_router.route("PRT", "UKR")

        assert uncached_router.cache_stats is None
        assert uncached_router.metrics_snapshot().calculations_total == 2

    def test_failures_counted_each_time(self, europe_router):
        for _ in range(2):
            with pytest.raises(NoRouteFoundError):
                europe_router.route("PRT", "ISL")
        assert europe_router.metrics_snapshot().errors_total == 2


# =============================================================================
# QUERIES
# =============================================================================


class TestQueries:
    """Tests for listing, border lookup, health and metrics."""

    def test_available_countries_sorted(self, europe_router, europe_borders):
        assert europe_router.get_available_countries() == sorted(europe_borders)

    def test_has_border(self, europe_router):
        assert europe_router.has_border("PRT", "ESP")
        assert not europe_router.has_border("PRT", "FRA")

    def test_health_down_then_up(self, europe_router):
        assert europe_router.health().status == "DOWN"
        europe_router.load()

        report = europe_router.health()
        assert report.status == "UP"
        assert report.details["countries"] == 24

    def test_algorithm_name(self, europe_router):
        assert europe_router.algorithm_name == "Breadth-First Search"
