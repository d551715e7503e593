"""
Shared fixtures for Border Router tests.

Provides border datasets, graph builders and an in-memory data provider
so tests never touch the network.
"""

from typing import Callable, Dict, Iterable, List, Optional

import pytest

from src.border_router.adapters.repositories.border_graph_repo import (
    BorderGraph,
    build_adjacency_graph,
)
from src.border_router.ports.country_data_provider import CountryDataProvider
from src.border_router.schemas.country import CountryRecord


class InMemoryDataProvider(CountryDataProvider):
    """Data provider double returning fixed records and counting fetches."""

    def __init__(
        self,
        records: List[CountryRecord],
        error: Optional[Exception] = None,
    ) -> None:
        self._records = records
        self._error = error
        self.call_count = 0

    def fetch_countries(self) -> List[CountryRecord]:
        self.call_count += 1
        if self._error is not None:
            raise self._error
        return list(self._records)

    @property
    def name(self) -> str:
        return "In-Memory Provider"


def records_from_adjacency(
    adjacency: Dict[str, Optional[Iterable[str]]],
) -> List[CountryRecord]:
    """Turn {code: borders} into CountryRecords (None stays None)."""
    return [
        CountryRecord.create(cca3=code, borders=borders)
        for code, borders in adjacency.items()
    ]


@pytest.fixture
def anyio_backend():
    """Use only asyncio backend (trio not installed)."""
    return "asyncio"


@pytest.fixture
def graph_factory() -> Callable[[Dict[str, Optional[Iterable[str]]]], BorderGraph]:
    """Build a BorderGraph from a {code: borders} dict."""

    def _make(adjacency: Dict[str, Optional[Iterable[str]]]) -> BorderGraph:
        return build_adjacency_graph(records_from_adjacency(adjacency))

    return _make


@pytest.fixture
def provider_factory() -> Callable[..., InMemoryDataProvider]:
    """Create InMemoryDataProvider doubles."""

    def _make(
        adjacency: Optional[Dict[str, Optional[Iterable[str]]]] = None,
        error: Optional[Exception] = None,
    ) -> InMemoryDataProvider:
        return InMemoryDataProvider(records_from_adjacency(adjacency or {}), error)

    return _make


@pytest.fixture
def central_europe_borders() -> Dict[str, List[str]]:
    """Partial dataset: CZE reaches ITA only through AUT."""
    return {
        "CZE": ["AUT", "DEU", "POL", "SVK"],
        "AUT": ["CZE", "DEU", "HUN", "ITA", "SVN", "SVK", "CHE", "LIE"],
        "ITA": ["AUT", "CHE", "FRA", "SMR", "SVN", "VAT"],
    }


@pytest.fixture
def americas_borders() -> Dict[str, List[str]]:
    """North America plus an island nation without land borders."""
    return {
        "USA": ["CAN", "MEX"],
        "CAN": ["USA"],
        "MEX": ["USA"],
        "AUS": [],
    }


@pytest.fixture
def europe_borders() -> Dict[str, List[str]]:
    """Symmetric western/central European border network."""
    return {
        "PRT": ["ESP"],
        "ESP": ["PRT", "FRA", "AND"],
        "AND": ["ESP", "FRA"],
        "FRA": ["ESP", "AND", "ITA", "CHE", "DEU", "BEL", "LUX", "MCO"],
        "MCO": ["FRA"],
        "BEL": ["FRA", "LUX", "DEU", "NLD"],
        "NLD": ["BEL", "DEU"],
        "LUX": ["FRA", "BEL", "DEU"],
        "DEU": ["FRA", "BEL", "NLD", "LUX", "CHE", "AUT", "CZE", "POL", "DNK"],
        "DNK": ["DEU"],
        "CHE": ["FRA", "DEU", "AUT", "ITA", "LIE"],
        "LIE": ["CHE", "AUT"],
        "ITA": ["FRA", "CHE", "AUT", "SVN", "SMR", "VAT"],
        "SMR": ["ITA"],
        "VAT": ["ITA"],
        "AUT": ["DEU", "CZE", "SVK", "HUN", "SVN", "ITA", "CHE", "LIE"],
        "SVN": ["ITA", "AUT", "HUN", "HRV"],
        "HRV": ["SVN", "HUN"],
        "HUN": ["AUT", "SVK", "UKR", "SVN", "HRV"],
        "CZE": ["DEU", "POL", "SVK", "AUT"],
        "SVK": ["CZE", "POL", "UKR", "HUN", "AUT"],
        "POL": ["DEU", "CZE", "SVK", "UKR"],
        "UKR": ["POL", "SVK", "HUN"],
        "ISL": [],
    }


@pytest.fixture
def central_europe_graph(graph_factory, central_europe_borders) -> BorderGraph:
    return graph_factory(central_europe_borders)


@pytest.fixture
def americas_graph(graph_factory, americas_borders) -> BorderGraph:
    return graph_factory(americas_borders)


@pytest.fixture
def europe_graph(graph_factory, europe_borders) -> BorderGraph:
    return graph_factory(europe_borders)
