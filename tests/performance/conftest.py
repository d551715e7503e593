"""
Shared fixtures for performance benchmarks.

Key design principle: build expensive resources (graph, warmed router)
once at module scope, then benchmark only the hot paths.
"""

from typing import Dict, List

import pytest

from src.border_router.adapters.algorithms.bfs_adapter import (
    BreadthFirstRouteFinder,
)
from src.border_router.adapters.repositories.border_graph_repo import (
    BorderGraph,
    build_adjacency_graph,
)
from src.border_router.application import FindCountryRoute
from src.border_router.ports.country_data_provider import CountryDataProvider
from src.border_router.schemas.country import CountryRecord

# Roughly the size of the real dataset (~250 countries)
GRID_SIDE = 16


def grid_borders(side: int) -> Dict[str, List[str]]:
    """Square lattice of countries; each borders its 4 orthogonal neighbors."""

    def code(row: int, col: int) -> str:
        return f"R{row:02d}C{col:02d}"

    borders: Dict[str, List[str]] = {}
    for row in range(side):
        for col in range(side):
            neighbors = []
            for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                r, c = row + dr, col + dc
                if 0 <= r < side and 0 <= c < side:
                    neighbors.append(code(r, c))
            borders[code(row, col)] = neighbors
    return borders


@pytest.fixture(scope="module")
def grid_records() -> List[CountryRecord]:
    """Records for a GRID_SIDE x GRID_SIDE lattice."""
    return [
        CountryRecord.create(code, borders)
        for code, borders in grid_borders(GRID_SIDE).items()
    ]


@pytest.fixture(scope="module")
def grid_graph(grid_records) -> BorderGraph:
    """Pre-built lattice graph (module-scoped)."""
    return build_adjacency_graph(grid_records)


@pytest.fixture(scope="module")
def route_finder() -> BreadthFirstRouteFinder:
    return BreadthFirstRouteFinder()


@pytest.fixture(scope="module")
def corner_codes() -> tuple:
    """Opposite corners: the longest shortest path in the lattice."""
    last = GRID_SIDE - 1
    return "R00C00", f"R{last:02d}C{last:02d}"


@pytest.fixture(scope="module")
def warmed_router(grid_records, corner_codes) -> FindCountryRoute:
    """Router with the graph loaded and the corner route already cached."""

    class LatticeProvider(CountryDataProvider):
        @property
        def name(self) -> str:
            return "Benchmark Lattice"

        def fetch_countries(self) -> List[CountryRecord]:
            return list(grid_records)

    router = FindCountryRoute(data_provider=LatticeProvider())
    router.load()
    router.route(*corner_codes)
    return router


@pytest.fixture(scope="module")
def grid_side() -> int:
    return GRID_SIDE
