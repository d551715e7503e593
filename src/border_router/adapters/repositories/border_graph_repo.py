"""
Border Graph Repository - build-once adjacency graph infrastructure.

Implements the process-wide country border graph:
- build_adjacency_graph: raw records -> immutable adjacency sets
- BorderGraph: read-only graph plus metadata, shared without locks
- BorderGraphRepository: one-time load from a data provider, guarded
  by a lock so concurrent first requests build the graph only once
"""

from __future__ import annotations

import hashlib
import logging
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Dict, FrozenSet, Mapping, Optional, Sequence, Set

from src.border_router.adapters.algorithms.immutability import freeze_adjacency
from src.border_router.exceptions import InvalidInputError
from src.border_router.ports.graph_repository import GraphNotInitializedError
from src.border_router.schemas.country import CountryRecord

if TYPE_CHECKING:
    from src.border_router.ports.country_data_provider import CountryDataProvider

logger = logging.getLogger(__name__)

_NO_NEIGHBORS: FrozenSet[str] = frozenset()


# =============================================================================
# BORDER GRAPH: Immutable adjacency sets with metadata
# =============================================================================


@dataclass(frozen=True, eq=False)
class BorderGraph:
    """
    Immutable country border graph.

    Every country with a record is a key, including countries without
    land borders (empty neighbor set). Edges are stored exactly as the
    source declares them and are NOT symmetrized: if X lists Y but Y's
    record omits X, only X -> Y exists.

    Attributes:
        adjacency: Read-only mapping from country code to neighbor codes.
        built_at: Timestamp when graph was built.
        version: Content hash, independent of record order.
        country_count: Number of countries (keys).
        border_count: Number of directed border edges.
    """

    adjacency: Mapping[str, FrozenSet[str]]
    built_at: datetime
    version: str
    country_count: int
    border_count: int

    def neighbors(self, code: str) -> FrozenSet[str]:
        """
        Countries reachable from ``code`` by one border crossing.

        Codes that only appear inside other neighbor sets have no
        record of their own and therefore no outgoing borders.
        """
        return self.adjacency.get(code, _NO_NEIGHBORS)

    def country_exists(self, code: str) -> bool:
        """Check if ``code`` is a node of the graph."""
        return code in self.adjacency

    def has_border(self, origin: str, destination: str) -> bool:
        """Check if ``origin`` declares a border with ``destination``."""
        return destination in self.neighbors(origin)

    @property
    def countries(self) -> FrozenSet[str]:
        """All country codes that are nodes of the graph."""
        return frozenset(self.adjacency)


# =============================================================================
# GRAPH BUILDER
# =============================================================================


def compute_graph_version(adjacency: Mapping[str, FrozenSet[str]]) -> str:
    """Compute a short hash of the adjacency content for version tracking."""
    digest = hashlib.md5()
    for code in sorted(adjacency):
        digest.update(code.encode())
        digest.update(b":")
        digest.update(",".join(sorted(adjacency[code])).encode())
        digest.update(b";")
    return digest.hexdigest()[:12]


def build_adjacency_graph(records: Optional[Sequence[CountryRecord]]) -> BorderGraph:
    """
    Build the border graph from raw country records.

    Each record's code becomes a key (empty neighbor set if it has no
    borders). Listed borders are added as-is, whether or not the
    neighbor has a record of its own. Duplicate records for one code
    merge their neighbor sets, so record order never changes the result.

    Args:
        records: Country records from the data provider.

    Returns:
        Immutable BorderGraph.

    Raises:
        InvalidInputError: If ``records`` is None or empty.

    Example:
        >>> graph = build_adjacency_graph([
        ...     CountryRecord("USA", ("CAN", "MEX")),
        ...     CountryRecord("AUS", ()),
        ... ])
        >>> sorted(graph.neighbors("USA"))
        ['CAN', 'MEX']
        >>> graph.country_exists("CAN")
        False
    """
    if not records:
        raise InvalidInputError("Cannot build border graph from an empty dataset")

    adjacency: Dict[str, Set[str]] = {}
    for record in records:
        neighbors = adjacency.setdefault(record.cca3, set())
        if record.borders:
            neighbors.update(record.borders)

    frozen = freeze_adjacency(adjacency)

    return BorderGraph(
        adjacency=frozen,
        built_at=datetime.now(),
        version=compute_graph_version(frozen),
        country_count=len(frozen),
        border_count=sum(len(neighbors) for neighbors in frozen.values()),
    )


# =============================================================================
# BORDER GRAPH REPOSITORY: Load once, serve forever
# =============================================================================


class BorderGraphRepository:
    """
    Repository holding the process-wide border graph.

    Architecture:
    - The graph is built once, on ``load()`` at startup or on the first
      ``get_graph()`` call (cold start)
    - Cold start is guarded by a lock with double-check, so concurrent
      first requests never build twice
    - After that, readers never block: the graph is immutable

    There is no refresh: a changed upstream dataset means a restart.

    Usage:
        >>> provider = HttpCountryDataProvider()
        >>> repo = BorderGraphRepository(provider)
        >>> graph = repo.load()  # At startup
    """

    def __init__(self, data_provider: CountryDataProvider) -> None:
        """
        Initialize repository with a data provider.

        Args:
            data_provider: Source for country records.
        """
        self._provider = data_provider
        self._graph: Optional[BorderGraph] = None
        self._load_lock = threading.Lock()

    def get_graph(self) -> BorderGraph:
        """
        Get the border graph - NEVER BLOCKS after initialization.

        Returns:
            The loaded BorderGraph.

        Raises:
            GraphNotInitializedError: If loading fails.
        """
        graph = self._graph
        if graph is not None:
            return graph

        # Cold start: must block for first load
        with self._load_lock:
            # Double-check after acquiring lock
            if self._graph is not None:
                return self._graph

            try:
                self._graph = self._build_graph()
            except Exception as e:
                logger.error("Border graph load failed: %s", e)
                raise GraphNotInitializedError(
                    f"Failed to initialize border graph: {e}"
                ) from e

            return self._graph

    def load(self) -> BorderGraph:
        """Eagerly load the graph (startup hook). Same errors as get_graph()."""
        return self.get_graph()

    def _build_graph(self) -> BorderGraph:
        """Fetch records from the provider and build the graph."""
        start = time.perf_counter()
        records = self._provider.fetch_countries()
        graph = build_adjacency_graph(records)
        elapsed = time.perf_counter() - start

        logger.info(
            "Border graph loaded from %s: %d countries, %d borders in %.1fms "
            "(version %s)",
            self._provider.name,
            graph.country_count,
            graph.border_count,
            elapsed * 1000,
            graph.version,
        )
        return graph

    def country_exists(self, code: str) -> bool:
        """Check if a country is part of the loaded graph."""
        return self.get_graph().country_exists(code)

    @property
    def is_initialized(self) -> bool:
        """Check if graph has been loaded."""
        return self._graph is not None

    @property
    def current_version(self) -> Optional[str]:
        """Get version of the loaded graph."""
        graph = self._graph
        return graph.version if graph else None

    @property
    def provider_name(self) -> str:
        """Name of the underlying data provider."""
        return self._provider.name
