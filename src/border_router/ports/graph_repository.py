"""
Graph Repository port interface.

Defines the read protocol for the border graph shared by all requests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from src.border_router.adapters.repositories.border_graph_repo import (
        BorderGraph,
    )


class GraphNotInitializedError(Exception):
    """Raised when graph is accessed but could not be loaded."""

    pass


@runtime_checkable
class BorderGraphSource(Protocol):
    """
    Protocol for components that hand out the process-wide border graph.

    The graph is built once and never mutated, so implementations return
    the same object to every caller without copying or locking on reads.
    """

    def get_graph(self) -> BorderGraph:
        """
        Get the border graph, loading it on first access.

        Raises:
            GraphNotInitializedError: If the graph cannot be loaded.
        """
        ...

    @property
    def is_initialized(self) -> bool:
        """True once the graph has been loaded."""
        ...

    @property
    def current_version(self) -> Optional[str]:
        """Content hash of the loaded graph, None before loading."""
        ...
