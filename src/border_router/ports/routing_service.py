"""
Routing Calculator port interface.

The narrow contract shared by the routing service and the route cache,
so the cache can wrap any component that computes routes by code pair.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from src.border_router.schemas.route import RoutePath


@runtime_checkable
class RoutingCalculator(Protocol):
    """Anything that turns an (origin, destination) pair into a route."""

    def calculate_route(self, origin: str, destination: str) -> RoutePath:
        """
        Calculate the shortest land route between two countries.

        Args:
            origin: Origin country code, already normalized.
            destination: Destination country code, already normalized.

        Returns:
            RoutePath from origin to destination.
        """
        ...
