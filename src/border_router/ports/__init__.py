"""
Port interfaces for the Border Router.

Ports define the abstract interfaces (ABCs and Protocols) that the domain
layer uses to communicate with external systems. This follows the
Ports and Adapters (Hexagonal) architecture pattern.
"""

from src.border_router.ports.country_data_provider import CountryDataProvider
from src.border_router.ports.graph_repository import (
    BorderGraphSource,
    GraphNotInitializedError,
)
from src.border_router.ports.route_finder import RouteFinder
from src.border_router.ports.routing_service import RoutingCalculator

__all__ = [
    "BorderGraphSource",
    "CountryDataProvider",
    "GraphNotInitializedError",
    "RouteFinder",
    "RoutingCalculator",
]
