"""
Domain services for the Border Router.

Services orchestrate the interaction between ports (repositories, algorithms)
and cross-cutting concerns (metrics, logging).
"""

from src.border_router.services.routing_service import RoutingService

__all__ = ["RoutingService"]
