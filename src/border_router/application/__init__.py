"""
Application layer for the Border Router.

This layer provides the public API for the border routing engine.
It acts as a facade, handling dependency initialization and providing
a simple interface for consumers.
"""

from src.border_router.application.find_country_route import (
    FindCountryRoute,
    normalize_country_code,
)

__all__ = ["FindCountryRoute", "normalize_country_code"]
