"""
Data provider adapters for country data sources.
"""

from src.border_router.adapters.data_providers.countries_provider import (
    DEFAULT_COUNTRIES_URL,
    HttpCountryDataProvider,
    JsonFileCountryDataProvider,
    parse_countries_payload,
)

__all__ = [
    "DEFAULT_COUNTRIES_URL",
    "HttpCountryDataProvider",
    "JsonFileCountryDataProvider",
    "parse_countries_payload",
]
