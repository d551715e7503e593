"""
Country Data Provider port interface.

Defines the abstract contract for data sources that provide country
border records. Implementations handle the specifics of each backend
(HTTP download, local file, in-memory fixtures).
"""

from abc import ABC, abstractmethod
from typing import List

from src.border_router.schemas.country import CountryRecord


class CountryDataProvider(ABC):
    """
    Abstract interface for country data providers.

    The router fetches records exactly once per process lifetime,
    before the first request is served.

    Implementations:
    - HttpCountryDataProvider: JSON array downloaded over HTTP
    - JsonFileCountryDataProvider: JSON array read from disk
    """

    @abstractmethod
    def fetch_countries(self) -> List[CountryRecord]:
        """
        Return all country records.

        Schema validation (CountryRecordSchema) happens here at the
        boundary, before records reach the graph builder.

        Returns:
            Non-empty list of CountryRecord.

        Raises:
            CountryDataUnavailableError: If the source cannot be read,
                cannot be parsed, or yields no records.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this data provider.

        Returns:
            Provider identifier (e.g., "HTTP countries.json").
        """
        ...
