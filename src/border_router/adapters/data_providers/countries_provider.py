"""
Country Data Providers - JSON to CountryRecord adapters.

Fetch the country dataset (a JSON array of country objects with at
least ``cca3`` and ``borders``), validate it against CountryRecordSchema,
and convert it to CountryRecord objects for the graph builder.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

import httpx
import pandera as pa

from src.border_router.exceptions import CountryDataUnavailableError
from src.border_router.ports.country_data_provider import CountryDataProvider
from src.border_router.schemas.country import (
    CountryRecord,
    countries_frame,
    records_from_frame,
)

logger = logging.getLogger(__name__)

DEFAULT_COUNTRIES_URL = (
    "https://raw.githubusercontent.com/mledoze/countries/master/countries.json"
)
DEFAULT_CONNECT_TIMEOUT = 15.0
DEFAULT_READ_TIMEOUT = 30.0


def parse_countries_payload(payload: Any, source: str) -> List[CountryRecord]:
    """
    Validate a decoded JSON payload and convert it to records.

    Args:
        payload: Decoded JSON document.
        source: Description of where the payload came from (for errors).

    Returns:
        Non-empty list of CountryRecord.

    Raises:
        CountryDataUnavailableError: If the payload is not a non-empty
            list of valid country objects.
    """
    if not isinstance(payload, list):
        raise CountryDataUnavailableError(
            source, f"expected a JSON array, got {type(payload).__name__}"
        )
    if not payload:
        raise CountryDataUnavailableError(source, "no country data received")

    try:
        df = countries_frame(payload)
    except (TypeError, pa.errors.SchemaError) as e:
        raise CountryDataUnavailableError(source, f"invalid country records: {e}") from e

    return records_from_frame(df)


class HttpCountryDataProvider(CountryDataProvider):
    """
    Data provider downloading the country dataset over HTTP.

    Uses a synchronous httpx client: the dataset is fetched once at
    startup, before any request is served.

    Attributes:
        _url: Dataset URL.
        _timeout: httpx timeout configuration.
        _client: Optional injected client (tests, custom transports).
    """

    def __init__(
        self,
        url: str = DEFAULT_COUNTRIES_URL,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Initialize the HTTP data provider.

        Args:
            url: Location of the countries JSON array.
            connect_timeout: Connection timeout in seconds.
            read_timeout: Read/write/pool timeout in seconds.
            client: Pre-configured httpx client. If None, a short-lived
                client is created for each fetch.
        """
        self._url = url
        self._timeout = httpx.Timeout(read_timeout, connect=connect_timeout)
        self._client = client
        logger.info("HttpCountryDataProvider initialized with URL: %s", url)

    @property
    def name(self) -> str:
        """Provider identifier."""
        return f"HTTP {self._url}"

    def fetch_countries(self) -> List[CountryRecord]:
        """
        Download and parse the country dataset.

        Returns:
            Non-empty list of CountryRecord.

        Raises:
            CountryDataUnavailableError: On HTTP errors, transport errors,
                invalid JSON or an empty dataset.
        """
        logger.info("Fetching country data from: %s", self._url)

        try:
            if self._client is not None:
                response = self._client.get(self._url, timeout=self._timeout)
            else:
                with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
                    response = client.get(self._url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "HTTP error fetching countries: status=%d", e.response.status_code
            )
            raise CountryDataUnavailableError(
                self._url, f"HTTP status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error("Transport error fetching countries: %s", e)
            raise CountryDataUnavailableError(self._url, type(e).__name__) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise CountryDataUnavailableError(self._url, "response is not valid JSON") from e

        records = parse_countries_payload(payload, self._url)
        logger.info("Successfully fetched %d countries", len(records))
        return records


class JsonFileCountryDataProvider(CountryDataProvider):
    """
    Data provider reading the country dataset from a local JSON file.

    Useful for offline runs and pinned datasets; the file has the same
    format as the upstream download.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        """
        Initialize the file data provider.

        Args:
            path: Path to a JSON file containing the countries array.
        """
        self._path = Path(path)

    @property
    def name(self) -> str:
        """Provider identifier."""
        return f"File {self._path}"

    def fetch_countries(self) -> List[CountryRecord]:
        """
        Read and parse the country dataset.

        Raises:
            CountryDataUnavailableError: If the file is missing, unreadable,
                not valid JSON, or holds no records.
        """
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except OSError as e:
            raise CountryDataUnavailableError(str(self._path), str(e)) from e
        except json.JSONDecodeError as e:
            raise CountryDataUnavailableError(
                str(self._path), f"invalid JSON: {e}"
            ) from e

        records = parse_countries_payload(payload, str(self._path))
        logger.info("Loaded %d countries from %s", len(records), self._path)
        return records
