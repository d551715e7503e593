"""
Configuration module for the Border Router.

This module loads environment variables (optionally from a .env file)
and provides centralized settings for the data source, the route cache,
logging and the HTTP layer.
"""

import logging
import math
import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv

from src.border_router.adapters.data_providers.countries_provider import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_COUNTRIES_URL,
    DEFAULT_READ_TIMEOUT,
)

# Load environment variables from .env file
load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_CORS_ORIGINS = ("http://localhost:3000",)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class RouterSettings:
    """
    Border Router settings.

    Attributes:
        countries_api_url: URL of the countries JSON array.
        countries_file: Local JSON file; when set, used instead of the URL.
        connect_timeout: HTTP connect timeout in seconds.
        read_timeout: HTTP read timeout in seconds.
        route_cache_enabled: Memoize routes per (origin, destination).
        log_level: Root log level name.
        cors_origins: Origins allowed by the CORS middleware.
    """

    countries_api_url: str = DEFAULT_COUNTRIES_URL
    countries_file: Optional[str] = None
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT
    route_cache_enabled: bool = True
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not self.countries_api_url and not self.countries_file:
            raise ValueError("Either countries_api_url or countries_file must be set")
        # NaN compares false both ways, so check finiteness explicitly
        if not math.isfinite(self.connect_timeout) or self.connect_timeout <= 0:
            raise ValueError(
                f"connect_timeout must be a finite number > 0, got {self.connect_timeout}"
            )
        if not math.isfinite(self.read_timeout) or self.read_timeout <= 0:
            raise ValueError(
                f"read_timeout must be a finite number > 0, got {self.read_timeout}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls) -> "RouterSettings":
        """
        Build settings from environment variables.

        Variables: COUNTRIES_API_URL, COUNTRIES_FILE,
        COUNTRIES_CONNECT_TIMEOUT, COUNTRIES_READ_TIMEOUT,
        ROUTE_CACHE_ENABLED, LOG_LEVEL, CORS_ORIGINS (comma-separated).
        """
        cors_raw = os.getenv("CORS_ORIGINS")
        if cors_raw:
            cors_origins = tuple(o.strip() for o in cors_raw.split(",") if o.strip())
        else:
            cors_origins = DEFAULT_CORS_ORIGINS

        return cls(
            countries_api_url=os.getenv("COUNTRIES_API_URL") or DEFAULT_COUNTRIES_URL,
            countries_file=os.getenv("COUNTRIES_FILE") or None,
            connect_timeout=_env_float(
                "COUNTRIES_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT
            ),
            read_timeout=_env_float("COUNTRIES_READ_TIMEOUT", DEFAULT_READ_TIMEOUT),
            route_cache_enabled=_env_bool("ROUTE_CACHE_ENABLED", True),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            cors_origins=cors_origins,
        )


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for console output."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
