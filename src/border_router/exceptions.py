"""
Custom exceptions for the border router.

Provides a hierarchy of exceptions for clear error handling
of graph construction and route-finding operations. The HTTP layer
is the only place these are translated into responses.
"""


class BorderRouterError(Exception):
    """Base exception for all border router errors."""

    pass


class InvalidInputError(BorderRouterError):
    """Raised when the country dataset is empty or absent."""

    def __init__(self, message: str = "Country dataset is empty") -> None:
        super().__init__(message)


class UnknownCountryError(BorderRouterError):
    """Raised when a country code is not a node of the border graph."""

    def __init__(self, code: str) -> None:
        self.code = code
        message = f"Unknown country code '{code}'"
        super().__init__(message)


class NoRouteFoundError(BorderRouterError):
    """Raised when both countries exist but no land route connects them."""

    def __init__(self, origin: str, destination: str) -> None:
        self.origin = origin
        self.destination = destination
        message = f"No land route found between {origin} and {destination}"
        super().__init__(message)


class CountryDataUnavailableError(BorderRouterError):
    """Raised when the upstream country dataset cannot be fetched or parsed."""

    def __init__(self, source: str, reason: str = "") -> None:
        self.source = source
        self.reason = reason
        message = f"Failed to load country data from {source}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
