"""
Route result schema.

Defines the output contract for route finding algorithms.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class RoutePath:
    """
    Immutable representation of a land route.

    Element 0 is the origin and the last element is the destination.
    Consecutive countries share a land border. A single-element path
    means origin and destination are the same country.
    """

    countries: Tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate path after initialization."""
        if not self.countries:
            raise ValueError("Route must contain at least one country")

    @property
    def origin(self) -> str:
        """First country of the route."""
        return self.countries[0]

    @property
    def destination(self) -> str:
        """Last country of the route."""
        return self.countries[-1]

    @property
    def crossings(self) -> int:
        """Number of border crossings (edges) in the route."""
        return len(self.countries) - 1

    def as_list(self) -> List[str]:
        """Ordered list of country codes (a fresh copy)."""
        return list(self.countries)

    def __len__(self) -> int:
        return len(self.countries)

    @classmethod
    def from_codes(cls, codes: Sequence[str]) -> "RoutePath":
        """
        Factory method to create RoutePath from any sequence of codes.

        Args:
            codes: Ordered country codes, origin first.

        Returns:
            Validated RoutePath instance.
        """
        return cls(countries=tuple(codes))
