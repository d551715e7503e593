"""
Schema definitions for the Border Router.

Pandera-validated DataFrames for raw input, frozen dataclasses for results.
"""

from .country import (
    CountryRecord,
    CountryRecordSchema,
    countries_frame,
    records_from_frame,
)
from .route import RoutePath

__all__ = [
    # Country input
    "CountryRecord",
    "CountryRecordSchema",
    "countries_frame",
    "records_from_frame",
    # Route output
    "RoutePath",
]
