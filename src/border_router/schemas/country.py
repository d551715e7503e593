"""
Country record schemas using Pandera.

Defines the contract for raw country data entering the system.
Schema validation happens at the provider boundary only, not per-row
inside the graph builder.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import pandas as pd
import pandera as pa
from pandera.typing import Series

# Only these fields of the upstream payload are used by the router
RECORD_COLUMNS = ("cca3", "borders")


@dataclass(frozen=True)
class CountryRecord:
    """
    Immutable raw country record.

    Attributes:
        cca3: Country code (opaque, case-sensitive).
        borders: Codes of countries sharing a land border, in source order.
            None when the source omits the field.
    """

    cca3: str
    borders: Optional[Tuple[str, ...]] = None

    @classmethod
    def create(
        cls, cca3: str, borders: Optional[Iterable[str]] = None
    ) -> "CountryRecord":
        """Factory converting any iterable of borders to a tuple."""
        if borders is not None and not isinstance(borders, tuple):
            borders = tuple(borders)
        return cls(cca3=cca3, borders=borders)


def _is_code_list(value: Any) -> bool:
    """True for a missing border list or a list of string codes."""
    if value is None:
        return True
    if isinstance(value, float) and pd.isna(value):
        return True
    if not isinstance(value, (list, tuple)):
        return False
    return all(isinstance(code, str) for code in value)


class CountryRecordSchema(pa.DataFrameModel):
    """
    Pandera schema for a batch of raw country records.

    One row per country. Extra columns are allowed so the full upstream
    payload can be validated without pre-filtering.
    """

    cca3: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Country code used as the node identifier (e.g., 'DEU')",
    )

    class Config:
        strict = False
        coerce = False
        name = "CountryRecordSchema"
        description = "Raw country records with land border lists"

    @pa.dataframe_check
    def borders_are_code_lists(cls, df: pd.DataFrame) -> Series[bool]:
        """Every borders cell is missing or a list of string codes."""
        if "borders" not in df.columns:
            return pd.Series(True, index=df.index)
        return df["borders"].map(_is_code_list).astype(bool)


def countries_frame(payload: Sequence[Any]) -> pd.DataFrame:
    """
    Build a validated records DataFrame from a decoded JSON array.

    Args:
        payload: Decoded JSON list of country objects.

    Returns:
        DataFrame with ``cca3`` and ``borders`` columns.

    Raises:
        TypeError: If an item is not a JSON object.
        pandera.errors.SchemaError: If the records fail validation.
    """
    rows: List[dict] = []
    for item in payload:
        if not isinstance(item, dict):
            raise TypeError(f"Expected country object, got {type(item).__name__}")
        rows.append({column: item.get(column) for column in RECORD_COLUMNS})

    df = pd.DataFrame(rows, columns=list(RECORD_COLUMNS))
    return CountryRecordSchema.validate(df)


def records_from_frame(df: pd.DataFrame) -> List[CountryRecord]:
    """Convert a validated records DataFrame into CountryRecord objects."""
    records: List[CountryRecord] = []
    for cca3, borders in zip(df["cca3"], df["borders"]):
        if not isinstance(borders, (list, tuple)):
            borders = None
        records.append(CountryRecord.create(cca3=str(cca3), borders=borders))
    return records
