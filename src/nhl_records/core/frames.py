"""
Conversion between API records and pandas DataFrames.

records_to_frame() is the deserialization boundary: every row is validated
against its endpoint model, and the resulting frame always carries the
model's full column set in declaration order, even when empty.
"""

from __future__ import annotations

import logging
from typing import Any

import pandas as pd
from pydantic import BaseModel, ValidationError

from .http import SchemaError

logger = logging.getLogger(__name__)


def model_columns(model: type[BaseModel]) -> list[str]:
    """Declared fields followed by computed fields."""
    return list(model.model_fields) + list(model.model_computed_fields)


def parse_records(rows: list[dict[str, Any]], model: type[BaseModel]) -> list[BaseModel]:
    """Validate raw rows, raising SchemaError on the first bad row."""
    records = []
    for index, row in enumerate(rows):
        try:
            records.append(model.model_validate(row))
        except ValidationError as e:
            logger.error(f"Row {index} failed {model.__name__} validation: {e}")
            raise SchemaError(f"Row {index} is not a valid {model.__name__}: {e}") from e
    return records


def records_to_frame(rows: list[dict[str, Any]], model: type[BaseModel]) -> pd.DataFrame:
    """
    Build a DataFrame from raw API rows.

    Args:
        rows: The "data" array of an API response, in server order
        model: Endpoint model declaring the column set

    Returns:
        DataFrame with one row per record and snake_case columns;
        keys absent from a row are null
    """
    columns = model_columns(model)
    records = parse_records(rows, model)
    return pd.DataFrame([r.model_dump() for r in records], columns=columns)


def frame_to_records(df: pd.DataFrame, *, include_index: bool = False) -> list[dict[str, Any]]:
    """
    Convert a result frame into plain ordered records for presentation layers.

    Missing values become None. With include_index, index levels become
    leading columns (useful for contingency tables).
    """
    if include_index:
        df = df.reset_index()
    df = df.astype(object).where(df.notna(), None)
    return [{str(k): v for k, v in row.items()} for row in df.to_dict(orient="records")]
