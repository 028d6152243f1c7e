"""
Contingency tables with row, column and grand totals.

Margins are computed from the interior counts after any reordering, so
every row total, column total and the grand total equal the sum of the
interior cells they cover.
"""

from __future__ import annotations

from typing import Optional, Sequence

import pandas as pd

DEFAULT_MARGINS_NAME = "Total"


def _ordered(observed: pd.Index, order: Optional[Sequence]) -> list:
    """Requested order first, then any observed values the order omits."""
    if order is None:
        return list(observed)
    order = list(order)
    return order + [value for value in observed if value not in order]


def contingency_table(
    df: pd.DataFrame,
    index: str,
    columns: str,
    *,
    margins_name: str = DEFAULT_MARGINS_NAME,
    index_order: Optional[Sequence] = None,
    columns_order: Optional[Sequence] = None,
) -> pd.DataFrame:
    """
    Count rows of df by (index, columns) value pairs.

    Categorical columns supply their category order unless an explicit
    order is given. Values listed in an order but never observed appear
    as zero rows/columns. Rows with a null in either column are not counted.

    Returns:
        Integer DataFrame with a trailing margins_name row and column
    """
    if index == columns:
        raise ValueError(f"index and columns must differ, got {index!r} twice")
    rows = df[index]
    cols = df[columns]

    if index_order is None and isinstance(rows.dtype, pd.CategoricalDtype):
        index_order = list(rows.cat.categories)
    if columns_order is None and isinstance(cols.dtype, pd.CategoricalDtype):
        columns_order = list(cols.cat.categories)

    pairs = pd.DataFrame({index: rows.astype(object), columns: cols.astype(object)}).dropna()
    if pairs.empty:
        counts = pd.DataFrame(index=pd.Index([], dtype=object), columns=pd.Index([], dtype=object), dtype=int)
    else:
        counts = pd.crosstab(pairs[index], pairs[columns])
    counts = counts.reindex(
        index=_ordered(counts.index, index_order),
        columns=_ordered(counts.columns, columns_order),
        fill_value=0,
    ).astype(int)

    table = counts.copy()
    table[margins_name] = counts.sum(axis=1)
    table.loc[margins_name] = table.sum(axis=0)

    table.index.name = index
    table.columns.name = columns
    return table


def interior(table: pd.DataFrame, margins_name: str = DEFAULT_MARGINS_NAME) -> pd.DataFrame:
    """The table without its margins."""
    return table.drop(index=margins_name, columns=margins_name)
