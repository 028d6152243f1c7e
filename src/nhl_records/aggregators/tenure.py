"""
Seasons-played binning.

Buckets are closed at their lower bound: [0, 3) "<3", [3, 6) "3-5",
[6, 10) "6-9", [10, inf) "≥10". Every non-null value lands in exactly one.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd

from .contingency import contingency_table
from .lookup import active_franchises
from .positions import POSITION_ORDER, position_names

TENURE_LABELS = ["<3", "3-5", "6-9", "≥10"]
TENURE_BINS = [-np.inf, 3, 6, 10, np.inf]

TENURE_COLUMN = "tenure"
POSITION_COLUMN = "position"


def bin_tenure(seasons: pd.Series) -> pd.Series:
    """Ordered categorical of tenure buckets; nulls stay null."""
    binned = pd.cut(
        seasons.astype(float),
        bins=TENURE_BINS,
        labels=TENURE_LABELS,
        right=False,
        ordered=True,
    )
    return binned.rename(TENURE_COLUMN)


def tenure_bucket(seasons: float) -> str:
    """Bucket label of a single seasons count."""
    if seasons is None or pd.isna(seasons):
        raise ValueError("seasons must not be null")
    if seasons < 3:
        return "<3"
    if seasons < 6:
        return "3-5"
    if seasons < 10:
        return "6-9"
    return "≥10"


def tenure_by_position(
    records: pd.DataFrame,
    franchises: Optional[pd.DataFrame] = None,
) -> pd.DataFrame:
    """
    Cross-tabulate position against tenure bucket.

    Args:
        records: Skater or goalie records with position_code and seasons
        franchises: If given, only records of active franchises are counted

    Returns:
        Contingency table (position rows, tenure columns) with totals
    """
    if franchises is not None:
        active_ids = set(active_franchises(franchises)["id"].astype(int))
        records = records[records["franchise_id"].isin(active_ids)]

    frame = pd.DataFrame(
        {
            POSITION_COLUMN: position_names(records["position_code"]),
            TENURE_COLUMN: bin_tenure(records["seasons"]),
        }
    )
    return contingency_table(
        frame,
        POSITION_COLUMN,
        TENURE_COLUMN,
        index_order=[p for p in POSITION_ORDER if p in set(frame[POSITION_COLUMN])],
    )
