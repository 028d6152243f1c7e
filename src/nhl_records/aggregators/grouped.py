"""
Grouped totals in long (tidy) format for charting collaborators.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

import pandas as pd

from .ranking import GAME_TYPE_NAMES

RECORD_COLUMNS = ["games_played", "wins", "losses", "ties", "goals_for", "goals_against"]


def grouped_totals(
    df: pd.DataFrame,
    value_columns: Sequence[str],
    by: str = "position",
    *,
    stat_column: str = "stat",
    value_column: str = "total",
) -> pd.DataFrame:
    """
    Sum each value column per group, one output row per (group, stat).

    Groups are sorted; stats follow the order of value_columns. Nulls are
    skipped in the sums.

    Raises:
        KeyError: If by or a value column is missing
    """
    value_columns = list(value_columns)
    missing = [c for c in [by, *value_columns] if c not in df.columns]
    if missing:
        raise KeyError(f"Columns {missing} not found")

    long = df.melt(
        id_vars=[by],
        value_vars=value_columns,
        var_name=stat_column,
        value_name=value_column,
    )
    long[value_column] = pd.to_numeric(long[value_column], errors="coerce")
    long[stat_column] = pd.Categorical(long[stat_column], categories=value_columns, ordered=True)

    totals = (
        long.groupby([by, stat_column], observed=True, sort=True)[value_column]
        .sum()
        .reset_index()
    )
    totals[stat_column] = totals[stat_column].astype(str)
    return totals


def game_type_record(
    totals: pd.DataFrame,
    franchise_ids: Optional[Iterable[int]] = None,
) -> pd.DataFrame:
    """
    Regular season vs playoff record per franchise.

    Sums team totals over every team identity of a franchise.

    Returns:
        One row per (franchise_id, game_type_id) with game_type,
        the summed RECORD_COLUMNS and goal_differential
    """
    if franchise_ids is not None:
        totals = totals[totals["franchise_id"].isin(list(franchise_ids))]

    record = (
        totals.groupby(["franchise_id", "game_type_id"], sort=True)[RECORD_COLUMNS]
        .sum(min_count=1)
        .reset_index()
    )
    record.insert(2, "game_type", record["game_type_id"].map(GAME_TYPE_NAMES))
    record["goal_differential"] = record["goals_for"] - record["goals_against"]
    return record
