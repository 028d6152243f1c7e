"""Joins with explicit keys and join type."""

from __future__ import annotations

import logging
from typing import Literal, Sequence

import pandas as pd

logger = logging.getLogger(__name__)

JoinHow = Literal["inner", "left"]


def join_frames(
    left: pd.DataFrame,
    right: pd.DataFrame,
    on: Sequence[str],
    how: JoinHow = "inner",
    suffixes: tuple[str, str] = ("", "_right"),
) -> pd.DataFrame:
    """
    Join two frames on the given key columns.

    Rows whose key is absent on the other side are dropped by an inner join
    and kept with nulls by a left join; neither case is an error.

    Raises:
        ValueError: If how is not "inner" or "left", or on is empty
        KeyError: If a key column is missing from either frame
    """
    if how not in ("inner", "left"):
        raise ValueError(f"Unsupported join type: {how}")
    keys = list(on)
    if not keys:
        raise ValueError("At least one join key is required")

    for side, frame in (("left", left), ("right", right)):
        missing = [k for k in keys if k not in frame.columns]
        if missing:
            raise KeyError(f"Join key(s) {missing} missing from {side} frame")

    joined = left.merge(right, how=how, on=keys, suffixes=suffixes)
    if how == "inner" and len(joined) < len(left):
        logger.debug(f"Inner join on {keys} excluded {len(left) - len(joined)} left rows")
    return joined.reset_index(drop=True)
