"""
Derived-ratio ranking and summary statistics.

Ratios are pure functions of their input columns. Rows whose denominator is
zero or null are excluded before dividing (and logged) instead of producing
inf or NaN ratios.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Iterable, Optional

import pandas as pd

from .lookup import active_franchises

logger = logging.getLogger(__name__)

REGULAR_SEASON = 2
PLAYOFFS = 3

GAME_TYPE_NAMES = {
    REGULAR_SEASON: "Regular Season",
    PLAYOFFS: "Playoffs",
}


@dataclass(frozen=True)
class SummaryStatistics:
    """Population summary. Percentiles interpolate linearly; std uses ddof=1."""

    count: int
    mean: float
    std: float
    min: float
    p25: float
    p50: float
    p75: float
    max: float

    @classmethod
    def empty(cls) -> "SummaryStatistics":
        nan = float("nan")
        return cls(count=0, mean=nan, std=nan, min=nan, p25=nan, p50=nan, p75=nan, max=nan)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RatioRanking:
    """Top rows by a derived ratio plus statistics over the whole population."""

    column: str
    top: pd.DataFrame
    summary: SummaryStatistics


def derive_ratio(
    df: pd.DataFrame,
    numerator: str,
    denominator: str,
    name: Optional[str] = None,
) -> pd.DataFrame:
    """
    Return a copy of df with column name = numerator / denominator.

    Rows with a zero or null denominator are dropped.
    """
    name = name or f"{numerator}_per_{denominator}"
    denominators = pd.to_numeric(df[denominator], errors="coerce")
    usable = denominators.notna() & (denominators != 0)

    excluded = int((~usable).sum())
    if excluded:
        logger.warning(f"Excluding {excluded} rows with zero or missing {denominator}")

    result = df[usable].copy()
    result[name] = pd.to_numeric(result[numerator], errors="coerce") / denominators[usable]
    return result


def summary_statistics(values: Iterable[float]) -> SummaryStatistics:
    """
    Summarise a set of numbers.

    Raises:
        ValueError: If there are no non-null values
    """
    series = pd.Series(list(values), dtype=float).dropna()
    if series.empty:
        raise ValueError("Cannot summarise an empty set of values")

    quartiles = series.quantile([0.25, 0.5, 0.75], interpolation="linear")
    return SummaryStatistics(
        count=int(series.count()),
        mean=float(series.mean()),
        std=float(series.std(ddof=1)),
        min=float(series.min()),
        p25=float(quartiles.loc[0.25]),
        p50=float(quartiles.loc[0.5]),
        p75=float(quartiles.loc[0.75]),
        max=float(series.max()),
    )


def rank_by_ratio(
    totals: pd.DataFrame,
    numerator: str = "penalty_minutes",
    denominator: str = "games_played",
    *,
    game_type_id: int = REGULAR_SEASON,
    top_k: int = 10,
    name: Optional[str] = None,
) -> RatioRanking:
    """
    Rank active franchises of one game type by numerator / denominator.

    Args:
        totals: Franchise team totals frame
        game_type_id: 2 for regular season, 3 for playoffs
        top_k: Number of leading rows to keep in the result

    Returns:
        RatioRanking with the top_k rows sorted descending (ties keep
        server order) and summary statistics of the full filtered population.
        An empty population gives an empty top and SummaryStatistics.empty().
    """
    if top_k < 1:
        raise ValueError(f"top_k must be at least 1, got {top_k}")

    population = active_franchises(totals)
    population = population[population["game_type_id"] == game_type_id]
    column = name or f"{numerator}_per_{denominator}"
    ranked = derive_ratio(population, numerator, denominator, column)

    ranked = ranked.sort_values(column, ascending=False, kind="mergesort")
    logger.info(f"Ranked {len(ranked)} franchises by {column} (game type {game_type_id})")

    if ranked[column].notna().any():
        summary = summary_statistics(ranked[column])
    else:
        logger.warning(f"No franchises to rank for game type {game_type_id}")
        summary = SummaryStatistics.empty()

    return RatioRanking(
        column=column,
        top=ranked.head(top_k).reset_index(drop=True),
        summary=summary,
    )
