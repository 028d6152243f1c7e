"""
Aggregations over records API frames.

Every function is pure: it takes DataFrames produced by RecordsClient and
returns new DataFrames (or small result objects) without fetching anything.
"""

from .contingency import contingency_table, interior
from .grouped import game_type_record, grouped_totals
from .joins import join_frames
from .lookup import (
    FranchiseLookupError,
    active_franchises,
    resolve_franchise,
    team_to_franchise,
)
from .positions import POSITION_NAMES, position_names
from .ranking import (
    PLAYOFFS,
    REGULAR_SEASON,
    RatioRanking,
    SummaryStatistics,
    derive_ratio,
    rank_by_ratio,
    summary_statistics,
)
from .rosters import active_roster_skaters, on_roster_players, roster_composition
from .tenure import TENURE_LABELS, bin_tenure, tenure_bucket, tenure_by_position

__all__ = [
    "FranchiseLookupError",
    "PLAYOFFS",
    "POSITION_NAMES",
    "REGULAR_SEASON",
    "RatioRanking",
    "SummaryStatistics",
    "TENURE_LABELS",
    "active_franchises",
    "active_roster_skaters",
    "bin_tenure",
    "contingency_table",
    "derive_ratio",
    "game_type_record",
    "grouped_totals",
    "interior",
    "join_frames",
    "on_roster_players",
    "position_names",
    "rank_by_ratio",
    "resolve_franchise",
    "roster_composition",
    "summary_statistics",
    "team_to_franchise",
    "tenure_bucket",
    "tenure_by_position",
]
