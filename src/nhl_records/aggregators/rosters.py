"""
Cross-franchise roster composition.

Rosters are addressed by team id while records are keyed by franchise id,
so roster rows are first resolved to a franchise through the active
franchises' most recent team id. Records are then joined on both player id
and franchise id, which keeps a player's stats from a former franchise out
of the current franchise's rows.
"""

from __future__ import annotations

import logging

import pandas as pd

from .contingency import contingency_table
from .joins import join_frames
from .lookup import team_to_franchise
from .positions import POSITION_ORDER, position_names

logger = logging.getLogger(__name__)

FRANCHISE_NAME_COLUMN = "team_common_name"


def on_roster_players(rosters: pd.DataFrame) -> pd.DataFrame:
    """Roster rows flagged as currently on the roster."""
    return rosters[rosters["on_roster"].astype(bool)]


def active_roster_skaters(
    franchises: pd.DataFrame,
    skaters: pd.DataFrame,
    rosters: pd.DataFrame,
) -> pd.DataFrame:
    """
    Restrict historical records to players currently rostered by an active franchise.

    Args:
        franchises: Franchise listing
        skaters: Skater (or goalie) records of one or more franchises
        rosters: Roster rows of the corresponding teams

    Returns:
        The matching record rows plus team_id and team_common_name
    """
    roster_keys = (
        on_roster_players(rosters)[["id", "current_team_id"]]
        .rename(columns={"id": "player_id", "current_team_id": "team_id"})
        .dropna()
        .astype(int)
        .drop_duplicates()
    )

    mapping = team_to_franchise(franchises).rename(
        columns={"franchise_name": FRANCHISE_NAME_COLUMN}
    )
    roster_keys = join_frames(roster_keys, mapping, on=["team_id"], how="inner")

    records = skaters.copy()
    records[["player_id", "franchise_id"]] = records[["player_id", "franchise_id"]].astype(int)

    joined = join_frames(records, roster_keys, on=["player_id", "franchise_id"], how="inner")
    logger.info(
        f"{len(joined)} of {len(skaters)} records belong to currently rostered players"
    )
    return joined


def roster_composition(active_skaters: pd.DataFrame) -> pd.DataFrame:
    """Contingency table of position by franchise for joined roster records."""
    frame = pd.DataFrame(
        {
            "position": position_names(active_skaters["position_code"]),
            FRANCHISE_NAME_COLUMN: active_skaters[FRANCHISE_NAME_COLUMN],
        }
    )
    observed = set(frame["position"])
    return contingency_table(
        frame,
        "position",
        FRANCHISE_NAME_COLUMN,
        index_order=[p for p in POSITION_ORDER if p in observed],
    )
