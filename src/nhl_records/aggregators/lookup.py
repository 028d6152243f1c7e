"""
Franchise identifier resolution.

"Currently active" is always a null last_season_id; the API has no active
flag on the franchise listing.
"""

from __future__ import annotations

import logging

import pandas as pd

from ..core.models import FranchiseRef

logger = logging.getLogger(__name__)


class FranchiseLookupError(LookupError):
    """A franchise name matched zero or several active franchises."""

    def __init__(self, name: str, matches: int):
        if matches == 0:
            message = f"No active franchise named {name!r}"
        else:
            message = f"{matches} active franchises named {name!r}"
        super().__init__(message)
        self.name = name
        self.matches = matches


def active_franchises(df: pd.DataFrame) -> pd.DataFrame:
    """Rows whose last_season_id is null."""
    return df[df["last_season_id"].isna()]


def resolve_franchise(franchises: pd.DataFrame, common_name: str) -> FranchiseRef:
    """
    Map a team common name (e.g. "Hurricanes") to franchise and team ids.

    Matching is exact and limited to active franchises.

    Raises:
        FranchiseLookupError: If zero or more than one active row matches
    """
    active = active_franchises(franchises)
    matches = active[active["team_common_name"] == common_name]

    if len(matches) != 1:
        logger.warning(f"Franchise lookup for {common_name!r} matched {len(matches)} rows")
        raise FranchiseLookupError(common_name, len(matches))

    row = matches.iloc[0]
    team_id = row["most_recent_team_id"]
    return FranchiseRef(
        franchise_id=int(row["id"]),
        team_id=None if pd.isna(team_id) else int(team_id),
        team_common_name=common_name,
    )


def team_to_franchise(franchises: pd.DataFrame) -> pd.DataFrame:
    """
    Mapping of most recent team id to franchise id and name for active franchises.

    Columns: team_id, franchise_id, franchise_name.
    """
    active = active_franchises(franchises).dropna(subset=["most_recent_team_id"])
    return pd.DataFrame(
        {
            "team_id": active["most_recent_team_id"].astype(int),
            "franchise_id": active["id"].astype(int),
            "franchise_name": active["team_common_name"],
        }
    ).reset_index(drop=True)
