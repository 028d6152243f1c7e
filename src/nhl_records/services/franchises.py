"""
Franchise analytics service: fetch, join and aggregate in one call.

Each method re-fetches what it needs; nothing is cached between calls.
Requests are issued one after another: the franchise listing first, then
per-franchise records, then per-team rosters.

Client errors propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import pandas as pd

from ..aggregators.grouped import game_type_record, grouped_totals
from ..aggregators.lookup import (
    FranchiseLookupError,
    active_franchises,
    resolve_franchise,
)
from ..aggregators.positions import position_names
from ..aggregators.ranking import REGULAR_SEASON, RatioRanking, rank_by_ratio
from ..aggregators.rosters import active_roster_skaters, roster_composition
from ..aggregators.tenure import tenure_by_position
from ..client import RecordsClient
from ..core.frames import records_to_frame
from ..core.models import FranchiseRef, Player

logger = logging.getLogger(__name__)

DEFAULT_SKATER_STATS = ("goals", "assists", "points")


class FranchiseAnalytics:
    """Analytic views over the records API for a set of franchises."""

    def __init__(self, client: RecordsClient):
        self.client = client

    def resolve(self, common_name: str) -> FranchiseRef:
        """Resolve an active franchise's common name, e.g. "Hurricanes"."""
        return resolve_franchise(self.client.list_franchises(), common_name)

    def resolve_many(self, common_names: Iterable[str]) -> list[FranchiseRef]:
        """Resolve several names against a single franchise listing."""
        franchises = self.client.list_franchises()
        return [resolve_franchise(franchises, name) for name in common_names]

    def active_skaters(self, franchise_ids: Sequence[int]) -> pd.DataFrame:
        """
        Skater records of currently rostered players of the given franchises.

        Raises:
            FranchiseLookupError: If an id is not an active franchise with a team
        """
        # Repeated ids would fetch and count the same players twice
        franchise_ids = list(dict.fromkeys(int(f) for f in franchise_ids))
        franchises = self.client.list_franchises()
        team_ids = self._team_ids(franchises, franchise_ids)

        skaters = self.client.get_skater_records_for(franchise_ids)
        rosters = [self.client.get_players_by_team(team_id) for team_id in team_ids]
        rosters = [r for r in rosters if not r.empty]
        roster = pd.concat(rosters, ignore_index=True) if rosters else records_to_frame([], Player)

        return active_roster_skaters(franchises, skaters, roster)

    def roster_composition(self, franchise_ids: Sequence[int]) -> pd.DataFrame:
        """Position by franchise contingency table of current rosters."""
        return roster_composition(self.active_skaters(franchise_ids))

    def tenure_table(self, franchise_ids: Sequence[int]) -> pd.DataFrame:
        """Position by seasons-played bucket for currently rostered skaters."""
        return tenure_by_position(self.active_skaters(franchise_ids))

    def skater_totals(
        self,
        franchise_ids: Sequence[int],
        stats: Sequence[str] = DEFAULT_SKATER_STATS,
    ) -> pd.DataFrame:
        """Summed stats per position, long format (position, stat, total)."""
        skaters = self.active_skaters(franchise_ids)
        skaters = skaters.assign(position=position_names(skaters["position_code"]))
        return grouped_totals(skaters, stats, by="position")

    def penalty_minutes_ranking(
        self,
        game_type_id: int = REGULAR_SEASON,
        top_k: int = 10,
    ) -> RatioRanking:
        """Active franchises ranked by penalty minutes per game."""
        return rank_by_ratio(
            self.client.list_franchise_totals(),
            "penalty_minutes",
            "games_played",
            game_type_id=game_type_id,
            top_k=top_k,
        )

    def game_type_summary(self, franchise_ids: Sequence[int] | None = None) -> pd.DataFrame:
        """Regular season vs playoff record per franchise."""
        return game_type_record(self.client.list_franchise_totals(), franchise_ids)

    @staticmethod
    def _team_ids(franchises: pd.DataFrame, franchise_ids: Sequence[int]) -> list[int]:
        active = active_franchises(franchises).set_index("id")
        team_ids = []
        for franchise_id in franchise_ids:
            if franchise_id not in active.index or pd.isna(active.at[franchise_id, "most_recent_team_id"]):
                raise FranchiseLookupError(str(franchise_id), 0)
            team_ids.append(int(active.at[franchise_id, "most_recent_team_id"]))
        logger.debug(f"Franchises {franchise_ids} -> teams {team_ids}")
        return team_ids
