"""
Pydantic models for NHL records API entities.

One model per endpoint. These models are used for:
- Validating rows of the "data" array at the deserialization boundary
- Declaring the column set of the tabular results

Wire names are camelCase; attributes are snake_case with camelCase aliases.
Fields the API does not declare here are ignored.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, computed_field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """Base for read-only API records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


# =============================================================================
# Franchises
# =============================================================================


class Franchise(RecordModel):
    """All-time franchise listing entry. A null last_season_id means active."""

    id: int
    first_season_id: int
    last_season_id: Optional[int] = None
    most_recent_team_id: Optional[int] = None
    team_common_name: Optional[str] = None
    team_place_name: Optional[str] = None
    full_name: Optional[str] = None
    team_abbrev: Optional[str] = None

    @model_validator(mode="after")
    def _check_season_span(self) -> "Franchise":
        if self.last_season_id is not None and self.last_season_id < self.first_season_id:
            raise ValueError(
                f"franchise {self.id}: lastSeasonId {self.last_season_id} "
                f"precedes firstSeasonId {self.first_season_id}"
            )
        return self

    @computed_field
    @property
    def is_active(self) -> bool:
        return self.last_season_id is None


class FranchiseTeamTotals(RecordModel):
    """Aggregate counters for one (franchise, team, game type) combination."""

    id: int
    franchise_id: Optional[int] = None
    team_id: Optional[int] = None
    team_name: Optional[str] = None
    tri_code: Optional[str] = None
    game_type_id: int
    first_season_id: Optional[int] = None
    last_season_id: Optional[int] = None
    active_franchise: Optional[int] = None
    games_played: Optional[int] = None
    wins: Optional[int] = None
    losses: Optional[int] = None
    ties: Optional[int] = None
    overtime_losses: Optional[int] = None
    goals_for: Optional[int] = None
    goals_against: Optional[int] = None
    penalty_minutes: Optional[int] = None
    points: Optional[int] = None
    point_pctg: Optional[float] = None
    shutouts: Optional[int] = None
    shootout_wins: Optional[int] = None
    shootout_losses: Optional[int] = None
    home_wins: Optional[int] = None
    home_losses: Optional[int] = None
    home_ties: Optional[int] = None
    home_overtime_losses: Optional[int] = None
    road_wins: Optional[int] = None
    road_losses: Optional[int] = None
    road_ties: Optional[int] = None
    road_overtime_losses: Optional[int] = None


# =============================================================================
# Per-franchise records
# =============================================================================


class SeasonRecord(RecordModel):
    """Single-season extremes for a franchise."""

    id: int
    franchise_id: int
    franchise_name: Optional[str] = None
    most_wins: Optional[int] = None
    most_wins_seasons: Optional[str] = None
    fewest_wins: Optional[int] = None
    fewest_wins_seasons: Optional[str] = None
    most_losses: Optional[int] = None
    most_losses_seasons: Optional[str] = None
    fewest_losses: Optional[int] = None
    fewest_losses_seasons: Optional[str] = None
    most_points: Optional[int] = None
    most_points_seasons: Optional[str] = None
    fewest_points: Optional[int] = None
    fewest_points_seasons: Optional[str] = None
    most_goals: Optional[int] = None
    most_goals_seasons: Optional[str] = None
    fewest_goals: Optional[int] = None
    fewest_goals_seasons: Optional[str] = None
    most_goals_against: Optional[int] = None
    most_goals_against_seasons: Optional[str] = None
    fewest_goals_against: Optional[int] = None
    fewest_goals_against_seasons: Optional[str] = None
    most_penalty_minutes: Optional[int] = None
    most_penalty_minutes_seasons: Optional[str] = None
    most_shutouts: Optional[int] = None
    most_shutouts_seasons: Optional[str] = None
    win_streak: Optional[int] = None
    win_streak_dates: Optional[str] = None
    loss_streak: Optional[int] = None
    loss_streak_dates: Optional[str] = None
    point_streak: Optional[int] = None
    point_streak_dates: Optional[str] = None
    home_win_streak: Optional[int] = None
    home_win_streak_dates: Optional[str] = None
    home_loss_streak: Optional[int] = None
    home_loss_streak_dates: Optional[str] = None
    road_win_streak: Optional[int] = None
    road_win_streak_dates: Optional[str] = None
    road_loss_streak: Optional[int] = None
    road_loss_streak_dates: Optional[str] = None


class GoalieRecord(RecordModel):
    """Career totals and single-game/season bests of a goalie within a franchise."""

    id: int
    player_id: int
    franchise_id: int
    franchise_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    game_type_id: Optional[int] = None
    position_code: Optional[str] = None
    active_player: Optional[bool] = None
    seasons: Optional[int] = None
    games_played: Optional[int] = None
    wins: Optional[int] = None
    losses: Optional[int] = None
    ties: Optional[int] = None
    overtime_losses: Optional[int] = None
    shutouts: Optional[int] = None
    most_saves_one_game: Optional[int] = None
    most_shots_against_one_game: Optional[int] = None
    most_goals_against_one_game: Optional[int] = None
    most_shutouts_one_season: Optional[int] = None
    most_wins_one_season: Optional[int] = None
    rookie_games_played: Optional[int] = None
    rookie_shutouts: Optional[int] = None
    rookie_wins: Optional[int] = None


class SkaterRecord(RecordModel):
    """Career totals and single-game/season bests of a skater within a franchise."""

    id: int
    player_id: int
    franchise_id: int
    franchise_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    game_type_id: Optional[int] = None
    position_code: Optional[str] = None
    active_player: Optional[bool] = None
    rookie_flag: Optional[bool] = None
    seasons: Optional[int] = None
    games_played: Optional[int] = None
    goals: Optional[int] = None
    assists: Optional[int] = None
    points: Optional[int] = None
    penalty_minutes: Optional[int] = None
    most_goals_one_game: Optional[int] = None
    most_goals_one_season: Optional[int] = None
    most_assists_one_game: Optional[int] = None
    most_assists_one_season: Optional[int] = None
    most_points_one_game: Optional[int] = None
    most_points_one_season: Optional[int] = None
    most_penalty_minutes_one_season: Optional[int] = None
    rookie_points: Optional[int] = None


# =============================================================================
# Rosters
# =============================================================================


class Player(RecordModel):
    """Roster entry of a team."""

    id: int
    current_team_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    position: Optional[str] = None
    sweater_number: Optional[int] = None
    on_roster: bool = False

    @field_validator("on_roster", mode="before")
    @classmethod
    def _parse_roster_flag(cls, value: Any) -> Any:
        # The API sends "Y"/"N"
        if isinstance(value, str):
            flag = value.strip().upper()
            if flag in ("Y", "N"):
                return flag == "Y"
        if value is None:
            return False
        return value


# =============================================================================
# Derived
# =============================================================================


class FranchiseRef(BaseModel):
    """Result of resolving a franchise common name."""

    model_config = ConfigDict(frozen=True)

    franchise_id: int
    team_id: Optional[int] = None
    team_common_name: str
