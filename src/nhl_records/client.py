"""
NHL records API client.

One method per endpoint of https://records.nhl.com/site/api. Every method
performs exactly one GET, validates the rows against the endpoint model and
returns them as a DataFrame in server order. Endpoints return complete
arrays, so nothing is paginated.

Usage:
    from nhl_records.client import RecordsClient

    with RecordsClient() as client:
        franchises = client.list_franchises()
        skaters = client.get_skater_records(26)
"""

from __future__ import annotations

import logging
import numbers
from typing import Any, Iterable, Union

import httpx
import pandas as pd

from .core.config import DEFAULT_BASE_URL, Settings, get_settings
from .core.frames import records_to_frame
from .core.http import BaseApiClient
from .core.models import (
    Franchise,
    FranchiseTeamTotals,
    GoalieRecord,
    Player,
    SeasonRecord,
    SkaterRecord,
)

logger = logging.getLogger(__name__)

Identifier = Union[int, str]

# Resource paths
FRANCHISE_PATH = "/franchise"
FRANCHISE_TOTALS_PATH = "/franchise-team-totals"
SEASON_RECORDS_PATH = "/franchise-season-records"
GOALIE_RECORDS_PATH = "/franchise-goalie-records"
SKATER_RECORDS_PATH = "/franchise-skater-records"
PLAYERS_BY_TEAM_PATH = "/player/byTeam/{team_id}"


def _validate_identifier(value: Any, name: str) -> str:
    """Accept a positive int or a non-empty string; return it as a string."""
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer or string, got bool")
    # numpy integers from DataFrame columns count as integers
    if isinstance(value, numbers.Integral):
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")
        return str(int(value))
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValueError(f"{name} must not be empty")
        return value
    raise ValueError(f"{name} must be an integer or string, got {type(value).__name__}")


def franchise_filter(franchise_id: Identifier) -> dict[str, str]:
    """Build the cayenneExp query parameter restricting rows to one franchise."""
    return {"cayenneExp": f"franchiseId={_validate_identifier(franchise_id, 'franchise_id')}"}


class RecordsClient(BaseApiClient):
    """Synchronous client for the NHL records API."""

    BASE_URL = DEFAULT_BASE_URL

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        settings = settings or get_settings()
        super().__init__(
            base_url=base_url or settings.base_url,
            headers={"Accept": "application/json", "User-Agent": settings.user_agent},
            timeout=timeout if timeout is not None else settings.timeout,
            transport=transport,
        )

    def __enter__(self) -> "RecordsClient":
        super().__enter__()
        return self

    # =========================================================================
    # Raw access
    # =========================================================================

    def fetch(self, path: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """Return the unvalidated "data" array of any endpoint."""
        return self._get_data(path, params=params)

    # =========================================================================
    # Franchises
    # =========================================================================

    def list_franchises(self) -> pd.DataFrame:
        """All-time franchise listing, active and defunct."""
        return records_to_frame(self._get_data(FRANCHISE_PATH), Franchise)

    def list_franchise_totals(self) -> pd.DataFrame:
        """Aggregate counters for every (franchise, team, game type)."""
        return records_to_frame(self._get_data(FRANCHISE_TOTALS_PATH), FranchiseTeamTotals)

    # =========================================================================
    # Per-franchise records
    # =========================================================================

    def get_season_records(self, franchise_id: Identifier) -> pd.DataFrame:
        """Single-season extremes of one franchise."""
        rows = self._get_data(SEASON_RECORDS_PATH, params=franchise_filter(franchise_id))
        return records_to_frame(rows, SeasonRecord)

    def get_goalie_records(self, franchise_id: Identifier) -> pd.DataFrame:
        """Goalie records of one franchise."""
        rows = self._get_data(GOALIE_RECORDS_PATH, params=franchise_filter(franchise_id))
        return records_to_frame(rows, GoalieRecord)

    def get_skater_records(self, franchise_id: Identifier) -> pd.DataFrame:
        """Skater records of one franchise."""
        rows = self._get_data(SKATER_RECORDS_PATH, params=franchise_filter(franchise_id))
        return records_to_frame(rows, SkaterRecord)

    def get_goalie_records_for(self, franchise_ids: Iterable[Identifier]) -> pd.DataFrame:
        """Goalie records of several franchises, one request per franchise."""
        return self._concat(self.get_goalie_records, franchise_ids, GoalieRecord)

    def get_skater_records_for(self, franchise_ids: Iterable[Identifier]) -> pd.DataFrame:
        """Skater records of several franchises, one request per franchise."""
        return self._concat(self.get_skater_records, franchise_ids, SkaterRecord)

    # =========================================================================
    # Rosters
    # =========================================================================

    def get_players_by_team(self, team_id: Identifier) -> pd.DataFrame:
        """Roster rows of a team id (not a franchise id)."""
        path = PLAYERS_BY_TEAM_PATH.format(team_id=_validate_identifier(team_id, "team_id"))
        return records_to_frame(self._get_data(path), Player)

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _concat(fetch_one, ids: Iterable[Identifier], model) -> pd.DataFrame:
        frames = [fetch_one(franchise_id) for franchise_id in ids]
        frames = [f for f in frames if not f.empty]
        if not frames:
            return records_to_frame([], model)
        return pd.concat(frames, ignore_index=True)
