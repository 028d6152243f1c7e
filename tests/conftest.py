"""
Pytest configuration for nhl-records tests.

HTTP is served by httpx.MockTransport from the canned payloads below; no
test touches the network.
"""

import httpx
import pandas as pd
import pytest

from nhl_records.client import RecordsClient
from nhl_records.core.config import Settings
from nhl_records.core.frames import records_to_frame
from nhl_records.core.models import Franchise, FranchiseTeamTotals, Player, SkaterRecord

API_PREFIX = "/site/api"

FRANCHISES = [
    {
        "id": 1, "firstSeasonId": 19171918, "lastSeasonId": None, "mostRecentTeamId": 8,
        "teamCommonName": "Canadiens", "teamPlaceName": "Montréal", "teamAbbrev": "MTL",
    },
    {
        "id": 2, "firstSeasonId": 19171918, "lastSeasonId": 19171918, "mostRecentTeamId": 41,
        "teamCommonName": "Wanderers", "teamPlaceName": "Montreal", "teamAbbrev": "MWN",
    },
    {
        "id": 6, "firstSeasonId": 19241925, "lastSeasonId": None, "mostRecentTeamId": 6,
        "teamCommonName": "Bruins", "teamPlaceName": "Boston", "teamAbbrev": "BOS",
    },
    {
        "id": 26, "firstSeasonId": 19791980, "lastSeasonId": None, "mostRecentTeamId": 12,
        "teamCommonName": "Hurricanes", "teamPlaceName": "Carolina", "teamAbbrev": "CAR",
    },
]

# Player 101 played for Boston before joining Carolina; his Boston row must
# never be attributed to a current roster.
SKATERS = {
    26: [
        {
            "id": 1, "playerId": 100, "franchiseId": 26, "franchiseName": "Carolina Hurricanes",
            "firstName": "Jaccob", "lastName": "Slavin", "positionCode": "D", "seasons": 12,
            "gamesPlayed": 800, "goals": 50, "assists": 200, "points": 250, "penaltyMinutes": 120,
            "activePlayer": True, "gameTypeId": 2, "mostGoalsOneSeason": 8,
        },
        {
            "id": 2, "playerId": 101, "franchiseId": 26, "franchiseName": "Carolina Hurricanes",
            "firstName": "Jordan", "lastName": "Staal", "positionCode": "C", "seasons": 3,
            "gamesPlayed": 200, "goals": 60, "assists": 70, "points": 130, "penaltyMinutes": 40,
            "activePlayer": True, "gameTypeId": 2,
        },
        {
            "id": 3, "playerId": 102, "franchiseId": 26, "franchiseName": "Carolina Hurricanes",
            "firstName": "Ron", "lastName": "Francis", "positionCode": "L", "seasons": 1,
            "gamesPlayed": 40, "goals": 5, "assists": 5, "points": 10, "penaltyMinutes": 4,
            "activePlayer": False, "gameTypeId": 2,
        },
        {
            "id": 4, "playerId": 103, "franchiseId": 26, "franchiseName": "Carolina Hurricanes",
            "firstName": "Eric", "lastName": "Staal", "positionCode": "R", "seasons": 6,
            "gamesPlayed": 400, "goals": 100, "assists": 100, "points": 200, "penaltyMinutes": 80,
            "activePlayer": False, "gameTypeId": 2,
        },
    ],
    6: [
        {
            "id": 10, "playerId": 200, "franchiseId": 6, "franchiseName": "Boston Bruins",
            "firstName": "Brad", "lastName": "Marchand", "positionCode": "C", "seasons": 10,
            "gamesPlayed": 900, "goals": 150, "assists": 200, "points": 350, "penaltyMinutes": 600,
            "activePlayer": True, "gameTypeId": 2,
        },
        {
            "id": 11, "playerId": 101, "franchiseId": 6, "franchiseName": "Boston Bruins",
            "firstName": "Jordan", "lastName": "Staal", "positionCode": "C", "seasons": 2,
            "gamesPlayed": 120, "goals": 20, "assists": 20, "points": 40, "penaltyMinutes": 10,
            "activePlayer": True, "gameTypeId": 2,
        },
        {
            "id": 12, "playerId": 201, "franchiseId": 6, "franchiseName": "Boston Bruins",
            "firstName": "Charlie", "lastName": "McAvoy", "positionCode": "D", "seasons": 5,
            "gamesPlayed": 350, "goals": 20, "assists": 100, "points": 120, "penaltyMinutes": 200,
            "activePlayer": True, "gameTypeId": 2,
        },
    ],
}

ROSTERS = {
    12: [
        {"id": 100, "currentTeamId": 12, "onRoster": "Y", "position": "D", "sweaterNumber": 74},
        {"id": 101, "currentTeamId": 12, "onRoster": "Y", "position": "C", "sweaterNumber": 11},
        {"id": 103, "currentTeamId": 12, "onRoster": "N", "position": "R"},
    ],
    6: [
        {"id": 200, "currentTeamId": 6, "onRoster": "Y", "position": "C", "sweaterNumber": 63},
        {"id": 201, "currentTeamId": 6, "onRoster": "Y", "position": "D", "sweaterNumber": 73},
    ],
}

SEASON_RECORDS = {
    26: [
        {
            "id": 26, "franchiseId": 26, "franchiseName": "Carolina Hurricanes",
            "mostWins": 52, "mostWinsSeasons": "2005-06 (82)",
            "fewestWins": 19, "fewestWinsSeasons": "1982-83 (80)",
            "mostPoints": 116, "mostPointsSeasons": "2021-22 (82)",
            "mostGoals": 332, "mostGoalsSeasons": "1985-86 (80)",
            "mostPenaltyMinutes": 2354, "mostPenaltyMinutesSeasons": "1992-93 (84)",
            "winStreak": 9, "winStreakDates": "Oct 22 2005 - Nov 11 2005",
            "pointStreak": 15, "pointStreakDates": "Dec 13 2005 - Jan 16 2006",
        },
    ],
}

GOALIES = {
    26: [
        {
            "id": 1, "playerId": 200, "franchiseId": 26, "franchiseName": "Carolina Hurricanes",
            "firstName": "Cam", "lastName": "Ward", "positionCode": "G", "seasons": 13,
            "gamesPlayed": 668, "wins": 318, "losses": 244, "ties": 0, "overtimeLosses": 84,
            "shutouts": 27, "activePlayer": False, "gameTypeId": 2, "mostWinsOneSeason": 39,
        },
        {
            "id": 2, "playerId": 201, "franchiseId": 26, "franchiseName": "Carolina Hurricanes",
            "firstName": "Frederik", "lastName": "Andersen", "positionCode": "G", "seasons": 4,
            "gamesPlayed": 150, "wins": 95, "losses": 40, "ties": None, "overtimeLosses": 10,
            "shutouts": 10, "activePlayer": True, "gameTypeId": 2,
        },
    ],
}

# Regular-season penalty minutes per game of the active rows:
# 7.27, 12.94, 14.08, 15.67, 18.41
TEAM_TOTALS = [
    {
        "id": 1, "franchiseId": 26, "teamId": 12, "teamName": "Carolina Hurricanes",
        "gameTypeId": 2, "lastSeasonId": None, "gamesPlayed": 100, "penaltyMinutes": 1408,
        "wins": 50, "losses": 40, "ties": 10, "goalsFor": 300, "goalsAgainst": 280,
    },
    {
        "id": 2, "franchiseId": 26, "teamId": 12, "teamName": "Carolina Hurricanes",
        "gameTypeId": 3, "lastSeasonId": None, "gamesPlayed": 50, "penaltyMinutes": 900,
        "wins": 30, "losses": 20, "ties": 0, "goalsFor": 150, "goalsAgainst": 130,
    },
    {
        "id": 3, "franchiseId": 6, "teamId": 6, "teamName": "Boston Bruins",
        "gameTypeId": 2, "lastSeasonId": None, "gamesPlayed": 100, "penaltyMinutes": 727,
        "wins": 60, "losses": 30, "ties": 10, "goalsFor": 320, "goalsAgainst": 250,
    },
    {
        "id": 4, "franchiseId": 1, "teamId": 8, "teamName": "Montréal Canadiens",
        "gameTypeId": 2, "lastSeasonId": None, "gamesPlayed": 100, "penaltyMinutes": 1294,
        "wins": 55, "losses": 35, "ties": 10, "goalsFor": 310, "goalsAgainst": 260,
    },
    {
        "id": 5, "franchiseId": 5, "teamId": 10, "teamName": "Toronto Maple Leafs",
        "gameTypeId": 2, "lastSeasonId": None, "gamesPlayed": 100, "penaltyMinutes": 1567,
        "wins": 45, "losses": 45, "ties": 10, "goalsFor": 290, "goalsAgainst": 300,
    },
    {
        "id": 6, "franchiseId": 10, "teamId": 4, "teamName": "Philadelphia Flyers",
        "gameTypeId": 2, "lastSeasonId": None, "gamesPlayed": 100, "penaltyMinutes": 1841,
        "wins": 48, "losses": 42, "ties": 10, "goalsFor": 295, "goalsAgainst": 290,
    },
    {
        "id": 7, "franchiseId": 2, "teamId": 41, "teamName": "Montreal Wanderers",
        "gameTypeId": 2, "lastSeasonId": 19171918, "gamesPlayed": 6, "penaltyMinutes": 500,
        "wins": 1, "losses": 5, "ties": 0, "goalsFor": 17, "goalsAgainst": 35,
    },
    {
        "id": 8, "franchiseId": 38, "teamId": 55, "teamName": "Seattle Kraken",
        "gameTypeId": 3, "lastSeasonId": None, "gamesPlayed": 0, "penaltyMinutes": 0,
        "wins": 0, "losses": 0, "ties": 0, "goalsFor": 0, "goalsAgainst": 0,
    },
    {
        "id": 9, "franchiseId": 38, "teamId": 55, "teamName": "Seattle Kraken",
        "gameTypeId": 2, "lastSeasonId": None, "gamesPlayed": 0, "penaltyMinutes": 0,
        "wins": 0, "losses": 0, "ties": 0, "goalsFor": 0, "goalsAgainst": 0,
    },
]


def envelope(rows):
    return {"data": rows, "total": len(rows)}


def route(request: httpx.Request) -> httpx.Response:
    """Serve canned payloads by path, like the live records API."""
    path = request.url.path[len(API_PREFIX):]
    franchise_filter = request.url.params.get("cayenneExp", "")
    franchise_id = int(franchise_filter.split("=")[1]) if franchise_filter else None

    if path == "/franchise":
        return httpx.Response(200, json=envelope(FRANCHISES))
    if path == "/franchise-team-totals":
        return httpx.Response(200, json=envelope(TEAM_TOTALS))
    if path == "/franchise-skater-records":
        return httpx.Response(200, json=envelope(SKATERS.get(franchise_id, [])))
    if path == "/franchise-goalie-records":
        return httpx.Response(200, json=envelope(GOALIES.get(franchise_id, [])))
    if path == "/franchise-season-records":
        return httpx.Response(200, json=envelope(SEASON_RECORDS.get(franchise_id, [])))
    if path.startswith("/player/byTeam/"):
        team_id = int(path.rsplit("/", 1)[1])
        return httpx.Response(200, json=envelope(ROSTERS.get(team_id, [])))
    return httpx.Response(404, json={"message": "not found"})


@pytest.fixture
def settings():
    return Settings(base_url="https://records.nhl.com/site/api", timeout=5)


@pytest.fixture
def requests_seen():
    """Every request the mock transport received, in order."""
    return []


@pytest.fixture
def make_client(settings, requests_seen):
    """Build a RecordsClient whose transport calls handler (default: route)."""
    clients = []

    def _make(handler=route):
        def recording(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        client = RecordsClient(settings, transport=httpx.MockTransport(recording))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def franchises() -> pd.DataFrame:
    return records_to_frame(FRANCHISES, Franchise)


@pytest.fixture
def skaters() -> pd.DataFrame:
    return records_to_frame(SKATERS[26] + SKATERS[6], SkaterRecord)


@pytest.fixture
def rosters() -> pd.DataFrame:
    return records_to_frame(ROSTERS[12] + ROSTERS[6], Player)


@pytest.fixture
def team_totals() -> pd.DataFrame:
    return records_to_frame(TEAM_TOTALS, FranchiseTeamTotals)
