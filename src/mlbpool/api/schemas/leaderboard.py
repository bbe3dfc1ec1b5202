from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel


class LeaderboardEntryResponse(BaseModel):
    participant_id: str
    name: str
    rank: int
    teams: List[str]
    combined_win_pct: float
    combined_runs_per_game: float


class LeaderboardResponse(BaseModel):
    quarter: str
    season: int
    last_updated: datetime
    started: bool
    entries: List[LeaderboardEntryResponse]


class TeamResponse(BaseModel):
    abbreviation: str
    name: str
    wins: int
    losses: int
    win_pct: float
    runs_scored: int
    runs_allowed: int
    games_played: int
    runs_per_game: float
