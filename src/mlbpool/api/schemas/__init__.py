"""Pydantic models for API I/O."""

from .leaderboard import LeaderboardEntryResponse, LeaderboardResponse, TeamResponse

__all__ = [
    "LeaderboardEntryResponse",
    "LeaderboardResponse",
    "TeamResponse",
]
