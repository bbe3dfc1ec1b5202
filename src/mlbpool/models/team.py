"""Per-game and per-team statistics records."""

from __future__ import annotations

from pydantic import Field

from .base import CamelModel


FINAL_STATUS = "final"


class GameResult(CamelModel):
    away_team_id: int
    home_team_id: int
    away_score: int = Field(default=0, ge=0)
    home_score: int = Field(default=0, ge=0)
    completion_status: str

    @property
    def is_final(self) -> bool:
        return self.completion_status == FINAL_STATUS


class TeamRunStats(CamelModel):
    runs_scored: int = Field(default=0, ge=0)
    runs_allowed: int = Field(default=0, ge=0)
    games_played: int = Field(default=0, ge=0)

    def credit(self, scored: int, allowed: int) -> "TeamRunStats":
        """Return a copy with one more game of ``scored``/``allowed`` runs added."""

        return TeamRunStats(
            runs_scored=self.runs_scored + scored,
            runs_allowed=self.runs_allowed + allowed,
            games_played=self.games_played + 1,
        )


class TeamRecord(CamelModel):
    """Official record merged with aggregated run totals for one club."""

    name: str
    abbreviation: str
    wins: int = Field(..., ge=0)
    losses: int = Field(..., ge=0)
    win_pct: float = Field(..., ge=0.0, le=1.0)
    runs_scored: int = Field(default=0, ge=0)
    runs_allowed: int = Field(default=0, ge=0)
    games_played: int = Field(default=0, ge=0)
    runs_per_game: float = Field(default=0.0, ge=0.0)


class QuarterTeamStats(CamelModel):
    wins: int
    losses: int
    win_pct: float
    runs_scored: int
    runs_per_game: float

    @classmethod
    def from_record(cls, record: TeamRecord) -> "QuarterTeamStats":
        return cls(
            wins=record.wins,
            losses=record.losses,
            win_pct=record.win_pct,
            runs_scored=record.runs_scored,
            runs_per_game=record.runs_per_game,
        )
