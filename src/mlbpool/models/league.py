"""Pool participants, quarter windows and the published standings document."""

from __future__ import annotations

from datetime import date, datetime
from typing import Dict, List, Literal, Optional, Tuple

from pydantic import Field, field_validator, model_validator

from .base import CamelModel
from .team import QuarterTeamStats, TeamRecord


QuarterName = Literal["Q1", "Q2", "Q3", "Q4"]
QUARTER_NAMES: Tuple[str, ...] = ("Q1", "Q2", "Q3", "Q4")


class QuarterDefinition(CamelModel):
    name: QuarterName
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def _check_window(self) -> "QuarterDefinition":
        if self.end_date < self.start_date:
            raise ValueError(f"{self.name} ends ({self.end_date}) before it starts ({self.start_date})")
        return self

    def has_started(self, reference_date: date) -> bool:
        return reference_date >= self.start_date


class TierPicks(CamelModel):
    tier1: Optional[str] = None
    tier2: Optional[str] = None
    tier3: Optional[str] = None
    tier4: Optional[str] = None

    @field_validator("tier1", "tier2", "tier3", "tier4", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().upper()
            return value or None
        return value

    def teams(self) -> List[str]:
        """Selected abbreviations in tier order, skipping empty slots."""

        slots = (self.tier1, self.tier2, self.tier3, self.tier4)
        return [team for team in slots if team]


class ParticipantRoster(CamelModel):
    id: str = Field(..., min_length=1)
    name: str
    quarters: Dict[QuarterName, Optional[TierPicks]] = Field(default_factory=dict)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def picks_for(self, quarter: str) -> Optional[TierPicks]:
        return self.quarters.get(quarter)  # type: ignore[call-overload]


class ParticipantScore(CamelModel):
    name: str
    teams: List[str]
    combined_win_pct: float
    combined_runs_per_game: float
    rank: int = Field(default=0, ge=0)


class StandingsResult(CamelModel):
    """Everything written to ``standings.json`` after a sync."""

    last_updated: datetime
    season: int
    teams: Dict[str, TeamRecord]
    quarterly_stats: Dict[str, Dict[str, QuarterTeamStats]]
    player_scores: Dict[str, Dict[str, ParticipantScore]]
