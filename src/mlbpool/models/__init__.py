"""Canonical models shared across ingestion, scoring and persistence layers."""

from .base import CamelModel
from .league import (
    QUARTER_NAMES,
    ParticipantRoster,
    ParticipantScore,
    QuarterDefinition,
    QuarterName,
    StandingsResult,
    TierPicks,
)
from .team import FINAL_STATUS, GameResult, QuarterTeamStats, TeamRecord, TeamRunStats

__all__ = [
    "CamelModel",
    "FINAL_STATUS",
    "GameResult",
    "ParticipantRoster",
    "ParticipantScore",
    "QUARTER_NAMES",
    "QuarterDefinition",
    "QuarterName",
    "QuarterTeamStats",
    "StandingsResult",
    "TeamRecord",
    "TeamRunStats",
    "TierPicks",
]
