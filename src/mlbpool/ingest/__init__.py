"""Input adapters that normalize raw Stats API payloads."""

from .schedule import ScheduleGame, aggregate_runs, games_from_schedule
from .standings import StandingsEntry, normalize_standings, runs_per_game, standings_entries

__all__ = [
    "ScheduleGame",
    "StandingsEntry",
    "aggregate_runs",
    "games_from_schedule",
    "normalize_standings",
    "runs_per_game",
    "standings_entries",
]
