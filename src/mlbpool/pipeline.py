"""Run the aggregation and ranking stages end to end."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Any, Mapping, Optional

from mlbpool.config import TeamDirectory, get_directory
from mlbpool.config_loader import LeagueConfig
from mlbpool.ingest import aggregate_runs, games_from_schedule, normalize_standings, standings_entries
from mlbpool.models import StandingsResult
from mlbpool.scoring import score_participants, snapshot_quarters


logger = logging.getLogger(__name__)


class PipelineError(Exception):
    def __init__(self, message: str, stage: str):
        super().__init__(f"{stage}: {message}")
        self.message = message
        self.stage = stage


def build_standings(
    standings_payload: Mapping[str, Any],
    schedule_payload: Mapping[str, Any],
    league: LeagueConfig,
    reference_date: date | datetime | str,
    *,
    season: int,
    directory: Optional[TeamDirectory] = None,
    now: Optional[datetime] = None,
) -> StandingsResult:
    """Compute the full standings document from already fetched payloads.

    Nothing is written here; the caller persists the returned result. Any
    failure inside a stage is raised as a :class:`PipelineError`.
    """

    directory = directory or get_directory("MLB")
    stage = "schedule"
    try:
        games = games_from_schedule(schedule_payload)
        run_stats = aggregate_runs(games, directory)
        logger.info("Counted runs for %d teams from %d games", len(run_stats), len(games))

        stage = "standings"
        teams = normalize_standings(standings_entries(standings_payload), run_stats, directory)

        stage = "quarters"
        quarterly_stats = snapshot_quarters(teams, league.quarters, reference_date)

        stage = "scoring"
        player_scores = score_participants(league.players, quarterly_stats, directory=directory)

        stage = "assemble"
        return StandingsResult(
            last_updated=now or datetime.now(timezone.utc),
            season=season,
            teams=teams,
            quarterly_stats=quarterly_stats,
            player_scores=player_scores,
        )
    except Exception as exc:
        raise PipelineError(str(exc), stage) from exc
