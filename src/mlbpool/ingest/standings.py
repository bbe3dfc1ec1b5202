"""Merge official standings with aggregated run totals into team records."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping

from pydantic import BaseModel, Field, ValidationError

from mlbpool.config import TeamDirectory
from mlbpool.models import TeamRecord, TeamRunStats


logger = logging.getLogger(__name__)


class _StandingsTeam(BaseModel):
    id: int
    name: str = ""


class _LeagueRecord(BaseModel):
    wins: int = Field(..., ge=0)
    losses: int = Field(..., ge=0)
    pct: str | float | None = None


class StandingsEntry(BaseModel):
    """One entry of ``records[].teamRecords[]`` as returned by ``/standings``."""

    team: _StandingsTeam
    league_record: _LeagueRecord = Field(alias="leagueRecord")


def standings_entries(payload: Mapping[str, Any]) -> List[StandingsEntry]:
    records = payload.get("records") if isinstance(payload, Mapping) else None
    if not isinstance(records, list):
        logger.warning("Standings payload has no records; treating it as empty")
        return []

    entries: List[StandingsEntry] = []
    for division in records:
        team_records = division.get("teamRecords") if isinstance(division, Mapping) else None
        if not isinstance(team_records, list):
            continue
        for raw in team_records:
            try:
                entries.append(StandingsEntry.model_validate(raw))
            except ValidationError as exc:
                logger.warning("Skipping malformed standings entry: %s", exc.errors()[0]["msg"])
    return entries


def _parse_pct(raw: str | float | None, *, team: str) -> float:
    if raw is None:
        return 0.0
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Unparseable win pct %r for %s; using 0.0", raw, team)
        return 0.0
    return min(1.0, max(0.0, value))


def runs_per_game(runs_scored: int, games_played: int) -> float:
    if games_played <= 0:
        return 0.0
    return round(runs_scored / games_played, 2)


def normalize_standings(
    entries: Iterable[StandingsEntry],
    run_stats: Mapping[str, TeamRunStats],
    directory: TeamDirectory,
) -> Dict[str, TeamRecord]:
    """Build one :class:`TeamRecord` per known club.

    ``win_pct`` is taken from the standings as published; it is not recomputed
    from wins and losses. Clubs without counted games get zero run totals.
    """

    teams: Dict[str, TeamRecord] = {}
    empty = TeamRunStats()
    for entry in entries:
        abbrev = directory.resolve(entry.team.id)
        if abbrev is None:
            logger.warning("Unknown team ID: %s", entry.team.id)
            continue

        runs = run_stats.get(abbrev, empty)
        teams[abbrev] = TeamRecord(
            name=entry.team.name,
            abbreviation=abbrev,
            wins=entry.league_record.wins,
            losses=entry.league_record.losses,
            win_pct=_parse_pct(entry.league_record.pct, team=abbrev),
            runs_scored=runs.runs_scored,
            runs_allowed=runs.runs_allowed,
            games_played=runs.games_played,
            runs_per_game=runs_per_game(runs.runs_scored, runs.games_played),
        )
    return teams
