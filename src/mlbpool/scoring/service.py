"""Combine each participant's picked teams into a composite score and rank them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from mlbpool.config import TeamDirectory
from mlbpool.models import ParticipantRoster, ParticipantScore, QuarterTeamStats


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredEntry:
    participant_id: str
    score: ParticipantScore


@dataclass
class _Totals:
    wins: int = 0
    losses: int = 0
    runs: int = 0
    games: int = 0

    def add(self, stats: QuarterTeamStats) -> None:
        self.wins += stats.wins
        self.losses += stats.losses
        self.runs += stats.runs_scored
        # Games are estimated from the decided games on the record.
        self.games += stats.wins + stats.losses


def _composite(
    participant: ParticipantRoster,
    teams: Sequence[str],
    team_stats: Mapping[str, QuarterTeamStats],
) -> ParticipantScore:
    totals = _Totals()
    for abbrev in teams:
        stats = team_stats.get(abbrev)
        if stats is not None:
            totals.add(stats)

    decided = totals.wins + totals.losses
    win_pct = totals.wins / decided if decided > 0 else 0.0
    runs_per_game = totals.runs / totals.games if totals.games > 0 else 0.0
    return ParticipantScore(
        name=participant.name,
        teams=list(teams),
        combined_win_pct=round(win_pct, 3),
        combined_runs_per_game=round(runs_per_game, 2),
    )


def _known_picks(
    participant: ParticipantRoster,
    quarter: str,
    teams: Sequence[str],
    directory: Optional[TeamDirectory],
) -> List[str]:
    if directory is None:
        return list(teams)
    known: List[str] = []
    for abbrev in teams:
        if abbrev in directory:
            known.append(abbrev)
        else:
            logger.warning("Dropping unknown team %r picked by %s for %s", abbrev, participant.id, quarter)
    return known


def score_quarter(
    participants: Iterable[ParticipantRoster],
    quarter: str,
    team_stats: Mapping[str, QuarterTeamStats],
    *,
    directory: Optional[TeamDirectory] = None,
) -> List[ScoredEntry]:
    """Score every participant with picks for ``quarter``, in input order and unranked.

    With a ``directory``, picks it does not list are dropped with a warning.
    """

    entries: List[ScoredEntry] = []
    for participant in participants:
        picks = participant.picks_for(quarter)
        if picks is None:
            continue
        teams = _known_picks(participant, quarter, picks.teams(), directory)
        if not teams:
            continue
        entries.append(ScoredEntry(participant.id, _composite(participant, teams, team_stats)))
    return entries


def rank_scores(entries: Sequence[ScoredEntry]) -> List[ScoredEntry]:
    """Order by win pct then runs per game, both descending, and number 1..N.

    The sort is stable, so participants tied on both keys keep their input
    order, and each still gets its own consecutive rank.
    """

    ordered = sorted(
        entries,
        key=lambda entry: (-entry.score.combined_win_pct, -entry.score.combined_runs_per_game),
    )
    return [
        ScoredEntry(entry.participant_id, entry.score.model_copy(update={"rank": position}))
        for position, entry in enumerate(ordered, start=1)
    ]


def score_participants(
    participants: Sequence[ParticipantRoster],
    snapshot: Mapping[str, Mapping[str, QuarterTeamStats]],
    *,
    quarters: Optional[Iterable[str]] = None,
    directory: Optional[TeamDirectory] = None,
) -> Dict[str, Dict[str, ParticipantScore]]:
    """Return ``{quarter: {participant_id: ParticipantScore}}`` in rank order."""

    results: Dict[str, Dict[str, ParticipantScore]] = {}
    for quarter in quarters if quarters is not None else snapshot.keys():
        team_stats = snapshot.get(quarter, {})
        ranked = rank_scores(score_quarter(participants, quarter, team_stats, directory=directory))
        results[quarter] = {entry.participant_id: entry.score for entry in ranked}
        logger.debug("Scored %d participants for %s", len(ranked), quarter)
    return results
