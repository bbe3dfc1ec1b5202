"""Flatten Stats API schedule payloads and fold final games into run totals."""

from __future__ import annotations

import logging
from functools import reduce
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from mlbpool.config import TeamDirectory
from mlbpool.models import FINAL_STATUS, GameResult, TeamRunStats


logger = logging.getLogger(__name__)

_STATUS_BY_CODE = {
    "F": FINAL_STATUS,
    "O": "game_over",
    "I": "in_progress",
    "P": "pre_game",
    "S": "scheduled",
    "D": "postponed",
}


class _RawTeam(BaseModel):
    id: int


class _RawSide(BaseModel):
    team: _RawTeam
    score: Optional[int] = None


class _RawSides(BaseModel):
    away: _RawSide
    home: _RawSide


class _RawStatus(BaseModel):
    status_code: str = Field(alias="statusCode")


class ScheduleGame(BaseModel):
    """One entry of ``dates[].games[]`` as returned by ``/schedule``."""

    game_pk: Optional[int] = Field(default=None, alias="gamePk")
    status: _RawStatus
    teams: _RawSides

    def to_result(self) -> GameResult:
        code = self.status.status_code
        return GameResult(
            away_team_id=self.teams.away.team.id,
            home_team_id=self.teams.home.team.id,
            # Postponed or unplayed games come back without a score.
            away_score=self.teams.away.score or 0,
            home_score=self.teams.home.score or 0,
            completion_status=_STATUS_BY_CODE.get(code, "unknown"),
        )


def games_from_schedule(payload: Mapping[str, Any]) -> List[GameResult]:
    dates = payload.get("dates") if isinstance(payload, Mapping) else None
    if not isinstance(dates, list):
        logger.warning("Schedule payload has no dates; treating it as empty")
        return []

    results: List[GameResult] = []
    for day in dates:
        games = day.get("games") if isinstance(day, Mapping) else None
        if not isinstance(games, list):
            continue
        for raw in games:
            try:
                results.append(ScheduleGame.model_validate(raw).to_result())
            except ValidationError as exc:
                game_pk = raw.get("gamePk") if isinstance(raw, Mapping) else None
                logger.warning("Skipping malformed game %s: %s", game_pk, exc.errors()[0]["msg"])
    return results


def _fold_game(
    directory: TeamDirectory,
) -> Callable[[Dict[str, TeamRunStats], GameResult], Dict[str, TeamRunStats]]:
    empty = TeamRunStats()

    def step(totals: Dict[str, TeamRunStats], game: GameResult) -> Dict[str, TeamRunStats]:
        if not game.is_final:
            return totals
        away = directory.resolve(game.away_team_id)
        home = directory.resolve(game.home_team_id)
        if away is None or home is None:
            logger.debug(
                "Skipping game between unlisted teams %s and %s",
                game.away_team_id,
                game.home_team_id,
            )
            return totals
        updated = dict(totals)
        updated[away] = updated.get(away, empty).credit(game.away_score, game.home_score)
        updated[home] = updated.get(home, empty).credit(game.home_score, game.away_score)
        return updated

    return step


def aggregate_runs(games: Iterable[GameResult], directory: TeamDirectory) -> Dict[str, TeamRunStats]:
    """Sum runs scored/allowed and games played per abbreviation over final games.

    Each counted game credits both clubs in the same step, so the totals do not
    depend on the order of ``games``.
    """

    return reduce(_fold_game(directory), games, {})
