"""Read-only REST API over the last synced standings."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException

from mlbpool.api.schemas import LeaderboardEntryResponse, LeaderboardResponse, TeamResponse
from mlbpool.config import Settings
from mlbpool.models import QUARTER_NAMES, StandingsResult
from mlbpool.persistence import StandingsStore


def _leaderboard(result: StandingsResult, quarter: str) -> LeaderboardResponse:
    scores = result.player_scores.get(quarter, {})
    entries = sorted(
        (
            LeaderboardEntryResponse(
                participant_id=participant_id,
                name=score.name,
                rank=score.rank,
                teams=list(score.teams),
                combined_win_pct=score.combined_win_pct,
                combined_runs_per_game=score.combined_runs_per_game,
            )
            for participant_id, score in scores.items()
        ),
        key=lambda entry: entry.rank,
    )
    return LeaderboardResponse(
        quarter=quarter,
        season=result.season,
        last_updated=result.last_updated,
        started=bool(result.quarterly_stats.get(quarter)),
        entries=entries,
    )


def create_app(store: Optional[StandingsStore] = None) -> FastAPI:
    app = FastAPI(title="mlbpool standings")
    store = store or StandingsStore(Settings.from_env().data_dir)
    app.state.store = store

    def _result_or_404() -> StandingsResult:
        result = store.read_result()
        if result is None:
            raise HTTPException(status_code=404, detail="No standings have been synced yet")
        return result

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/standings")
    async def standings() -> dict:
        return _result_or_404().to_payload()

    @app.get("/standings/teams", response_model=list[TeamResponse])
    async def teams() -> list[TeamResponse]:
        result = _result_or_404()
        records = sorted(result.teams.values(), key=lambda record: (-record.win_pct, record.abbreviation))
        return [TeamResponse(**record.model_dump()) for record in records]

    @app.get("/standings/quarters/{quarter}", response_model=LeaderboardResponse)
    async def quarter_leaderboard(quarter: str) -> LeaderboardResponse:
        key = quarter.upper()
        if key not in QUARTER_NAMES:
            raise HTTPException(status_code=404, detail=f"Unknown quarter {quarter!r}")
        return _leaderboard(_result_or_404(), key)

    return app
