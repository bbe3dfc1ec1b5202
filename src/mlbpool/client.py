"""Thin httpx wrapper around the MLB Stats API endpoints used by the sync."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, Optional

import httpx

from mlbpool.config.settings import DEFAULT_API_BASE, DEFAULT_HTTP_TIMEOUT


logger = logging.getLogger(__name__)

AMERICAN_LEAGUE_ID = 103
NATIONAL_LEAGUE_ID = 104
MLB_SPORT_ID = 1


class StatsApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class StatsApiClient:
    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE,
        *,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def __enter__(self) -> "StatsApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get_json(self, path: str, params: dict[str, Any]) -> dict:
        try:
            resp = self._client.get(path, params=params)
        except httpx.HTTPError as exc:
            raise StatsApiError(f"Request to {path} failed: {exc}") from exc
        if resp.status_code >= 400:
            raise StatsApiError(
                f"MLB API responded with status: {resp.status_code}",
                status_code=resp.status_code,
            )
        try:
            payload = resp.json()
        except ValueError as exc:
            raise StatsApiError(f"MLB API returned invalid JSON for {path}") from exc
        if not isinstance(payload, dict):
            raise StatsApiError(f"MLB API returned unexpected payload for {path}")
        return payload

    def fetch_standings(
        self,
        season: int,
        league_ids: Iterable[int] = (AMERICAN_LEAGUE_ID, NATIONAL_LEAGUE_ID),
    ) -> dict:
        params = {"leagueId": ",".join(str(league_id) for league_id in league_ids), "season": season}
        logger.info("Fetching standings for season %s", season)
        return self._get_json("/standings", params)

    def fetch_schedule(self, start_date: date, end_date: date, *, sport_id: int = MLB_SPORT_ID) -> dict:
        params = {
            "sportId": sport_id,
            "startDate": start_date.isoformat(),
            "endDate": end_date.isoformat(),
        }
        logger.info("Fetching schedule from %s to %s", start_date, end_date)
        return self._get_json("/schedule", params)
