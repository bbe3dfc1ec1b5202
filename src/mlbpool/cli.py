"""Command-line entry point that syncs pool standings from the MLB Stats API."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from mlbpool.client import StatsApiClient, StatsApiError
from mlbpool.config import Settings
from mlbpool.models import StandingsResult
from mlbpool.persistence import StandingsStore
from mlbpool.pipeline import PipelineError, build_standings


logger = logging.getLogger(__name__)


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from exc


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sync MLB pool standings")
    parser.add_argument("--data-dir", type=Path, default=None, help="Directory holding players/quarters/standings JSON")
    parser.add_argument("--season", type=int, default=None, help="Season year to fetch")
    parser.add_argument("--season-start", type=_parse_date, default=None, help="First day of schedule to count")
    parser.add_argument(
        "--date",
        dest="reference_date",
        type=_parse_date,
        default=None,
        help="Reference date for quarter snapshots (defaults to today, UTC)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Print the standings JSON instead of writing it")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser.parse_args(argv)


def run_sync(
    settings: Settings,
    store: StandingsStore,
    client: StatsApiClient,
    *,
    reference_date: date,
) -> StandingsResult:
    league = store.load_league()
    standings_payload = client.fetch_standings(settings.season)
    schedule_payload = client.fetch_schedule(settings.season_start, reference_date)
    return build_standings(
        standings_payload,
        schedule_payload,
        league,
        reference_date,
        season=settings.season,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = Settings.from_env()
    overrides = {
        key: value
        for key, value in (
            ("data_dir", args.data_dir),
            ("season", args.season),
            ("season_start", args.season_start),
        )
        if value is not None
    }
    if overrides:
        settings = replace(settings, **overrides)
    reference_date = args.reference_date or datetime.now(timezone.utc).date()

    print("Starting MLB data sync...")
    store = StandingsStore(settings.data_dir)
    try:
        with StatsApiClient(settings.api_base, timeout=settings.http_timeout) as client:
            result = run_sync(settings, store, client, reference_date=reference_date)
        if args.dry_run:
            print(json.dumps(result.to_payload(), indent=2))
        else:
            store.write_result(result)
    except (StatsApiError, PipelineError, ValidationError, ValueError, OSError) as exc:
        logger.error("Sync failed: %s", exc)
        raise SystemExit(1) from exc

    print("Sync completed successfully!")
    print(f"Updated {len(result.teams)} teams")
    print(f"Last updated: {result.last_updated.isoformat()}")


if __name__ == "__main__":
    main()
