"""Lightweight REST client for the mlbpool API."""

from __future__ import annotations

import argparse
import json

import httpx


def _print_leaderboard(payload: dict) -> None:
    state = "in progress" if payload["started"] else "not started"
    print(f"{payload['quarter']} {payload['season']} ({state}), updated {payload['last_updated']}")
    for entry in payload["entries"]:
        teams = " ".join(entry["teams"])
        print(
            f"{entry['rank']:>3}. {entry['name']:<24} {entry['combined_win_pct']:.3f} "
            f"{entry['combined_runs_per_game']:>5.2f}  {teams}"
        )


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the mlbpool REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--quarter", default="Q1", help="Quarter leaderboard to show (Q1-Q4)")
    parser.add_argument("--teams", action="store_true", help="List team records instead of a leaderboard")
    parser.add_argument("--raw", action="store_true", help="Dump the full standings JSON and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.raw:
            resp = client.get("/standings")
        elif args.teams:
            resp = client.get("/standings/teams")
        else:
            resp = client.get(f"/standings/quarters/{args.quarter}")
        if resp.status_code == 404:
            raise SystemExit(resp.json().get("detail", "not found"))
        resp.raise_for_status()

        if args.raw or args.teams:
            print(json.dumps(resp.json(), indent=2))
            return
        _print_leaderboard(resp.json())


if __name__ == "__main__":
    main()
