import logging
from itertools import permutations

from mlbpool.config import TeamDirectory, get_directory
from mlbpool.ingest import aggregate_runs, games_from_schedule
from mlbpool.models import GameResult, TeamRunStats

from tests.conftest import BOS, LAD, NYY, TOR, game


def _games(*raw: dict) -> list[GameResult]:
    return games_from_schedule({"dates": [{"games": list(raw)}]})


def test_single_final_game_credits_both_teams():
    totals = aggregate_runs(_games(game(NYY, BOS, 5, 2)), get_directory())

    assert totals["NYY"] == TeamRunStats(runs_scored=5, runs_allowed=2, games_played=1)
    assert totals["BOS"] == TeamRunStats(runs_scored=2, runs_allowed=5, games_played=1)


def test_schedule_fixture_totals(schedule_payload):
    totals = aggregate_runs(games_from_schedule(schedule_payload), get_directory())

    assert totals["NYY"] == TeamRunStats(runs_scored=6, runs_allowed=8, games_played=2)
    assert totals["BOS"] == TeamRunStats(runs_scored=8, runs_allowed=6, games_played=2)
    assert totals["TOR"] == TeamRunStats(runs_scored=3, runs_allowed=4, games_played=1)
    assert totals["LAD"] == TeamRunStats(runs_scored=4, runs_allowed=3, games_played=1)


def test_runs_scored_equals_runs_allowed_across_league(schedule_payload):
    totals = aggregate_runs(games_from_schedule(schedule_payload), get_directory())

    assert sum(s.runs_scored for s in totals.values()) == sum(s.runs_allowed for s in totals.values())


def test_order_of_games_does_not_change_totals():
    games = _games(
        game(NYY, BOS, 5, 2),
        game(BOS, TOR, 7, 7),
        game(TOR, NYY, 0, 11),
        game(LAD, BOS, 3, 1),
    )
    directory = get_directory()
    expected = aggregate_runs(games, directory)

    for ordering in permutations(games):
        assert aggregate_runs(ordering, directory) == expected


def test_non_final_games_contribute_nothing():
    games = _games(
        game(NYY, BOS, 3, 1, code="I"),
        game(NYY, BOS, 0, 0, code="S"),
        game(TOR, LAD, code="D"),
    )
    assert all(not g.is_final for g in games)
    assert aggregate_runs(games, get_directory()) == {}


def test_missing_scores_count_as_zero():
    totals = aggregate_runs(_games(game(NYY, BOS)), get_directory())

    assert totals["NYY"] == TeamRunStats(runs_scored=0, runs_allowed=0, games_played=1)
    assert totals["BOS"].games_played == 1


def test_games_with_unlisted_team_are_skipped():
    totals = aggregate_runs(_games(game(NYY, 940, 4, 1), game(NYY, BOS, 2, 3)), get_directory())

    assert totals["NYY"] == TeamRunStats(runs_scored=2, runs_allowed=3, games_played=1)
    assert set(totals) == {"NYY", "BOS"}


def test_games_played_matches_counted_appearances(schedule_payload):
    games = games_from_schedule(schedule_payload)
    directory = get_directory()
    totals = aggregate_runs(games, directory)

    for abbrev, stats in totals.items():
        appearances = sum(
            1
            for g in games
            if g.is_final and abbrev in (directory.resolve(g.away_team_id), directory.resolve(g.home_team_id))
        )
        assert stats.games_played == appearances


def test_injected_directory_is_used():
    directory = TeamDirectory(league="TEST", teams={NYY: "YANKS", BOS: "SOX"})
    totals = aggregate_runs(_games(game(NYY, BOS, 5, 2)), directory)
    assert set(totals) == {"YANKS", "SOX"}


def test_schedule_without_dates_is_empty(caplog):
    with caplog.at_level(logging.WARNING):
        assert games_from_schedule({"totalGames": 0}) == []
    assert "no dates" in caplog.text
    assert aggregate_runs([], get_directory()) == {}


def test_malformed_games_are_skipped(caplog):
    payload = {
        "dates": [
            {"games": [{"gamePk": 9, "status": {"statusCode": "F"}}, game(NYY, BOS, 1, 0)]},
            {"date": "2026-04-02"},
        ]
    }
    with caplog.at_level(logging.WARNING):
        games = games_from_schedule(payload)
    assert len(games) == 1
    assert "Skipping malformed game 9" in caplog.text


def test_status_codes_map_to_completion_status():
    games = _games(game(NYY, BOS, 1, 0, code="F"), game(NYY, BOS, 1, 0, code="O"), game(NYY, BOS, code="ZZ"))
    assert [g.completion_status for g in games] == ["final", "game_over", "unknown"]


def test_only_exact_final_code_counts():
    games = _games(game(NYY, BOS, 4, 2, code="f"), game(NYY, BOS, 4, 2, code=" F"))
    assert [g.completion_status for g in games] == ["unknown", "unknown"]
    assert aggregate_runs(games, get_directory()) == {}
