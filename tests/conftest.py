from datetime import date

import pytest

from mlbpool.config_loader import LeagueConfig
from mlbpool.models import ParticipantRoster, QuarterDefinition, TierPicks

# Stats API ids used throughout the fixtures.
NYY, BOS, TOR, LAD = 147, 111, 141, 119


def game(away: int, home: int, away_score=None, home_score=None, code: str = "F", game_pk: int = 1) -> dict:
    away_side: dict = {"team": {"id": away}}
    home_side: dict = {"team": {"id": home}}
    if away_score is not None:
        away_side["score"] = away_score
    if home_score is not None:
        home_side["score"] = home_score
    return {
        "gamePk": game_pk,
        "status": {"statusCode": code},
        "teams": {"away": away_side, "home": home_side},
    }


def team_record(team_id: int, name: str, wins: int, losses: int, pct: str) -> dict:
    return {
        "team": {"id": team_id, "name": name},
        "leagueRecord": {"wins": wins, "losses": losses, "pct": pct},
    }


@pytest.fixture
def schedule_payload() -> dict:
    return {
        "dates": [
            {
                "date": "2026-03-26",
                "games": [
                    game(NYY, BOS, 5, 2, game_pk=1),
                    game(TOR, LAD, 3, 4, game_pk=2),
                ],
            },
            {
                "date": "2026-03-27",
                "games": [
                    game(BOS, NYY, 6, 1, game_pk=3),
                    game(LAD, TOR, code="D", game_pk=4),
                ],
            },
        ]
    }


@pytest.fixture
def standings_payload() -> dict:
    return {
        "records": [
            {
                "teamRecords": [
                    team_record(NYY, "New York Yankees", 10, 5, ".667"),
                    team_record(BOS, "Boston Red Sox", 8, 7, ".533"),
                    team_record(TOR, "Toronto Blue Jays", 6, 9, ".400"),
                ]
            },
            {
                "teamRecords": [
                    team_record(LAD, "Los Angeles Dodgers", 12, 3, ".800"),
                ]
            },
        ]
    }


@pytest.fixture
def league() -> LeagueConfig:
    return LeagueConfig(
        players=[
            ParticipantRoster(
                id="p1",
                name="Alice",
                quarters={
                    "Q1": TierPicks(tier1="NYY", tier2="BOS"),
                    "Q2": TierPicks(tier1="LAD"),
                },
            ),
            ParticipantRoster(
                id="p2",
                name="Bob",
                quarters={"Q1": TierPicks(tier1="LAD", tier2="TOR", tier3="BOS")},
            ),
            ParticipantRoster(id="p3", name="Cara", quarters={}),
        ],
        quarters={
            "Q1": QuarterDefinition(name="Q1", start_date=date(2026, 3, 25), end_date=date(2026, 5, 10)),
            "Q2": QuarterDefinition(name="Q2", start_date=date(2026, 5, 11), end_date=date(2026, 6, 30)),
            "Q3": QuarterDefinition(name="Q3", start_date=date(2026, 7, 1), end_date=date(2026, 8, 15)),
            "Q4": QuarterDefinition(name="Q4", start_date=date(2026, 8, 16), end_date=date(2026, 9, 28)),
        },
    )
