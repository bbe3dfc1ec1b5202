"""Load pool participants and quarter windows from their JSON files."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping

from mlbpool.models import ParticipantRoster, QuarterDefinition


@dataclass
class LeagueConfig:
    players: List[ParticipantRoster]
    quarters: Dict[str, QuarterDefinition] = field(default_factory=dict)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for player in self.players:
            if player.id in seen:
                raise ValueError(f"Duplicate participant id {player.id!r}")
            seen.add(player.id)

    @classmethod
    def from_payloads(cls, players: Mapping[str, Any], quarters: Mapping[str, Any]) -> "LeagueConfig":
        if not isinstance(players, Mapping):
            raise ValueError(f"players file must hold an object, got {type(players).__name__}")
        if not isinstance(quarters, Mapping):
            raise ValueError(f"quarters file must hold an object, got {type(quarters).__name__}")

        raw_players = players.get("players", [])
        if not isinstance(raw_players, list):
            raise ValueError(f"'players' must be a list, got {type(raw_players).__name__}")
        raw_quarters = quarters.get("quarters", {})
        if not isinstance(raw_quarters, Mapping):
            raise ValueError(f"'quarters' must be an object, got {type(raw_quarters).__name__}")

        roster = [ParticipantRoster.model_validate(item) for item in raw_players]
        windows: Dict[str, QuarterDefinition] = {}
        for name, window in raw_quarters.items():
            if not isinstance(window, Mapping):
                raise ValueError(f"quarter {name!r} must be an object, got {type(window).__name__}")
            windows[name] = QuarterDefinition.model_validate({**window, "name": name})
        return cls(players=roster, quarters=windows)

    @classmethod
    def load(cls, players_path: Path, quarters_path: Path) -> "LeagueConfig":
        players = json.loads(players_path.read_text(encoding="utf-8"))
        quarters = json.loads(quarters_path.read_text(encoding="utf-8"))
        return cls.from_payloads(players, quarters)

    def to_payloads(self) -> tuple[dict, dict]:
        players = {"players": [player.to_payload() for player in self.players]}
        quarters = {
            "quarters": {
                name: window.model_dump(mode="json", by_alias=True, exclude={"name"})
                for name, window in self.quarters.items()
            }
        }
        return players, quarters

    def save(self, players_path: Path, quarters_path: Path) -> None:
        players, quarters = self.to_payloads()
        players_path.write_text(json.dumps(players, indent=2), encoding="utf-8")
        quarters_path.write_text(json.dumps(quarters, indent=2), encoding="utf-8")


def load_league(players_path: Path, quarters_path: Path) -> LeagueConfig:
    return LeagueConfig.load(players_path, quarters_path)
