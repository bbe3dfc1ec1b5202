"""Team identity tables mapping Stats API ids to club abbreviations."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple


@dataclass(frozen=True)
class TeamDirectory:
    league: str
    teams: Mapping[int, str]
    _by_abbreviation: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        reverse: Dict[str, int] = {}
        for team_id, abbreviation in self.teams.items():
            if abbreviation in reverse:
                raise ValueError(
                    f"Abbreviation {abbreviation!r} assigned to both {reverse[abbreviation]} and {team_id}"
                )
            reverse[abbreviation] = team_id
        object.__setattr__(self, "teams", MappingProxyType(dict(self.teams)))
        object.__setattr__(self, "_by_abbreviation", MappingProxyType(reverse))

    def resolve(self, team_id: object) -> Optional[str]:
        """Return the abbreviation for ``team_id`` or ``None`` when it is not listed."""

        try:
            key = int(team_id)  # type: ignore[call-overload]
        except (TypeError, ValueError):
            return None
        return self.teams.get(key)

    def team_id(self, abbreviation: str) -> Optional[int]:
        return self._by_abbreviation.get(abbreviation.upper())

    def __contains__(self, abbreviation: object) -> bool:
        return isinstance(abbreviation, str) and abbreviation.upper() in self._by_abbreviation

    @property
    def abbreviations(self) -> Tuple[str, ...]:
        return tuple(self._by_abbreviation)


MLB_TEAMS: Mapping[int, str] = {
    108: "LAA", 109: "ARI", 110: "BAL", 111: "BOS", 112: "CHC",
    113: "CIN", 114: "CLE", 115: "COL", 116: "DET", 117: "HOU",
    118: "KCR", 119: "LAD", 120: "WSN", 121: "NYM", 133: "OAK",
    134: "PIT", 135: "SDP", 136: "SEA", 137: "SFG", 138: "STL",
    139: "TBR", 140: "TEX", 141: "TOR", 142: "MIN", 143: "PHI",
    144: "ATL", 145: "CHW", 146: "MIA", 147: "NYY", 158: "MIL",
}


_DIRECTORIES: Dict[str, TeamDirectory] = {
    "MLB": TeamDirectory(league="MLB", teams=MLB_TEAMS),
}


def iter_directories() -> Iterable[TeamDirectory]:
    """Return an iterator of all configured team directories."""

    return _DIRECTORIES.values()


def get_directory(league: str = "MLB") -> TeamDirectory:
    """Fetch the directory for a league, raising KeyError if missing."""

    key = league.upper()
    if key not in _DIRECTORIES:
        raise KeyError(f"No team directory configured for league={league!r}")
    return _DIRECTORIES[key]
