"""File-backed storage for league configuration and computed standings."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from mlbpool.config_loader import LeagueConfig
from mlbpool.models import StandingsResult


logger = logging.getLogger(__name__)

PLAYERS_FILENAME = "players.json"
QUARTERS_FILENAME = "quarters.json"
STANDINGS_FILENAME = "standings.json"


class StandingsStore:
    """Reads ``players.json``/``quarters.json`` and replaces ``standings.json``."""

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir)

    def path_for(self, filename: str) -> Path:
        return self.data_dir / filename

    def read_json(self, filename: str) -> Any:
        return json.loads(self.path_for(filename).read_text(encoding="utf-8"))

    def write_json(self, filename: str, payload: Any) -> Path:
        target = self.path_for(filename)
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{filename}.", suffix=".tmp", dir=target.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        return target

    def load_league(self) -> LeagueConfig:
        return LeagueConfig.load(self.path_for(PLAYERS_FILENAME), self.path_for(QUARTERS_FILENAME))

    def read_result(self) -> Optional[StandingsResult]:
        path = self.path_for(STANDINGS_FILENAME)
        if not path.exists():
            return None
        return StandingsResult.model_validate(self.read_json(STANDINGS_FILENAME))

    def write_result(self, result: StandingsResult) -> Path:
        path = self.write_json(STANDINGS_FILENAME, result.to_payload())
        logger.info("Wrote standings to %s", path)
        return path
