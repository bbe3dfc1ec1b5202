"""Runtime settings resolved from ``MLBPOOL_*`` environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path


logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://statsapi.mlb.com/api/v1"
DEFAULT_SEASON = 2026
DEFAULT_SEASON_START = date(2026, 3, 25)
DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_DATA_DIR = Path("data")

_SEASON_ENV = "MLBPOOL_SEASON"
_SEASON_START_ENV = "MLBPOOL_SEASON_START"
_API_BASE_ENV = "MLBPOOL_API_BASE"
_HTTP_TIMEOUT_ENV = "MLBPOOL_HTTP_TIMEOUT"
DATA_DIR_ENV = "MLBPOOL_DATA_DIR"


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _env_date(name: str, default: date) -> date:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        logger.warning("Invalid date for %s: %s; using default %s", name, raw, default.isoformat())
        return default


@dataclass(frozen=True)
class Settings:
    season: int = DEFAULT_SEASON
    season_start: date = DEFAULT_SEASON_START
    api_base: str = DEFAULT_API_BASE
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    data_dir: Path = DEFAULT_DATA_DIR

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            season=_env_int(_SEASON_ENV, DEFAULT_SEASON, min_value=1876),
            season_start=_env_date(_SEASON_START_ENV, DEFAULT_SEASON_START),
            api_base=os.getenv(_API_BASE_ENV) or DEFAULT_API_BASE,
            http_timeout=_env_float(_HTTP_TIMEOUT_ENV, DEFAULT_HTTP_TIMEOUT, clamp_min=1.0),
            data_dir=Path(os.getenv(DATA_DIR_ENV) or DEFAULT_DATA_DIR),
        )
