"""Configuration helpers for team identity and runtime settings."""

from .settings import Settings
from .teams import MLB_TEAMS, TeamDirectory, get_directory, iter_directories

__all__ = [
    "MLB_TEAMS",
    "Settings",
    "TeamDirectory",
    "get_directory",
    "iter_directories",
]
