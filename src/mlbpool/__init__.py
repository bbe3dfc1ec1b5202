"""Quarterly MLB team-pool standings."""

__version__ = "0.1.0"
