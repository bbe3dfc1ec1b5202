"""Quarter snapshots and participant scoring."""

from .quarters import QuarterSnapshot, snapshot_quarters
from .service import ScoredEntry, rank_scores, score_participants, score_quarter

__all__ = [
    "QuarterSnapshot",
    "ScoredEntry",
    "rank_scores",
    "score_participants",
    "score_quarter",
    "snapshot_quarters",
]
