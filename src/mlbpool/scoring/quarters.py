"""Copy current team stats into each quarter that has started."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Dict, Mapping

from mlbpool.models import QUARTER_NAMES, QuarterDefinition, QuarterTeamStats, TeamRecord


logger = logging.getLogger(__name__)

QuarterSnapshot = Dict[str, Dict[str, QuarterTeamStats]]


def _as_date(value: date | datetime | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip()[:10])


def snapshot_quarters(
    teams: Mapping[str, TeamRecord],
    quarters: Mapping[str, QuarterDefinition],
    reference_date: date | datetime | str,
) -> QuarterSnapshot:
    """Return ``{quarter: {abbreviation: QuarterTeamStats}}`` as of ``reference_date``.

    Every quarter name is present in the result. A quarter populates once
    ``reference_date`` reaches its start date (inclusive) and otherwise stays
    empty. The copied figures are the season-to-date totals, not totals for
    games inside the quarter's own window.
    """

    as_of = _as_date(reference_date)
    snapshot: QuarterSnapshot = {name: {} for name in QUARTER_NAMES}
    for name, definition in quarters.items():
        if not definition.has_started(as_of):
            logger.debug("%s starts %s; leaving it empty", name, definition.start_date)
            continue
        snapshot[name] = {abbrev: QuarterTeamStats.from_record(record) for abbrev, record in teams.items()}
    return snapshot
