from __future__ import annotations

from typing import Optional, Sequence

from ..sessions.model import ReportSummary, Session
from .duration import parse_duration


def aggregate_daily(sessions: Sequence[Session]) -> list[tuple[str, int]]:
    """Sum session durations per ``date`` key, ascending by key.

    Keys are ``YYYY-MM-DD`` strings, so ascending string order is calendar order.
    Durations are read back from ``duration_string``; the formatter floors to
    whole seconds, so daily totals are whole seconds as well.
    """
    totals: dict[str, int] = {}
    for s in sessions:
        totals[s.date] = totals.get(s.date, 0) + parse_duration(s.duration_string)
    return sorted(totals.items(), key=lambda item: item[0])


def build_summary(
    sessions: Sequence[Session],
    total_ms: int,
    *,
    notice: Optional[str] = None,
) -> ReportSummary:
    return ReportSummary(
        sessions=tuple(sessions),
        total_ms=int(total_ms),
        daily_totals=tuple(aggregate_daily(sessions)),
        notice=notice,
    )
