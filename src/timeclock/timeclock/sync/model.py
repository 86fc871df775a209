from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FinalReport:
    """Totals aggregated by the client and pushed through the gateway."""

    report_date: str
    user_key: str
    work_hours: str
    break_hours: str
    cutoff_timestamp: str
