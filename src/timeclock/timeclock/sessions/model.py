from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Session:
    """A completed work period, created when its closing row is seen."""

    date: str
    time_in: str
    time_out: str
    duration_ms: int
    duration_string: str

    def as_row(self) -> list[str]:
        return [self.date, self.time_in, self.time_out, self.duration_string]


@dataclass(frozen=True)
class ReportSummary:
    """Recomputed on every request; never persisted."""

    sessions: tuple[Session, ...] = ()
    total_ms: int = 0
    daily_totals: tuple[tuple[str, int], ...] = ()
    # Set when there was nothing to read at all (empty log / no store).
    notice: Optional[str] = field(default=None)

    @property
    def is_empty(self) -> bool:
        return not self.sessions

    def to_dict(self) -> dict:
        return {
            "sessions": [s.as_row() for s in self.sessions],
            "totalMs": self.total_ms,
            "dailyTotals": [[day, ms] for day, ms in self.daily_totals],
            "notice": self.notice,
        }
