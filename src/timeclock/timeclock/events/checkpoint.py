"""Locate the "last reported" checkpoint in an event log.

The scan is an explicit backward linear pass: the most recent ``REPORTED``
row wins. Keep it that way rather than indexing, since an index would have to
reproduce the same last-match-wins rule.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.constants import EPOCH
from ..core.enums import LogAction
from .model import LogEvent


def last_reported_timestamp(events: Sequence[LogEvent]) -> datetime:
    """Timestamp of the newest REPORTED row, else of the first dated row, else EPOCH."""
    for event in reversed(events):
        if event.action == LogAction.REPORTED.value and event.has_instant:
            return event.timestamp

    for event in events:
        if event.has_instant:
            return event.timestamp

    return EPOCH


def events_since_checkpoint(events: Sequence[LogEvent]) -> list[LogEvent]:
    """Rows stored after the newest REPORTED row (by position, not by time)."""
    for index in range(len(events) - 1, -1, -1):
        if events[index].action == LogAction.REPORTED.value:
            return list(events[index + 1:])
    return list(events)


def latest_instant(events: Sequence[LogEvent]) -> Optional[datetime]:
    """Newest valid timestamp anywhere in the log, or None when no row is dated."""
    instants = [e.timestamp for e in events if e.has_instant]
    return max(instants) if instants else None
