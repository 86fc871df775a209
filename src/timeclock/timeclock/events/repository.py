from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import LogEvent


class EventLogRepository(Protocol):
    """Append-only log read back in insertion order (never re-sorted)."""

    def append_event(self, *, timestamp: datetime, action: str, status: str = "") -> int:
        raise NotImplementedError

    def read_all_events(self) -> Sequence[LogEvent]:
        raise NotImplementedError


class SyncedLogRepository(Protocol):
    """Snapshot of raw rows pushed by the client-side store."""

    def replace_all(self, events: Sequence[LogEvent]) -> int:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def read_all_events(self) -> Sequence[LogEvent]:
        raise NotImplementedError
