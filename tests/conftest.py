from __future__ import annotations

import os
import threading
from datetime import datetime, timezone
from typing import Optional

import pytest

from src.timeclock.timeclock.clock.model import ClockState
from src.timeclock.timeclock.clock.service import ClockService
from src.timeclock.timeclock.common.datetime_utils import parse_instant
from src.timeclock.timeclock.container import Container
from src.timeclock.timeclock.events.model import LogEvent
from src.timeclock.timeclock.reports.service import ReportService
from src.timeclock.timeclock.sync.service import SyncService

os.environ.setdefault("APP_ENV", "testing")


def ts(text: str) -> datetime:
    """ISO text -> aware datetime (UTC when no offset is given)."""
    value = parse_instant(text, timezone.utc)
    assert value is not None, text
    return value


def ev(text: str, action: str, status: str = "") -> LogEvent:
    return LogEvent(timestamp=ts(text), action=action, status=status)


class InMemoryEventLog:
    def __init__(self, events: Optional[list[LogEvent]] = None):
        self.events: list[LogEvent] = list(events or [])

    def append_event(self, *, timestamp: datetime, action: str, status: str = "") -> int:
        self.events.append(LogEvent(timestamp=timestamp, action=action, status=status))
        return len(self.events)

    def read_all_events(self):
        return list(self.events)


class InMemorySyncedLog:
    def __init__(self, events: Optional[list[LogEvent]] = None):
        self.events: list[LogEvent] = list(events or [])

    def replace_all(self, events) -> int:
        self.events = list(events)
        return len(self.events)

    def clear(self) -> None:
        self.events = []

    def read_all_events(self):
        return list(self.events)


class InMemoryClockState:
    def __init__(self, state: Optional[ClockState] = None):
        self.state = state or ClockState()

    def get_state(self) -> ClockState:
        return self.state

    def save_state(self, state: ClockState) -> None:
        self.state = state


class InMemoryFinalReports:
    def __init__(self):
        self.reports = []

    def append_report(self, report) -> int:
        self.reports.append(report)
        return len(self.reports)


class RecordingMailer:
    def __init__(self, error: Optional[Exception] = None):
        self.sent = []
        self._error = error

    def send(self, email) -> None:
        if self._error is not None:
            raise self._error
        self.sent.append(email)


@pytest.fixture
def fixed_now() -> datetime:
    return ts("2024-06-01T18:00:00Z")


@pytest.fixture
def event_log() -> InMemoryEventLog:
    return InMemoryEventLog()


@pytest.fixture
def synced_log() -> InMemorySyncedLog:
    return InMemorySyncedLog()


@pytest.fixture
def clock_state() -> InMemoryClockState:
    return InMemoryClockState()


@pytest.fixture
def final_reports() -> InMemoryFinalReports:
    return InMemoryFinalReports()


@pytest.fixture
def mailer() -> RecordingMailer:
    return RecordingMailer()


@pytest.fixture
def report_service(event_log, synced_log) -> ReportService:
    return ReportService(event_log, synced_log, tz=timezone.utc, preview_recipients=["preview@example.com"])


@pytest.fixture
def clock_service(event_log, clock_state, report_service, mailer) -> ClockService:
    return ClockService(
        event_log,
        clock_state,
        report_service,
        mailer,
        tz=timezone.utc,
        recipients=["boss@example.com", "me@example.com"],
        lock=threading.Lock(),
    )


@pytest.fixture
def sync_service(synced_log, final_reports, report_service) -> SyncService:
    return SyncService(synced_log, final_reports, report_service, tz=timezone.utc)


@pytest.fixture
def container(event_log, synced_log, clock_state, final_reports, mailer, report_service, clock_service, sync_service):
    return Container(
        conn=None,
        events_repo=event_log,
        synced_repo=synced_log,
        state_repo=clock_state,
        final_reports_repo=final_reports,
        mailer=mailer,
        report_service=report_service,
        clock_service=clock_service,
        sync_service=sync_service,
    )


@pytest.fixture
def client(container):
    from src.timeclock.timeclock.main import create_app

    app = create_app(container)
    return app.test_client()
