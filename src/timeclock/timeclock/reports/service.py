from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Optional, Sequence

from ..common.datetime_utils import format_datetime, now_utc
from ..core.constants import NO_LOG_DATA, NO_SYNCED_DATA
from ..core.enums import LogSource
from ..events.checkpoint import events_since_checkpoint, last_reported_timestamp
from ..events.model import LogEvent
from ..events.repository import EventLogRepository, SyncedLogRepository
from ..events.window import filter_window
from ..sessions.model import ReportSummary
from ..sessions.reconstructor import SessionReconstructor
from ..sessions.vocabularies.factory import VocabularyFactory
from .model import RenderedEmail, ReportingPeriod
from .renderer import render_grid, render_preview_email


class ReportService:
    """Use case: build session reports from the local log or the synced snapshot."""

    def __init__(
        self,
        events: EventLogRepository,
        synced: SyncedLogRepository,
        *,
        tz: tzinfo,
        preview_recipients: Sequence[str] = (),
        vocabularies: Optional[VocabularyFactory] = None,
    ):
        self._events = events
        self._synced = synced
        self._tz = tz
        self._preview_recipients = tuple(preview_recipients)
        self._vocabularies = vocabularies or VocabularyFactory()

    def _reconstructor(self, source: LogSource) -> SessionReconstructor:
        return SessionReconstructor(self._vocabularies.for_source(source), self._tz)

    def summarize(self, events: Sequence[LogEvent], source: LogSource = LogSource.LOCAL) -> ReportSummary:
        return self._reconstructor(source).reconstruct(events)

    def build_since_checkpoint(self, pending: Sequence[LogEvent] = ()) -> ReportSummary:
        """Sessions logged after the newest REPORTED marker.

        ``pending`` rows are treated as already appended, so a workflow can see
        the report it is about to close before writing anything.
        """
        events = list(self._events.read_all_events()) + list(pending)
        if not events:
            return ReportSummary(notice=NO_LOG_DATA)
        return self.summarize(events_since_checkpoint(events))

    def reporting_period(self, *, now: Optional[datetime] = None) -> ReportingPeriod:
        start = last_reported_timestamp(self._events.read_all_events())
        end = now or now_utc()
        return ReportingPeriod(
            start=start,
            end=end,
            start_text=format_datetime(start, self._tz),
            end_text=format_datetime(end, self._tz),
        )

    def preview_email(self, *, now: Optional[datetime] = None) -> RenderedEmail:
        """Report email as it would be sent now, without logging anything."""
        summary = self.build_since_checkpoint()
        period = self.reporting_period(now=now)
        return render_preview_email(summary, period, self._preview_recipients)

    def build_synced_summary(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        *,
        now: Optional[datetime] = None,
    ) -> Optional[ReportSummary]:
        """Synced CLOCK_IN/CLOCK_OUT sessions within ``[start, end]``; None when nothing was synced."""
        events = self._synced.read_all_events()
        if not events:
            return None
        return self.summarize(filter_window(events, start, end, now=now), LogSource.SYNCED)

    def build_synced_grid(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        *,
        now: Optional[datetime] = None,
    ) -> list[list[str]]:
        summary = self.build_synced_summary(start, end, now=now)
        if summary is None:
            return [[NO_SYNCED_DATA]]
        return render_grid(summary)
