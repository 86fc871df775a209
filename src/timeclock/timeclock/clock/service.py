from __future__ import annotations

import logging
import threading
from datetime import datetime, tzinfo
from typing import Optional, Sequence, Union

from ..common.datetime_utils import ensure_aware, format_datetime, now_utc, parse_instant
from ..core.enums import LogAction
from ..core.exceptions import MailDeliveryError, ValidationError
from ..events.checkpoint import latest_instant
from ..events.model import LogEvent
from ..events.repository import EventLogRepository
from ..notifications.mailer import Mailer
from ..reports.duration import format_duration
from ..reports.model import RenderedEmail, ReportingPeriod
from ..reports.renderer import render_report_email
from ..reports.service import ReportService
from ..sessions.model import ReportSummary
from .model import ClockState, WorkflowResult
from .repository import ClockStateRepository

logger = logging.getLogger(__name__)

# Serializes every workflow that appends to the event log.
_LOG_LOCK = threading.Lock()


class ClockService:
    """Use cases that write to the event log: clock in/out, breaks, reporting."""

    def __init__(
        self,
        events: EventLogRepository,
        state: ClockStateRepository,
        reports: ReportService,
        mailer: Mailer,
        *,
        tz: tzinfo,
        recipients: Sequence[str] = (),
        lock: Optional[threading.Lock] = None,
    ):
        self._events = events
        self._state = state
        self._reports = reports
        self._mailer = mailer
        self._tz = tz
        self._recipients = tuple(recipients)
        self._lock = lock or _LOG_LOCK

    def status(self) -> ClockState:
        return self._state.get_state()

    def _append(self, when: datetime, action: LogAction, status: str = "") -> None:
        self._events.append_event(timestamp=when, action=action.value, status=status)
        logger.info("Logged %s at %s", action.value, format_datetime(when, self._tz))

    def _parse_when(self, when: Union[datetime, str, None]) -> datetime:
        if when is None:
            return now_utc()
        if isinstance(when, datetime):
            return ensure_aware(when, self._tz)
        parsed = parse_instant(str(when), self._tz)
        if parsed is None:
            raise ValidationError(f"Invalid date/time: {when!r}")
        return parsed

    def _require_chronological(self, when: datetime) -> None:
        """Rows must not be stamped before anything already in the log."""
        latest = latest_instant(self._events.read_all_events())
        if latest is not None and when < latest:
            raise ValidationError(
                f"Time {format_datetime(when, self._tz)} is earlier than the last logged entry "
                f"({format_datetime(latest, self._tz)})."
            )

    def record_time_log(self, when: Union[datetime, str, None] = None) -> WorkflowResult:
        """Toggle the clock: IN when clocked out, OUT (ending any break) when clocked in."""
        logged_at = self._parse_when(when)
        with self._lock:
            self._require_chronological(logged_at)
            state = self._state.get_state()
            if state.is_clocked_in:
                action, new_state = LogAction.OUT, state.clocked_out()
            else:
                action, new_state = LogAction.IN, state.clocked_in()

            self._append(logged_at, action)
            self._state.save_state(new_state)

        return WorkflowResult(
            title=f"Successfully Clocked {action.value}!",
            message=f"Time recorded: {format_datetime(logged_at, self._tz)}",
            action=action.value,
        )

    def toggle_break(self, *, now: Optional[datetime] = None) -> WorkflowResult:
        now = now or now_utc()
        with self._lock:
            state = self._state.get_state()
            if not state.is_clocked_in:
                raise ValidationError("You must be Clocked IN to start or resume work.")
            self._require_chronological(now)

            starting = not state.is_on_break
            action = LogAction.BREAK_OUT if starting else LogAction.BREAK_IN
            self._append(now, action)
            self._state.save_state(state.with_break(starting))

        return WorkflowResult(
            title="Break Started" if starting else "Work Resumed",
            message=f"{action.value} logged at {format_datetime(now, self._tz)}.",
            action=action.value,
        )

    def _prepare_report(
        self, now: datetime, pending: Sequence[LogEvent] = ()
    ) -> tuple[ReportSummary, ReportingPeriod, str]:
        """Report for the window ending at ``now``; writes nothing."""
        summary = self._reports.build_since_checkpoint(pending)
        period = self._reports.reporting_period(now=now)
        return summary, period, format_duration(summary.total_ms)

    def mark_hours_reported(self, *, now: Optional[datetime] = None) -> WorkflowResult:
        """Close the reporting window without sending mail (only while clocked out)."""
        now = now or now_utc()
        with self._lock:
            state = self._state.get_state()
            if state.is_clocked_in:
                raise ValidationError("Please Clock OUT before marking hours as reported.")
            self._require_chronological(now)

            _, period, total = self._prepare_report(now)
            self._state.save_state(state.clocked_out())
            self._append(now, LogAction.REPORTED, period.status_line(total))

        return WorkflowResult(
            title="Hours Reported",
            message=(
                f"A 'REPORTED' marker was logged. The reporting period logged was from "
                f"{period.start_text} to {period.end_text}.\nTotal Work Time: {total}"
            ),
            action=LogAction.REPORTED.value,
        )

    def clock_out_and_report(self, message: Optional[str] = None, *, now: Optional[datetime] = None) -> WorkflowResult:
        """Log OUT and REPORTED, then email the report for the closed window.

        The report and the email are built before anything is written, so a
        failure there leaves the log and the clock state as they were. Mail
        delivery happens last: both rows are already written when it fails,
        and the failure is re-raised so the caller can tell the user.
        """
        now = now or now_utc()
        with self._lock:
            state = self._state.get_state()
            if not state.is_clocked_in:
                raise ValidationError("Action cancelled: You were already Clocked OUT.")
            self._require_chronological(now)

            clock_out = LogEvent(timestamp=now, action=LogAction.OUT.value)
            summary, period, total = self._prepare_report(now, pending=[clock_out])
            email = render_report_email(summary, period, self._recipients, message=message)

            self._append(now, LogAction.OUT)
            self._state.save_state(state.clocked_out())
            self._append(now, LogAction.REPORTED, period.status_line(total))

        self._send(email)

        return WorkflowResult(
            title="Report Sent & Clocked Out",
            message=(
                f"Successfully Clocked OUT, marked hours as Reported, and sent the email to "
                f"{', '.join(email.recipients)}.\n\nPeriod: {period.start_text} - {period.end_text}\n"
                f"Total Work Time: {total}"
            ),
            action=LogAction.OUT.value,
        )

    def _send(self, email: RenderedEmail) -> None:
        try:
            self._mailer.send(email)
        except MailDeliveryError:
            logger.exception("Report email could not be delivered")
            raise

    def preview_report_email(self, *, now: Optional[datetime] = None) -> RenderedEmail:
        return self._reports.preview_email(now=now)
