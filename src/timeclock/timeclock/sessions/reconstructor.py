"""Rebuild completed work sessions from an ordered event log.

One state machine serves both log vocabularies. Its state is two instants and
a counter, all local to a single ``reconstruct`` call:

* ``opened_at``     start of the open session (None while idle)
* ``working_since`` start of the current working window (None while paused)
* ``accrued_ms``    work already banked for the open session

Rows are consumed in storage order. Rows without a usable timestamp are skipped
and leave the state untouched. A close with nothing open is dropped, and a
session still open when the rows run out is discarded, so gaps in real-world
logging (a forgotten clock-out, say) never produce a partial session.
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Iterable, Optional

from ..common.datetime_utils import elapsed_ms, format_clock, format_date
from ..core.enums import Transition
from ..events.model import LogEvent
from ..reports.aggregator import build_summary
from ..reports.duration import format_duration
from .model import ReportSummary, Session
from .vocabularies.base import SessionVocabulary

logger = logging.getLogger(__name__)


class SessionReconstructor:
    def __init__(self, vocabulary: SessionVocabulary, tz: tzinfo):
        self._vocabulary = vocabulary
        self._tz = tz

    def reconstruct(self, events: Iterable[LogEvent]) -> ReportSummary:
        sessions: list[Session] = []
        total_ms = 0

        opened_at: Optional[datetime] = None
        working_since: Optional[datetime] = None
        accrued_ms = 0

        for event in events:
            if not event.has_instant:
                logger.debug("Skipping %s row with unusable timestamp %r", event.action, event.timestamp)
                continue

            transition = self._vocabulary.classify(event.action)
            ts = event.timestamp

            if transition == Transition.OPEN:
                # An unterminated earlier open is overwritten, never emitted.
                opened_at = ts
                working_since = ts
                accrued_ms = 0

            elif transition == Transition.PAUSE:
                if opened_at is not None and working_since is not None:
                    accrued_ms += elapsed_ms(working_since, ts)
                    working_since = None

            elif transition == Transition.RESUME:
                if opened_at is not None:
                    working_since = ts

            elif transition == Transition.CLOSE:
                if opened_at is not None:
                    if working_since is not None:
                        accrued_ms += elapsed_ms(working_since, ts)
                    sessions.append(self._to_session(opened_at, ts, accrued_ms))
                    total_ms += accrued_ms
                else:
                    logger.debug("Dropping %s at %s with no open session", event.action, ts)

                opened_at = None
                working_since = None
                accrued_ms = 0

        if opened_at is not None:
            logger.debug("Discarding session opened at %s that was never closed", opened_at)

        logger.debug("Rebuilt %d session(s) from the %s log", len(sessions), self._vocabulary.name)
        return build_summary(sessions, total_ms)

    def _to_session(self, opened_at: datetime, closed_at: datetime, duration_ms: int) -> Session:
        return Session(
            date=format_date(opened_at, self._tz),
            time_in=format_clock(opened_at, self._tz),
            time_out=format_clock(closed_at, self._tz),
            duration_ms=duration_ms,
            duration_string=format_duration(duration_ms),
        )
