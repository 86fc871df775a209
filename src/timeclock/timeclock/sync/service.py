from __future__ import annotations

import json
import logging
from datetime import datetime, tzinfo
from typing import Any, Mapping, Optional, Union

from ..common.datetime_utils import ensure_aware, format_date, parse_instant
from ..common.validators import require_keys
from ..core.constants import ACTION_MISSING, CORRUPT_TIMESTAMP, EXTERNAL_HOST_USER
from ..core.exceptions import IngestionError, ValidationError
from ..events.model import LogEvent
from ..events.repository import SyncedLogRepository
from ..reports.service import ReportService
from .model import FinalReport
from .repository import FinalReportRepository

logger = logging.getLogger(__name__)


def _text_field(fields: list, index: int, default: str) -> str:
    value = fields[index] if index < len(fields) else None
    return str(value) if value else default


def coerce_raw_row(row: Any, tz: tzinfo) -> LogEvent:
    """Turn one untrusted ``[timestamp, action, status]`` triple into a LogEvent.

    Every field becomes a string. A timestamp that does not parse is kept as its
    raw text; report code skips such rows.
    """
    fields = list(row) if isinstance(row, (list, tuple)) else []
    timestamp_text = _text_field(fields, 0, CORRUPT_TIMESTAMP)
    action = _text_field(fields, 1, ACTION_MISSING)
    status = _text_field(fields, 2, "")

    timestamp = parse_instant(timestamp_text, tz)
    if timestamp is None:
        logger.warning("Keeping unparsable synced timestamp %r as text", timestamp_text)
    return LogEvent(timestamp=timestamp or timestamp_text, action=action, status=status)


class SyncService:
    """Use cases fed by the client-side store through the RPC gateway."""

    def __init__(
        self,
        synced: SyncedLogRepository,
        final_reports: FinalReportRepository,
        reports: ReportService,
        *,
        tz: tzinfo,
    ):
        self._synced = synced
        self._final_reports = final_reports
        self._reports = reports
        self._tz = tz

    def write_raw_logs_from_json(self, payload: str) -> int:
        """Replace the synced snapshot with the rows in ``payload``; returns the row count.

        An unparsable payload leaves the previous snapshot untouched.
        """
        try:
            raw_rows = json.loads(payload)
        except (TypeError, ValueError) as e:
            logger.error("Could not parse synced log payload: %s", e)
            raise IngestionError("Could not parse JSON data from client") from e

        if not isinstance(raw_rows, list):
            logger.error("Synced log payload is %s, expected a list", type(raw_rows).__name__)
            raise IngestionError("Synced log payload must be a JSON array")

        if not raw_rows:
            self._synced.clear()
            logger.info("Synced log payload was empty; snapshot cleared")
            return 0

        events = [coerce_raw_row(row, self._tz) for row in raw_rows]
        count = self._synced.replace_all(events)
        logger.info("Synced %d raw log entries from client", count)
        return count

    def _parse_bound(self, value: Union[datetime, str, None], field_name: str) -> Optional[datetime]:
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return ensure_aware(value, self._tz)
        parsed = parse_instant(str(value), self._tz)
        if parsed is None:
            raise ValidationError(f"{field_name} is not a valid date/time: {value!r}")
        return parsed

    def calculate_report_from_synced_logs(
        self,
        start: Union[datetime, str, None] = None,
        end: Union[datetime, str, None] = None,
        *,
        now: Optional[datetime] = None,
    ) -> list[list[str]]:
        return self._reports.build_synced_grid(
            self._parse_bound(start, "startTime"),
            self._parse_bound(end, "endTime"),
            now=now,
        )

    def record_final_report(self, data: Mapping[str, Any], *, user_key: Optional[str] = None) -> str:
        require_keys(data, "report", "cutoffTimestamp", "totalWorkHours", "totalBreakHours")

        cutoff_text = str(data["cutoffTimestamp"])
        cutoff = parse_instant(cutoff_text, self._tz)
        if cutoff is None:
            raise ValidationError(f"cutoffTimestamp is not a valid date/time: {cutoff_text!r}")

        report = FinalReport(
            report_date=format_date(cutoff, self._tz),
            user_key=user_key or EXTERNAL_HOST_USER,
            work_hours=str(data["totalWorkHours"]),
            break_hours=str(data["totalBreakHours"]),
            cutoff_timestamp=cutoff_text,
        )
        self._final_reports.append_report(report)
        logger.info("Aggregated report recorded for %s on %s", report.user_key, report.report_date)
        return f"Synced {report.work_hours} hours."
