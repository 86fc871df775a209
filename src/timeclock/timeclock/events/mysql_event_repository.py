from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..common.datetime_utils import from_db_utc, to_db_utc
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import LogEvent
from .repository import EventLogRepository, SyncedLogRepository


def _row_to_event(r: dict) -> LogEvent:
    logged_at = r.get("logged_at")
    if isinstance(logged_at, datetime):
        timestamp = from_db_utc(logged_at)
    else:
        timestamp = str(r.get("raw_timestamp") or "")
    return LogEvent(timestamp=timestamp, action=str(r["action"]), status=r.get("status") or "")


def _event_params(event: LogEvent) -> tuple:
    if event.has_instant:
        return (to_db_utc(event.timestamp), None, event.action, event.status)
    return (None, str(event.timestamp), event.action, event.status)


class MySQLEventLogRepository(EventLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append_event(self, *, timestamp: datetime, action: str, status: str = "") -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_logs(logged_at, raw_timestamp, action, status)
                VALUES(%s,%s,%s,%s)
                """,
                _event_params(LogEvent(timestamp=timestamp, action=action, status=status)),
            )
            return int(cur.lastrowid)

    def read_all_events(self) -> Sequence[LogEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT log_id, logged_at, raw_timestamp, action, status
                FROM time_logs
                ORDER BY log_id ASC
                """
            )
            return [_row_to_event(r) for r in fetchall(cur)]


class MySQLSyncedLogRepository(SyncedLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def replace_all(self, events: Sequence[LogEvent]) -> int:
        # One transaction: a failed insert rolls the delete back too.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM synced_time_logs")
            cur.executemany(
                """
                INSERT INTO synced_time_logs(logged_at, raw_timestamp, action, status)
                VALUES(%s,%s,%s,%s)
                """,
                [_event_params(e) for e in events],
            )
            return len(events)

    def clear(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM synced_time_logs")

    def read_all_events(self) -> Sequence[LogEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT log_id, logged_at, raw_timestamp, action, status
                FROM synced_time_logs
                ORDER BY log_id ASC
                """
            )
            return [_row_to_event(r) for r in fetchall(cur)]
