from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .model import FinalReport
from .repository import FinalReportRepository


class MySQLFinalReportRepository(FinalReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append_report(self, report: FinalReport) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO aggregated_reports(report_date, user_key, work_hours, break_hours, cutoff_timestamp)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (
                    report.report_date,
                    report.user_key,
                    report.work_hours,
                    report.break_hours,
                    report.cutoff_timestamp,
                ),
            )
            return int(cur.lastrowid)
