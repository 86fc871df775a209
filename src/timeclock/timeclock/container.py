from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .clock.mysql_state_repository import MySQLClockStateRepository
from .clock.service import ClockService
from .common.datetime_utils import get_zone
from .core.constants import DEFAULT_TIMEZONE
from .database.connection import DBConfig, DatabaseConnection
from .events.mysql_event_repository import MySQLEventLogRepository, MySQLSyncedLogRepository
from .notifications.mailer import SMTPConfig, SMTPMailer
from .reports.service import ReportService
from .sessions.vocabularies.factory import VocabularyFactory
from .sync.mysql_report_repository import MySQLFinalReportRepository
from .sync.service import SyncService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    events_repo: MySQLEventLogRepository
    synced_repo: MySQLSyncedLogRepository
    state_repo: MySQLClockStateRepository
    final_reports_repo: MySQLFinalReportRepository

    mailer: SMTPMailer
    report_service: ReportService
    clock_service: ClockService
    sync_service: SyncService


def build_container(
    *,
    db_config: dict,
    timezone: str = DEFAULT_TIMEZONE,
    report_recipients: Sequence[str] = (),
    preview_recipients: Sequence[str] = (),
    smtp_config: dict | None = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    tz = get_zone(timezone)

    events_repo = MySQLEventLogRepository(conn)
    synced_repo = MySQLSyncedLogRepository(conn)
    state_repo = MySQLClockStateRepository(conn)
    final_reports_repo = MySQLFinalReportRepository(conn)

    smtp = dict(smtp_config or {})
    mailer = SMTPMailer(
        SMTPConfig(
            host=str(smtp.get("host", "localhost")),
            port=int(smtp.get("port", 25)),
            sender=str(smtp.get("sender", "")),
            username=smtp.get("username"),
            password=smtp.get("password"),
            use_tls=bool(smtp.get("use_tls", False)),
        )
    )

    report_service = ReportService(
        events_repo,
        synced_repo,
        tz=tz,
        preview_recipients=preview_recipients,
        vocabularies=VocabularyFactory(),
    )
    clock_service = ClockService(
        events_repo,
        state_repo,
        report_service,
        mailer,
        tz=tz,
        recipients=report_recipients,
    )
    sync_service = SyncService(synced_repo, final_reports_repo, report_service, tz=tz)

    return Container(
        conn=conn,
        events_repo=events_repo,
        synced_repo=synced_repo,
        state_repo=state_repo,
        final_reports_repo=final_reports_repo,
        mailer=mailer,
        report_service=report_service,
        clock_service=clock_service,
        sync_service=sync_service,
    )
