"""Example: use the service layer directly (no Flask).

Prints the unreported sessions and the synced-log grid for the last week.
"""

import importlib
from datetime import timedelta

from config import get_settings_module

from src.timeclock.timeclock.common.datetime_utils import now_utc
from src.timeclock.timeclock.container import build_container
from src.timeclock.timeclock.reports.duration import format_duration


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, timezone=settings.TIMEZONE)

    summary = container.report_service.build_since_checkpoint()
    for day, ms in summary.daily_totals:
        print(day, format_duration(ms))
    print("GRAND TOTAL", format_duration(summary.total_ms))

    now = now_utc()
    for row in container.sync_service.calculate_report_from_synced_logs(now - timedelta(days=7), now):
        print(row)


if __name__ == "__main__":
    main()
