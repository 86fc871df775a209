"""Functions callable by name through the JSON gateway.

Only names listed here are dispatchable; the gateway never looks functions up
dynamically.
"""

from __future__ import annotations

import inspect
from dataclasses import asdict
from typing import Any, Callable, Mapping, Sequence

from ..core.exceptions import ValidationError
from ..container import Container

DEFAULT_RESULT = "Function executed successfully."


def build_registry(container: Container) -> dict[str, Callable[..., Any]]:
    clock = container.clock_service
    reports = container.report_service
    sync = container.sync_service

    def get_app_startup_data():
        state = clock.status()
        return {"isClockedIn": state.is_clocked_in, "isOnBreak": state.is_on_break}

    def record_time_log(date_time_string=None):
        return asdict(clock.record_time_log(date_time_string))

    def toggle_break():
        return asdict(clock.toggle_break())

    def mark_hours_reported():
        return asdict(clock.mark_hours_reported())

    def send_report_email(additional_message=None):
        return asdict(clock.clock_out_and_report(additional_message))

    def get_report_data():
        return reports.build_since_checkpoint().to_dict()

    def preview_report_email():
        return clock.preview_report_email().html_body

    def write_raw_logs_from_json(raw_data_json_string):
        count = sync.write_raw_logs_from_json(raw_data_json_string)
        return f"Successfully synced {count} raw log entries."

    def calculate_report_from_synced_logs(start_time=None, end_time=None):
        return sync.calculate_report_from_synced_logs(start_time, end_time)

    def record_final_report(data):
        return sync.record_final_report(data)

    return {
        "getAppStartupData": get_app_startup_data,
        "recordTimeLog": record_time_log,
        "toggleBreak": toggle_break,
        "markHoursReported": mark_hours_reported,
        "sendReportEmail": send_report_email,
        "getReportData": get_report_data,
        "previewReportEmail": preview_report_email,
        "writeRawLogsFromJson": write_raw_logs_from_json,
        "calculateReportFromSyncedLogs": calculate_report_from_synced_logs,
        "recordFinalReport": record_final_report,
    }


def dispatch(registry: Mapping[str, Callable[..., Any]], function_name: str, parameters: Sequence[Any]) -> Any:
    fn = registry.get(function_name)
    if fn is None:
        raise ValidationError(f"Function {function_name} not found or is not accessible.")

    try:
        inspect.signature(fn).bind(*parameters)
    except TypeError as e:
        raise ValidationError(f"Invalid parameters for {function_name}: {e}") from e

    result = fn(*parameters)
    return DEFAULT_RESULT if result is None or result == "" else result
