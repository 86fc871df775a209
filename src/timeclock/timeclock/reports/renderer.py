"""Presentational projections of a ReportSummary.

Two shapes are produced: an HTML fragment (daily totals + grand total) used in
report emails, and grid rows for display in a spreadsheet-like table. The grid
keeps a leading blank column; consumers rely on the five-column layout.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from ..core.constants import GRID_HEADER, NO_SESSIONS_TO_REPORT, NO_SYNCED_SESSIONS
from ..sessions.model import ReportSummary
from .duration import format_duration
from .model import RenderedEmail, ReportingPeriod

_env = Environment(
    loader=FileSystemLoader(str(Path(__file__).resolve().parent / "templates")),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_html_fragment(summary: ReportSummary) -> str:
    rows = [{"date": day, "total": format_duration(ms)} for day, ms in summary.daily_totals]
    return _env.get_template("report_fragment.html").render(
        rows=rows,
        grand_total=format_duration(summary.total_ms),
        empty_message=summary.notice or NO_SESSIONS_TO_REPORT,
    ).strip()


def render_grid(summary: ReportSummary) -> list[list[str]]:
    header = list(GRID_HEADER)
    if summary.is_empty:
        return [header, ["", NO_SYNCED_SESSIONS, "", "", ""]]
    return [header] + [[""] + s.as_row() for s in summary.sessions]


def report_subject(period: ReportingPeriod) -> str:
    return f"Time Report: {period.start_day} to {period.end_day}"


def render_report_email(
    summary: ReportSummary,
    period: ReportingPeriod,
    recipients: Sequence[str],
    *,
    message: Optional[str] = None,
) -> RenderedEmail:
    message = (message or "").strip()
    context = {
        "period": period,
        "total": format_duration(summary.total_ms),
        "message": message,
        "message_lines": message.splitlines() if message else [],
        "fragment": Markup(render_html_fragment(summary)),
    }
    return RenderedEmail(
        recipients=tuple(recipients),
        subject=report_subject(period),
        text_body=_env.get_template("email_body.txt").render(**context),
        html_body=_env.get_template("email_body.html").render(**context),
    )


def render_preview_email(
    summary: ReportSummary,
    period: ReportingPeriod,
    recipients: Sequence[str],
) -> RenderedEmail:
    subject = report_subject(period)
    html = _env.get_template("email_preview.html").render(
        period=period,
        total=format_duration(summary.total_ms),
        recipients=list(recipients),
        subject=subject,
        fragment=Markup(render_html_fragment(summary)),
    )
    return RenderedEmail(recipients=tuple(recipients), subject=subject, text_body="", html_body=html)
