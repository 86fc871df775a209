from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ReportingPeriod:
    """From the last checkpoint up to the moment the report is built."""

    start: datetime
    end: datetime
    start_text: str
    end_text: str

    @property
    def start_day(self) -> str:
        return self.start_text.split(" ")[0]

    @property
    def end_day(self) -> str:
        return self.end_text.split(" ")[0]

    def status_line(self, total_text: str) -> str:
        """Status text stored on the REPORTED row."""
        return f"{self.start_text} | {self.end_text} | Total Work: {total_text}"


@dataclass(frozen=True)
class RenderedEmail:
    recipients: tuple[str, ...]
    subject: str
    text_body: str
    html_body: str
