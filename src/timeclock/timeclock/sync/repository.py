from __future__ import annotations

from typing import Protocol

from .model import FinalReport


class FinalReportRepository(Protocol):
    def append_report(self, report: FinalReport) -> int:
        raise NotImplementedError
