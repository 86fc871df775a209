from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from ..common.datetime_utils import is_instant


@dataclass(frozen=True)
class LogEvent:
    """Domain entity: one row of an append-only event log.

    ``timestamp`` is an aware datetime, except for synced rows whose text could
    not be parsed; those keep the raw text and are skipped by every report.
    """

    timestamp: Union[datetime, str]
    action: str
    status: str = ""

    @property
    def has_instant(self) -> bool:
        return is_instant(self.timestamp)
