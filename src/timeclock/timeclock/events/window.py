from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Sequence

from ..common.datetime_utils import ensure_aware, now_utc
from ..core.constants import EPOCH
from .model import LogEvent


def resolve_window(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    *,
    now: Optional[datetime] = None,
) -> tuple[datetime, datetime]:
    """Fill in missing bounds (epoch / now) and swap them when reversed."""
    lower = ensure_aware(start, timezone.utc) if start is not None else EPOCH
    upper = ensure_aware(end, timezone.utc) if end is not None else (now or now_utc())
    if lower > upper:
        lower, upper = upper, lower
    return lower, upper


def filter_window(
    events: Sequence[LogEvent],
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    *,
    now: Optional[datetime] = None,
) -> list[LogEvent]:
    """Rows whose timestamp lies in ``[start, end]`` inclusive, in storage order.

    Rows without a usable timestamp cannot be placed in the window and are dropped.
    """
    lower, upper = resolve_window(start, end, now=now)
    return [e for e in events if e.has_instant and lower <= e.timestamp <= upper]
