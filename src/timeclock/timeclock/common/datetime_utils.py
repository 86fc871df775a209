from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Optional
from zoneinfo import ZoneInfo

from ..core.constants import CLOCK_FORMAT, DATE_FORMAT, DATETIME_FORMAT

_ONE_MS = timedelta(milliseconds=1)


def now_utc() -> datetime:
    """Current time as an aware UTC datetime.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(timezone.utc)


def get_zone(name: str) -> tzinfo:
    return ZoneInfo(name)


def is_instant(value: Any) -> bool:
    return isinstance(value, datetime)


def ensure_aware(value: datetime, tz: tzinfo) -> datetime:
    """Attach ``tz`` to naive datetimes, leave aware ones untouched."""
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value


def parse_instant(text: str, tz: tzinfo) -> Optional[datetime]:
    """Parse ISO-8601 text into an aware datetime, or None when it is not a date.

    Naive values are read in ``tz``. A trailing ``Z`` means UTC.
    """
    value = (text or "").strip()
    if not value:
        return None
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    return ensure_aware(parsed, tz)


def elapsed_ms(start: datetime, end: datetime) -> int:
    return (end - start) // _ONE_MS


def format_date(value: datetime, tz: tzinfo) -> str:
    return value.astimezone(tz).strftime(DATE_FORMAT)


def format_clock(value: datetime, tz: tzinfo) -> str:
    return value.astimezone(tz).strftime(CLOCK_FORMAT)


def format_datetime(value: datetime, tz: tzinfo) -> str:
    return value.astimezone(tz).strftime(DATETIME_FORMAT)


def to_db_utc(value: datetime) -> datetime:
    """MySQL DATETIME has no zone: store naive UTC."""
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def from_db_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc)
