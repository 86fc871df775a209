from src.timeclock.timeclock.core.constants import EPOCH
from src.timeclock.timeclock.events.model import LogEvent
from src.timeclock.timeclock.events.window import filter_window, resolve_window

from conftest import ev, ts

EVENTS = [
    ev("2024-06-01T09:00:00Z", "CLOCK_IN"),
    ev("2024-06-01T17:00:00Z", "CLOCK_OUT"),
    LogEvent(timestamp="CORRUPT_TIMESTAMP", action="CLOCK_IN"),
    ev("2024-06-02T09:00:00Z", "CLOCK_IN"),
    ev("2024-06-02T17:00:00Z", "CLOCK_OUT"),
]


def test_bounds_are_inclusive():
    rows = filter_window(EVENTS, ts("2024-06-01T09:00:00Z"), ts("2024-06-01T17:00:00Z"))
    assert [e.action for e in rows] == ["CLOCK_IN", "CLOCK_OUT"]


def test_reversed_bounds_are_swapped():
    start, end = ts("2024-06-01T12:00:00Z"), ts("2024-06-02T12:00:00Z")
    assert filter_window(EVENTS, end, start) == filter_window(EVENTS, start, end)
    assert [e.timestamp for e in filter_window(EVENTS, start, end)] == [
        ts("2024-06-01T17:00:00Z"),
        ts("2024-06-02T09:00:00Z"),
    ]


def test_missing_bounds_default_to_epoch_and_now():
    now = ts("2024-06-02T10:00:00Z")

    assert resolve_window(None, None, now=now) == (EPOCH, now)
    rows = filter_window(EVENTS, now=now)
    assert len(rows) == 3


def test_rows_without_timestamp_are_dropped():
    rows = filter_window(EVENTS, now=ts("2030-01-01T00:00:00Z"))
    assert all(e.has_instant for e in rows)
    assert len(rows) == 4
