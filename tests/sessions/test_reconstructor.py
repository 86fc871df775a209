import logging
from datetime import timezone
from zoneinfo import ZoneInfo

import pytest

from src.timeclock.timeclock.core.exceptions import InvalidDuration
from src.timeclock.timeclock.events.model import LogEvent
from src.timeclock.timeclock.sessions.reconstructor import SessionReconstructor
from src.timeclock.timeclock.sessions.vocabularies.local_vocabulary import LocalVocabulary
from src.timeclock.timeclock.sessions.vocabularies.synced_vocabulary import SyncedVocabulary

from conftest import ev

MINUTE = 60_000
HOUR = 60 * MINUTE


@pytest.fixture
def local():
    return SessionReconstructor(LocalVocabulary(), timezone.utc)


@pytest.fixture
def synced():
    return SessionReconstructor(SyncedVocabulary(), timezone.utc)


def test_full_day_with_lunch_break(local):
    summary = local.reconstruct(
        [
            ev("2024-06-01T09:00:00Z", "IN"),
            ev("2024-06-01T12:00:00Z", "BREAK-OUT"),
            ev("2024-06-01T12:30:00Z", "BREAK-IN"),
            ev("2024-06-01T17:00:00Z", "OUT"),
        ]
    )

    assert len(summary.sessions) == 1
    s = summary.sessions[0]
    assert (s.date, s.time_in, s.time_out, s.duration_string) == ("2024-06-01", "09:00:00", "17:00:00", "07:30:00")
    assert s.duration_ms == 7 * HOUR + 30 * MINUTE
    assert summary.total_ms == s.duration_ms
    assert summary.daily_totals == (("2024-06-01", 7 * HOUR + 30 * MINUTE),)


def test_break_interval_is_excluded_exactly(local):
    summary = local.reconstruct(
        [
            ev("2024-06-01T08:00:00Z", "IN"),
            ev("2024-06-01T08:17:13Z", "BREAK-OUT"),
            ev("2024-06-01T09:02:00Z", "BREAK-IN"),
            ev("2024-06-01T10:00:05Z", "OUT"),
        ]
    )

    # (t1 - t0) + (t3 - t2)
    expected = (17 * MINUTE + 13_000) + (58 * MINUTE + 5_000)
    assert summary.sessions[0].duration_ms == expected


def test_legacy_break_token_pauses_like_break_out(local):
    summary = local.reconstruct(
        [
            ev("2024-06-01T09:00:00Z", "IN"),
            ev("2024-06-01T10:00:00Z", "BREAK"),
            ev("2024-06-01T11:00:00Z", "BREAK-IN"),
            ev("2024-06-01T12:00:00Z", "OUT"),
        ]
    )
    assert summary.total_ms == 2 * HOUR


def test_out_while_on_break_closes_session_with_banked_time(local):
    summary = local.reconstruct(
        [
            ev("2024-06-01T09:00:00Z", "IN"),
            ev("2024-06-01T11:00:00Z", "BREAK-OUT"),
            ev("2024-06-01T12:00:00Z", "OUT"),
        ]
    )

    assert len(summary.sessions) == 1
    assert summary.sessions[0].duration_ms == 2 * HOUR
    assert summary.sessions[0].time_out == "12:00:00"


def test_orphan_out_produces_nothing(local):
    summary = local.reconstruct([ev("2024-06-01T17:00:00Z", "OUT")])

    assert summary.sessions == ()
    assert summary.total_ms == 0


def test_unclosed_in_is_discarded(local):
    summary = local.reconstruct(
        [
            ev("2024-06-01T09:00:00Z", "IN"),
            ev("2024-06-01T10:00:00Z", "OUT"),
            ev("2024-06-01T11:00:00Z", "IN"),
            ev("2024-06-01T12:00:00Z", "BREAK-OUT"),
        ]
    )

    assert len(summary.sessions) == 1
    assert summary.total_ms == HOUR


def test_break_rows_without_open_session_are_ignored(local):
    summary = local.reconstruct(
        [
            ev("2024-06-01T08:00:00Z", "BREAK-IN"),
            ev("2024-06-01T08:30:00Z", "BREAK-OUT"),
            ev("2024-06-01T09:00:00Z", "IN"),
            ev("2024-06-01T10:00:00Z", "OUT"),
        ]
    )
    assert summary.total_ms == HOUR


def test_reported_and_unknown_rows_are_inert(local):
    summary = local.reconstruct(
        [
            ev("2024-06-01T09:00:00Z", "IN"),
            ev("2024-06-01T09:30:00Z", "REPORTED", "x | y | Total Work: 00:00:00"),
            ev("2024-06-01T09:45:00Z", "CLOCK_OUT"),
            ev("2024-06-01T10:00:00Z", "OUT"),
        ]
    )
    assert [s.duration_ms for s in summary.sessions] == [HOUR]


def test_rows_with_bad_timestamp_do_not_touch_state(local):
    summary = local.reconstruct(
        [
            ev("2024-06-01T09:00:00Z", "IN"),
            LogEvent(timestamp="oops", action="OUT"),
            LogEvent(timestamp="oops", action="IN"),
            ev("2024-06-01T10:00:00Z", "OUT"),
        ]
    )
    assert [s.time_in for s in summary.sessions] == ["09:00:00"]
    assert summary.total_ms == HOUR


def test_session_count_matches_closed_sessions(local):
    events = [
        ev("2024-06-01T07:00:00Z", "OUT"),
        ev("2024-06-01T08:00:00Z", "IN"),
        ev("2024-06-01T09:00:00Z", "OUT"),
        ev("2024-06-01T09:30:00Z", "OUT"),
        ev("2024-06-01T10:00:00Z", "IN"),
        ev("2024-06-01T11:00:00Z", "IN"),
        ev("2024-06-01T12:00:00Z", "OUT"),
        ev("2024-06-01T13:00:00Z", "IN"),
    ]

    summary = local.reconstruct(events)

    assert len(summary.sessions) == 2
    # the second IN restarted the session
    assert summary.sessions[1].time_in == "11:00:00"
    assert summary.total_ms == 2 * HOUR


def test_sessions_follow_log_order_not_timestamp_order(local):
    summary = local.reconstruct(
        [
            ev("2024-06-02T09:00:00Z", "IN"),
            ev("2024-06-02T10:00:00Z", "OUT"),
            ev("2024-06-01T09:00:00Z", "IN"),
            ev("2024-06-01T11:00:00Z", "OUT"),
        ]
    )

    assert [s.date for s in summary.sessions] == ["2024-06-02", "2024-06-01"]
    assert summary.daily_totals == (("2024-06-01", 2 * HOUR), ("2024-06-02", HOUR))


def test_close_before_open_is_a_logic_error(local):
    with pytest.raises(InvalidDuration):
        local.reconstruct([ev("2024-06-01T10:00:00Z", "IN"), ev("2024-06-01T09:00:00Z", "OUT")])


def test_dates_and_times_use_the_configured_zone():
    reconstructor = SessionReconstructor(LocalVocabulary(), ZoneInfo("America/New_York"))

    summary = reconstructor.reconstruct([ev("2024-06-02T02:00:00Z", "IN"), ev("2024-06-02T04:00:00Z", "OUT")])

    s = summary.sessions[0]
    assert (s.date, s.time_in, s.time_out) == ("2024-06-01", "22:00:00", "00:00:00")


def test_synced_duration_is_plain_difference(synced):
    summary = synced.reconstruct([ev("2024-06-01T09:00:00Z", "CLOCK_IN"), ev("2024-06-01T17:15:00Z", "CLOCK_OUT")])

    assert summary.sessions[0].duration_ms == 8 * HOUR + 15 * MINUTE


def test_synced_ignores_break_and_local_tokens(synced):
    summary = synced.reconstruct(
        [
            ev("2024-06-01T09:00:00Z", "CLOCK_IN"),
            ev("2024-06-01T12:00:00Z", "BREAK-OUT"),
            ev("2024-06-01T13:00:00Z", "BREAK-IN"),
            ev("2024-06-01T14:00:00Z", "OUT"),
            ev("2024-06-01T17:00:00Z", "CLOCK_OUT"),
        ]
    )

    assert [s.duration_ms for s in summary.sessions] == [8 * HOUR]


def test_synced_reopen_overwrites_unterminated_session(synced):
    summary = synced.reconstruct(
        [
            ev("2024-06-01T08:00:00Z", "CLOCK_IN"),
            ev("2024-06-01T09:00:00Z", "CLOCK_IN"),
            ev("2024-06-01T10:00:00Z", "CLOCK_OUT"),
            ev("2024-06-01T11:00:00Z", "CLOCK_OUT"),
        ]
    )

    assert len(summary.sessions) == 1
    assert summary.sessions[0].time_in == "09:00:00"
    assert summary.total_ms == HOUR


def test_reconstructor_keeps_no_state_between_calls(local):
    events = [ev("2024-06-01T09:00:00Z", "IN")]
    local.reconstruct(events)

    summary = local.reconstruct([ev("2024-06-01T10:00:00Z", "OUT")])

    assert summary.sessions == ()


def test_debug_log_names_the_vocabulary(synced, caplog):
    with caplog.at_level(logging.DEBUG, logger="src.timeclock.timeclock.sessions.reconstructor"):
        synced.reconstruct([ev("2024-06-01T09:00:00Z", "CLOCK_IN"), ev("2024-06-01T10:00:00Z", "CLOCK_OUT")])

    assert "Rebuilt 1 session(s) from the synced log" in caplog.text
