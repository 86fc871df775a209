from __future__ import annotations

from enum import Enum


class LogAction(str, Enum):
    """Action tokens written to the event logs."""

    IN = "IN"
    OUT = "OUT"
    BREAK_OUT = "BREAK-OUT"
    BREAK_IN = "BREAK-IN"
    BREAK = "BREAK"
    REPORTED = "REPORTED"

    # Rows synced from the client-side store
    CLOCK_IN = "CLOCK_IN"
    CLOCK_OUT = "CLOCK_OUT"


class Transition(str, Enum):
    """What a log row does to an open work session."""

    OPEN = "OPEN"
    PAUSE = "PAUSE"
    RESUME = "RESUME"
    CLOSE = "CLOSE"


class LogSource(str, Enum):
    """Which event log (and vocabulary) a report is built from."""

    LOCAL = "local"
    SYNCED = "synced"
