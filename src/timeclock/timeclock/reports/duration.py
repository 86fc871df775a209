"""HH:MM:SS rendering of millisecond durations.

``format_duration`` floors to whole seconds and never rounds up, so
``parse_duration(format_duration(ms)) == ms`` for every whole-second ``ms``.
Hours are not clamped to 24.
"""

from __future__ import annotations

import math

from ..core.exceptions import InvalidDuration


def format_duration(total_ms: int) -> str:
    if isinstance(total_ms, float) and not math.isfinite(total_ms):
        raise InvalidDuration(f"Duration must be finite, got {total_ms!r}")
    if total_ms < 0:
        raise InvalidDuration(f"Duration must not be negative, got {total_ms!r}")

    total_seconds = int(total_ms // 1000)
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def parse_duration(text: str) -> int:
    parts = (text or "").strip().split(":")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise InvalidDuration(f"Invalid duration string: {text!r}")

    hours, minutes, seconds = (int(p) for p in parts)
    if minutes >= 60 or seconds >= 60:
        raise InvalidDuration(f"Invalid duration string: {text!r}")
    return (hours * 3600 + minutes * 60 + seconds) * 1000
