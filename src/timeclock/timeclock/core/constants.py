"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

from datetime import datetime, timezone

# Lower bound used when the log holds no usable timestamp at all.
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

DATE_FORMAT = "%Y-%m-%d"
CLOCK_FORMAT = "%H:%M:%S"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

CORRUPT_TIMESTAMP = "CORRUPT_TIMESTAMP"
ACTION_MISSING = "ACTION_MISSING"

DEFAULT_TIMEZONE = "UTC"
EXTERNAL_HOST_USER = "EXTERNAL_HOST"

NO_LOG_DATA = "No log data available."
NO_SYNCED_DATA = "No data available in synced sheet."
NO_SESSIONS_TO_REPORT = "* No new clock-in/out sessions to report since the last reset. *"
NO_SYNCED_SESSIONS = "No completed IN/OUT sessions found in synced data."

GRID_HEADER = ["", "Date (Session)", "Time IN", "Time OUT", "Total Duration"]
