from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import ClockState
from .repository import ClockStateRepository

CLOCK_IN_KEY = "isClockedIn"
ON_BREAK_KEY = "isUserOnBreak"


class MySQLClockStateRepository(ClockStateRepository):
    """Flags stored as 'true'/'false' strings in the app_properties key/value table."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_state(self) -> ClockState:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT prop_key, prop_value FROM app_properties WHERE prop_key IN (%s, %s)",
                (CLOCK_IN_KEY, ON_BREAK_KEY),
            )
            props = {r["prop_key"]: r["prop_value"] for r in fetchall(cur)}
        return ClockState(
            is_clocked_in=props.get(CLOCK_IN_KEY) == "true",
            is_on_break=props.get(ON_BREAK_KEY) == "true",
        )

    def save_state(self, state: ClockState) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO app_properties(prop_key, prop_value) VALUES(%s, %s)
                ON DUPLICATE KEY UPDATE prop_value=VALUES(prop_value)
                """,
                [
                    (CLOCK_IN_KEY, "true" if state.is_clocked_in else "false"),
                    (ON_BREAK_KEY, "true" if state.is_on_break else "false"),
                ],
            )
