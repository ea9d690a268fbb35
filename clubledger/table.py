"""A single table of the club and its accumulated usage."""

from __future__ import annotations

from clubledger.event_time import EventTime


def _ceil_hours(minutes: int) -> int:
    # Rounds toward zero after adding 59, as integer division does for billing.
    shifted = minutes + 59
    hours = abs(shifted) // 60
    return hours if shifted >= 0 else -hours


class Table:
    """A table that is occupied by at most one client at a time."""

    def __init__(self, table_id: int) -> None:
        self.table_id = table_id
        self.client_name = ""
        self.session_start = EventTime("00:00")
        self.total_minutes = 0
        self.total_income = 0

    def is_occupied(self) -> bool:
        """Return True while a client sits at the table."""
        return bool(self.client_name)

    def seat(self, name: str, start_time: EventTime) -> None:
        """Start a session for ``name`` at ``start_time``."""
        self.client_name = name
        self.session_start = start_time

    def leave(self, end_time: EventTime, hourly_rate: int) -> None:
        """End the current session, charging every started hour."""
        if not self.client_name:
            return
        duration = end_time - self.session_start
        self.total_minutes += duration
        self.total_income += _ceil_hours(duration) * hourly_rate
        self.client_name = ""

    def __repr__(self) -> str:
        return (
            f"Table(table_id={self.table_id}, client_name={self.client_name!r}, "
            f"total_minutes={self.total_minutes}, total_income={self.total_income})"
        )