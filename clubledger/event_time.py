"""Clock time of day used to stamp club events."""

from __future__ import annotations

import re
from functools import total_ordering

_TIME_FORMAT = re.compile(r"(?:[01][0-9]|2[0-3]):[0-5][0-9]")
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def is_time_format(text: str) -> bool:
    """Return True if ``text`` is a strict ``HH:MM`` time."""
    return _TIME_FORMAT.fullmatch(text) is not None


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    return int(match.group(1))


@total_ordering
class EventTime:
    """A time of day with minute precision, parsed from ``HH:MM``."""

    __slots__ = ("_hour", "_minute")

    def __init__(self, text: str) -> None:
        if len(text) != 5 or text[2] != ":":
            raise ValueError("Invalid EventTime format")
        try:
            hour = _leading_int(text[0:2])
            minute = _leading_int(text[3:5])
        except ValueError:
            raise ValueError("Invalid EventTime format") from None
        if not (0 <= hour < 24 and 0 <= minute < 60):
            raise ValueError("Invalid EventTime format")
        self._hour = hour
        self._minute = minute

    def minutes(self) -> int:
        """Minutes elapsed since midnight."""
        return self._hour * 60 + self._minute

    def __sub__(self, other: EventTime) -> int:
        if not isinstance(other, EventTime):
            return NotImplemented
        return self.minutes() - other.minutes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EventTime):
            return NotImplemented
        return self.minutes() == other.minutes()

    def __lt__(self, other: EventTime) -> bool:
        if not isinstance(other, EventTime):
            return NotImplemented
        return self.minutes() < other.minutes()

    def __hash__(self) -> int:
        return hash(self.minutes())

    def __str__(self) -> str:
        return f"{self._hour}:{self._minute:02d}"

    def __repr__(self) -> str:
        return f"EventTime('{self._hour:02d}:{self._minute:02d}')"