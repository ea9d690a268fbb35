"""Plain records passed between parsing, processing and reporting."""

from __future__ import annotations

from dataclasses import dataclass, field

from clubledger.event_time import EventTime
from clubledger.events import Event


def _midnight() -> EventTime:
    return EventTime("00:00")


@dataclass
class ClubConfig:
    """Number of tables, working hours and hourly rate of the club."""

    table_count: int = 0
    open_time: EventTime = field(default_factory=_midnight)
    close_time: EventTime = field(default_factory=_midnight)
    hourly_rate: int = 0


@dataclass
class ParseData:
    """Configuration and events read from an input file."""

    config: ClubConfig = field(default_factory=ClubConfig)
    events: list[Event] = field(default_factory=list)


@dataclass(frozen=True)
class TableInfo:
    """Revenue and occupied time of one table for the day."""

    table_id: int
    revenue: int
    occupied_minutes: int


@dataclass
class ClubResult:
    """Outcome of a working day: hours, event log and table statistics."""

    open_time: EventTime
    end_time: EventTime
    events: list[Event] = field(default_factory=list)
    table_stats: list[TableInfo] = field(default_factory=list)