"""Events that happen in the club, read from input or produced by the service."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from clubledger.event_time import EventTime


class EventKind(IntEnum):
    """Numeric identifiers of event kinds."""

    ARRIVED = 1
    SAT_DOWN = 2
    WAITING = 3
    LEFT = 4
    FINAL = 11
    SAT_BY_QUEUE = 12
    ERROR = 13


@dataclass(frozen=True)
class Event:
    """Base of all events: a time, a kind and a client or error name."""

    kind: ClassVar[EventKind]

    time: EventTime
    name: str

    def __str__(self) -> str:
        return f"{self.time} {int(self.kind)} {self.name}"


@dataclass(frozen=True)
class ClientArrived(Event):
    """A client came into the club."""

    kind: ClassVar[EventKind] = EventKind.ARRIVED


@dataclass(frozen=True)
class ClientSatDown(Event):
    """A client took a table."""

    kind: ClassVar[EventKind] = EventKind.SAT_DOWN

    table_id: int

    def __str__(self) -> str:
        return f"{super().__str__()} {self.table_id}"


@dataclass(frozen=True)
class ClientWaiting(Event):
    """A client asked to wait for a free table."""

    kind: ClassVar[EventKind] = EventKind.WAITING


@dataclass(frozen=True)
class ClientLeft(Event):
    """A client left the club."""

    kind: ClassVar[EventKind] = EventKind.LEFT


@dataclass(frozen=True)
class ClientFinal(Event):
    """A client was sent away by the club."""

    kind: ClassVar[EventKind] = EventKind.FINAL


@dataclass(frozen=True)
class ClientSatByQueue(Event):
    """A waiting client was seated at a freed table."""

    kind: ClassVar[EventKind] = EventKind.SAT_BY_QUEUE

    table_id: int

    def __str__(self) -> str:
        return f"{super().__str__()} {self.table_id}"


@dataclass(frozen=True)
class ErrorEvent(Event):
    """An error raised while processing an event; ``name`` holds the error."""

    kind: ClassVar[EventKind] = EventKind.ERROR