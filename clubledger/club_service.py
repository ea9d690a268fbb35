"""Processing of a day's events into an event log and table statistics."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from clubledger.event_time import EventTime
from clubledger.events import (
    ClientArrived,
    ClientFinal,
    ClientLeft,
    ClientSatByQueue,
    ClientSatDown,
    ClientWaiting,
    ErrorEvent,
    Event,
)
from clubledger.models import ClubConfig, ClubResult, TableInfo
from clubledger.table import Table


class ClubService:
    """Tracks clients, tables and the waiting queue through a working day."""

    def __init__(self, config: ClubConfig) -> None:
        self._config = config
        self._tables: dict[int, Table] = {
            table_id: Table(table_id) for table_id in range(1, config.table_count + 1)
        }
        self._present: set[str] = set()
        self._queue: deque[str] = deque()

    def run(self, events: Iterable[Event]) -> ClubResult:
        """Process ``events`` in order and close the day."""
        log: list[Event] = []
        for event in events:
            log.append(event)
            log.extend(self._handle(event))

        close_time = self._config.close_time
        for name in sorted(self._present):
            log.extend(self._leave(name, close_time))
            log.append(ClientFinal(close_time, name))

        stats = [
            TableInfo(table_id, table.total_income, table.total_income)
            for table_id, table in sorted(self._tables.items())
        ]
        return ClubResult(self._config.open_time, close_time, log, stats)

    def _table(self, table_id: int) -> Table:
        return self._tables.setdefault(table_id, Table(table_id))

    def _handle(self, event: Event) -> list[Event]:
        time, name = event.time, event.name

        if isinstance(event, ClientArrived):
            if name in self._present:
                return [ErrorEvent(time, "YouShallNotPass")]
            if time < self._config.open_time or time > self._config.close_time:
                return [ErrorEvent(time, "NotOpenYet")]
            self._present.add(name)
            return []

        if isinstance(event, ClientSatDown):
            if name not in self._present:
                return [ErrorEvent(time, "ClientUnknown")]
            if self._table(event.table_id).is_occupied():
                return [ErrorEvent(time, "PlaceIsBusy")]
            self._seat(name, event.table_id, time)
            return []

        if isinstance(event, ClientWaiting):
            if name not in self._present:
                return [ErrorEvent(time, "ClientUnknown")]
            if any(not table.is_occupied() for table in self._tables.values()):
                return [ErrorEvent(time, "ICanWaitNoLonger!")]
            if len(self._queue) >= self._config.table_count:
                self._present.discard(name)
                return [ClientFinal(time, name)]
            self._queue.append(name)
            return []

        if isinstance(event, ClientLeft):
            if name not in self._present:
                return [ErrorEvent(time, "ClientUnknown")]
            return self._leave(name, time)

        return []

    def _seat(self, name: str, table_id: int, time: EventTime) -> None:
        for table in self._tables.values():
            if table.client_name == name:
                table.leave(time, self._config.hourly_rate)
                break
        self._table(table_id).seat(name, time)

    def _leave(self, name: str, time: EventTime) -> list[Event]:
        produced: list[Event] = []
        for table_id, table in sorted(self._tables.items()):
            if table.client_name == name:
                table.leave(time, self._config.hourly_rate)
                if self._queue:
                    next_client = self._queue.popleft()
                    table.seat(next_client, time)
                    produced.append(ClientSatByQueue(time, next_client, table_id))
                break
        self._present.discard(name)
        return produced