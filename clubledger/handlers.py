"""Chain of handlers that turn the tokens of an input line into events."""

from __future__ import annotations

import re
from collections.abc import Sequence

from clubledger.event_time import EventTime
from clubledger.events import (
    ClientArrived,
    ClientLeft,
    ClientSatDown,
    ClientWaiting,
    Event,
    EventKind,
)

_CLIENT_NAME = re.compile(r"[a-z0-9_-]+")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError("stoi")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError("stoi")
    return value


def _require_tokens(tokens: Sequence[str], count: int, event_name: str) -> None:
    if len(tokens) < count:
        raise ValueError(f"Not enough arguments for {event_name} event")


def _client_name(token: str) -> str:
    if _CLIENT_NAME.fullmatch(token) is None:
        raise ValueError("Invalid client name format")
    return token


class EventHandler:
    """A link of the chain; passes work on to the next link or fails."""

    def __init__(self) -> None:
        self._next: EventHandler | None = None

    def set_next(self, next_handler: EventHandler) -> EventHandler:
        """Attach ``next_handler`` after this one and return it for chaining."""
        self._next = next_handler
        return next_handler

    def handle(
        self, event_time: EventTime, event_id: int, tokens: Sequence[str]
    ) -> Event:
        """Build the event for ``event_id`` or raise ValueError if no link knows it."""
        if self._next is not None:
            return self._next.handle(event_time, event_id, tokens)
        raise ValueError(f"Unknown event ID: {event_id}")


class ClientArrivedHandler(EventHandler):
    """Builds arrival events."""

    def handle(
        self, event_time: EventTime, event_id: int, tokens: Sequence[str]
    ) -> Event:
        if event_id == EventKind.ARRIVED:
            _require_tokens(tokens, 3, "ClientArrived")
            return ClientArrived(event_time, _client_name(tokens[2]))
        return super().handle(event_time, event_id, tokens)


class ClientLeftHandler(EventHandler):
    """Builds departure events."""

    def handle(
        self, event_time: EventTime, event_id: int, tokens: Sequence[str]
    ) -> Event:
        if event_id == EventKind.LEFT:
            _require_tokens(tokens, 3, "ClientLeft")
            return ClientLeft(event_time, _client_name(tokens[2]))
        return super().handle(event_time, event_id, tokens)


class ClientWaitingHandler(EventHandler):
    """Builds waiting events."""

    def handle(
        self, event_time: EventTime, event_id: int, tokens: Sequence[str]
    ) -> Event:
        if event_id == EventKind.WAITING:
            _require_tokens(tokens, 3, "ClientWaiting")
            return ClientWaiting(event_time, _client_name(tokens[2]))
        return super().handle(event_time, event_id, tokens)


class ClientSatDownHandler(EventHandler):
    """Builds events of a client taking a table."""

    def handle(
        self, event_time: EventTime, event_id: int, tokens: Sequence[str]
    ) -> Event:
        if event_id == EventKind.SAT_DOWN:
            _require_tokens(tokens, 4, "ClientSatDown")
            name = _client_name(tokens[2])
            try:
                table_id = _parse_int(tokens[3])
                if table_id <= 0:
                    raise ValueError("Table number must be positive")
            except ValueError as exc:
                raise ValueError(f"Invalid table number format: {exc}") from None
            return ClientSatDown(event_time, name, table_id)
        return super().handle(event_time, event_id, tokens)


def default_chain() -> EventHandler:
    """Return the head of a chain that knows every input event kind."""
    head = ClientArrivedHandler()
    head.set_next(ClientLeftHandler()).set_next(ClientWaitingHandler()).set_next(
        ClientSatDownHandler()
    )
    return head