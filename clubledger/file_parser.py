"""Reading the club's configuration and event log from a text file."""

from __future__ import annotations

import os
import re

from clubledger.event_time import EventTime, is_time_format
from clubledger.events import Event
from clubledger.handlers import EventHandler
from clubledger.models import ClubConfig, ParseData

_NUMBER = re.compile(r"[0-9]+")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class ParseError(ValueError):
    """Raised when the input file cannot be read or is malformed."""


def _split(text: str, delimiter: str) -> list[str]:
    # A trailing delimiter does not produce a final empty field.
    parts = text.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def _validate_header(tables: str, hours: str, price: str) -> None:
    if _NUMBER.fullmatch(tables) is None:
        raise ParseError(f"Invalid tables count: {tables}")
    tokens = _split(hours, " ")
    if len(tokens) != 2 or not all(is_time_format(token) for token in tokens):
        raise ParseError(f"Invalid working time format: {hours}")
    if _NUMBER.fullmatch(price) is None:
        raise ParseError(f"Invalid price format: {price}")


class FileParser:
    """Parses an input file into a club configuration and its events."""

    def __init__(self, path: str | os.PathLike[str], handler_chain: EventHandler) -> None:
        self._path = path
        self._handler_chain = handler_chain

    def parse(self) -> ParseData:
        """Read the file; raise ParseError on any problem with it."""
        try:
            with open(self._path, encoding="utf-8", newline="") as stream:
                content = stream.read()
        except OSError as exc:
            raise ParseError(f"Cannot open file: {os.fspath(self._path)}") from exc

        lines = _split(content, "\n")
        if len(lines) < 3:
            raise ParseError("Header is incomplete")
        tables, hours, price = lines[:3]
        _validate_header(tables, hours, price)

        open_text, close_text = _split(hours, " ")
        config = ClubConfig(
            table_count=int(tables),
            open_time=EventTime(open_text),
            close_time=EventTime(close_text),
            hourly_rate=int(price),
        )
        data = ParseData(config=config)

        line_number = 4
        previous = EventTime("00:00")
        for line in lines[3:]:
            if not line:
                continue
            event = self._parse_line(line, line_number)
            if event.time < previous:
                raise ParseError(
                    f"Line {line_number}: Event time must be non-decreasing. "
                    f"Previous time: {previous}, current time: {event.time}"
                )
            previous = event.time
            data.events.append(event)
            line_number += 1
        return data

    def _parse_line(self, line: str, line_number: int) -> Event:
        tokens = _split(line, " ")
        if len(tokens) < 2:
            raise ParseError(f"Line {line_number}: malformed")
        if not is_time_format(tokens[0]):
            raise ParseError(f"Line {line_number}: invalid time format")
        time = EventTime(tokens[0])
        match = _LEADING_INT.match(tokens[1])
        if match is None:
            raise ParseError(f"Line {line_number}: invalid event id: {tokens[1]}")
        event_id = int(match.group(1))
        try:
            return self._handler_chain.handle(time, event_id, tokens)
        except ValueError as exc:
            raise ParseError(f"Line {line_number}: {exc}") from exc