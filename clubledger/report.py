"""Plain-text rendering of a day's result."""

from __future__ import annotations

import sys
from typing import TextIO

from clubledger.models import ClubResult, TableInfo


def _table_line(info: TableInfo) -> str:
    return f"{info.table_id} {info.revenue} {info.occupied_minutes}"


def format_result(result: ClubResult) -> str:
    """Render the opening time, event log, closing time and table statistics."""
    lines = [str(result.open_time)]
    lines.extend(str(event) for event in result.events)
    lines.append(str(result.end_time))
    lines.extend(_table_line(info) for info in result.table_stats)
    return "".join(f"{line}\n" for line in lines)


def write_result(result: ClubResult, stream: TextIO | None = None) -> None:
    """Write the rendered result to ``stream`` (standard output by default)."""
    target = sys.stdout if stream is None else stream
    target.write(format_result(result))