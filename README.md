# clubledger

clubledger reads one day's event log from a computer club. It replays the events against the club's opening hours, its tables and its waiting queue. It then prints the full event history, including the events and errors the club generated itself, and one statistics line per table.

## Installation

```
pip install .
```

## Input format

The first three lines form the header:

```
3
09:00 19:00
10
```

1. The number of tables, as digits only.
2. The opening and closing times, as `HH:MM HH:MM`.
3. The hourly rate, as digits only. Every started hour of a session is charged in full.

Each line after the header is an event, written as `HH:MM <id> <client> [table]`. Empty lines are skipped. Event times must not decrease from one line to the next.

| id | meaning                    | extra field           |
|----|----------------------------|-----------------------|
| 1  | client arrived             |                       |
| 2  | client sat down at a table | table number, above 0 |
| 3  | client is waiting          |                       |
| 4  | client left                |                       |

Client names may contain only `a-z`, `0-9`, `_` and `-`.

A table number above the configured table count is accepted. That table then appears in the statistics.

## What the club generates

While replaying the log, the club adds events of its own right after the event that caused them:

| id | meaning |
|----|---------|
| 11 | client was sent away: the queue was full when they asked to wait, or the club closed |
| 12 | a waiting client took the table that was just freed |
| 13 | error, named in place of the client |

The error names are:

- `YouShallNotPass`: the client is already in the club.
- `NotOpenYet`: the client arrived outside working hours.
- `ClientUnknown`: the client is not in the club.
- `PlaceIsBusy`: the table is taken.
- `ICanWaitNoLonger!`: the client asked to wait while a table was free.

A client who asks to wait is sent away (id 11) when every table is busy and the queue already holds as many clients as there are tables. At closing time, every client still present leaves, in name order. Each of them produces an id 11 event.

## Usage

```
clubledger -f day.txt
clubledger --file=day.txt
clubledger --help
```

A file has to be given. Without one, the command prints `Not a single file has been transferred` and the help text, then exits with status 1.

If an option is unknown, the command prints `Wrong argument` and the help text, then exits with status 1.

If the input file cannot be read or is malformed, the command prints the reason to standard error and exits with status 1.

The report is built as follows:

1. It starts with the opening time.
2. Every event follows, one per line, both read and generated.
3. Then comes the closing time.
4. It ends with one line per table, in table order: `<table> <revenue> <revenue>`.

Times are printed without a leading zero on the hour, for example `9:00`.

The statistics line repeats the revenue in its third column. The time each table was occupied is not reported.

## Library use

```python
from clubledger.handlers import default_chain
from clubledger.file_parser import FileParser
from clubledger.club_service import ClubService
from clubledger.report import format_result

data = FileParser("day.txt", default_chain()).parse()
result = ClubService(data.config).run(data.events)
print(format_result(result), end="")
```

- `clubledger.file_parser.ParseError` (a `ValueError`) is raised for a file that cannot be read or is malformed.
- `clubledger.report.write_result(result, stream)` writes the report to a stream, or to standard output by default.
- `clubledger.arguments.ArgParser` is the small option parser that the command uses.

## Running the tests

```
pip install .[test]
pytest
```