"""Command that processes a club's event file and prints the day's report."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from clubledger.arguments import ArgParser, ArgumentError
from clubledger.club_service import ClubService
from clubledger.file_parser import FileParser, ParseError
from clubledger.handlers import default_chain
from clubledger.report import write_result

DEFAULT_INPUT = "../input/test_file.txt"


@dataclass
class _Options:
    input_file: str = ""


def _build_parser(options: _Options) -> ArgParser:
    parser = ArgParser("Program")
    # The default is set before the value is stored, so it never reaches the options.
    parser.add_string_argument("file", "path to input file", short_name="f").default(
        DEFAULT_INPUT
    ).store_value(options, "input_file")
    parser.add_help("h", "help", "Program accumulate arguments")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    options = _Options()
    parser = _build_parser(options)

    try:
        parser.parse(args)
    except ArgumentError as exc:
        print(exc, file=sys.stderr)
        print("Wrong argument")
        print(parser.help_description())
        return 1

    if parser.help_requested():
        print(parser.help_description())
        return 0

    if not options.input_file:
        print("Not a single file has been transferred")
        sys.stdout.write(parser.help_description())
        return 1

    try:
        data = FileParser(options.input_file, default_chain()).parse()
    except ParseError as exc:
        print(exc, file=sys.stderr)
        return 1

    result = ClubService(data.config).run(data.events)
    write_result(result, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())