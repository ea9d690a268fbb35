import pytest

from clubledger.cli import main
from clubledger.club_service import ClubService
from clubledger.file_parser import FileParser
from clubledger.handlers import default_chain
from clubledger.report import format_result

REVENUE_INPUT = (
    "3\n"
    "09:00 19:00\n"
    "10\n"
    "09:00 1 client1\n"
    "09:10 2 client1 1\n"
    "10:10 4 client1\n"
)

BUSY_INPUT = (
    "3\n"
    "09:00 19:00\n"
    "10\n"
    "09:00 1 client1\n"
    "09:05 2 client1 1\n"
    "09:10 1 client2\n"
    "09:15 2 client2 1\n"
)


@pytest.fixture
def revenue_file(tmp_path):
    path = tmp_path / "revenue.txt"
    path.write_text(REVENUE_INPUT, encoding="utf-8")
    return path


def _expected(path):
    data = FileParser(path, default_chain()).parse()
    return format_result(ClubService(data.config).run(data.events))


def test_short_option_prints_report(revenue_file, capsys):
    assert main(["-f", str(revenue_file)]) == 0
    out = capsys.readouterr().out
    assert out == _expected(revenue_file)
    assert "1 10 10" in out.splitlines()


def test_long_option_with_equals(revenue_file, capsys):
    assert main([f"--file={revenue_file}"]) == 0
    assert capsys.readouterr().out == _expected(revenue_file)


def test_closing_time_line(revenue_file, capsys):
    main(["-f", str(revenue_file)])
    lines = capsys.readouterr().out.splitlines()
    assert "19:00" in lines


def test_busy_table_error_reported(tmp_path, capsys):
    path = tmp_path / "occupied.txt"
    path.write_text(BUSY_INPUT, encoding="utf-8")
    assert main(["-f", str(path)]) == 0
    assert "9:15 13 PlaceIsBusy" in capsys.readouterr().out.splitlines()


def test_no_file_given(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Not a single file has been transferred\n")
    assert "Display this help and exit" in out


def test_help_requested(capsys):
    assert main(["-h"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "Program"
    assert "Program accumulate arguments" in out


def test_long_help_requested(capsys):
    assert main(["--help"]) == 0
    assert "path to input file" in capsys.readouterr().out


def test_unknown_option(capsys):
    assert main(["-x"]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Wrong argument\n")


def test_stray_positional(capsys):
    assert main(["input.txt"]) == 1
    assert capsys.readouterr().out.startswith("Wrong argument\n")


def test_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main(["-f", str(missing)]) == 1
    captured = capsys.readouterr()
    assert "Cannot open file" in captured.err
    assert captured.out == ""


def test_malformed_file(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("three\n09:00 19:00\n10\n", encoding="utf-8")
    assert main(["-f", str(path)]) == 1
    assert "Invalid tables count: three" in capsys.readouterr().err