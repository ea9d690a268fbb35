from clubledger.event_time import EventTime
from clubledger.table import Table


def test_new_table_is_free():
    table = Table(1)
    assert table.table_id == 1
    assert table.is_occupied() is False
    assert table.total_income == 0
    assert table.total_minutes == 0


def test_seat_occupies_table():
    table = Table(2)
    table.seat("client1", EventTime("09:10"))
    assert table.is_occupied() is True
    assert table.client_name == "client1"
    assert table.session_start == EventTime("09:10")


def test_one_full_hour_is_charged_once():
    table = Table(1)
    table.seat("client1", EventTime("09:10"))
    table.leave(EventTime("10:10"), 10)
    assert table.total_income == 10 * 1
    assert table.total_minutes == EventTime("10:10") - EventTime("09:10")
    assert table.is_occupied() is False


def test_started_hour_is_charged_in_full():
    table = Table(1)
    table.seat("client1", EventTime("09:10"))
    table.leave(EventTime("10:11"), 10)
    assert table.total_income == 20


def test_short_session_costs_one_hour():
    table = Table(1)
    table.seat("client1", EventTime("09:10"))
    table.leave(EventTime("09:11"), 7)
    assert table.total_income == 7
    assert table.total_minutes == EventTime("09:11") - EventTime("09:10")


def test_leave_on_free_table_changes_nothing():
    table = Table(3)
    table.leave(EventTime("12:00"), 10)
    assert table.total_income == 0
    assert table.total_minutes == 0
    assert table.is_occupied() is False


def test_sessions_accumulate():
    table = Table(1)
    table.seat("a", EventTime("09:00"))
    table.leave(EventTime("10:00"), 10)
    first_income = table.total_income
    first_minutes = table.total_minutes
    table.seat("b", EventTime("11:00"))
    table.leave(EventTime("12:00"), 10)
    assert table.total_income == 2 * first_income
    assert table.total_minutes == 2 * first_minutes


def test_negative_session_rounds_toward_zero():
    table = Table(1)
    table.seat("late", EventTime("20:00"))
    table.leave(EventTime("19:00"), 10)
    assert table.total_minutes == EventTime("19:00") - EventTime("20:00")
    assert table.total_income == 0