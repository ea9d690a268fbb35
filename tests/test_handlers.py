import pytest

from clubledger.event_time import EventTime
from clubledger.events import (
    ClientArrived,
    ClientLeft,
    ClientSatDown,
    ClientWaiting,
)
from clubledger.handlers import (
    ClientArrivedHandler,
    ClientLeftHandler,
    ClientSatDownHandler,
    ClientWaitingHandler,
    EventHandler,
    default_chain,
)

T = EventTime("09:00")


def test_set_next_returns_the_attached_handler():
    head = ClientArrivedHandler()
    second = ClientLeftHandler()
    assert head.set_next(second) is second


def test_chain_builds_arrival():
    event = default_chain().handle(T, 1, ["09:00", "1", "client1"])
    assert event == ClientArrived(T, "client1")


def test_chain_builds_left_and_waiting():
    chain = default_chain()
    assert chain.handle(T, 4, ["09:00", "4", "bob"]) == ClientLeft(T, "bob")
    assert chain.handle(T, 3, ["09:00", "3", "bob"]) == ClientWaiting(T, "bob")


def test_chain_builds_sat_down_with_table():
    event = default_chain().handle(T, 2, ["09:00", "2", "client1", "2"])
    assert event == ClientSatDown(T, "client1", 2)
    assert event.table_id == 2


def test_unknown_id_raises():
    with pytest.raises(ValueError, match="Unknown event ID: 7"):
        default_chain().handle(T, 7, ["09:00", "7", "client1"])


def test_bare_handler_without_next_raises():
    with pytest.raises(ValueError, match="Unknown event ID"):
        EventHandler().handle(T, 1, ["09:00", "1", "client1"])


def test_handler_alone_only_knows_its_kind():
    with pytest.raises(ValueError, match="Unknown event ID"):
        ClientWaitingHandler().handle(T, 1, ["09:00", "1", "client1"])


@pytest.mark.parametrize(
    "event_id, tokens, message",
    [
        (1, ["09:00", "1"], "Not enough arguments for ClientArrived event"),
        (4, ["09:00", "4"], "Not enough arguments for ClientLeft event"),
        (3, ["09:00", "3"], "Not enough arguments for ClientWaiting event"),
        (2, ["09:00", "2", "client1"], "Not enough arguments for ClientSatDown event"),
    ],
)
def test_missing_arguments(event_id, tokens, message):
    with pytest.raises(ValueError, match=message):
        default_chain().handle(T, event_id, tokens)


@pytest.mark.parametrize("name", ["Client", "a b", "имя", "x!", ""])
def test_invalid_client_name(name):
    with pytest.raises(ValueError, match="Invalid client name format"):
        default_chain().handle(T, 1, ["09:00", "1", name])


def test_non_positive_table_number():
    with pytest.raises(ValueError, match="Table number must be positive"):
        ClientSatDownHandler().handle(T, 2, ["09:00", "2", "client1", "0"])


def test_non_numeric_table_number():
    with pytest.raises(ValueError, match="Invalid table number format"):
        ClientSatDownHandler().handle(T, 2, ["09:00", "2", "client1", "abc"])