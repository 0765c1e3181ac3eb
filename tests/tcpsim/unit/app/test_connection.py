from __future__ import annotations

import itertools
import random

import pytest

from fsmengine.api.errors import ConfigurationClosedError
from fsmengine.api.fsm import Fired, UnexpectedEvent
from fsmengine.api.actions import NotifyAction
from fsmengine.api.identity import Event
from fsmengine.diagnostics.trace import TransitionTrace
from tcpsim.app.connection import MACHINE_NAME, TcpConnection
from tcpsim.core import protocol
from tcpsim.core.protocol import ALL_EVENTS, ALL_STATES, LIFECYCLE
from tests.tcpsim.oracle import PATH_TO_STATE, expected_next_state


def _fire_all(connection: TcpConnection, names: tuple[str, ...] | list[str]) -> list[str]:
    trajectory = []
    for name in names:
        connection.fire(Event(name))
        trajectory.append(connection.current_state_name())
    return trajectory


def test_connection_starts_closed_with_full_table(connection) -> None:
    assert connection.current_state_name() == "CLOSED"
    assert connection.machine.name == MACHINE_NAME
    assert len(connection.machine.transitions()) == 20
    assert connection.machine.states() == frozenset(ALL_STATES)
    assert connection.machine.events() == frozenset(ALL_EVENTS)
    assert connection.data_count == 0


def test_passive_open_data_and_simultaneous_close(connection, lines) -> None:
    trajectory = _fire_all(
        connection,
        ["PASSIVE", "SYN", "ACK", "RDATA", "SDATA", "CLOSE", "FIN", "ACK", "TIMEOUT"],
    )
    assert trajectory == [
        "LISTEN",
        "SYN_RCVD",
        "ESTABLISHED",
        "ESTABLISHED",
        "ESTABLISHED",
        "FIN_WAIT_1",
        "CLOSING",
        "TIME_WAIT",
        "CLOSED",
    ]
    assert connection.data_count == 2
    assert lines == [
        "Event PASSIVE received, current State is CLOSED",
        "Event SYN received, current State is LISTEN",
        "Event ACK received, current State is SYN_RCVD",
        "DATA received 1",
        "DATA sent 2",
        "Event CLOSE received, current State is ESTABLISHED",
        "Event FIN received, current State is FIN_WAIT_1",
        "Event ACK received, current State is CLOSING",
        "Event TIMEOUT received, current State is TIME_WAIT",
    ]


def test_invalid_event_in_closed(connection, lines) -> None:
    outcome = connection.fire(protocol.ACK)
    assert outcome == UnexpectedEvent(state=protocol.CLOSED, event=protocol.ACK)
    assert connection.current_state_name() == "CLOSED"
    assert lines == []


def test_active_open_and_orderly_close(connection) -> None:
    trajectory = _fire_all(
        connection,
        ["ACTIVE", "SYNACK", "CLOSE", "ACK", "FIN", "TIMEOUT"],
    )
    assert trajectory == [
        "SYN_SENT",
        "ESTABLISHED",
        "FIN_WAIT_1",
        "FIN_WAIT_2",
        "TIME_WAIT",
        "CLOSED",
    ]


def test_passive_close_via_close_wait(connection) -> None:
    trajectory = _fire_all(connection, ["ACTIVE", "SYNACK", "FIN", "CLOSE", "ACK"])
    assert trajectory[-3:] == ["CLOSE_WAIT", "LAST_ACK", "CLOSED"]


def test_data_self_loops_keep_state_and_count(connection, lines) -> None:
    _fire_all(connection, ["ACTIVE", "SYNACK"])
    lines.clear()
    for name in ["SDATA", "SDATA", "RDATA"]:
        outcome = connection.fire(Event(name))
        assert isinstance(outcome, Fired)
        assert outcome.source == outcome.target == protocol.ESTABLISHED
    assert connection.data_count == 3
    assert lines == ["DATA sent 1", "DATA sent 2", "DATA received 3"]


@pytest.mark.parametrize(
    ("state_name", "event_name"),
    list(itertools.product(PATH_TO_STATE, [event.name for event in ALL_EVENTS])),
)
def test_every_state_event_pair_matches_switch_form(lines, state_name, event_name) -> None:
    connection = TcpConnection(emit=lines.append)
    _fire_all(connection, PATH_TO_STATE[state_name])
    assert connection.current_state_name() == state_name
    lines.clear()

    outcome = connection.fire(Event(event_name))
    expected = expected_next_state(state_name, event_name)
    if expected is None:
        assert isinstance(outcome, UnexpectedEvent)
        assert connection.current_state_name() == state_name
        assert lines == []
    else:
        assert isinstance(outcome, Fired)
        assert connection.current_state_name() == expected
        assert len(lines) == 1


def test_lifecycle_rows_have_unique_keys() -> None:
    keys = [(source, event) for source, event, _ in LIFECYCLE]
    assert len(keys) == len(set(keys))


def test_replaying_a_sequence_is_deterministic() -> None:
    rng = random.Random(1337)
    names = [rng.choice(ALL_EVENTS).name for _ in range(400)]
    runs = []
    for _ in range(2):
        trace = TransitionTrace(capacity=len(names))
        connection = TcpConnection(emit=lambda _line: None, trace=trace)
        _fire_all(connection, names)
        runs.append((trace.trajectory(), trace.digest(), connection.data_count))
    assert runs[0] == runs[1]


def test_connections_do_not_share_counters(lines) -> None:
    first = TcpConnection(emit=lines.append)
    second = TcpConnection(emit=lines.append)
    _fire_all(first, ["ACTIVE", "SYNACK", "RDATA"])
    assert first.data_count == 1
    assert second.data_count == 0


def test_connection_table_is_closed_once_running(connection) -> None:
    connection.fire(protocol.PASSIVE)
    with pytest.raises(ConfigurationClosedError):
        connection.machine.add_transition(
            protocol.LISTEN,
            protocol.TIMEOUT,
            protocol.CLOSED,
            NotifyAction(protocol.TIMEOUT, protocol.LISTEN),
        )
