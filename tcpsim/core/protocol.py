"""Simplified TCP connection lifecycle states and events."""

from __future__ import annotations

from fsmengine.api.identity import Event, State

CLOSED = State("CLOSED")
LISTEN = State("LISTEN")
SYN_SENT = State("SYN_SENT")
SYN_RCVD = State("SYN_RCVD")
ESTABLISHED = State("ESTABLISHED")
FIN_WAIT_1 = State("FIN_WAIT_1")
FIN_WAIT_2 = State("FIN_WAIT_2")
CLOSING = State("CLOSING")
TIME_WAIT = State("TIME_WAIT")
CLOSE_WAIT = State("CLOSE_WAIT")
LAST_ACK = State("LAST_ACK")

PASSIVE = Event("PASSIVE")
ACTIVE = Event("ACTIVE")
SYN = Event("SYN")
SYNACK = Event("SYNACK")
ACK = Event("ACK")
RDATA = Event("RDATA")
SDATA = Event("SDATA")
FIN = Event("FIN")
CLOSE = Event("CLOSE")
TIMEOUT = Event("TIMEOUT")

ALL_STATES: tuple[State, ...] = (
    CLOSED,
    LISTEN,
    SYN_SENT,
    SYN_RCVD,
    ESTABLISHED,
    FIN_WAIT_1,
    FIN_WAIT_2,
    CLOSING,
    TIME_WAIT,
    CLOSE_WAIT,
    LAST_ACK,
)

ALL_EVENTS: tuple[Event, ...] = (
    PASSIVE,
    ACTIVE,
    SYN,
    SYNACK,
    ACK,
    RDATA,
    SDATA,
    FIN,
    CLOSE,
    TIMEOUT,
)

# Data events are self-loops in ESTABLISHED; the value is the direction word.
DATA_DIRECTIONS: dict[Event, str] = {
    RDATA: "received",
    SDATA: "sent",
}

# (source, event, target) rows of the connection lifecycle.
LIFECYCLE: tuple[tuple[State, Event, State], ...] = (
    (CLOSED, PASSIVE, LISTEN),
    (CLOSED, ACTIVE, SYN_SENT),
    (LISTEN, SYN, SYN_RCVD),
    (LISTEN, CLOSE, CLOSED),
    (SYN_SENT, SYN, SYN_RCVD),
    (SYN_SENT, SYNACK, ESTABLISHED),
    (SYN_SENT, CLOSE, CLOSED),
    (SYN_RCVD, ACK, ESTABLISHED),
    (SYN_RCVD, CLOSE, FIN_WAIT_1),
    (ESTABLISHED, RDATA, ESTABLISHED),
    (ESTABLISHED, SDATA, ESTABLISHED),
    (ESTABLISHED, FIN, CLOSE_WAIT),
    (ESTABLISHED, CLOSE, FIN_WAIT_1),
    (FIN_WAIT_1, FIN, CLOSING),
    (FIN_WAIT_1, ACK, FIN_WAIT_2),
    (FIN_WAIT_2, FIN, TIME_WAIT),
    (CLOSING, ACK, TIME_WAIT),
    (TIME_WAIT, TIMEOUT, CLOSED),
    (CLOSE_WAIT, CLOSE, LAST_ACK),
    (LAST_ACK, ACK, CLOSED),
)
