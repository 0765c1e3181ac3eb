"""Interactive session loop feeding input tokens into a connection."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from fsmengine.api.actions import EmitLine
from fsmengine.api.fsm import UnexpectedEvent
from tcpsim.app.connection import TcpConnection
from tcpsim.app.tokens import EventTokenMap, UnknownEventTokenError

RULE = "=" * 60

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionSummary:
    """Counts collected over one session run."""

    final_state: str
    events_seen: int
    accepted: int
    unexpected: int
    unknown: int
    data_count: int


def write_banner(emit: EmitLine, token_map: EventTokenMap, initial_state: str) -> None:
    emit(RULE)
    emit("TCP State Machine Simulator")
    emit(RULE)
    emit(f"Valid events: {', '.join(token_map.tokens())}")
    emit("Events are matched case-insensitively")
    emit(RULE)
    emit(f"Initial state: {initial_state}")
    emit("")


def run_session(
    tokens: Iterable[str],
    connection: TcpConnection,
    token_map: EventTokenMap,
    *,
    emit: EmitLine = print,
    banner: bool = True,
) -> SessionSummary:
    """Deliver tokens in order and report the state after each one."""
    if banner:
        write_banner(emit, token_map, connection.current_state_name())

    events_seen = 0
    accepted = 0
    unexpected = 0
    unknown = 0
    for raw in tokens:
        if not raw.strip():
            continue
        events_seen += 1
        try:
            event = token_map.resolve(raw)
        except UnknownEventTokenError as exc:
            unknown += 1
            logger.info("session_unknown_token token=%s", exc.token)
            emit(f"Error: {exc}")
        else:
            outcome = connection.fire(event)
            if isinstance(outcome, UnexpectedEvent):
                unexpected += 1
                logger.info(
                    "session_unexpected_event state=%s event=%s",
                    outcome.state.name,
                    outcome.event.name,
                )
                emit(f"Error: {outcome}")
            else:
                accepted += 1
        emit(f"Current state: {connection.current_state_name()}")
        emit("")

    summary = SessionSummary(
        final_state=connection.current_state_name(),
        events_seen=events_seen,
        accepted=accepted,
        unexpected=unexpected,
        unknown=unknown,
        data_count=connection.data_count,
    )
    if banner:
        emit(RULE)
        emit(f"Program terminated. Final state: {summary.final_state}")
        emit(f"Data events processed: {summary.data_count}")
        emit(RULE)
    logger.info(
        "session_complete final_state=%s events=%d accepted=%d unexpected=%d unknown=%d data=%d",
        summary.final_state,
        summary.events_seen,
        summary.accepted,
        summary.unexpected,
        summary.unknown,
        summary.data_count,
    )
    return summary
