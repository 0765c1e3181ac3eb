"""TCP connection lifecycle wired onto the table-driven engine."""

from __future__ import annotations

import logging

from fsmengine.api.actions import (
    Action,
    CountedEffectAction,
    EmitLine,
    NotifyAction,
    SharedCounter,
    create_counter,
)
from fsmengine.api.fsm import FireOutcome, StateMachine, create_state_machine
from fsmengine.api.identity import Event, State
from fsmengine.diagnostics.trace import TransitionTrace
from tcpsim.core.protocol import CLOSED, DATA_DIRECTIONS, LIFECYCLE

MACHINE_NAME = "TCP_FSM"
DATA_TEMPLATE = "DATA {direction} {count}"

logger = logging.getLogger(__name__)


class TcpConnection:
    """One simulated connection: a configured machine plus its data counter."""

    def __init__(
        self,
        *,
        emit: EmitLine = print,
        counter: SharedCounter | None = None,
        trace: TransitionTrace | None = None,
    ) -> None:
        self._emit = emit
        self._counter = counter if counter is not None else create_counter()
        self._machine = create_state_machine(MACHINE_NAME, CLOSED, trace=trace)
        for source, event, target in LIFECYCLE:
            self._machine.add_transition(source, event, target, self._action_for(source, event))
        logger.debug(
            "tcp_connection_configured machine=%s transitions=%d",
            MACHINE_NAME,
            len(self._machine.transitions()),
        )

    @property
    def machine(self) -> StateMachine:
        return self._machine

    @property
    def data_count(self) -> int:
        return self._counter.value

    def fire(self, event: Event) -> FireOutcome:
        return self._machine.fire(event)

    def current_state_name(self) -> str:
        return self._machine.current_state_name()

    def _action_for(self, source: State, event: Event) -> Action:
        direction = DATA_DIRECTIONS.get(event)
        if direction is not None:
            return CountedEffectAction(
                direction=direction,
                counter=self._counter,
                emit=self._emit,
                template=DATA_TEMPLATE,
            )
        return NotifyAction(event=event, state=source, emit=self._emit)
