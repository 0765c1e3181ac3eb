"""Table-driven finite-state-machine engine."""

from fsmengine.api import (
    Event,
    FireOutcome,
    Fired,
    State,
    StateMachine,
    Transition,
    UnexpectedEvent,
    create_state_machine,
)

__all__ = [
    "Event",
    "FireOutcome",
    "Fired",
    "State",
    "StateMachine",
    "Transition",
    "UnexpectedEvent",
    "create_state_machine",
]
