"""Public state-machine API contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Protocol, TypeAlias

from fsmengine.api.actions import Action
from fsmengine.api.errors import UnexpectedEventError
from fsmengine.api.identity import Event, State

if TYPE_CHECKING:
    from fsmengine.diagnostics.trace import TransitionTrace


@dataclass(frozen=True, slots=True)
class Transition:
    """Table entry: (source, event) -> (target, action)."""

    source: State
    event: Event
    target: State
    action: Action

    @property
    def key(self) -> tuple[State, Event]:
        return (self.source, self.event)

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target


@dataclass(frozen=True, slots=True)
class Fired:
    """Outcome of a matched event; the machine is now in ``target``."""

    source: State
    event: Event
    target: State

    @property
    def accepted(self) -> Literal[True]:
        return True


@dataclass(frozen=True, slots=True)
class UnexpectedEvent:
    """Outcome of an unmatched event; the machine is still in ``state``."""

    state: State
    event: Event

    @property
    def accepted(self) -> Literal[False]:
        return False

    def as_error(self) -> UnexpectedEventError:
        return UnexpectedEventError(self.state.name, self.event.name)

    def __str__(self) -> str:
        return f"unexpected event {self.event.name} in state {self.state.name}"


FireOutcome: TypeAlias = Fired | UnexpectedEvent


class StateMachine(Protocol):
    """Public table-driven state-machine contract.

    One instance must be driven by a single logical thread of control at a
    time; ``fire`` calls are not serialized internally.
    """

    @property
    def name(self) -> str:
        """Return machine name."""

    @property
    def initial_state(self) -> State:
        """Return configured initial state."""

    @property
    def current_state(self) -> State:
        """Return current state."""

    @property
    def sealed(self) -> bool:
        """Return whether the table is closed to further registration."""

    def current_state_name(self) -> str:
        """Return current state's name."""

    def add_transition(self, source: State, event: Event, target: State, action: Action) -> Transition:
        """Register one transition keyed by (source, event)."""

    def register(self, transition: Transition) -> Transition:
        """Register one prebuilt transition."""

    def fire(self, event: Event) -> FireOutcome:
        """Apply the transition for (current state, event) if one exists."""

    def transition_for(self, state: State, event: Event) -> Transition | None:
        """Look up a transition without firing it."""

    def transitions(self) -> tuple[Transition, ...]:
        """Return registered transitions in registration order."""

    def states(self) -> frozenset[State]:
        """Return states known to the table, including the initial state."""

    def events(self) -> frozenset[Event]:
        """Return events known to the table."""

    def reset(self) -> None:
        """Return to the initial state without touching the table."""


def create_state_machine(
    name: str,
    initial_state: State,
    *,
    trace: TransitionTrace | None = None,
) -> StateMachine:
    """Create default engine state-machine implementation."""
    from fsmengine.runtime.fsm import RuntimeStateMachine

    return RuntimeStateMachine(name, initial_state, trace=trace)
