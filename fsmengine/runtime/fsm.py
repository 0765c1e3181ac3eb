"""Table-driven state-machine executor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fsmengine.api.actions import Action
from fsmengine.api.errors import (
    ActionFailedError,
    ConfigurationClosedError,
    DuplicateTransitionError,
)
from fsmengine.api.fsm import FireOutcome, Fired, Transition, UnexpectedEvent
from fsmengine.api.identity import Event, State

if TYPE_CHECKING:
    from fsmengine.diagnostics.trace import TransitionTrace

logger = logging.getLogger(__name__)


class RuntimeStateMachine:
    """Resolve (current state, event) through a transition table.

    The table is writable until the first ``fire`` and read-only afterward.
    A single instance assumes one caller at a time.
    """

    def __init__(
        self,
        name: str,
        initial_state: State,
        *,
        trace: TransitionTrace | None = None,
    ) -> None:
        if not name:
            raise ValueError("machine name must not be empty")
        if not isinstance(initial_state, State):
            raise TypeError("initial_state must be a State")
        self._name = name
        self._initial = initial_state
        self._current = initial_state
        self._table: dict[tuple[State, Event], Transition] = {}
        self._sealed = False
        self._trace = trace

    @property
    def name(self) -> str:
        return self._name

    @property
    def initial_state(self) -> State:
        return self._initial

    @property
    def current_state(self) -> State:
        return self._current

    @property
    def sealed(self) -> bool:
        return self._sealed

    def current_state_name(self) -> str:
        return self._current.name

    def add_transition(self, source: State, event: Event, target: State, action: Action) -> Transition:
        """Register one transition keyed by (source, event)."""
        return self.register(Transition(source=source, event=event, target=target, action=action))

    def register(self, transition: Transition) -> Transition:
        """Register one prebuilt transition. Duplicate keys are rejected."""
        if self._sealed:
            raise ConfigurationClosedError(self._name)
        if not isinstance(transition.action, Action):
            raise TypeError("transition action must provide execute()")
        key = transition.key
        if key in self._table:
            raise DuplicateTransitionError(transition.source.name, transition.event.name)
        self._table[key] = transition
        logger.debug(
            "fsm_register machine=%s source=%s event=%s target=%s",
            self._name,
            transition.source.name,
            transition.event.name,
            transition.target.name,
        )
        return transition

    def fire(self, event: Event) -> FireOutcome:
        """Apply the transition for (current state, event) if one exists."""
        self._sealed = True
        source = self._current
        transition = self._table.get((source, event))
        if transition is None:
            miss = UnexpectedEvent(state=source, event=event)
            logger.debug(
                "fsm_unexpected_event machine=%s state=%s event=%s",
                self._name,
                source.name,
                event.name,
            )
            self._record(miss)
            return miss
        try:
            transition.action.execute()
        except Exception as exc:
            # State is only advanced after the action completes.
            raise ActionFailedError(source.name, event.name, transition.target.name) from exc
        self._current = transition.target
        hit = Fired(source=source, event=event, target=transition.target)
        logger.debug(
            "fsm_fire machine=%s state=%s event=%s target=%s",
            self._name,
            source.name,
            event.name,
            transition.target.name,
        )
        self._record(hit)
        return hit

    def transition_for(self, state: State, event: Event) -> Transition | None:
        return self._table.get((state, event))

    def transitions(self) -> tuple[Transition, ...]:
        return tuple(self._table.values())

    def states(self) -> frozenset[State]:
        known = {self._initial}
        for transition in self._table.values():
            known.add(transition.source)
            known.add(transition.target)
        return frozenset(known)

    def events(self) -> frozenset[Event]:
        return frozenset(transition.event for transition in self._table.values())

    def reset(self) -> None:
        """Return to the initial state. The table stays sealed."""
        self._current = self._initial

    def _record(self, outcome: FireOutcome) -> None:
        if self._trace is not None:
            self._trace.record(self._name, outcome)

    def __repr__(self) -> str:
        return f"RuntimeStateMachine(name={self._name!r}, state={self._current.name!r}, transitions={len(self._table)})"


StateMachine = RuntimeStateMachine
