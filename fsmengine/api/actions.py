"""Public action and shared-counter API contracts."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeAlias, runtime_checkable

from fsmengine.api.identity import Event, State

EmitLine: TypeAlias = Callable[[str], None]

NOTIFY_TEMPLATE = "Event {event} received, current State is {state}"
COUNTED_TEMPLATE = "{direction} {count}"

_ACTION_LOGGER = logging.getLogger("fsmengine.actions")


@runtime_checkable
class Action(Protocol):
    """Side effect bound to one transition. Runs once per matched fire."""

    def execute(self) -> None:
        """Run the side effect."""


class SharedCounter(Protocol):
    """Counter shared between actions constructed with the same instance."""

    @property
    def value(self) -> int:
        """Return current value."""

    def increment(self, step: int = 1) -> int:
        """Add ``step`` and return the new value."""

    def reset(self) -> None:
        """Set value back to the start value."""


def _default_emit(line: str) -> None:
    _ACTION_LOGGER.info(line)


@dataclass(frozen=True, slots=True)
class NotifyAction:
    """Emit one line naming the event and the state it fired from."""

    event: Event
    state: State
    emit: EmitLine | None = None
    template: str = NOTIFY_TEMPLATE

    def render(self) -> str:
        return self.template.format(event=self.event.name, state=self.state.name)

    def execute(self) -> None:
        (self.emit or _default_emit)(self.render())


@dataclass(frozen=True, slots=True)
class CountedEffectAction:
    """Increment a shared counter, then emit a line with the new count."""

    direction: str
    counter: SharedCounter
    emit: EmitLine | None = None
    template: str = COUNTED_TEMPLATE

    def execute(self) -> None:
        count = self.counter.increment()
        line = self.template.format(direction=self.direction, count=count)
        (self.emit or _default_emit)(line)


def create_counter(start: int = 0) -> SharedCounter:
    """Create default thread-safe shared counter implementation."""
    from fsmengine.runtime.counter import RuntimeCounter

    return RuntimeCounter(start)
