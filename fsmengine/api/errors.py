"""Engine error taxonomy.

Configuration errors are programmer defects and abort setup. Unmatched
events are reported as outcome values by ``fire``; ``UnexpectedEventError``
exists for callers that prefer to raise them. Action failures abort the
in-progress transition and surface as ``ActionFailedError``.
"""

from __future__ import annotations


class FsmError(Exception):
    """Base class for all state-machine engine errors."""


class ConfigurationError(FsmError):
    """Transition table could not be configured as requested."""


class DuplicateTransitionError(ConfigurationError):
    """A transition for the same (state, event) key is already registered."""

    def __init__(self, state_name: str, event_name: str) -> None:
        self.state_name = state_name
        self.event_name = event_name
        super().__init__(f"duplicate transition for event {event_name} in state {state_name}")


class ConfigurationClosedError(ConfigurationError):
    """The table was modified after the machine started firing events."""

    def __init__(self, machine_name: str) -> None:
        self.machine_name = machine_name
        super().__init__(f"machine {machine_name} is sealed; transitions must be registered before fire")


class UnexpectedEventError(FsmError):
    """No transition is registered for the event in the current state."""

    def __init__(self, state_name: str, event_name: str) -> None:
        self.state_name = state_name
        self.event_name = event_name
        super().__init__(f"unexpected event {event_name} in state {state_name}")


class ActionFailedError(FsmError):
    """Transition action raised; the machine stayed in the source state."""

    def __init__(self, state_name: str, event_name: str, target_name: str) -> None:
        self.state_name = state_name
        self.event_name = event_name
        self.target_name = target_name
        super().__init__(
            f"action failed for event {event_name} in state {state_name} (target {target_name})"
        )
