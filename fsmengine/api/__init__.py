"""Public engine API contracts."""

from fsmengine.api.identity import Event, State
from fsmengine.api.errors import (
    ActionFailedError,
    ConfigurationClosedError,
    ConfigurationError,
    DuplicateTransitionError,
    FsmError,
    UnexpectedEventError,
)
from fsmengine.api.actions import (
    Action,
    CountedEffectAction,
    EmitLine,
    NotifyAction,
    SharedCounter,
    create_counter,
)
from fsmengine.api.fsm import (
    FireOutcome,
    Fired,
    StateMachine,
    Transition,
    UnexpectedEvent,
    create_state_machine,
)
from fsmengine.api.logging import (
    EngineLoggingConfig,
    JsonFormatter,
    configure_logging,
    get_logger,
    shutdown_logging,
)

__all__ = [
    "Action",
    "ActionFailedError",
    "ConfigurationClosedError",
    "ConfigurationError",
    "CountedEffectAction",
    "DuplicateTransitionError",
    "EmitLine",
    "EngineLoggingConfig",
    "Event",
    "FireOutcome",
    "Fired",
    "FsmError",
    "JsonFormatter",
    "NotifyAction",
    "SharedCounter",
    "State",
    "StateMachine",
    "Transition",
    "UnexpectedEvent",
    "UnexpectedEventError",
    "configure_logging",
    "create_counter",
    "create_state_machine",
    "get_logger",
    "shutdown_logging",
]
