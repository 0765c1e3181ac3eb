"""Engine runtime modules."""

from fsmengine.runtime.counter import RuntimeCounter
from fsmengine.runtime.debug_config import DebugConfig, load_debug_config, resolve_log_level_name
from fsmengine.runtime.fsm import RuntimeStateMachine
from fsmengine.runtime.logging import (
    configure_engine_logging,
    setup_engine_logging,
    shutdown_engine_logging,
)

__all__ = [
    "DebugConfig",
    "RuntimeCounter",
    "RuntimeStateMachine",
    "configure_engine_logging",
    "load_debug_config",
    "resolve_log_level_name",
    "setup_engine_logging",
    "shutdown_engine_logging",
]
