"""Engine-wide debug configuration sourced from environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from fsmengine.diagnostics.trace import DEFAULT_TRACE_CAPACITY


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool = False, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


@dataclass(frozen=True, slots=True)
class DebugConfig:
    """Immutable runtime debug configuration."""

    log_level: str
    trace_enabled: bool
    trace_capacity: int
    trace_export_path: str | None = None


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve runtime log level with engine-prefixed override."""
    value = _raw("FSM_LOG_LEVEL", env=env)
    if value is None:
        value = _text("LOG_LEVEL", default, env=env)
    return value.strip().upper()


def load_debug_config(env: Mapping[str, str] | None = None) -> DebugConfig:
    """Load immutable debug configuration from env vars."""
    export_path = _text("FSM_TRACE_EXPORT", "", env=env)
    return DebugConfig(
        log_level=resolve_log_level_name(env=env),
        trace_enabled=_flag("FSM_TRACE_ENABLED", False, env=env) or bool(export_path),
        trace_capacity=_int("FSM_TRACE_CAPACITY", DEFAULT_TRACE_CAPACITY, minimum=1, env=env),
        trace_export_path=export_path or None,
    )
