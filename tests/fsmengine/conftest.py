from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from fsmengine.api.identity import Event, State


@dataclass(slots=True)
class RecordingAction:
    label: str
    log: list[str] = field(default_factory=list)

    def execute(self) -> None:
        self.log.append(self.label)


@dataclass(slots=True)
class FailingAction:
    message: str = "boom"
    calls: int = 0

    def execute(self) -> None:
        self.calls += 1
        raise RuntimeError(self.message)


IDLE = State("IDLE")
RUNNING = State("RUNNING")
DONE = State("DONE")
START = Event("START")
TICK = Event("TICK")
STOP = Event("STOP")


@pytest.fixture
def action_log() -> list[str]:
    return []
