"""Transition trace recording for replay comparison and export."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from fsmengine.api.fsm import FireOutcome, Fired
from fsmengine.diagnostics.json_codec import dumps_bytes, dumps_text
from fsmengine.diagnostics.ring_buffer import RingBuffer

DEFAULT_TRACE_CAPACITY = 1024


@dataclass(frozen=True, slots=True)
class TraceEntry:
    """One recorded ``fire`` outcome."""

    seq: int
    machine: str
    source: str
    event: str
    target: str | None
    accepted: bool
    ts_utc: str

    @property
    def resulting_state(self) -> str:
        return self.target if self.target is not None else self.source

    def to_payload(self, *, include_ts: bool = True) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "seq": self.seq,
            "machine": self.machine,
            "source": self.source,
            "event": self.event,
            "target": self.target,
            "accepted": self.accepted,
        }
        if include_ts:
            payload["ts_utc"] = self.ts_utc
        return payload


class TransitionTrace:
    """Bounded log of fire outcomes, shared by one or more machines."""

    def __init__(self, capacity: int = DEFAULT_TRACE_CAPACITY) -> None:
        self._buffer = RingBuffer[TraceEntry](capacity)
        self._next_seq = 1

    @property
    def capacity(self) -> int:
        return self._buffer.capacity

    @property
    def size(self) -> int:
        return self._buffer.size

    def record(self, machine_name: str, outcome: FireOutcome) -> TraceEntry:
        if isinstance(outcome, Fired):
            source = outcome.source.name
            target: str | None = outcome.target.name
        else:
            source = outcome.state.name
            target = None
        entry = TraceEntry(
            seq=self._next_seq,
            machine=machine_name,
            source=source,
            event=outcome.event.name,
            target=target,
            accepted=outcome.accepted,
            ts_utc=datetime.now(tz=UTC).isoformat(timespec="milliseconds"),
        )
        self._next_seq += 1
        self._buffer.append(entry)
        return entry

    def entries(self, *, limit: int | None = None) -> list[TraceEntry]:
        return self._buffer.snapshot(limit=limit)

    def trajectory(self) -> list[str]:
        """Return the state name the machine was in after each recorded fire."""
        return [entry.resulting_state for entry in self._buffer.snapshot()]

    def digest(self) -> str:
        """Stable hash of recorded outcomes, ignoring timestamps and sequence numbers."""
        payload = [
            {k: v for k, v in entry.to_payload(include_ts=False).items() if k != "seq"}
            for entry in self._buffer.snapshot()
        ]
        normalized = dumps_text(payload, sort_keys=True)
        return hashlib.sha256(normalized.encode("utf-8")).hexdigest()

    def export_jsonl(self, path: str | Path) -> Path:
        """Write one JSON object per entry and return the output path."""
        out_path = Path(path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with out_path.open("wb") as handle:
            for entry in self._buffer.snapshot():
                handle.write(dumps_bytes(entry.to_payload()))
                handle.write(b"\n")
        return out_path

    def clear(self) -> None:
        self._buffer.clear()
        self._next_seq = 1
