"""Engine diagnostics package."""

from fsmengine.diagnostics.json_codec import dumps_bytes, dumps_text
from fsmengine.diagnostics.ring_buffer import RingBuffer
from fsmengine.diagnostics.trace import DEFAULT_TRACE_CAPACITY, TraceEntry, TransitionTrace

__all__ = [
    "DEFAULT_TRACE_CAPACITY",
    "RingBuffer",
    "TraceEntry",
    "TransitionTrace",
    "dumps_bytes",
    "dumps_text",
]
