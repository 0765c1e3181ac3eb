"""Raw input token to event identity mapping."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, TextIO

from fsmengine.api.identity import Event


class UnknownEventTokenError(ValueError):
    """Input token does not name any configured event."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"unknown event token: {token}")


def normalize_token(raw: str) -> str:
    """Trim and uppercase one raw token."""
    return raw.strip().upper()


@dataclass(frozen=True, slots=True)
class EventTokenMap:
    """Immutable mapping from normalized token text to events."""

    by_token: Mapping[str, Event]

    @classmethod
    def from_events(cls, events: Iterable[Event]) -> EventTokenMap:
        mapping: dict[str, Event] = {}
        for event in events:
            token = normalize_token(event.name)
            existing = mapping.get(token)
            if existing is not None and existing != event:
                raise ValueError(f"events {existing.name} and {event.name} share token {token}")
            mapping[token] = event
        return cls(MappingProxyType(mapping))

    def tokens(self) -> tuple[str, ...]:
        return tuple(self.by_token)

    def resolve(self, raw: str) -> Event:
        """Return the event for ``raw``; raises UnknownEventTokenError."""
        token = normalize_token(raw)
        event = self.by_token.get(token)
        if event is None:
            raise UnknownEventTokenError(token)
        return event


def iter_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-separated tokens from a text stream until EOF."""
    for line in stream:
        yield from line.split()
