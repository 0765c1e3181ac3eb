from __future__ import annotations

import pytest

from tcpsim.app.connection import TcpConnection
from tcpsim.app.tokens import EventTokenMap
from tcpsim.core.protocol import ALL_EVENTS


@pytest.fixture
def lines() -> list[str]:
    return []


@pytest.fixture
def connection(lines) -> TcpConnection:
    return TcpConnection(emit=lines.append)


@pytest.fixture
def token_map() -> EventTokenMap:
    return EventTokenMap.from_events(ALL_EVENTS)
