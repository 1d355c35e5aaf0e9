"""Bridge between the viewer and the connection store."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Iterable, List, Union

from ..models import Connection, FetchResult
from ..store import ConnectionStore


async def get_connections(store: ConnectionStore) -> List[Connection]:
    """Fetch every recorded day, newest first, without blocking the event loop."""
    return await asyncio.to_thread(store.get_connections)


async def fetch_connections(
    source: Callable[[], Awaitable[Iterable[Union[Connection, dict]]]],
) -> FetchResult:
    """Call ``source`` and wrap its outcome. Never raises for source errors."""
    try:
        connections = [_coerce(item) for item in await source()]
    except Exception as e:
        return FetchResult.failed(e)
    return FetchResult.success(connections)


def _coerce(item: Any) -> Connection:
    if isinstance(item, Connection):
        return item
    return Connection.from_mapping(item)


def make_fetch(store: ConnectionStore) -> Callable[[], Awaitable[FetchResult]]:
    """Zero-argument fetch for the poller, backed by ``store``."""

    async def fetch() -> FetchResult:
        return await fetch_connections(lambda: get_connections(store))

    return fetch
