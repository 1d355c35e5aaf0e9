"""Periodic retrieval of the connection log.

The poller fetches once when started, then once per tick of a repeating
timer. It never owns a hidden timer: :meth:`Poller.start` takes the
scheduler to use (Textual's ``set_interval`` in the app, a fake in tests)
and returns a :class:`PollHandle` that the caller passes back to
:meth:`Poller.stop`.

Fetch failures are logged and otherwise ignored; the next tick simply
tries again. Each handle has at most one fetch in flight, and a fetch
that completes after its handle was stopped is dropped.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from .models import ConnectionLog, FetchResult

log = logging.getLogger(__name__)

POLL_INTERVAL = 30.0

Fetch = Callable[[], Awaitable[FetchResult]]
SetInterval = Callable[[float, Callable[[], None]], Any]


class PollHandle:
    """The timer belonging to one ACTIVE period of a poller."""

    def __init__(self) -> None:
        self.timer: Any = None
        self.pending: Optional[asyncio.Task] = None
        self.stopped = False

    @property
    def active(self) -> bool:
        return not self.stopped


class Poller:
    def __init__(
        self, fetch: Fetch, connection_log: ConnectionLog, interval: float = POLL_INTERVAL
    ):
        self.fetch = fetch
        self.connection_log = connection_log
        self.interval = interval
        # Most recent attempt across all handles.
        self.pending: Optional[asyncio.Task] = None

    def start(self, set_interval: SetInterval) -> PollHandle:
        """Fetch now, then every ``interval`` seconds via ``set_interval``."""
        handle = PollHandle()
        self.refresh(handle)
        handle.timer = set_interval(self.interval, lambda: self.refresh(handle))
        return handle

    def stop(self, handle: Optional[PollHandle]) -> None:
        """Cancel the timer. Safe to call twice, or with no handle at all."""
        if handle is None or handle.stopped:
            return
        handle.stopped = True
        timer, handle.timer = handle.timer, None
        if timer is None:
            return
        try:
            timer.stop()
        except Exception:
            log.exception("Failed to stop poll timer")

    def refresh(self, handle: PollHandle) -> None:
        """Start one fetch attempt unless stopped or one is already running."""
        if handle.stopped:
            return
        if handle.pending is not None and not handle.pending.done():
            log.debug("Fetch already in flight, skipping tick")
            return
        handle.pending = asyncio.get_running_loop().create_task(self._attempt(handle))
        self.pending = handle.pending

    async def _attempt(self, handle: PollHandle) -> None:
        try:
            result = await self.fetch()
        except Exception as e:
            result = FetchResult.failed(e)
        if handle.stopped:
            log.debug("Discarding fetch result received after stop")
            return
        if not result.ok:
            log.error("Failed to fetch connections: %s", result.failure.reason)
            return
        log.info("Received %d connection(s)", len(result.connections))
        try:
            self.connection_log.replace(result.connections)
        except Exception:
            log.exception("Connection log subscriber failed")
