import asyncio

import pytest

from eduroamlog.models import Connection, FetchResult


class FakeTimer:
    def __init__(self, interval, callback):
        self.interval = interval
        self.callback = callback
        self.stopped = False

    def stop(self):
        self.stopped = True


class FakeScheduler:
    """Stands in for Textual's ``set_interval``; time advances only via :meth:`advance`."""

    def __init__(self):
        self.timers = []

    def __call__(self, interval, callback):
        timer = FakeTimer(interval, callback)
        self.timers.append(timer)
        return timer

    def advance(self, ticks=1):
        for _ in range(ticks):
            for timer in self.timers:
                if not timer.stopped:
                    timer.callback()


class FakeSource:
    """Async fetch returning queued results; the last one repeats."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0
        self.gate = None

    def hold(self):
        self.gate = asyncio.Event()
        return self.gate

    async def __call__(self):
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if len(self.results) > 1:
            return self.results.pop(0)
        return self.results[0]


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def week():
    return [
        Connection("2024-03-05", "08:15", "17:42"),
        Connection("2024-03-04", "09:01", "16:30"),
        Connection("2024-03-03", "10:00", "10:00"),
    ]


@pytest.fixture
def ok(week):
    return FetchResult.success(week)
