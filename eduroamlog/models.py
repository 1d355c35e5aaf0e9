"""Connection records and the observable log the viewer displays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Connection:
    """One day's first and last connection on the target network."""

    date: str
    earliest: str
    latest: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Connection":
        return cls(
            date=str(data["date"]),
            earliest=str(data["earliest"]),
            latest=str(data["latest"]),
        )


@dataclass(frozen=True)
class FetchFailure:
    """Why the connection source could not produce data."""

    reason: str
    error: Optional[BaseException] = None


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one fetch: either ``connections`` or a ``failure``."""

    connections: Tuple[Connection, ...] = ()
    failure: Optional[FetchFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, connections: Iterable[Connection]) -> "FetchResult":
        return cls(connections=tuple(connections))

    @classmethod
    def failed(cls, error: BaseException) -> "FetchResult":
        return cls(failure=FetchFailure(str(error) or type(error).__name__, error))


Subscriber = Callable[[Tuple[Connection, ...]], None]


class ConnectionLog:
    """Ordered connections, swapped wholesale on every successful fetch.

    Observers registered with :meth:`subscribe` are called with the new
    contents after each :meth:`replace`.
    """

    def __init__(self) -> None:
        self._connections: Tuple[Connection, ...] = ()
        self._subscribers: List[Subscriber] = []

    @property
    def connections(self) -> Tuple[Connection, ...]:
        return self._connections

    def __len__(self) -> int:
        return len(self._connections)

    def __iter__(self) -> Iterator[Connection]:
        return iter(self._connections)

    def replace(self, connections: Iterable[Connection]) -> None:
        self._connections = tuple(connections)
        for callback in list(self._subscribers):
            callback(self._connections)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback``; returns a function that removes it again."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe
