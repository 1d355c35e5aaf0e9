"""Eduroam Connection Log: Textual app showing per-day connection times."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Footer, Static

from ..config import Config, load_config
from ..logs import setup_logging
from ..models import Connection, ConnectionLog
from ..poller import Fetch, PollHandle, Poller
from ..recorder import Recorder
from ..store import ConnectionStore
from ..widgets.connection_table import ConnectionTable
from ..widgets.header import LogHeader
from ..wifi import WifiProbe
from .commands import make_fetch

log = logging.getLogger(__name__)


class ConnectionLogPanel(Vertical):
    """Polls while mounted and shows the latest connections.

    Mounting starts the poller exactly once; unmounting stops it. Row
    updates come from the log subscription, never from re-mounting.
    """

    DEFAULT_CSS = """
    ConnectionLogPanel {
        height: auto;
    }
    """

    def __init__(self, poller: Poller, connection_log: ConnectionLog, **kwargs) -> None:
        super().__init__(**kwargs)
        self._poller = poller
        self._log = connection_log
        self._handle: Optional[PollHandle] = None
        self._unsubscribe: list[Callable[[], None]] = []

    @property
    def active(self) -> bool:
        return self._handle is not None and self._handle.active

    def compose(self) -> ComposeResult:
        yield ConnectionTable(id="connections-table")
        yield Static("Waiting for connections...", id="status-line", classes="empty-message")

    def on_mount(self) -> None:
        table = self.query_one("#connections-table", ConnectionTable)
        table.show_connections(self._log.connections)
        self._unsubscribe = [
            self._log.subscribe(table.show_connections),
            self._log.subscribe(self._update_status),
        ]
        self._handle = self._poller.start(self.set_interval)

    def on_unmount(self) -> None:
        self._poller.stop(self._handle)
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe = []

    def refresh_now(self) -> None:
        if self._handle is not None:
            self._poller.refresh(self._handle)

    def _update_status(self, connections: Tuple[Connection, ...]) -> None:
        status = self.query_one("#status-line", Static)
        if connections:
            status.update(f"{len(connections)} day(s) logged")
        else:
            status.update("No connections recorded yet")


class ConnectionLogApp(App):
    """Read-only view of the connection log, refreshed every 30 seconds."""

    TITLE = "Eduroam Connection Log"
    CSS_PATH = "app.tcss"

    BINDINGS = [
        Binding("r", "refresh", "Refresh"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        config: Optional[Config] = None,
        fetch: Optional[Fetch] = None,
        recorder: Optional[Recorder] = None,
    ) -> None:
        super().__init__()
        self._config = config or load_config()
        self._recorder = recorder
        if fetch is None:
            store = ConnectionStore(self._config.db_path)
            fetch = make_fetch(store)
            if recorder is None and self._config.recorder_enabled:
                self._recorder = Recorder(
                    WifiProbe(self._config.interface), store, self._config.ssid
                )
        self.connection_log = ConnectionLog()
        self.poller = Poller(fetch, self.connection_log)

    def compose(self) -> ComposeResult:
        yield LogHeader(self.TITLE, self._config.ssid)
        with VerticalScroll(id="dashboard"):
            yield ConnectionLogPanel(self.poller, self.connection_log, id="connection-log")
        yield Footer()

    def on_mount(self) -> None:
        if self._recorder is not None:
            self.record_connection()
            self.set_interval(self._config.recorder_interval, self.record_connection)

    @work(exclusive=True, group="recorder")
    async def record_connection(self) -> None:
        try:
            recorded = await self._recorder.check()
        except Exception:
            log.exception("Error checking WiFi connection")
            return
        if recorded:
            self.query_one(ConnectionLogPanel).refresh_now()

    def action_refresh(self) -> None:
        self.query_one(ConnectionLogPanel).refresh_now()


def main():
    config = load_config()
    setup_logging(config.log_level, config.log_file)
    app = ConnectionLogApp(config)
    app.run()


if __name__ == "__main__":
    main()
