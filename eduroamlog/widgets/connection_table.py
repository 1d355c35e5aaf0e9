"""DataTable listing one formatted row per recorded day."""

from __future__ import annotations

from typing import Any, Iterable, Tuple

from rich.text import Text
from textual.widgets import DataTable

from ..models import Connection
from ..render import Row, render_rows


class ConnectionTable(DataTable):
    """Connection rows keyed by position, re-rendered on every log change."""

    DEFAULT_CSS = """
    ConnectionTable {
        height: auto;
        margin: 0 1;
    }
    """

    COLUMN = "Connection"

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("show_header", False)
        kwargs.setdefault("cursor_type", "none")
        super().__init__(**kwargs)
        self.add_column(self.COLUMN, key=self.COLUMN)

    def show_connections(self, connections: Tuple[Connection, ...]) -> None:
        """Log subscriber: rebuild rows from the latest connections."""
        self.replace_data(render_rows(connections))

    def replace_data(self, rows: Iterable[Row]) -> None:
        """Clear and repopulate with new rows."""
        self.clear()
        for row in rows:
            self.add_row(Text(row.text, justify="center"), key=row.key)
