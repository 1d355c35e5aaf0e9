"""SQLite store of per-day earliest/latest connection times."""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from .models import Connection

log = logging.getLogger(__name__)


_SCHEMA = """
CREATE TABLE IF NOT EXISTS connections (
    date TEXT PRIMARY KEY,
    earliest TEXT NOT NULL,
    latest TEXT NOT NULL
)
"""

_UPSERT = """
INSERT INTO connections (date, earliest, latest)
VALUES (?1, ?2, ?2)
ON CONFLICT(date) DO UPDATE SET
    earliest = MIN(earliest, ?2),
    latest = MAX(latest, ?2)
"""


class ConnectionStore:
    """One row per calendar day; times are zero-padded ``HH:MM`` strings."""

    def __init__(self, db_path: Union[str, Path]):
        self.db_path = Path(db_path).expanduser()
        self._init_db()

    def _init_db(self) -> None:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(_SCHEMA)
        log.debug("Connection store ready at %s", self.db_path)

    def record(self, now: Optional[datetime] = None) -> Connection:
        """Fold the current local time into today's row and return the row."""
        now = now or datetime.now()
        day = now.strftime("%Y-%m-%d")
        at = now.strftime("%H:%M")
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(_UPSERT, (day, at))
            row = conn.execute(
                "SELECT date, earliest, latest FROM connections WHERE date = ?",
                (day,),
            ).fetchone()
        log.info("Recorded connection at %s %s", day, at)
        return Connection(*row)

    def get_connections(self) -> List[Connection]:
        """All days, newest first."""
        with sqlite3.connect(self.db_path) as conn:
            rows = conn.execute(
                "SELECT date, earliest, latest FROM connections ORDER BY date DESC"
            ).fetchall()
        return [Connection(*row) for row in rows]
