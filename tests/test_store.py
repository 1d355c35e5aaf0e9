import sqlite3
from datetime import datetime

import pytest

from eduroamlog.models import Connection
from eduroamlog.store import ConnectionStore


@pytest.fixture
def store(tmp_path):
    return ConnectionStore(tmp_path / "nested" / "connections.db")


def test_creates_database_and_parent_directories(tmp_path):
    path = tmp_path / "a" / "b" / "connections.db"
    ConnectionStore(path)
    assert path.exists()
    with sqlite3.connect(path) as conn:
        tables = {r[0] for r in conn.execute("SELECT name FROM sqlite_master")}
    assert "connections" in tables


def test_empty_store_has_no_connections(store):
    assert store.get_connections() == []


def test_first_record_sets_earliest_and_latest(store):
    row = store.record(datetime(2024, 3, 5, 8, 15))
    assert row == Connection("2024-03-05", "08:15", "08:15")


def test_records_keep_min_and_max_time_per_day(store):
    store.record(datetime(2024, 3, 5, 12, 0))
    store.record(datetime(2024, 3, 5, 8, 15))
    store.record(datetime(2024, 3, 5, 17, 42))
    row = store.record(datetime(2024, 3, 5, 9, 30))

    assert row == Connection("2024-03-05", "08:15", "17:42")
    assert store.get_connections() == [row]


def test_connections_are_newest_first(store):
    store.record(datetime(2024, 3, 3, 10, 0))
    store.record(datetime(2024, 3, 5, 9, 0))
    store.record(datetime(2024, 3, 4, 11, 0))

    assert [c.date for c in store.get_connections()] == [
        "2024-03-05",
        "2024-03-04",
        "2024-03-03",
    ]


def test_reopening_keeps_existing_rows(tmp_path):
    path = tmp_path / "connections.db"
    ConnectionStore(path).record(datetime(2024, 3, 5, 8, 15))
    assert len(ConnectionStore(path).get_connections()) == 1
