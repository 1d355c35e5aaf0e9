"""Date and row formatting for the connection list."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, List, NamedTuple, Optional

from .models import Connection


UNKNOWN_DATE = "UNKNOWN DATE"

# Fixed tables so labels don't depend on the process locale.
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class Row(NamedTuple):
    key: str
    text: str


def ordinal(day: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 23 -> '23rd'."""
    if 10 <= day % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def parse_date(value: str) -> Optional[date]:
    """Parse an ISO date or date/time string. Returns None on invalid input.

    The calendar date is taken as written; no timezone conversion is applied.
    """
    text = (value or "").strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    # Only fall back to the date part when a time part follows it.
    if len(text) > 10 and text[10] not in "T ":
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def format_date(value: str) -> str:
    """'2024-03-05' -> 'TUE MAR 5TH'."""
    d = parse_date(value)
    if d is None:
        return UNKNOWN_DATE
    label = f"{_WEEKDAYS[d.weekday()]} {_MONTHS[d.month - 1]} {ordinal(d.day)}"
    return label.upper()


def format_range(earliest: str, latest: str) -> str:
    return f"{earliest} TO {latest}"


def format_row(conn: Connection) -> str:
    return f"{format_date(conn.date)} — {format_range(conn.earliest, conn.latest)}"


def render_rows(connections: Iterable[Connection]) -> List[Row]:
    """One row per connection, in input order, keyed by position."""
    return [Row(str(i), format_row(conn)) for i, conn in enumerate(connections)]
