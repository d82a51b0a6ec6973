"""
filetimer/db/time_store.py

Persistent mapping from file path to cumulative tracked seconds.
"""
from typing import Dict, List, Optional
from .connection import get_cursor, ensure_db_exists
from ..events import EventBus, Event, TimesChangedContext, event_bus


class TimeStore:
    """
    Key-value store of per-file totals backed by the file_times table.

    The tracker controller is the only writer. Every write emits
    Event.TIMES_CHANGED so views can refresh. keys() returns rowid order,
    which stays stable because resets overwrite rather than delete.

    A read_only store never creates the database or its schema; reads
    raise FileNotFoundError until the tracker has written the file.
    """

    def __init__(self, db_path: Optional[str] = None, bus: Optional[EventBus] = None,
                 read_only: bool = False) -> None:
        self.db_path = db_path
        self.bus = bus if bus is not None else event_bus
        self.read_only = read_only
        if not read_only:
            ensure_db_exists(db_path)

    def get(self, path: str) -> int:
        """Stored total for path, or 0 if never tracked."""
        with get_cursor(self.db_path, self.read_only) as cur:
            cur.execute("SELECT seconds FROM file_times WHERE path = ?", (path,))
            row = cur.fetchone()
        return int(row[0]) if row else 0

    def set(self, path: str, total_seconds: int) -> None:
        """Overwrite the stored total for path and notify listeners."""
        if isinstance(total_seconds, bool) or not isinstance(total_seconds, int):
            raise ValueError(f"total_seconds must be an int, got {total_seconds!r}")
        if total_seconds < 0:
            raise ValueError(f"total_seconds must be non-negative, got {total_seconds}")

        with get_cursor(self.db_path, self.read_only) as cur:
            cur.execute("""
                INSERT INTO file_times (path, seconds) VALUES (?, ?)
                ON CONFLICT(path) DO UPDATE SET seconds = excluded.seconds
            """, (path, total_seconds))

        self.bus.emit(Event.TIMES_CHANGED, TimesChangedContext(path, total_seconds))

    def keys(self) -> List[str]:
        """All known file paths."""
        with get_cursor(self.db_path, self.read_only) as cur:
            cur.execute("SELECT path FROM file_times ORDER BY rowid ASC")
            return [row[0] for row in cur.fetchall()]

    def snapshot(self) -> Dict[str, int]:
        """All totals in enumeration order, read in a single query."""
        with get_cursor(self.db_path, self.read_only) as cur:
            cur.execute("SELECT path, seconds FROM file_times ORDER BY rowid ASC")
            return {row[0]: int(row[1]) for row in cur.fetchall()}
