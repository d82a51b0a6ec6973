"""Database connection management."""
import sqlite3
import os
from contextlib import contextmanager
from typing import Iterator, Optional
from .. import config


def get_connection(db_path: Optional[str] = None, read_only: bool = False) -> sqlite3.Connection:
    """
    Create and return a database connection.

    A read-only connection never creates the database file and raises
    FileNotFoundError when it does not exist yet.
    """
    path = db_path or config.DB_PATH
    if read_only:
        if not os.path.exists(path):
            raise FileNotFoundError(f"DB not found at {path}")
        conn = sqlite3.connect(f"file:{path}?mode=ro", uri=True)
    else:
        conn = sqlite3.connect(path)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: Optional[str] = None, read_only: bool = False) -> Iterator[sqlite3.Cursor]:
    """Context manager for database operations."""
    conn = get_connection(db_path, read_only)
    try:
        cursor = conn.cursor()
        yield cursor
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def ensure_db_exists(db_path: Optional[str] = None) -> None:
    """Ensure database directory and table exist."""
    path = db_path or config.DB_PATH
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with get_cursor(path) as cur:
        cur.execute("""
            CREATE TABLE IF NOT EXISTS file_times (
                path TEXT PRIMARY KEY,
                seconds INTEGER NOT NULL DEFAULT 0
            )
        """)
