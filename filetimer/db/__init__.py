"""Database layer."""
from .connection import get_connection, get_cursor, ensure_db_exists
from .time_store import TimeStore

__all__ = ['get_connection', 'get_cursor', 'ensure_db_exists', 'TimeStore']
