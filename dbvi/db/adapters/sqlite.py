"""SQLite adapter using the standard library sqlite3 module."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .base import CursorBasedAdapter

if TYPE_CHECKING:
    from ...config import ConnectionConfig


class SQLiteAdapter(CursorBasedAdapter):
    """Adapter for SQLite."""

    @property
    def name(self) -> str:
        return "SQLite"

    def connect(self, config: ConnectionConfig) -> Any:
        """Connect to a SQLite database file."""
        file_path = config.file_path or ":memory:"
        if file_path != ":memory:":
            file_path = str(Path(file_path).expanduser())
        # Queries run in a worker thread, not the thread that opened the connection
        return sqlite3.connect(file_path, check_same_thread=False)
