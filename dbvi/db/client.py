"""Query execution capability backed by a single database connection."""

from __future__ import annotations

import asyncio
import threading
from typing import TYPE_CHECKING, Any

from loguru import logger

from .exceptions import QueryError
from .providers import get_adapter

if TYPE_CHECKING:
    from ..config import ConnectionConfig
    from .adapters.base import DatabaseAdapter
    from .results import QueryResult


class QueryClient:
    """Runs queries on one open connection.

    Driver calls block, so they run in a worker thread. Calls are serialized
    inside the worker: a call abandoned by a timeout keeps the connection
    until the driver returns.
    """

    def __init__(self, adapter: DatabaseAdapter, connection: Any, max_rows: int | None = None) -> None:
        self.adapter = adapter
        self.connection = connection
        self.max_rows = max_rows
        self._lock = threading.Lock()
        self._closed = False

    @classmethod
    def connect(cls, config: ConnectionConfig, max_rows: int | None = None) -> QueryClient:
        """Open a connection for ``config``.

        Raises MissingDriverError when the driver is not installed; driver
        connection errors propagate unchanged.
        """
        adapter = get_adapter(config.db_type)
        adapter.ensure_driver_available()
        logger.info("Connecting to {}", config.get_display_info())
        connection = adapter.connect(config)
        return cls(adapter, connection, max_rows=max_rows)

    async def execute(self, query: str) -> QueryResult:
        """Run ``query``; any driver failure is raised as QueryError."""
        if self._closed:
            raise QueryError("connection is closed")
        try:
            return await asyncio.to_thread(self._execute_blocking, query)
        except Exception as e:
            raise QueryError(str(e).strip() or type(e).__name__) from e

    def _execute_blocking(self, query: str) -> QueryResult:
        with self._lock:
            return self.adapter.execute_query(self.connection, query, self.max_rows)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self.adapter.close(self.connection)
        except Exception as e:
            logger.warning("Error closing {} connection: {}", self.adapter.name, e)
        else:
            logger.info("Closed {} connection", self.adapter.name)

    def __enter__(self) -> QueryClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_client(config: ConnectionConfig, max_rows: int | None = None) -> QueryClient:
    """Connect and return a client usable as a context manager."""
    return QueryClient.connect(config, max_rows=max_rows)
