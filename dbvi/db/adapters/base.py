"""Base classes for database adapters."""

from __future__ import annotations

import importlib
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ..exceptions import MissingDriverError
from ..results import QueryResult

if TYPE_CHECKING:
    from ...config import ConnectionConfig


class DatabaseAdapter(ABC):
    """Abstract base class for database adapters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this database type."""

    @property
    def install_extra(self) -> str | None:
        """Optional dependency group that provides the driver, if any."""
        return None

    @property
    def install_package(self) -> str | None:
        """Package on the index that provides the driver, if any."""
        return None

    @property
    def driver_import_names(self) -> tuple[str, ...]:
        return ()

    def _import_driver_module(
        self,
        module_name: str,
        *,
        driver_name: str,
        extra_name: str | None,
        package_name: str | None,
    ) -> Any:
        """Import a driver module, raising MissingDriverError if it is not installed."""
        if not extra_name or not package_name:
            return importlib.import_module(module_name)

        try:
            return importlib.import_module(module_name)
        except ImportError as e:
            raise MissingDriverError(driver_name, extra_name, package_name) from e

    def ensure_driver_available(self) -> None:
        for module_name in self.driver_import_names:
            self._import_driver_module(
                module_name,
                driver_name=self.name,
                extra_name=self.install_extra,
                package_name=self.install_package,
            )

    @abstractmethod
    def connect(self, config: ConnectionConfig) -> Any:
        """Open a connection using the given config."""

    @abstractmethod
    def execute_query(self, conn: Any, query: str, max_rows: int | None = None) -> QueryResult:
        """Run a query and return its result."""

    def close(self, conn: Any) -> None:
        conn.close()


class CursorBasedAdapter(DatabaseAdapter):
    """Adapter for drivers implementing the DB-API 2.0 cursor interface."""

    def execute_query(self, conn: Any, query: str, max_rows: int | None = None) -> QueryResult:
        """Execute a query through a cursor.

        Statements that produce a result set return their columns and rows,
        fetching at most ``max_rows`` rows. Other statements are committed and
        reported as an affected-row count.
        """
        cursor = conn.cursor()
        try:
            cursor.execute(query)

            if cursor.description is None:
                conn.commit()
                affected = cursor.rowcount if cursor.rowcount is not None and cursor.rowcount >= 0 else 0
                return QueryResult(columns=["Result"], rows=[(f"{affected} row(s) affected",)])

            columns = [col[0] for col in cursor.description]
            if max_rows is None:
                rows = [tuple(row) for row in cursor.fetchall()]
                return QueryResult(columns=columns, rows=rows)

            rows = [tuple(row) for row in cursor.fetchmany(max_rows + 1)]
            truncated = len(rows) > max_rows
            return QueryResult(columns=columns, rows=rows[:max_rows], truncated=truncated)
        finally:
            cursor.close()
