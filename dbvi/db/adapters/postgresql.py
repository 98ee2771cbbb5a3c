"""PostgreSQL adapter using psycopg2."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import CursorBasedAdapter

if TYPE_CHECKING:
    from ...config import ConnectionConfig


class PostgreSQLAdapter(CursorBasedAdapter):
    """Adapter for PostgreSQL using psycopg2."""

    @property
    def name(self) -> str:
        return "PostgreSQL"

    @property
    def install_extra(self) -> str:
        return "postgres"

    @property
    def install_package(self) -> str:
        return "psycopg2-binary"

    @property
    def driver_import_names(self) -> tuple[str, ...]:
        return ("psycopg2",)

    def connect(self, config: ConnectionConfig) -> Any:
        """Connect to a PostgreSQL database."""
        psycopg2 = self._import_driver_module(
            "psycopg2",
            driver_name=self.name,
            extra_name=self.install_extra,
            package_name=self.install_package,
        )

        conn = psycopg2.connect(
            host=config.server or "localhost",
            port=int(config.port or "5432"),
            dbname=config.database or "postgres",
            user=config.username or None,
            password=config.password or None,
            connect_timeout=10,
            **config.options,
        )
        # Each query is its own transaction; a failed statement must not poison the next one
        conn.autocommit = True
        return conn
