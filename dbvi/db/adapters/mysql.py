"""MySQL / MariaDB adapter using PyMySQL."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import CursorBasedAdapter

if TYPE_CHECKING:
    from ...config import ConnectionConfig


class MySQLAdapter(CursorBasedAdapter):
    """Adapter for MySQL and MariaDB using PyMySQL."""

    @property
    def name(self) -> str:
        return "MySQL"

    @property
    def install_extra(self) -> str:
        return "mysql"

    @property
    def install_package(self) -> str:
        return "PyMySQL"

    @property
    def driver_import_names(self) -> tuple[str, ...]:
        return ("pymysql",)

    def connect(self, config: ConnectionConfig) -> Any:
        """Connect to a MySQL database."""
        pymysql = self._import_driver_module(
            "pymysql",
            driver_name=self.name,
            extra_name=self.install_extra,
            package_name=self.install_package,
        )

        return pymysql.connect(
            host=config.server or "localhost",
            port=int(config.port or "3306"),
            database=config.database or None,
            user=config.username or None,
            password=config.password or "",
            connect_timeout=10,
            autocommit=True,
        )
