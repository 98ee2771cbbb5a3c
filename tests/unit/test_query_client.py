"""Tests for the SQLite-backed query client and the adapter registry."""

from __future__ import annotations

import sys

import pytest

from dbvi.config import ConnectionConfig
from dbvi.core import CommandExecutor, RunQuery, Session
from dbvi.db import MissingDriverError, QueryClient, QueryError, get_adapter, get_supported_db_types, open_client
from dbvi.db.adapters import MySQLAdapter, PostgreSQLAdapter, SQLiteAdapter


@pytest.mark.asyncio
async def test_select_returns_columns_and_rows(sqlite_client):
    result = await sqlite_client.execute("SELECT id, name FROM users ORDER BY id")

    assert result.columns == ["id", "name"]
    assert result.rows == [(1, "Alice"), (2, "Bob"), (3, "Carol")]
    assert result.truncated is False


@pytest.mark.asyncio
async def test_max_rows_truncates(sqlite_db_path):
    config = ConnectionConfig(db_type="sqlite", file_path=str(sqlite_db_path))
    with open_client(config, max_rows=2) as client:
        result = await client.execute("SELECT id FROM users ORDER BY id")

    assert result.rows == [(1,), (2,)]
    assert result.truncated is True


@pytest.mark.asyncio
async def test_statement_reports_affected_rows(sqlite_client):
    result = await sqlite_client.execute("UPDATE users SET email = 'x@example.com' WHERE email IS NULL")

    assert result.columns == ["Result"]
    assert result.rows == [("1 row(s) affected",)]

    check = await sqlite_client.execute("SELECT email FROM users WHERE id = 2")
    assert check.rows == [("x@example.com",)]


@pytest.mark.asyncio
async def test_driver_errors_become_query_errors(sqlite_client):
    with pytest.raises(QueryError, match="no such table"):
        await sqlite_client.execute("SELECT * FROM missing_table")


@pytest.mark.asyncio
async def test_connection_still_usable_after_error(sqlite_client):
    with pytest.raises(QueryError):
        await sqlite_client.execute("SELEC nonsense")

    result = await sqlite_client.execute("SELECT count(*) FROM users")
    assert result.rows == [(3,)]


@pytest.mark.asyncio
async def test_closed_client_rejects_queries(sqlite_db_path):
    config = ConnectionConfig(db_type="sqlite", file_path=str(sqlite_db_path))
    client = QueryClient.connect(config)
    client.close()
    client.close()

    with pytest.raises(QueryError, match="closed"):
        await client.execute("SELECT 1")


@pytest.mark.asyncio
async def test_executor_against_sqlite(sqlite_client):
    session = Session(pending_query="SELECT name FROM users WHERE id = 1")
    executor = CommandExecutor()

    await executor.execute(RunQuery(session.pending_query), session, sqlite_client)

    assert session.last_result.splitlines() == ["name", "-----", "Alice"]
    assert session.pending_query == ""

    session.pending_query = "SELECT * FROM nope"
    await executor.execute(RunQuery(session.pending_query), session, sqlite_client)

    assert session.status == "Failed to run query: no such table: nope"
    assert session.pending_query == "SELECT * FROM nope"
    assert session.last_result == ""


def test_registry():
    assert get_supported_db_types() == ["postgresql", "mysql", "sqlite"]
    assert isinstance(get_adapter("sqlite"), SQLiteAdapter)
    assert isinstance(get_adapter("postgresql"), PostgreSQLAdapter)
    assert isinstance(get_adapter("mysql"), MySQLAdapter)

    with pytest.raises(ValueError, match="Unknown database type"):
        get_adapter("oracle")


def test_missing_driver_raises_with_install_hint(monkeypatch):
    # A None entry makes the import fail even when psycopg2 is installed
    monkeypatch.setitem(sys.modules, "psycopg2", None)

    with pytest.raises(MissingDriverError) as exc_info:
        PostgreSQLAdapter().ensure_driver_available()

    assert exc_info.value.extra_name == "postgres"
    assert exc_info.value.package_name == "psycopg2-binary"
    assert 'pip install "dbvi[postgres]"' in str(exc_info.value)
