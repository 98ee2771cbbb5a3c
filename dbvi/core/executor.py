"""Command executor.

Runs commands against the session and a query client. Query failures are
captured into the session status and never propagate; anything else (a
broken terminal, a bug) propagates to the caller and ends the run loop.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Protocol

from loguru import logger

from ..db.exceptions import QueryError
from ..db.results import format_result
from .commands import Chain, Command, NoOp, Quit, RunQuery

if TYPE_CHECKING:
    from ..db.results import QueryResult
    from .state import Session

SUCCESS_MESSAGE = "Query executed successfully"


class QueryClientProtocol(Protocol):
    async def execute(self, query: str) -> QueryResult:
        """Run ``query`` and return its rows, raising QueryError on failure."""
        ...


class CommandExecutor:
    """Interprets commands, updating the session in place."""

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout if timeout and timeout > 0 else None

    async def execute(self, command: Command, session: Session, client: QueryClientProtocol) -> None:
        """Run ``command`` to completion.

        Chains are expanded onto a work stack rather than recursed into, so
        nesting depth does not grow the call stack. The first exception that
        is not a query failure stops the remaining commands.
        """
        pending: list[Command] = [command]
        while pending:
            current = pending.pop()
            if isinstance(current, Chain):
                pending.extend(reversed(current.commands))
            elif isinstance(current, RunQuery):
                await self._run_query(current.text, session, client)
            elif isinstance(current, Quit):
                session.running = False
            elif isinstance(current, NoOp):
                pass
            else:
                raise TypeError(f"Unknown command: {current!r}")

    async def _run_query(self, query: str, session: Session, client: QueryClientProtocol) -> None:
        logger.debug("Running query: {!r}", query)
        try:
            result = await self._call_client(query, client)
        except QueryError as e:
            self._record_failure(session, str(e))
            return

        session.last_result = format_result(result)
        session.status = SUCCESS_MESSAGE
        session.pending_query = ""
        logger.debug("Query returned {} row(s)", result.row_count)

    async def _call_client(self, query: str, client: QueryClientProtocol) -> QueryResult:
        if self.timeout is None:
            return await client.execute(query)
        try:
            return await asyncio.wait_for(client.execute(query), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise QueryError(f"query timed out after {self.timeout:g}s") from e

    def _record_failure(self, session: Session, error_message: str) -> None:
        # pending_query is kept so the user can fix the query and resubmit
        logger.warning("Query failed: {}", error_message)
        session.last_result = ""
        session.status = f"Failed to run query: {error_message}"
