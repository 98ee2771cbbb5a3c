"""Widgets for the results pane and the query footer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.containers import VerticalScroll
from textual.events import Key
from textual.widgets import Static

from ..core.controller import KeyPress
from ..core.state import Mode, Session
from ..db.results import PLACEHOLDER_TEXT

if TYPE_CHECKING:
    from textual.app import ComposeResult

PROMPT = "> "
BUSY_MESSAGE = "Running query..."


class ResultsPane(VerticalScroll, can_focus=False):
    """Scrollable pane showing the last query result."""

    DEFAULT_CSS = """
    ResultsPane {
        height: 1fr;
        border-top: solid $primary;
        border-title-align: center;
        padding: 0 1;
    }

    ResultsPane > #results-text {
        width: auto;
        height: auto;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.border_title = "Results"
        self._text = PLACEHOLDER_TEXT

    def compose(self) -> ComposeResult:
        yield Static(self._text, id="results-text", markup=False)

    @property
    def text(self) -> str:
        return self._text

    def show(self, result_text: str) -> None:
        self._text = result_text or PLACEHOLDER_TEXT
        self.query_one("#results-text", Static).update(Text(self._text))


def footer_title(session: Session, busy: bool = False) -> str:
    status = BUSY_MESSAGE if busy else session.status
    return f"Mode: {session.mode} | {status}"


def footer_text(session: Session) -> Text:
    """Build the footer body; in insert mode a cursor cell follows the typed text."""
    text = Text(PROMPT + session.pending_query)
    if session.mode == Mode.INSERT:
        text.append(" ", style="reverse")
    return text


class QueryFooter(Static, can_focus=True):
    """Footer showing mode, status and the query being typed.

    Holds focus and hands every key press to the app, which owns the mode
    controller. Only the app's priority quit binding sees keys first, and the
    app routes it through the executor.
    """

    DEFAULT_CSS = """
    QueryFooter {
        height: 2;
        border-top: solid $primary;
        padding: 0 1;
    }
    """

    async def _on_key(self, event: Key) -> None:
        event.prevent_default()
        event.stop()
        handler = getattr(self.app, "handle_key_press", None)
        if handler is not None:
            await handler(KeyPress(key=event.key, character=event.character))

    def show(self, session: Session, busy: bool = False) -> None:
        self.border_title = Text(footer_title(session, busy=busy))
        self.update(footer_text(session))
