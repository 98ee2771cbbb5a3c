"""Main Textual application for dbvi."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger
from textual.app import App, ComposeResult
from textual.containers import Vertical

from .config import DEFAULT_THEME
from .core import Chain, CommandExecutor, KeyPress, ModeController, NoOp, Quit, RunQuery, Session
from .ui import QueryFooter, ResultsPane

if TYPE_CHECKING:
    from .core.commands import Command
    from .core.executor import QueryClientProtocol

# Seconds between checks of the running flag when no input arrives
RUNNING_POLL_INTERVAL = 0.2

# Keys that scroll the results pane; they are still dispatched to the controller
SCROLL_KEYS = {
    "up": "scroll_up",
    "down": "scroll_down",
    "pageup": "scroll_page_up",
    "pagedown": "scroll_page_down",
    "home": "scroll_home",
    "end": "scroll_end",
}


def _runs_query(command: Command) -> bool:
    pending = [command]
    while pending:
        current = pending.pop()
        if isinstance(current, RunQuery):
            return True
        if isinstance(current, Chain):
            pending.extend(current.commands)
    return False


class DbviApp(App):
    """Modal query editor with a results pane."""

    TITLE = "dbvi"
    # The palette would take focus away from the query footer
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        background: $surface;
    }

    #main-container {
        width: 100%;
        height: 100%;
        margin: 1;
    }
    """

    def __init__(
        self,
        client: QueryClientProtocol,
        *,
        executor: CommandExecutor | None = None,
        controller: ModeController | None = None,
        session: Session | None = None,
        connection_label: str = "",
        theme_name: str | None = None,
    ):
        super().__init__()
        self.client = client
        self.executor = executor or CommandExecutor()
        self.controller = controller or ModeController()
        self.session = session or Session()
        self.sub_title = connection_label
        self._theme_name = theme_name or DEFAULT_THEME

    @property
    def results_pane(self) -> ResultsPane:
        return self.query_one("#results-area", ResultsPane)

    @property
    def query_footer(self) -> QueryFooter:
        return self.query_one("#query-footer", QueryFooter)

    def compose(self) -> ComposeResult:
        with Vertical(id="main-container"):
            yield ResultsPane(id="results-area")
            yield QueryFooter(id="query-footer")

    def on_mount(self) -> None:
        try:
            self.theme = self._theme_name
        except Exception:
            logger.warning("Unknown theme {!r}, using {}", self._theme_name, DEFAULT_THEME)
            self.theme = DEFAULT_THEME

        self.query_footer.focus()
        self.refresh_session()
        self.set_interval(RUNNING_POLL_INTERVAL, self._check_running)

    def refresh_session(self, busy: bool = False) -> None:
        """Redraw both panes from the session."""
        self.results_pane.show(self.session.last_result)
        self.query_footer.show(self.session, busy=busy)

    async def handle_key_press(self, key: KeyPress) -> None:
        """Dispatch one key press and run the resulting command to completion."""
        scroll = SCROLL_KEYS.get(key.key)
        if scroll is not None:
            getattr(self.results_pane, scroll)(animate=False)

        command = self.controller.dispatch(self.session, key)
        if not isinstance(command, NoOp):
            if _runs_query(command):
                self.refresh_session(busy=True)
            await self.executor.execute(command, self.session, self.client)

        self.refresh_session()
        self._check_running()

    async def action_quit(self) -> None:
        """Route the built-in quit binding through the executor."""
        await self.executor.execute(Quit(), self.session, self.client)
        self._check_running()

    def _check_running(self) -> None:
        if not self.session.running:
            self.exit()
