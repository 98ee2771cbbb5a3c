"""Session state for the query editor.

Tracks the current mode, the query being typed, and the outcome of the
last executed command.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

WELCOME_MESSAGE = "Welcome to dbvi! Press `q` to quit."


class Mode(Enum):
    """Input modes."""

    NORMAL = "Normal"  # Keys are application commands
    INSERT = "Insert"  # Keys are typed into the pending query

    def __str__(self) -> str:
        return self.value


@dataclass
class Session:
    """Mutable state threaded through the run loop.

    ``running`` is a one-way latch: once a Quit command clears it, nothing
    sets it back.
    """

    running: bool = True
    mode: Mode = Mode.NORMAL
    status: str = WELCOME_MESSAGE
    pending_query: str = ""
    last_result: str = ""
