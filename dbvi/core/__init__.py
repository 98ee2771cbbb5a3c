"""Core, UI-agnostic input state machine and command execution for dbvi."""

from .commands import Chain, Command, NoOp, Quit, RunQuery
from .controller import KeyPress, ModeController
from .executor import CommandExecutor, QueryClientProtocol
from .state import WELCOME_MESSAGE, Mode, Session

__all__ = [
    "Chain",
    "Command",
    "CommandExecutor",
    "KeyPress",
    "Mode",
    "ModeController",
    "NoOp",
    "QueryClientProtocol",
    "Quit",
    "RunQuery",
    "Session",
    "WELCOME_MESSAGE",
]
