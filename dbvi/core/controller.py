"""Mode controller.

Translates one input event into at most one Command, switching modes as a
side effect. Only key presses drive the state machine; every other event
(resize, mouse, focus) is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from .commands import Command, NoOp, Quit, RunQuery
from .state import Mode, Session

KEY_ESCAPE = "escape"
KEY_ENTER = "enter"
KEY_BACKSPACE = "backspace"


@dataclass(frozen=True)
class KeyPress:
    """A single key press.

    ``key`` is the key name ("q", "escape", "enter", "space", ...) and
    ``character`` the text it produces, if any.
    """

    key: str
    character: str | None = None

    @classmethod
    def char(cls, character: str) -> KeyPress:
        """Build the key press for a printable character."""
        return cls(key="space" if character == " " else character, character=character)

    @property
    def is_printable(self) -> bool:
        return (
            self.character is not None
            and len(self.character) == 1
            and self.character.isprintable()
        )


class ModeController:
    """Maps key presses to commands according to the current mode."""

    def dispatch(self, session: Session, event: object) -> Command:
        """Consume one input event and return the command it requests."""
        if not isinstance(event, KeyPress):
            return NoOp()

        if session.mode == Mode.NORMAL:
            return self._handle_normal_mode(session, event)
        return self._handle_insert_mode(session, event)

    def _handle_normal_mode(self, session: Session, key: KeyPress) -> Command:
        if key.key == "q":
            return Quit()
        if key.key == "i":
            self._enter_mode(session, Mode.INSERT)
        # Unbound keys are ignored
        return NoOp()

    def _handle_insert_mode(self, session: Session, key: KeyPress) -> Command:
        if key.key == KEY_ESCAPE:
            # Leave the buffer intact so typing can resume after `i`
            self._enter_mode(session, Mode.NORMAL)
            return NoOp()

        if key.key == KEY_ENTER:
            self._enter_mode(session, Mode.NORMAL)
            return RunQuery(session.pending_query)

        if key.key == KEY_BACKSPACE:
            session.pending_query = session.pending_query[:-1]
            return NoOp()

        if key.is_printable:
            session.pending_query += key.character or ""
        return NoOp()

    def _enter_mode(self, session: Session, mode: Mode) -> None:
        if session.mode != mode:
            logger.debug("Mode {} -> {}", session.mode, mode)
        session.mode = mode
