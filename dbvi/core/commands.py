"""Commands produced by input translation and run by the executor.

The set is closed: every variant is handled by CommandExecutor, which raises
TypeError on anything else.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class RunQuery:
    """Run ``text`` against the database."""

    text: str


@dataclass(frozen=True)
class Chain:
    """Run several commands in order."""

    commands: tuple[Command, ...] = ()

    @classmethod
    def of(cls, *commands: Command) -> Chain:
        return cls(tuple(commands))


@dataclass(frozen=True)
class Quit:
    """Stop the run loop."""


@dataclass(frozen=True)
class NoOp:
    """Do nothing."""


Command = Union[RunQuery, Chain, Quit, NoOp]

__all__ = ["Chain", "Command", "NoOp", "Quit", "RunQuery"]
