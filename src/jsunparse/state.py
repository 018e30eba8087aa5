"""Mutable state threaded through one render."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from jsunparse.commands import Command
from jsunparse.nodes import Comment


@dataclass(slots=True)
class RenderState:
    """State carried through the recursive descent of a single render.

    ``commands`` and ``comments`` are shared by every fork of the state;
    ``multiline`` is per fork so a caller can tell whether one particular
    subtree needed several lines. ``no_in`` is set while rendering the
    initializer of a ``for (;;)`` head, where a bare ``in`` operator would
    turn the loop into a for-in.
    """

    commands: list[Command] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    multiline: bool = False
    quote: str = "'"
    width: int = 80
    no_in: bool = False

    def push(self, *commands: Command) -> None:
        self.commands.extend(commands)

    def fork(self) -> RenderState:
        """Shallow copy with the multiline flag reset."""
        return replace(self, multiline=False)
