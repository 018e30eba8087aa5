"""Layout command model: the intermediate form produced by node handlers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union

from jsunparse.errors import LayoutError
from jsunparse.nodes import Comment, Span


class Marker(Enum):
    NEWLINE = auto()  # line break followed by the current indentation
    INDENT = auto()  # one level deeper for subsequent newlines
    DEDENT = auto()  # one level shallower


class Break(Enum):
    """What follows an emitted comment."""

    NONE = auto()
    SPACE = auto()
    NEWLINE = auto()


NEWLINE = Marker.NEWLINE
INDENT = Marker.INDENT
DEDENT = Marker.DEDENT


@dataclass(frozen=True, slots=True)
class Chunk:
    """Literal text tied to the source range it was generated from."""

    content: str
    loc: Span | None = None


@dataclass(frozen=True, slots=True)
class CommentSlot:
    """An attached comment and the break to emit after it."""

    comment: Comment
    after: Break = Break.NONE


@dataclass(slots=True)
class Deferred:
    """Placeholder whose contents are decided after its surroundings are measured.

    A Deferred is linked into the command sequence while still empty and
    filled in exactly once via :meth:`resolve`. The same instance may appear
    several times in a sequence (e.g. the separator between list items).
    """

    name: str
    children: list[Command] = field(default_factory=list)
    resolved: bool = False

    def resolve(self, *commands: Command) -> None:
        if self.resolved:
            raise LayoutError(f"deferred '{self.name}' resolved twice")
        self.children.extend(commands)
        self.resolved = True


Command = Union[str, Chunk, Marker, Deferred, CommentSlot]


def measure(commands: list[Command], start: int, end: int | None = None) -> int:
    """Rough estimate of the combined width of ``commands[start:end]``."""
    if end is None:
        end = len(commands)
    total = 0
    for i in range(start, end):
        command = commands[i]
        if isinstance(command, str):
            total += len(command)
        elif isinstance(command, Chunk):
            total += len(command.content)
        elif isinstance(command, Deferred):
            # assume this is ', '
            total += 2
        elif isinstance(command, CommentSlot):
            total += len(command.comment.get("value", "")) + 4
    return total


def iter_deferred(commands: Iterable[Command]) -> Iterator[Deferred]:
    """Yield every Deferred in a command sequence, including nested ones."""
    stack: list[Iterator[Command]] = [iter(commands)]
    while stack:
        for command in stack[-1]:
            if isinstance(command, Deferred):
                yield command
                stack.append(iter(command.children))
                break
        else:
            stack.pop()


def check_resolved(commands: list[Command]) -> None:
    """Raise LayoutError if any Deferred in *commands* was never resolved."""
    for deferred in iter_deferred(commands):
        if not deferred.resolved:
            raise LayoutError(f"deferred '{deferred.name}' was never resolved")
