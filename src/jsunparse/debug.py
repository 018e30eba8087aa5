"""--debug command-tree dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from jsunparse.commands import Chunk, Command, CommentSlot, Deferred, Marker


def dump_commands(commands: list[Command], *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable command tree to *file*."""
    file.write(f"Commands ({len(commands)})\n")
    for command in commands:
        _dump_command(command, 1, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_command(command: Command, depth: int, f: TextIO) -> None:
    if isinstance(command, str):
        f.write(f"{_indent(depth)}Text({command!r})\n")
    elif isinstance(command, Chunk):
        _dump_chunk(command, depth, f)
    elif isinstance(command, Marker):
        f.write(f"{_indent(depth)}{command.name}\n")
    elif isinstance(command, CommentSlot):
        kind = command.comment.get("type", "Block")
        f.write(
            f"{_indent(depth)}Comment {kind} {command.comment.get('value', '')!r}"
            f" then {command.after.name}\n"
        )
    elif isinstance(command, Deferred):
        _dump_deferred(command, depth, f)


def _dump_chunk(chunk: Chunk, depth: int, f: TextIO) -> None:
    f.write(f"{_indent(depth)}Chunk({chunk.content!r})")
    if chunk.loc is not None:
        start, end = chunk.loc.start, chunk.loc.end
        f.write(f" @ {start.line}:{start.column}-{end.line}:{end.column}")
    f.write("\n")


def _dump_deferred(deferred: Deferred, depth: int, f: TextIO) -> None:
    status = "" if deferred.resolved else " (unresolved)"
    f.write(f"{_indent(depth)}Deferred {deferred.name}{status}\n")
    for child in deferred.children:
        _dump_command(child, depth + 1, f)
