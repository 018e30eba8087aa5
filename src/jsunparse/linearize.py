"""Final pass: walk a resolved command sequence, producing text and mappings."""

from __future__ import annotations

from collections.abc import Iterator

from jsunparse.commands import Break, Chunk, Command, CommentSlot, Deferred, Marker
from jsunparse.errors import LayoutError
from jsunparse.nodes import Position, is_line_comment
from jsunparse.sourcemap import Mappings, Segment


class Linearizer:
    """Accumulates output text while tracking indentation and mapping positions.

    ``newline`` is the live "line break plus current indentation" string;
    indent and dedent markers grow and shrink it by one unit.
    """

    def __init__(self, indent: str = "\t") -> None:
        self.indent = indent
        self.newline = "\n"
        self.column = 0
        self.mappings: Mappings = []
        self._parts: list[str] = []
        self._line: list[Segment] = []

    def append(self, text: str) -> None:
        # columns count UTF-16 code units, like ESTree locations
        self._parts.append(text)
        for ch in text:
            if ch == "\n":
                self.mappings.append(self._line)
                self._line = []
                self.column = 0
            elif ord(ch) > 0xFFFF:
                self.column += 2
            else:
                self.column += 1

    def mark(self, position: Position) -> None:
        """Map the current output column to *position* in the source."""
        # source index is always zero: one tree, one source
        self._line.append([self.column, 0, position.line - 1, position.column])

    def run(self, commands: list[Command]) -> None:
        for command in _walk(commands):
            if isinstance(command, str):
                self.append(command)
            elif isinstance(command, Chunk):
                self._emit_chunk(command)
            elif isinstance(command, CommentSlot):
                self._emit_comment(command)
            elif command is Marker.NEWLINE:
                self.append(self.newline)
            elif command is Marker.INDENT:
                self.newline += self.indent
            elif command is Marker.DEDENT:
                if self.newline == "\n":
                    raise LayoutError("dedent below indentation level zero")
                self.newline = self.newline[: -len(self.indent)]

    def finish(self) -> tuple[str, Mappings]:
        if self.newline != "\n":
            raise LayoutError("indentation not back at level zero after render")
        self.mappings.append(self._line)
        self._line = []
        return "".join(self._parts), self.mappings

    def _emit_chunk(self, chunk: Chunk) -> None:
        if chunk.loc is None:
            self.append(chunk.content)
            return
        self.mark(chunk.loc.start)
        self.append(chunk.content)
        self.mark(chunk.loc.end)

    def _emit_comment(self, slot: CommentSlot) -> None:
        comment = slot.comment
        value = comment.get("value", "")
        if is_line_comment(comment):
            self.append(f"//{value}")
        else:
            # continuation lines follow the current indentation
            self.append("/*" + value.replace("\n", self.newline) + "*/")

        if slot.after is Break.SPACE:
            self.append(" ")
        elif slot.after is Break.NEWLINE:
            self.append(self.newline)


def _walk(commands: list[Command]) -> Iterator[Command]:
    """Yield leaf commands in order, expanding Deferreds without recursion."""
    stack: list[Iterator[Command]] = [iter(commands)]
    while stack:
        for command in stack[-1]:
            if isinstance(command, Deferred):
                stack.append(iter(command.children))
                break
            yield command
        else:
            stack.pop()


def linearize(commands: list[Command], indent: str = "\t") -> tuple[str, Mappings]:
    """Render *commands* to text plus per-line raw mapping segments."""
    linearizer = Linearizer(indent)
    linearizer.run(commands)
    return linearizer.finish()
