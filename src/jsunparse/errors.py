"""Exceptions raised while printing, with source-line context for reports."""

from __future__ import annotations

from jsunparse.nodes import Span


class UnhandledNodeError(NotImplementedError):
    """Raised when a node kind has no registered handler. Always fatal."""

    def __init__(
        self,
        kind: str | None,
        span: Span | None = None,
        source: str = "",
        category: str = "node",
    ) -> None:
        self.kind = kind
        self.span = span
        self.source = source
        self.category = category
        self.message = f"not implemented: {category} kind '{kind}'"
        super().__init__(self.format())

    def format(self, filename: str = "input.js") -> str:
        if self.span is None:
            return f"error: {self.message}"

        line = self.span.start.line
        col = self.span.start.column + 1
        result = f"error: {self.message}\n  --> {filename}:{line}:{col}"

        lines = self.source.splitlines()
        if not 0 <= line - 1 < len(lines):
            return result
        source_line = lines[line - 1]

        # Underline the full span when on one line, otherwise to end of line
        if self.span.end.line == line:
            underline_len = max(1, self.span.end.column - self.span.start.column)
        else:
            underline_len = max(1, len(source_line) - col + 1)

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class OptionsError(ValueError):
    """Raised when print options fall outside the documented set."""

    def __init__(self, option: str, message: str) -> None:
        self.option = option
        self.message = message
        super().__init__(self.format())

    def format(self) -> str:
        return f"error: invalid option '{self.option}': {self.message}"


class LayoutError(RuntimeError):
    """Raised when a render breaks one of the command-sequence invariants."""
