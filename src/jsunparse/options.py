"""Print options and their validation."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

from jsunparse.errors import OptionsError

QUOTES: dict[str, str] = {
    "single": "'",
    "double": '"',
}


@dataclass(frozen=True, slots=True)
class PrintOptions:
    """Options accepted by :func:`jsunparse.print`.

    ``indent`` is the text of one indentation level. ``quotes`` picks the
    delimiter for string literals that carry no raw source text. ``width``
    is the budget a list may occupy before it is broken over several lines.
    The ``source_map_*`` fields feed the position map: the source name and
    content to embed, and whether mappings are emitted in their compact
    encoded form or as raw segment lists.
    """

    indent: str = "\t"
    quotes: str = "single"
    width: int = 80
    source_map_source: str | None = None
    source_map_content: str | None = None
    source_map_encode_mappings: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.indent, str) or not self.indent:
            raise OptionsError("indent", "must be a non-empty string")
        if self.indent.strip(" \t"):
            raise OptionsError("indent", f"may only contain spaces and tabs, got {self.indent!r}")
        if self.quotes not in QUOTES:
            raise OptionsError("quotes", f"expected 'single' or 'double', got {self.quotes!r}")
        if isinstance(self.width, bool) or not isinstance(self.width, int) or self.width < 1:
            raise OptionsError("width", f"must be a positive integer, got {self.width!r}")
        if not isinstance(self.source_map_encode_mappings, bool):
            raise OptionsError(
                "source_map_encode_mappings",
                f"must be true or false, got {self.source_map_encode_mappings!r}",
            )

    @property
    def quote(self) -> str:
        """The quote character for string literals."""
        return QUOTES[self.quotes]


_FIELD_NAMES = frozenset(f.name for f in fields(PrintOptions))


def resolve_options(options: PrintOptions | None = None, **overrides: Any) -> PrintOptions:
    """Apply keyword overrides on top of *options* (or the defaults)."""
    base = options if options is not None else PrintOptions()
    unknown = sorted(set(overrides) - _FIELD_NAMES)
    if unknown:
        raise OptionsError(unknown[0], "unknown option")
    if not overrides:
        return base
    return replace(base, **overrides)
