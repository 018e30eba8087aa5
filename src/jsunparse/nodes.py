"""Syntax-tree node access helpers and source position types."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# Nodes are ESTree-shaped mappings owned by the caller: {"type": "Identifier", "name": "x", ...}
Node = Mapping[str, Any]
Comment = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and 0-based column (ESTree convention)."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


def node_span(node: Node | None) -> Span | None:
    """Return the recorded source range of *node*, or None if it has none."""
    if node is None:
        return None
    loc = node.get("loc")
    if not loc:
        return None
    start = loc.get("start")
    end = loc.get("end") or start
    if not start:
        return None
    return Span(
        Position(start["line"], start["column"]),
        Position(end["line"], end["column"]),
    )


def leading_comments(node: Node) -> list[Comment]:
    return node.get("leadingComments") or []


def trailing_comments(node: Node) -> list[Comment]:
    return node.get("trailingComments") or []


def is_line_comment(comment: Comment) -> bool:
    return comment.get("type") == "Line"


def name_of(node: Node) -> str | None:
    """Name of an Identifier, or value of a string Literal used as a name."""
    if node.get("type") == "Identifier":
        return node.get("name")
    if node.get("type") == "Literal" and isinstance(node.get("value"), str):
        return node["value"]
    return None
