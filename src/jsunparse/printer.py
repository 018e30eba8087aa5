"""Top-level render: tree to commands, commands to code and a source map."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from jsunparse import classes, expressions, functions, modules, statements, typescript
from jsunparse.commands import Command, check_resolved
from jsunparse.comments import drain_after_statement
from jsunparse.dispatch import handle
from jsunparse.errors import LayoutError, UnhandledNodeError
from jsunparse.linearize import linearize
from jsunparse.nodes import Node
from jsunparse.options import PrintOptions, resolve_options
from jsunparse.sourcemap import Mappings, SourceMap, encode_mappings
from jsunparse.state import RenderState

logger = logging.getLogger(__name__)

# Importing a handler module registers its node kinds
HANDLER_MODULES = (expressions, statements, functions, classes, modules, typescript)


@dataclass(frozen=True, slots=True)
class PrintResult:
    """Generated code and its source map."""

    code: str
    map: SourceMap


def as_program(node: Node | Sequence[Node]) -> Node:
    """Wrap a bare list of statements in a module Program node."""
    if isinstance(node, Mapping):
        return node
    return {"type": "Program", "body": list(node), "sourceType": "module"}


def render_commands(node: Node, options: PrintOptions) -> list[Command]:
    """Build the resolved command sequence for *node*."""
    state = RenderState(quote=options.quote, width=options.width)
    try:
        handle(node, state)
    except UnhandledNodeError as exc:
        if exc.source or not options.source_map_content:
            raise
        # re-raise with the source text so the error can show the offending line
        raise UnhandledNodeError(
            exc.kind, exc.span, options.source_map_content, exc.category
        ) from None

    # comments still queued after the root (e.g. trailing an expression root)
    drain_after_statement(state)
    if state.comments:
        raise LayoutError("comment queue not empty after render")

    check_resolved(state.commands)
    logger.debug("rendered %s into %d commands", node.get("type"), len(state.commands))
    return state.commands


def print_node(
    node: Node | Sequence[Node],
    options: PrintOptions | None = None,
    **overrides: Any,
) -> PrintResult:
    """Print a syntax tree (or a list of top-level statements) as source text."""
    options = resolve_options(options, **overrides)
    root = as_program(node)

    commands = render_commands(root, options)
    code, mappings = linearize(commands, options.indent)
    logger.debug("generated %d characters over %d lines", len(code), len(mappings))

    return PrintResult(code, build_source_map(mappings, options))


def build_source_map(mappings: Mappings, options: PrintOptions) -> SourceMap:
    """Wrap raw mapping segments in a SourceMap as *options* ask."""
    encoded = options.source_map_encode_mappings
    return SourceMap(
        mappings=encode_mappings(mappings) if encoded else mappings,
        sources=[options.source_map_source],
        sources_content=[options.source_map_content],
    )
