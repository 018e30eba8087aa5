"""Node-kind handler registries and the recursive entry points into them."""

from __future__ import annotations

from collections.abc import Callable

from jsunparse.commands import Chunk
from jsunparse.comments import prepend_comments, queue_trailing
from jsunparse.errors import UnhandledNodeError
from jsunparse.nodes import Node, leading_comments, node_span
from jsunparse.state import RenderState

Handler = Callable[[Node, RenderState], None]

HANDLERS: dict[str, Handler] = {}
TYPE_HANDLERS: dict[str, Handler] = {}


def handler(*kinds: str) -> Callable[[Handler], Handler]:
    """Register a function as the handler for one or more node kinds."""

    def register(fn: Handler) -> Handler:
        for k in kinds:
            HANDLERS[k] = fn
        return fn

    return register


def type_handler(*kinds: str) -> Callable[[Handler], Handler]:
    """Register a function as the handler for one or more type-annotation kinds."""

    def register(fn: Handler) -> Handler:
        for k in kinds:
            TYPE_HANDLERS[k] = fn
        return fn

    return register


def handle(node: Node, state: RenderState, *, with_leading: bool = True) -> None:
    """Render *node* into *state*, splicing in its attached comments.

    *with_leading* is cleared by callers that have already emitted the
    node's leading comments themselves.
    """
    node_type = node.get("type")
    fn = HANDLERS.get(node_type) if node_type else None
    if fn is None:
        raise UnhandledNodeError(node_type, node_span(node))

    if with_leading:
        comments = leading_comments(node)
        if comments:
            prepend_comments(comments, state, False, node)

    fn(node, state)

    queue_trailing(node, state)


def handle_type(node: Node, state: RenderState) -> None:
    """Render a type-annotation node."""
    node_type = node.get("type")
    fn = TYPE_HANDLERS.get(node_type) if node_type else None
    if fn is None:
        raise UnhandledNodeError(node_type, node_span(node), category="type annotation")
    fn(node, state)


def handle_wrapped(node: Node, state: RenderState, wrap: bool) -> None:
    """Render *node*, in parentheses if *wrap* is set."""
    if wrap:
        state.push("(")
        handle(node, state)
        state.push(")")
    else:
        handle(node, state)


def chunk(content: str, node: Node | None) -> Chunk:
    """Text that maps back to the source position of *node*."""
    return Chunk(content, node_span(node))
