"""Shared layout helpers: statement bodies, comma lists and declarator lists.

All three defer their line-breaking decision: separators are linked into the
command stream as empty :class:`Deferred` placeholders, the items are
rendered, and only then (once the rendered width and the items' own
multiline flags are known) are the placeholders filled in.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from jsunparse.commands import DEDENT, INDENT, NEWLINE, CommentSlot, Deferred, measure
from jsunparse.comments import drain_after_statement, prepend_comments
from jsunparse.dispatch import handle
from jsunparse.nodes import Node, leading_comments
from jsunparse.state import RenderState

# Declaration-like statements that are visually grouped: a run of imports is
# kept together, with a blank line where the run starts or ends.
GROUPED_STATEMENT_TYPES = frozenset(
    {
        "ImportDeclaration",
        "VariableDeclaration",
        "ExportDefaultDeclaration",
        "ExportNamedDeclaration",
    }
)


def handle_body(nodes: Sequence[Node], state: RenderState) -> None:
    """Render a list of statements, one per line, with blank-line margins."""
    last_type = "EmptyStatement"
    needs_margin = False
    first = True

    for statement in nodes:
        statement_type = statement["type"]
        if statement_type == "EmptyStatement":
            continue

        margin: Deferred | None = None
        if not first:
            margin = Deferred("margin")
            state.push(margin, NEWLINE)
        first = False

        comments = leading_comments(statement)
        if comments:
            prepend_comments(comments, state, True)

        child_state = state.fork()
        handle(statement, child_state, with_leading=False)

        if margin is not None:
            grouped = (
                statement_type in GROUPED_STATEMENT_TYPES or last_type in GROUPED_STATEMENT_TYPES
            )
            if child_state.multiline or needs_margin or (grouped and last_type != statement_type):
                margin.resolve("\n")
            else:
                margin.resolve()

        drain_after_statement(state)

        needs_margin = child_state.multiline
        last_type = statement_type


def sequence(
    nodes: Sequence[Node | None],
    state: RenderState,
    spaces: bool,
    fn: Callable[[Node, RenderState], None] = handle,
    separator: str = ",",
) -> None:
    """Render a separated list, on one line if it fits, else one item per line.

    ``None`` entries are holes (as in sparse arrays) and contribute only a
    separator. *spaces* pads the inline form inside its delimiters, as in
    ``{ a, b }``.
    """
    if not nodes:
        return

    index = len(state.commands)

    open_ = Deferred("sequence-open")
    join = Deferred("sequence-join")
    close = Deferred("sequence-close")

    state.push(open_)

    child_state = state.fork()
    last = len(nodes) - 1
    prev: Node | None = None

    for i, node in enumerate(nodes):
        is_first = i == 0
        is_last = i == last

        if node is None:
            state.push(separator)
            prev = node
            continue

        if not is_first and prev is None:
            state.push(join)

        fn(node, child_state)

        if not is_last:
            state.push(separator)

        if state.comments:
            state.push(" ")
            while state.comments:
                state.push(CommentSlot(state.comments.pop(0)))
                if not is_last:
                    state.push(join)
            child_state.multiline = True
        elif not is_last:
            state.push(join)

        prev = node

    state.push(close)

    if child_state.multiline or measure(state.commands, index) > state.width:
        state.multiline = True
        open_.resolve(INDENT, NEWLINE)
        join.resolve(NEWLINE)
        close.resolve(DEDENT, NEWLINE)
    else:
        if spaces:
            open_.resolve(" ")
            close.resolve(" ")
        else:
            open_.resolve()
            close.resolve()
        join.resolve(" ")


def handle_var_declaration(node: Node, state: RenderState) -> None:
    """Render ``kind a = 1, b = 2`` without the terminating semicolon."""
    declarations = node["declarations"]
    count = len(declarations)

    if node.get("declare"):
        state.push("declare ")

    index = len(state.commands)
    open_ = Deferred("declarations-open")
    join = Deferred("declarations-join")
    child_state = state.fork()

    state.push(f"{node['kind']} ", open_)

    for i, declarator in enumerate(declarations):
        if i > 0:
            state.push(join)
        handle(declarator, child_state)

    if child_state.multiline or (count > 1 and measure(state.commands, index) > state.width):
        state.multiline = True
        if count > 1:
            open_.resolve(INDENT)
        else:
            open_.resolve()
        join.resolve(",", NEWLINE)
        if count > 1:
            state.push(DEDENT)
    else:
        open_.resolve()
        join.resolve(", ")
