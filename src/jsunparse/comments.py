"""Splicing of attached comments into the command stream."""

from __future__ import annotations

from jsunparse.commands import NEWLINE, Break, CommentSlot
from jsunparse.nodes import Comment, Node, is_line_comment, node_span, trailing_comments
from jsunparse.state import RenderState


def prepend_comments(
    comments: list[Comment],
    state: RenderState,
    newlines: bool,
    node: Node | None = None,
) -> None:
    """Emit leading comments ahead of the commands of *node*.

    Each comment is followed by a newline if *newlines* is set, if it is a
    line comment, if it spans lines, or if the source put a line break
    between it and *node*; otherwise by a single space.
    """
    for comment in comments:
        if newlines or _ends_line(comment, node):
            state.push(CommentSlot(comment, Break.NEWLINE))
        else:
            state.push(CommentSlot(comment, Break.SPACE))


def _ends_line(comment: Comment, node: Node | None) -> bool:
    if is_line_comment(comment) or "\n" in comment.get("value", ""):
        return True
    comment_span = node_span(comment)
    node_start = node_span(node)
    if comment_span is None or node_start is None:
        return False
    return comment_span.end.line < node_start.start.line


def queue_trailing(node: Node, state: RenderState) -> None:
    """Queue the trailing comment of *node*; the caller decides where it lands."""
    trailing = trailing_comments(node)
    if trailing:
        # only the first one is ever attached
        state.comments.append(trailing[0])


def drain_after_statement(state: RenderState) -> None:
    """Flush queued comments after a statement, one per line after a line comment."""
    add_newline = False
    while state.comments:
        comment = state.comments.pop(0)
        state.push(NEWLINE if add_newline else " ", CommentSlot(comment))
        add_newline = is_line_comment(comment)


def drain_inline(state: RenderState) -> bool:
    """Flush queued comments between two list items.

    Returns True if a line comment was emitted, meaning the surrounding
    list cannot stay on one line.
    """
    saw_line = False
    while state.comments:
        comment = state.comments.pop(0)
        if is_line_comment(comment):
            saw_line = True
            state.push(CommentSlot(comment, Break.NEWLINE))
        else:
            state.push(CommentSlot(comment, Break.SPACE))
    return saw_line
