"""Handlers for function declarations, function expressions and arrows."""

from __future__ import annotations

from jsunparse.dispatch import handle, handle_type, handle_wrapped, handler
from jsunparse.layout import sequence
from jsunparse.nodes import Node
from jsunparse.precedence import starts_with
from jsunparse.state import RenderState

# An arrow body starting with one of these would be read as a block
_BRACE_HEADED = frozenset({"ObjectExpression", "ObjectPattern"})


def params_of(node: Node) -> list[Node]:
    """Parameter list of a function node or a TypeScript signature."""
    params = node.get("params")
    if params is None:
        params = node.get("parameters") or []
    return params


def handle_signature(node: Node, state: RenderState) -> None:
    """Render ``<T>(a, b): R``: type parameters, parameter list, return type."""
    type_params = node.get("typeParameters")
    if type_params:
        handle_type(type_params, state)

    state.push("(")
    sequence(params_of(node), state, False)
    state.push(")")

    return_type = node.get("returnType")
    if return_type:
        handle_type(return_type, state)


@handler("FunctionDeclaration", "FunctionExpression", "TSDeclareFunction")
def _function(node: Node, state: RenderState) -> None:
    if node.get("declare"):
        state.push("declare ")
    if node.get("async"):
        state.push("async ")
    state.push("function* " if node.get("generator") else "function ")

    if node.get("id"):
        handle(node["id"], state)

    handle_signature(node, state)

    body = node.get("body")
    if body is None:
        # overload or ambient declaration
        state.push(";")
        return

    state.push(" ")
    handle(body, state)


@handler("ArrowFunctionExpression")
def _arrow(node: Node, state: RenderState) -> None:
    if node.get("async"):
        state.push("async ")

    handle_signature(node, state)
    state.push(" => ")

    body = node["body"]
    if body["type"] == "BlockStatement":
        handle(body, state)
    else:
        handle_wrapped(body, state, starts_with(body, _BRACE_HEADED))
