"""Handlers for classes, their members and decorators."""

from __future__ import annotations

from jsunparse.commands import NEWLINE
from jsunparse.dispatch import handle, handle_type, handle_wrapped, handler
from jsunparse.expressions import handle_annotation, handle_key
from jsunparse.functions import handle_signature
from jsunparse.layout import sequence
from jsunparse.nodes import Node
from jsunparse.precedence import MEMBER, binds_looser
from jsunparse.state import RenderState

# Modifier keywords in the order TypeScript requires them
_MODIFIERS = ("declare", "accessibility", "static", "abstract", "override", "readonly")


def handle_decorators(node: Node, state: RenderState) -> None:
    for decorator in node.get("decorators") or ():
        handle(decorator, state)


def handle_modifiers(node: Node, state: RenderState) -> None:
    abstract_kind = node["type"].startswith("TSAbstract")
    for modifier in _MODIFIERS:
        value = node.get(modifier) or (modifier == "abstract" and abstract_kind)
        if not value:
            continue
        state.push(f"{value} " if modifier == "accessibility" else f"{modifier} ")


@handler("Decorator")
def _decorator(node: Node, state: RenderState) -> None:
    expression = node["expression"]
    state.push("@")
    handle_wrapped(expression, state, binds_looser(expression, MEMBER))
    state.push(NEWLINE)


@handler("ClassDeclaration", "ClassExpression")
def _class(node: Node, state: RenderState) -> None:
    handle_decorators(node, state)
    if node.get("declare"):
        state.push("declare ")
    if node.get("abstract"):
        state.push("abstract ")
    state.push("class ")

    if node.get("id"):
        handle(node["id"], state)
        type_params = node.get("typeParameters")
        if type_params:
            handle_type(type_params, state)
        state.push(" ")

    superclass = node.get("superClass")
    if superclass:
        state.push("extends ")
        handle_wrapped(superclass, state, binds_looser(superclass, MEMBER))
        super_args = node.get("superTypeArguments") or node.get("superTypeParameters")
        if super_args:
            handle_type(super_args, state)
        state.push(" ")

    implements = node.get("implements")
    if implements:
        state.push("implements ")
        sequence(implements, state, False, handle_type)
        state.push(" ")

    handle(node["body"], state)


@handler("MethodDefinition", "TSAbstractMethodDefinition")
def _method(node: Node, state: RenderState) -> None:
    handle_decorators(node, state)
    handle_modifiers(node, state)

    fn = node["value"]
    if node.get("kind") in ("get", "set"):
        state.push(node["kind"] + " ")
    if fn.get("async"):
        state.push("async ")
    if fn.get("generator"):
        state.push("*")

    handle_key(node, state)
    if node.get("optional"):
        state.push("?")

    handle_signature(fn, state)

    body = fn.get("body")
    if body is None:
        state.push(";")
        return
    state.push(" ")
    handle(body, state)


@handler("PropertyDefinition", "TSAbstractPropertyDefinition", "AccessorProperty")
def _property_definition(node: Node, state: RenderState) -> None:
    handle_decorators(node, state)
    handle_modifiers(node, state)
    if node["type"] == "AccessorProperty":
        state.push("accessor ")

    handle_key(node, state)
    if node.get("optional"):
        state.push("?")
    if node.get("definite"):
        state.push("!")
    handle_annotation(node, state)

    value = node.get("value")
    if value:
        state.push(" = ")
        handle(value, state)

    state.push(";")


@handler("TSParameterProperty")
def _parameter_property(node: Node, state: RenderState) -> None:
    """A constructor parameter that also declares a member: ``private readonly x``."""
    handle_modifiers(node, state)
    handle(node["parameter"], state)
