"""Shared test fixtures and ESTree node builders."""

from __future__ import annotations

from typing import Any

import pytest

import jsunparse

Node = dict[str, Any]


@pytest.fixture
def render():
    """Return a helper that prints a node (or statement list) and returns the code."""

    def _render(node: Node | list[Node], **options: Any) -> str:
        return jsunparse.print(node, **options).code

    return _render


def loc(line: int, column: int, end_line: int | None = None, end_column: int | None = None) -> Node:
    """A ``loc`` record; the end defaults to the start."""
    return {
        "start": {"line": line, "column": column},
        "end": {
            "line": end_line if end_line is not None else line,
            "column": end_column if end_column is not None else column,
        },
    }


def ident(name: str, **extra: Any) -> Node:
    return {"type": "Identifier", "name": name, **extra}


def num(value: int | float) -> Node:
    return {"type": "Literal", "value": value, "raw": str(value)}


def string(value: str, raw: str | None = None) -> Node:
    node: Node = {"type": "Literal", "value": value}
    if raw is not None:
        node["raw"] = raw
    return node


def binary(operator: str, left: Node, right: Node) -> Node:
    kind = "LogicalExpression" if operator in ("||", "&&", "??") else "BinaryExpression"
    return {"type": kind, "operator": operator, "left": left, "right": right}


def unary(operator: str, argument: Node) -> Node:
    return {"type": "UnaryExpression", "operator": operator, "prefix": True, "argument": argument}


def update(operator: str, argument: Node, prefix: bool = False) -> Node:
    return {
        "type": "UpdateExpression",
        "operator": operator,
        "prefix": prefix,
        "argument": argument,
    }


def member(obj: Node, prop: Node | str, computed: bool = False, optional: bool = False) -> Node:
    if isinstance(prop, str):
        prop = ident(prop)
    return {
        "type": "MemberExpression",
        "object": obj,
        "property": prop,
        "computed": computed,
        "optional": optional,
    }


def call(callee: Node, *arguments: Node, optional: bool = False) -> Node:
    return {
        "type": "CallExpression",
        "callee": callee,
        "arguments": list(arguments),
        "optional": optional,
    }


def new(callee: Node, *arguments: Node) -> Node:
    return {"type": "NewExpression", "callee": callee, "arguments": list(arguments)}


def assign(left: Node, right: Node, operator: str = "=") -> Node:
    return {"type": "AssignmentExpression", "operator": operator, "left": left, "right": right}


def prop(key: Node | str, value: Node, **extra: Any) -> Node:
    if isinstance(key, str):
        key = ident(key)
    node: Node = {
        "type": "Property",
        "key": key,
        "value": value,
        "kind": "init",
        "computed": False,
        "method": False,
        "shorthand": False,
    }
    node.update(extra)
    return node


def obj(*properties: Node) -> Node:
    return {"type": "ObjectExpression", "properties": list(properties)}


def array(*elements: Node | None) -> Node:
    return {"type": "ArrayExpression", "elements": list(elements)}


def block(*body: Node) -> Node:
    return {"type": "BlockStatement", "body": list(body)}


def stmt(expression: Node) -> Node:
    return {"type": "ExpressionStatement", "expression": expression}


def ret(argument: Node | None = None) -> Node:
    return {"type": "ReturnStatement", "argument": argument}


def var(kind: str, *declarators: tuple[str | Node, Node | None]) -> Node:
    """``var(kind, ("a", num(1)), ("b", None))``."""
    return {
        "type": "VariableDeclaration",
        "kind": kind,
        "declarations": [
            {
                "type": "VariableDeclarator",
                "id": ident(target) if isinstance(target, str) else target,
                "init": init,
            }
            for target, init in declarators
        ],
    }


def function(
    name: str | None,
    params: list[Node],
    *body: Node,
    expression: bool = False,
    **extra: Any,
) -> Node:
    node: Node = {
        "type": "FunctionExpression" if expression else "FunctionDeclaration",
        "id": ident(name) if name else None,
        "params": params,
        "body": block(*body),
        "generator": False,
        "async": False,
    }
    node.update(extra)
    return node


def arrow(params: list[Node], body: Node, **extra: Any) -> Node:
    node: Node = {
        "type": "ArrowFunctionExpression",
        "params": params,
        "body": body,
        "expression": body["type"] != "BlockStatement",
        "async": False,
    }
    node.update(extra)
    return node


def annotation(type_node: Node) -> Node:
    return {"type": "TSTypeAnnotation", "typeAnnotation": type_node}


def keyword_type(name: str) -> Node:
    """``keyword_type("string")`` is a TSStringKeyword node."""
    special = {"bigint": "BigInt"}
    return {"type": f"TS{special.get(name, name.capitalize())}Keyword"}


def instantiation(*params: Node) -> Node:
    return {"type": "TSTypeParameterInstantiation", "params": list(params)}


def type_ref(name: str, *args: Node) -> Node:
    node: Node = {"type": "TSTypeReference", "typeName": ident(name)}
    if args:
        node["typeArguments"] = instantiation(*args)
    return node


def line_comment(value: str) -> Node:
    return {"type": "Line", "value": value}


def block_comment(value: str) -> Node:
    return {"type": "Block", "value": value}
