"""Operator and expression binding strengths, and the parenthesization rules built on them."""

from __future__ import annotations

from collections.abc import Collection

from jsunparse.nodes import Node

OPERATOR_PRECEDENCE: dict[str, int] = {
    "||": 2,
    "&&": 3,
    "??": 4,
    "|": 5,
    "^": 6,
    "&": 7,
    "==": 8,
    "!=": 8,
    "===": 8,
    "!==": 8,
    "<": 9,
    ">": 9,
    "<=": 9,
    ">=": 9,
    "in": 9,
    "instanceof": 9,
    "<<": 10,
    ">>": 10,
    ">>>": 10,
    "+": 11,
    "-": 11,
    "*": 12,
    "%": 12,
    "/": 12,
    "**": 13,
}

# Node kind -> binding strength. RestElement and Super are pseudo-kinds used
# where no operator applies (a prefix rest marker, a base-class reference).
EXPRESSIONS_PRECEDENCE: dict[str, int] = {
    "JSXFragment": 20,
    "JSXElement": 20,
    "ArrayPattern": 20,
    "ObjectPattern": 20,
    "ArrayExpression": 20,
    "TaggedTemplateExpression": 20,
    "ThisExpression": 20,
    "Identifier": 20,
    "PrivateIdentifier": 20,
    "TemplateLiteral": 20,
    "Super": 20,
    "SequenceExpression": 20,
    "MemberExpression": 19,
    "MetaProperty": 19,
    "CallExpression": 19,
    "ChainExpression": 19,
    "ImportExpression": 19,
    "NewExpression": 19,
    "Literal": 18,
    "TSSatisfiesExpression": 18,
    "TSInstantiationExpression": 18,
    "TSNonNullExpression": 18,
    "TSTypeAssertion": 18,
    "AwaitExpression": 17,
    "ClassExpression": 17,
    "FunctionExpression": 17,
    "ObjectExpression": 17,
    "TSAsExpression": 16,
    "UpdateExpression": 16,
    "UnaryExpression": 15,
    "BinaryExpression": 14,
    "LogicalExpression": 13,
    "ConditionalExpression": 4,
    "ArrowFunctionExpression": 3,
    "AssignmentExpression": 3,
    "YieldExpression": 2,
    "RestElement": 1,
}

UNARY = EXPRESSIONS_PRECEDENCE["UnaryExpression"]
BINARY = EXPRESSIONS_PRECEDENCE["BinaryExpression"]
LOGICAL = EXPRESSIONS_PRECEDENCE["LogicalExpression"]
CALL = EXPRESSIONS_PRECEDENCE["CallExpression"]
MEMBER = EXPRESSIONS_PRECEDENCE["MemberExpression"]
CONDITIONAL = EXPRESSIONS_PRECEDENCE["ConditionalExpression"]


def unwrap(node: Node) -> Node:
    """Strip ParenthesizedExpression wrappers; grouping is re-derived on output."""
    while node.get("type") == "ParenthesizedExpression":
        node = node["expression"]
    return node


def precedence_of(node: Node) -> int | None:
    """Binding strength of an expression node, None for kinds outside the table."""
    return EXPRESSIONS_PRECEDENCE.get(unwrap(node).get("type", ""))


def binds_looser(node: Node, threshold: int) -> bool:
    """True if *node* binds strictly looser than *threshold* (and so needs parens)."""
    precedence = precedence_of(node)
    return precedence is not None and precedence < threshold


def wraps_as_head(node: Node, threshold: int) -> bool:
    """Parenthesization of a member object, callee or template tag.

    An optional chain in one of those positions is always wrapped, so the
    outer access stays outside its short-circuit (``(a?.b).c``).
    """
    return binds_looser(node, threshold) or unwrap(node).get("type") == "ChainExpression"


def needs_parens(node: Node, parent: Node, is_right: bool) -> bool:
    """Decide whether an operand of a binary/logical *parent* must be parenthesized."""
    node = unwrap(node)
    node_type = node.get("type")
    if node_type == "PrivateIdentifier":
        return False

    # `??` cannot be mixed with `||`/`&&` without explicit grouping
    if (
        node_type == "LogicalExpression"
        and parent["type"] == "LogicalExpression"
        and (parent["operator"] == "??") != (node["operator"] == "??")
    ):
        return True

    precedence = EXPRESSIONS_PRECEDENCE.get(node_type or "")
    parent_precedence = EXPRESSIONS_PRECEDENCE.get(parent["type"])
    if precedence is None or parent_precedence is None:
        return False

    if precedence != parent_precedence:
        # A unary or await left operand of `**` is a syntax error without parens
        if (
            not is_right
            and node_type in ("UnaryExpression", "AwaitExpression")
            and parent_precedence == BINARY
            and parent["operator"] == "**"
        ):
            return True
        return precedence < parent_precedence

    if precedence not in (LOGICAL, BINARY):
        return False

    if node["operator"] == "**" and parent["operator"] == "**":
        # right-associative
        return not is_right

    node_strength = OPERATOR_PRECEDENCE[node["operator"]]
    parent_strength = OPERATOR_PRECEDENCE[parent["operator"]]
    if is_right:
        return node_strength <= parent_strength
    return node_strength < parent_strength


def has_call_expression(node: Node | None) -> bool:
    """True if a call appears anywhere along a member-access chain."""
    while node is not None:
        node = unwrap(node)
        if node["type"] == "CallExpression":
            return True
        if node["type"] != "MemberExpression":
            return False
        node = node["object"]
    return False


def starts_with(node: Node, kinds: Collection[str]) -> bool:
    """True if the printed form of *node* begins with a node of one of *kinds*.

    Walks the leftmost operand chain, stopping wherever the printer would
    already emit an opening parenthesis. Used to guard statement and arrow
    body positions where a leading `{`, `function` or `class` would be read
    as a different production.
    """
    while True:
        node = unwrap(node)
        node_type = node.get("type")
        if node_type in kinds:
            return True

        match node_type:
            case "BinaryExpression" | "LogicalExpression":
                child = node["left"]
                if needs_parens(child, node, False):
                    return False
            case "ConditionalExpression":
                child = node["test"]
                precedence = precedence_of(child)
                if precedence is None or precedence <= CONDITIONAL:
                    return False
            case "MemberExpression":
                child = node["object"]
                if wraps_as_head(child, MEMBER):
                    return False
            case "CallExpression":
                child = node["callee"]
                if wraps_as_head(child, CALL):
                    return False
            case "TaggedTemplateExpression":
                child = node["tag"]
                if wraps_as_head(child, MEMBER):
                    return False
            case "TSAsExpression" | "TSSatisfiesExpression" | "TSNonNullExpression":
                child = node["expression"]
                if binds_looser(child, EXPRESSIONS_PRECEDENCE[node_type]):
                    return False
            case "UpdateExpression" if not node.get("prefix"):
                child = node["argument"]
            case "AssignmentExpression":
                child = node["left"]
            case "ChainExpression":
                child = node["expression"]
            case _:
                return False

        node = child
