"""Handlers for expressions, patterns and literals."""

from __future__ import annotations

from jsunparse.commands import DEDENT, INDENT, NEWLINE, Deferred, measure
from jsunparse.comments import drain_inline
from jsunparse.dispatch import chunk, handle, handle_type, handle_wrapped, handler
from jsunparse.functions import handle_signature
from jsunparse.layout import sequence
from jsunparse.nodes import Node
from jsunparse.precedence import (
    CALL,
    CONDITIONAL,
    EXPRESSIONS_PRECEDENCE,
    MEMBER,
    UNARY,
    binds_looser,
    has_call_expression,
    needs_parens,
    precedence_of,
    unwrap,
    wraps_as_head,
)
from jsunparse.state import RenderState
from jsunparse.strings import format_literal

AWAIT = EXPRESSIONS_PRECEDENCE["AwaitExpression"]


def type_arguments(node: Node) -> Node | None:
    """Explicit type arguments, under either of the names parsers use for them."""
    return node.get("typeArguments") or node.get("typeParameters")


def handle_annotation(node: Node, state: RenderState) -> None:
    """Append the optional ``: T`` annotation carried by a binding."""
    annotation = node.get("typeAnnotation")
    if annotation:
        handle_type(annotation, state)


# ---------------------------------------------------------------------------
# Primary expressions
# ---------------------------------------------------------------------------


@handler("Identifier")
def _identifier(node: Node, state: RenderState) -> None:
    state.push(chunk(node["name"], node))
    if node.get("optional"):
        state.push("?")
    handle_annotation(node, state)


@handler("PrivateIdentifier")
def _private_identifier(node: Node, state: RenderState) -> None:
    state.push(chunk("#" + node["name"], node))


@handler("ThisExpression")
def _this(node: Node, state: RenderState) -> None:
    state.push(chunk("this", node))


@handler("Super")
def _super(node: Node, state: RenderState) -> None:
    state.push(chunk("super", node))


@handler("Literal")
def _literal(node: Node, state: RenderState) -> None:
    """Literals keep their source spelling when the parser recorded one."""
    raw = node.get("raw")
    if raw:
        text = raw
    elif node.get("regex"):
        regex = node["regex"]
        text = f"/{regex['pattern']}/{regex.get('flags', '')}"
    elif node.get("bigint") is not None:
        text = f"{node['bigint']}n"
    else:
        text = format_literal(node.get("value"), state.quote)

    if "\n" in text:
        state.multiline = True
    state.push(chunk(text, node))


@handler("TemplateLiteral")
def _template_literal(node: Node, state: RenderState) -> None:
    quasis = node["quasis"]
    expressions = node["expressions"]

    state.push("`")
    for i, quasi in enumerate(quasis):
        raw = quasi["value"]["raw"]
        state.push(chunk(raw, quasi))
        if "\n" in raw:
            state.multiline = True
        if i < len(expressions):
            state.push("${")
            handle(expressions[i], state)
            state.push("}")
    state.push("`")


@handler("TaggedTemplateExpression")
def _tagged_template(node: Node, state: RenderState) -> None:
    tag = node["tag"]
    handle_wrapped(tag, state, wraps_as_head(tag, MEMBER))
    args = type_arguments(node)
    if args:
        handle_type(args, state)
    handle(node["quasi"], state)


@handler("ParenthesizedExpression")
def _parenthesized(node: Node, state: RenderState) -> None:
    # grouping is re-derived from precedence wherever the child is printed
    handle(node["expression"], state)


@handler("MetaProperty")
def _meta_property(node: Node, state: RenderState) -> None:
    handle(node["meta"], state)
    state.push(".")
    handle(node["property"], state)


@handler("ImportExpression")
def _import_expression(node: Node, state: RenderState) -> None:
    state.push(chunk("import", node), "(")
    handle(node["source"], state)
    options = node.get("options") or node.get("attributes")
    if options:
        state.push(", ")
        handle(options, state)
    state.push(")")


# ---------------------------------------------------------------------------
# Arrays, objects and patterns
# ---------------------------------------------------------------------------


@handler("ArrayExpression", "ArrayPattern")
def _array(node: Node, state: RenderState) -> None:
    state.push("[")
    sequence(node["elements"], state, False)
    state.push("]")
    handle_annotation(node, state)


@handler("ObjectExpression")
def _object_expression(node: Node, state: RenderState) -> None:
    state.push("{")
    sequence(node["properties"], state, True, _object_member)
    state.push("}")


@handler("ObjectPattern")
def _object_pattern(node: Node, state: RenderState) -> None:
    state.push("{")
    sequence(node["properties"], state, True)
    state.push("}")
    handle_annotation(node, state)


def _is_method(prop: Node) -> bool:
    value = prop["value"]
    if value.get("type") != "FunctionExpression" or value.get("id"):
        return False
    return prop.get("kind") in ("get", "set") or prop.get("method", True)


def _object_member(prop: Node, state: RenderState) -> None:
    if prop["type"] != "Property" or not _is_method(prop):
        handle(prop, state)
        return

    fn = prop["value"]
    if prop.get("kind") in ("get", "set"):
        state.push(prop["kind"] + " ")
    else:
        if fn.get("async"):
            state.push("async ")
        if fn.get("generator"):
            state.push("*")

    handle_key(prop, state)
    handle_signature(fn, state)
    state.push(" ")
    handle(fn["body"], state)


def handle_key(node: Node, state: RenderState) -> None:
    """Render a property or member key, bracketed when computed."""
    if node.get("computed"):
        state.push("[")
        handle(node["key"], state)
        state.push("]")
    else:
        handle(node["key"], state)


@handler("Property")
def _property(node: Node, state: RenderState) -> None:
    key = node["key"]
    value = node["value"]
    target = value["left"] if value["type"] == "AssignmentPattern" else value

    shorthand = (
        not node.get("computed")
        and node.get("kind", "init") == "init"
        and key["type"] == "Identifier"
        and target["type"] == "Identifier"
        and key["name"] == target["name"]
    )
    if shorthand:
        handle(value, state)
        return

    handle_key(node, state)
    state.push(": ")
    handle(value, state)


@handler("AssignmentPattern")
def _assignment_pattern(node: Node, state: RenderState) -> None:
    handle(node["left"], state)
    state.push(" = ")
    handle(node["right"], state)


@handler("RestElement", "SpreadElement")
def _rest(node: Node, state: RenderState) -> None:
    state.push("...")
    handle(node["argument"], state)
    handle_annotation(node, state)


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


@handler("BinaryExpression", "LogicalExpression")
def _binary(node: Node, state: RenderState) -> None:
    if node["operator"] == "in" and state.no_in:
        state.no_in = False
        state.push("(")
        _binary(node, state)
        state.push(")")
        state.no_in = True
        return

    left = node["left"]
    right = node["right"]
    handle_wrapped(left, state, needs_parens(left, node, False))
    state.push(f" {node['operator']} ")
    handle_wrapped(right, state, needs_parens(right, node, True))


@handler("UnaryExpression")
def _unary(node: Node, state: RenderState) -> None:
    operator = node["operator"]
    argument = node["argument"]
    state.push(operator)

    if len(operator) > 1:
        # typeof, void, delete
        state.push(" ")
    elif operator in "+-":
        inner = unwrap(argument)
        if (
            inner["type"] in ("UnaryExpression", "UpdateExpression")
            and inner["operator"][0] == operator
            and inner.get("prefix", True)
        ):
            # `- -x` and `+ ++x`, not `--x` and `+++x`
            state.push(" ")

    handle_wrapped(argument, state, binds_looser(argument, UNARY))


@handler("UpdateExpression")
def _update(node: Node, state: RenderState) -> None:
    if node.get("prefix"):
        state.push(node["operator"])
        handle(node["argument"], state)
    else:
        handle(node["argument"], state)
        state.push(node["operator"])


@handler("AssignmentExpression")
def _assignment(node: Node, state: RenderState) -> None:
    handle(node["left"], state)
    state.push(f" {node['operator']} ")
    handle(node["right"], state)


@handler("ConditionalExpression")
def _conditional(node: Node, state: RenderState) -> None:
    test = node["test"]
    precedence = precedence_of(test)
    handle_wrapped(test, state, precedence is None or precedence <= CONDITIONAL)

    if_true = Deferred("conditional-consequent")
    if_false = Deferred("conditional-alternate")
    child_state = state.fork()

    state.push(if_true)
    handle(node["consequent"], child_state)
    state.push(if_false)
    handle(node["alternate"], child_state)

    if child_state.multiline:
        state.multiline = True
        if_true.resolve(INDENT, NEWLINE, "? ")
        if_false.resolve(NEWLINE, ": ")
        state.push(DEDENT)
    else:
        if_true.resolve(" ? ")
        if_false.resolve(" : ")


@handler("SequenceExpression")
def _sequence_expression(node: Node, state: RenderState) -> None:
    state.push("(")
    sequence(node["expressions"], state, False)
    state.push(")")


@handler("AwaitExpression")
def _await(node: Node, state: RenderState) -> None:
    argument = node.get("argument")
    if argument is None:
        state.push("await")
        return
    if binds_looser(argument, AWAIT):
        state.push("await (")
        handle(argument, state)
        state.push(")")
    else:
        state.push("await ")
        handle(argument, state)


@handler("YieldExpression")
def _yield(node: Node, state: RenderState) -> None:
    keyword = "yield*" if node.get("delegate") else "yield"
    argument = node.get("argument")
    if argument is None:
        state.push(keyword)
        return
    state.push(keyword + " ")
    handle(argument, state)


# ---------------------------------------------------------------------------
# Member access and calls
# ---------------------------------------------------------------------------


@handler("MemberExpression")
def _member(node: Node, state: RenderState) -> None:
    obj = node["object"]
    handle_wrapped(obj, state, wraps_as_head(obj, MEMBER))

    if node.get("computed"):
        if node.get("optional"):
            state.push("?.")
        state.push("[")
        handle(node["property"], state)
        state.push("]")
    else:
        state.push("?." if node.get("optional") else ".")
        handle(node["property"], state)


@handler("ChainExpression")
def _chain(node: Node, state: RenderState) -> None:
    handle(node["expression"], state)


@handler("CallExpression", "NewExpression")
def _call(node: Node, state: RenderState) -> None:
    """Calls keep a trailing callback or object literal hugging the parens.

    The arguments before the last are broken one per line if any of them
    is multi-line or they are too wide together; the last argument's own
    layout does not affect that decision.
    """
    is_new = node["type"] == "NewExpression"
    if is_new:
        state.push("new ")

    callee = node["callee"]
    wrap = wraps_as_head(callee, CALL) or (is_new and has_call_expression(callee))
    handle_wrapped(callee, state, wrap)

    if node.get("optional"):
        state.push("?.")

    args = type_arguments(node)
    if args:
        handle_type(args, state)

    arguments = node["arguments"]
    last = len(arguments) - 1

    open_ = Deferred("arguments-open")
    join = Deferred("arguments-join")
    close = Deferred("arguments-close")

    state.push("(", open_)
    index = len(state.commands)
    final_index = index

    child_state = state.fork()
    final_state = state.fork()

    for i, argument in enumerate(arguments):
        if i > 0:
            if state.comments:
                state.push(", ")
                if drain_inline(state):
                    child_state.multiline = True
            else:
                state.push(join)

        if i == last:
            final_index = len(state.commands)
            handle(argument, final_state)
        else:
            handle(argument, child_state)

    state.push(close, ")")

    multiline = child_state.multiline or measure(state.commands, index, final_index) > state.width
    if multiline or final_state.multiline:
        state.multiline = True

    if multiline:
        open_.resolve(INDENT, NEWLINE)
        join.resolve(",", NEWLINE)
        close.resolve(DEDENT, NEWLINE)
    else:
        open_.resolve()
        join.resolve(", ")
        close.resolve()
