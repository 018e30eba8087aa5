"""Handlers for statements, blocks and the program root."""

from __future__ import annotations

from jsunparse.commands import DEDENT, INDENT, NEWLINE
from jsunparse.comments import drain_after_statement, prepend_comments
from jsunparse.dispatch import chunk, handle, handle_wrapped, handler
from jsunparse.layout import handle_body, handle_var_declaration
from jsunparse.nodes import Node, is_line_comment, leading_comments
from jsunparse.precedence import starts_with
from jsunparse.state import RenderState

# An expression statement starting with one of these would be read as a
# block, a function declaration or a class declaration
_STATEMENT_AMBIGUOUS = frozenset(
    {"ObjectExpression", "ObjectPattern", "FunctionExpression", "ClassExpression"}
)


@handler("Program")
def _program(node: Node, state: RenderState) -> None:
    handle_body(node["body"], state)


@handler("BlockStatement", "ClassBody", "TSModuleBlock", "StaticBlock")
def _block(node: Node, state: RenderState) -> None:
    """Braced statement list; an empty body prints as ``{}``."""
    if node["type"] == "StaticBlock":
        state.push("static ")

    body = node["body"]
    if all(statement["type"] == "EmptyStatement" for statement in body):
        state.push("{}")
        return

    state.multiline = True
    state.push("{", INDENT, NEWLINE)
    handle_body(body, state)
    state.push(DEDENT, NEWLINE, "}")


@handler("EmptyStatement")
def _empty(node: Node, state: RenderState) -> None:
    state.push(";")


@handler("ExpressionStatement")
def _expression_statement(node: Node, state: RenderState) -> None:
    expression = node["expression"]
    handle_wrapped(expression, state, starts_with(expression, _STATEMENT_AMBIGUOUS))
    state.push(";")


@handler("DebuggerStatement")
def _debugger(node: Node, state: RenderState) -> None:
    state.push(chunk("debugger", node), ";")


@handler("BreakStatement", "ContinueStatement")
def _jump(node: Node, state: RenderState) -> None:
    keyword = "break" if node["type"] == "BreakStatement" else "continue"
    label = node.get("label")
    if label:
        state.push(keyword + " ")
        handle(label, state)
        state.push(";")
    else:
        state.push(keyword + ";")


@handler("LabeledStatement")
def _labeled(node: Node, state: RenderState) -> None:
    handle(node["label"], state)
    state.push(": ")
    handle(node["body"], state)


def _breaks_line(argument: Node) -> bool:
    """True if a leading comment would put a line break after the keyword."""
    return any(
        is_line_comment(comment) or "\n" in comment.get("value", "")
        for comment in leading_comments(argument)
    )


@handler("ReturnStatement", "ThrowStatement")
def _return(node: Node, state: RenderState) -> None:
    keyword = "return" if node["type"] == "ReturnStatement" else "throw"
    argument = node.get("argument")
    if argument is None:
        state.push(keyword + ";")
        return

    # `return // ...` followed by a newline would return undefined
    if _breaks_line(argument):
        state.push(keyword + " (")
        handle(argument, state)
        state.push(");")
    else:
        state.push(keyword + " ")
        handle(argument, state)
        state.push(";")


@handler("VariableDeclaration")
def _variable_declaration(node: Node, state: RenderState) -> None:
    handle_var_declaration(node, state)
    state.push(";")


@handler("VariableDeclarator")
def _variable_declarator(node: Node, state: RenderState) -> None:
    handle(node["id"], state)
    init = node.get("init")
    if init:
        state.push(" = ")
        handle(init, state)


# ---------------------------------------------------------------------------
# Control flow
# ---------------------------------------------------------------------------


@handler("IfStatement")
def _if(node: Node, state: RenderState) -> None:
    state.push("if (")
    handle(node["test"], state)
    state.push(") ")
    handle(node["consequent"], state)

    alternate = node.get("alternate")
    if alternate:
        state.push(" else ")
        handle(alternate, state)


def _handle_head(node: Node, state: RenderState) -> None:
    """The declaration or expression in a for-loop head, without a semicolon."""
    if node["type"] == "VariableDeclaration":
        handle_var_declaration(node, state)
    else:
        handle(node, state)


@handler("ForStatement")
def _for(node: Node, state: RenderState) -> None:
    state.push("for (")
    init = node.get("init")
    if init:
        outer, state.no_in = state.no_in, True
        _handle_head(init, state)
        state.no_in = outer
    state.push(";")

    test = node.get("test")
    if test:
        state.push(" ")
        handle(test, state)
    state.push(";")

    update = node.get("update")
    if update:
        state.push(" ")
        handle(update, state)
    state.push(") ")
    handle(node["body"], state)


@handler("ForInStatement", "ForOfStatement")
def _for_in(node: Node, state: RenderState) -> None:
    state.push("for ")
    if node.get("await"):
        state.push("await ")
    state.push("(")
    _handle_head(node["left"], state)
    state.push(" in " if node["type"] == "ForInStatement" else " of ")
    handle(node["right"], state)
    state.push(") ")
    handle(node["body"], state)


@handler("WhileStatement")
def _while(node: Node, state: RenderState) -> None:
    state.push("while (")
    handle(node["test"], state)
    state.push(") ")
    handle(node["body"], state)


@handler("DoWhileStatement")
def _do_while(node: Node, state: RenderState) -> None:
    state.push("do ")
    handle(node["body"], state)
    state.push(" while (")
    handle(node["test"], state)
    state.push(");")


@handler("WithStatement")
def _with(node: Node, state: RenderState) -> None:
    state.push("with (")
    handle(node["object"], state)
    state.push(") ")
    handle(node["body"], state)


@handler("TryStatement")
def _try(node: Node, state: RenderState) -> None:
    state.push("try ")
    handle(node["block"], state)

    catch = node.get("handler")
    if catch:
        param = catch.get("param")
        if param:
            state.push(" catch (")
            handle(param, state)
            state.push(") ")
        else:
            state.push(" catch ")
        handle(catch["body"], state)

    finalizer = node.get("finalizer")
    if finalizer:
        state.push(" finally ")
        handle(finalizer, state)


@handler("SwitchStatement")
def _switch(node: Node, state: RenderState) -> None:
    state.multiline = True
    state.push("switch (")
    handle(node["discriminant"], state)
    state.push(") {", INDENT)

    for i, case in enumerate(node["cases"]):
        if i > 0:
            state.push("\n")
        state.push(NEWLINE)

        comments = leading_comments(case)
        if comments:
            prepend_comments(comments, state, True)

        test = case.get("test")
        if test:
            state.push("case ")
            handle(test, state)
            state.push(":")
        else:
            state.push("default:")

        state.push(INDENT)
        for statement in case["consequent"]:
            state.push(NEWLINE)
            handle(statement, state)
            drain_after_statement(state)
        state.push(DEDENT)

    state.push(DEDENT, NEWLINE, "}")
