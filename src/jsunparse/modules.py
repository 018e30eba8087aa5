"""Handlers for import and export declarations."""

from __future__ import annotations

from jsunparse.dispatch import chunk, handle, handle_wrapped, handler
from jsunparse.layout import sequence
from jsunparse.nodes import Node, name_of
from jsunparse.precedence import starts_with
from jsunparse.state import RenderState

# Declarations that end in a block and take no semicolon after `export default`
_SELF_TERMINATING = frozenset(
    {"FunctionDeclaration", "ClassDeclaration", "TSInterfaceDeclaration", "TSDeclareFunction"}
)

# An exported expression starting with one of these would be read as a declaration
_DECLARATION_HEADED = frozenset({"FunctionExpression", "ClassExpression"})


def _handle_attributes(node: Node, state: RenderState) -> None:
    attributes = node.get("attributes") or node.get("assertions")
    if attributes:
        state.push(" with {")
        sequence(attributes, state, True)
        state.push("}")


def _handle_source(node: Node, state: RenderState) -> None:
    state.push(" from ")
    handle(node["source"], state)
    _handle_attributes(node, state)


@handler("ImportAttribute")
def _import_attribute(node: Node, state: RenderState) -> None:
    handle(node["key"], state)
    state.push(": ")
    handle(node["value"], state)


@handler("ImportDeclaration")
def _import(node: Node, state: RenderState) -> None:
    """``import a, * as b`` or ``import a, { c as d }``.

    Default and namespace specifiers never wrap; the braced named
    specifiers wrap once they no longer fit.
    """
    state.push("import ")
    if node.get("importKind") == "type":
        state.push("type ")

    specifiers = node.get("specifiers") or []
    if not specifiers:
        handle(node["source"], state)
        _handle_attributes(node, state)
        state.push(";")
        return

    default: Node | None = None
    namespace: Node | None = None
    named: list[Node] = []
    for specifier in specifiers:
        if specifier["type"] == "ImportDefaultSpecifier":
            default = specifier
        elif specifier["type"] == "ImportNamespaceSpecifier":
            namespace = specifier
        else:
            named.append(specifier)

    if default is not None:
        state.push(chunk(default["local"]["name"], default))
        if namespace is not None or named:
            state.push(", ")

    if namespace is not None:
        state.push(chunk("* as " + namespace["local"]["name"], namespace))

    if named:
        state.push("{")
        sequence(named, state, True, _import_specifier)
        state.push("}")

    _handle_source(node, state)
    state.push(";")


def _import_specifier(node: Node, state: RenderState) -> None:
    if node.get("importKind") == "type":
        state.push("type ")
    imported = node["imported"]
    local = node["local"]
    if name_of(imported) != name_of(local):
        handle(imported, state)
        state.push(" as ")
    handle(local, state)


def _export_specifier(node: Node, state: RenderState) -> None:
    if node.get("exportKind") == "type":
        state.push("type ")
    local = node["local"]
    exported = node["exported"]
    handle(local, state)
    if name_of(local) != name_of(exported):
        state.push(" as ")
        handle(exported, state)


@handler("ExportNamedDeclaration")
def _export_named(node: Node, state: RenderState) -> None:
    state.push("export ")

    declaration = node.get("declaration")
    if declaration:
        handle(declaration, state)
        return

    if node.get("exportKind") == "type":
        state.push("type ")
    state.push("{")
    sequence(node.get("specifiers") or [], state, True, _export_specifier)
    state.push("}")

    if node.get("source"):
        _handle_source(node, state)
    state.push(";")


@handler("ExportDefaultDeclaration")
def _export_default(node: Node, state: RenderState) -> None:
    declaration = node["declaration"]
    state.push("export default ")
    handle_wrapped(declaration, state, starts_with(declaration, _DECLARATION_HEADED))
    if declaration["type"] not in _SELF_TERMINATING:
        state.push(";")


@handler("ExportAllDeclaration")
def _export_all(node: Node, state: RenderState) -> None:
    state.push("export ")
    if node.get("exportKind") == "type":
        state.push("type ")
    state.push("*")

    exported = node.get("exported")
    if exported:
        state.push(" as ")
        handle(exported, state)

    _handle_source(node, state)
    state.push(";")
