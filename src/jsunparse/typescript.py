"""Handlers for TypeScript expressions, declarations and type annotations.

Type annotations go through a registry of their own (see
:func:`jsunparse.dispatch.handle_type`); names, literals and other value
nodes nested inside a type are handed back to the main handler table.
Both ESTree dialects in common use are accepted: where typescript-estree
and acorn-typescript disagree on a field name (``typeArguments`` versus
``typeParameters``, ``params`` versus ``parameters``, ``returnType``
versus ``typeAnnotation``) either spelling is read.
"""

from __future__ import annotations

from jsunparse.classes import handle_modifiers
from jsunparse.dispatch import (
    TYPE_HANDLERS,
    handle,
    handle_type,
    handle_wrapped,
    handler,
    type_handler,
)
from jsunparse.expressions import handle_annotation, handle_key, type_arguments
from jsunparse.functions import params_of
from jsunparse.layout import sequence
from jsunparse.nodes import Node
from jsunparse.precedence import EXPRESSIONS_PRECEDENCE, UNARY, binds_looser
from jsunparse.state import RenderState

KEYWORD_TYPES: dict[str, str] = {
    "TSAnyKeyword": "any",
    "TSUnknownKeyword": "unknown",
    "TSNumberKeyword": "number",
    "TSStringKeyword": "string",
    "TSBooleanKeyword": "boolean",
    "TSBigIntKeyword": "bigint",
    "TSSymbolKeyword": "symbol",
    "TSObjectKeyword": "object",
    "TSVoidKeyword": "void",
    "TSUndefinedKeyword": "undefined",
    "TSNullKeyword": "null",
    "TSNeverKeyword": "never",
    "TSIntrinsicKeyword": "intrinsic",
    "TSThisType": "this",
}

# Types that bind looser than a postfix `[]` or an index access
_FUNCTION_LIKE = frozenset({"TSFunctionType", "TSConstructorType", "TSConditionalType"})
_LOOSE_TYPES = _FUNCTION_LIKE | {
    "TSUnionType",
    "TSIntersectionType",
    "TSTypeOperator",
    "TSInferType",
}


def handle_type_or_node(node: Node, state: RenderState) -> None:
    """Render a child that may be either a type or an ordinary node."""
    if node["type"] in TYPE_HANDLERS:
        handle_type(node, state)
    else:
        handle(node, state)


def _handle_type_wrapped(node: Node, state: RenderState, wrap: bool) -> None:
    if wrap:
        state.push("(")
        handle_type(node, state)
        state.push(")")
    else:
        handle_type(node, state)


def _handle_type_arguments(node: Node, state: RenderState) -> None:
    args = type_arguments(node)
    if args:
        handle_type(args, state)


def _return_type(node: Node) -> Node | None:
    """The bare return type of a signature, without its ``: `` wrapper."""
    annotation = node.get("returnType") or node.get("typeAnnotation")
    if annotation is not None and annotation["type"] == "TSTypeAnnotation":
        return annotation["typeAnnotation"]
    return annotation


def _handle_type_params(node: Node, state: RenderState) -> None:
    type_params = node.get("typeParameters")
    if type_params:
        handle_type(type_params, state)


def _handle_signature(node: Node, state: RenderState) -> None:
    """``<T>(a: A): R`` for signatures declared inside a type."""
    _handle_type_params(node, state)
    state.push("(")
    sequence(params_of(node), state, False)
    state.push(")")
    return_type = _return_type(node)
    if return_type is not None:
        state.push(": ")
        handle_type(return_type, state)


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


@handler("TSAsExpression", "TSSatisfiesExpression")
def _as(node: Node, state: RenderState) -> None:
    expression = node["expression"]
    precedence = EXPRESSIONS_PRECEDENCE[node["type"]]
    handle_wrapped(expression, state, binds_looser(expression, precedence))
    state.push(" as " if node["type"] == "TSAsExpression" else " satisfies ")
    handle_type(node["typeAnnotation"], state)


@handler("TSNonNullExpression")
def _non_null(node: Node, state: RenderState) -> None:
    expression = node["expression"]
    handle_wrapped(
        expression, state, binds_looser(expression, EXPRESSIONS_PRECEDENCE["TSNonNullExpression"])
    )
    state.push("!")


@handler("TSTypeAssertion")
def _type_assertion(node: Node, state: RenderState) -> None:
    state.push("<")
    handle_type(node["typeAnnotation"], state)
    state.push(">")
    expression = node["expression"]
    handle_wrapped(expression, state, binds_looser(expression, UNARY))


@handler("TSInstantiationExpression")
def _instantiation(node: Node, state: RenderState) -> None:
    handle(node["expression"], state)
    _handle_type_arguments(node, state)


@handler("TSQualifiedName")
def _qualified_name(node: Node, state: RenderState) -> None:
    handle(node["left"], state)
    state.push(".")
    handle(node["right"], state)


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


@handler("TSTypeAliasDeclaration")
def _type_alias(node: Node, state: RenderState) -> None:
    if node.get("declare"):
        state.push("declare ")
    state.push("type ")
    handle(node["id"], state)
    _handle_type_params(node, state)
    state.push(" = ")
    handle_type(node["typeAnnotation"], state)
    state.push(";")


@handler("TSInterfaceDeclaration")
def _interface(node: Node, state: RenderState) -> None:
    if node.get("declare"):
        state.push("declare ")
    state.push("interface ")
    handle(node["id"], state)
    _handle_type_params(node, state)

    extends = node.get("extends")
    if extends:
        state.push(" extends ")
        sequence(extends, state, False, handle_type)

    state.push(" ")
    handle(node["body"], state)


@handler("TSInterfaceBody")
def _interface_body(node: Node, state: RenderState) -> None:
    state.push("{")
    sequence(node["body"], state, True, handle_type, ";")
    state.push("}")


@handler("TSEnumDeclaration")
def _enum(node: Node, state: RenderState) -> None:
    if node.get("declare"):
        state.push("declare ")
    if node.get("const"):
        state.push("const ")
    state.push("enum ")
    handle(node["id"], state)
    state.push(" {")

    members = node.get("members")
    if members is None:
        members = node["body"]["members"]
    sequence(members, state, True)
    state.push("}")


@handler("TSEnumMember")
@type_handler("TSEnumMember")
def _enum_member(node: Node, state: RenderState) -> None:
    if node.get("computed"):
        state.push("[")
        handle(node["id"], state)
        state.push("]")
    else:
        handle(node["id"], state)

    initializer = node.get("initializer")
    if initializer:
        state.push(" = ")
        handle(initializer, state)


@handler("TSModuleDeclaration")
def _module(node: Node, state: RenderState) -> None:
    """``namespace a.b { ... }``, ``declare module 'x' { ... }`` or ``declare global { ... }``."""
    if node.get("declare"):
        state.push("declare ")

    module_kind = node.get("kind")
    if module_kind is None and not node.get("global"):
        module_kind = "module" if node["id"]["type"] == "Literal" else "namespace"
    if module_kind and module_kind != "global":
        state.push(module_kind + " ")
    handle(node["id"], state)

    body = node.get("body")
    # older trees nest `a.b` as a module declaration per segment
    while body is not None and body["type"] == "TSModuleDeclaration":
        state.push(".")
        handle(body["id"], state)
        body = body.get("body")

    if body is None:
        state.push(";")
        return
    state.push(" ")
    handle(body, state)


@handler("TSIndexSignature")
def _class_index_signature(node: Node, state: RenderState) -> None:
    # inside a class body, as opposed to an object type
    handle_type(node, state)
    state.push(";")


# ---------------------------------------------------------------------------
# Type annotations
# ---------------------------------------------------------------------------


@type_handler(*KEYWORD_TYPES)
def _keyword(node: Node, state: RenderState) -> None:
    state.push(KEYWORD_TYPES[node["type"]])


@type_handler("TSTypeAnnotation")
def _annotation(node: Node, state: RenderState) -> None:
    state.push(": ")
    handle_type(node["typeAnnotation"], state)


@type_handler("TSTypeReference")
def _type_reference(node: Node, state: RenderState) -> None:
    handle(node["typeName"], state)
    _handle_type_arguments(node, state)


@type_handler("TSExpressionWithTypeArguments", "TSClassImplements", "TSInterfaceHeritage")
def _heritage(node: Node, state: RenderState) -> None:
    handle(node["expression"], state)
    _handle_type_arguments(node, state)


@type_handler("TSTypeParameterInstantiation", "TSTypeParameterDeclaration")
def _type_parameters(node: Node, state: RenderState) -> None:
    state.push("<")
    for i, param in enumerate(node["params"]):
        if i > 0:
            state.push(", ")
        handle_type(param, state)
    state.push(">")


@type_handler("TSTypeParameter")
def _type_parameter(node: Node, state: RenderState) -> None:
    for modifier in ("const", "in", "out"):
        if node.get(modifier):
            state.push(modifier + " ")

    name = node["name"]
    if isinstance(name, str):
        state.push(name)
    else:
        handle(name, state)

    constraint = node.get("constraint")
    if constraint:
        state.push(" extends ")
        handle_type(constraint, state)
    default = node.get("default")
    if default:
        state.push(" = ")
        handle_type(default, state)


@type_handler("TSArrayType")
def _array_type(node: Node, state: RenderState) -> None:
    element = node["elementType"]
    _handle_type_wrapped(element, state, element["type"] in _LOOSE_TYPES)
    state.push("[]")


@type_handler("TSTupleType")
def _tuple_type(node: Node, state: RenderState) -> None:
    state.push("[")
    sequence(node["elementTypes"], state, False, handle_type)
    state.push("]")


@type_handler("TSNamedTupleMember")
def _named_tuple_member(node: Node, state: RenderState) -> None:
    handle(node["label"], state)
    if node.get("optional"):
        state.push("?")
    state.push(": ")
    handle_type(node["elementType"], state)


@type_handler("TSOptionalType")
def _optional_type(node: Node, state: RenderState) -> None:
    handle_type(node["typeAnnotation"], state)
    state.push("?")


@type_handler("TSRestType")
def _rest_type(node: Node, state: RenderState) -> None:
    state.push("...")
    handle_type(node["typeAnnotation"], state)


def _union_member(node: Node, state: RenderState) -> None:
    _handle_type_wrapped(node, state, node["type"] in _FUNCTION_LIKE)


def _intersection_member(node: Node, state: RenderState) -> None:
    wrap = node["type"] in _FUNCTION_LIKE or node["type"] == "TSUnionType"
    _handle_type_wrapped(node, state, wrap)


@type_handler("TSUnionType")
def _union_type(node: Node, state: RenderState) -> None:
    sequence(node["types"], state, False, _union_member, " |")


@type_handler("TSIntersectionType")
def _intersection_type(node: Node, state: RenderState) -> None:
    sequence(node["types"], state, False, _intersection_member, " &")


@type_handler("TSConditionalType")
def _conditional_type(node: Node, state: RenderState) -> None:
    check = node["checkType"]
    _handle_type_wrapped(check, state, check["type"] in _FUNCTION_LIKE)
    state.push(" extends ")
    extends = node["extendsType"]
    _handle_type_wrapped(extends, state, extends["type"] == "TSConditionalType")
    state.push(" ? ")
    handle_type(node["trueType"], state)
    state.push(" : ")
    handle_type(node["falseType"], state)


@type_handler("TSInferType")
def _infer_type(node: Node, state: RenderState) -> None:
    state.push("infer ")
    handle_type(node["typeParameter"], state)


@type_handler("TSFunctionType", "TSConstructorType")
def _function_type(node: Node, state: RenderState) -> None:
    if node["type"] == "TSConstructorType":
        if node.get("abstract"):
            state.push("abstract ")
        state.push("new ")

    _handle_type_params(node, state)
    state.push("(")
    sequence(params_of(node), state, False)
    state.push(") => ")

    return_type = _return_type(node)
    if return_type is not None:
        handle_type(return_type, state)
    else:
        state.push("void")


@type_handler("TSTypeLiteral")
def _type_literal(node: Node, state: RenderState) -> None:
    state.push("{")
    sequence(node["members"], state, True, handle_type, ";")
    state.push("}")


@type_handler("TSPropertySignature")
def _property_signature(node: Node, state: RenderState) -> None:
    if node.get("readonly"):
        state.push("readonly ")
    handle_key(node, state)
    if node.get("optional"):
        state.push("?")
    handle_annotation(node, state)


@type_handler("TSMethodSignature")
def _method_signature(node: Node, state: RenderState) -> None:
    if node.get("kind") in ("get", "set"):
        state.push(node["kind"] + " ")
    handle_key(node, state)
    if node.get("optional"):
        state.push("?")
    _handle_signature(node, state)


@type_handler("TSCallSignatureDeclaration", "TSConstructSignatureDeclaration")
def _call_signature(node: Node, state: RenderState) -> None:
    if node["type"] == "TSConstructSignatureDeclaration":
        state.push("new ")
    _handle_signature(node, state)


@type_handler("TSIndexSignature")
def _index_signature(node: Node, state: RenderState) -> None:
    handle_modifiers(node, state)
    state.push("[")
    sequence(params_of(node), state, False)
    state.push("]")
    handle_annotation(node, state)


@type_handler("TSMappedType")
def _mapped_type(node: Node, state: RenderState) -> None:
    """``{ readonly [K in T as N]?: V }``, with ``+``/``-`` modifier prefixes."""
    state.push("{ ")

    readonly = node.get("readonly")
    if readonly in ("+", "-"):
        state.push(f"{readonly}readonly ")
    elif readonly:
        state.push("readonly ")

    state.push("[")
    key = node.get("key")
    if key is not None:
        handle(key, state)
        constraint = node["constraint"]
    else:
        parameter = node["typeParameter"]
        name = parameter["name"]
        if isinstance(name, str):
            state.push(name)
        else:
            handle(name, state)
        constraint = parameter["constraint"]
    state.push(" in ")
    handle_type(constraint, state)

    name_type = node.get("nameType")
    if name_type:
        state.push(" as ")
        handle_type(name_type, state)
    state.push("]")

    optional = node.get("optional")
    if optional in ("+", "-"):
        state.push(f"{optional}?")
    elif optional:
        state.push("?")

    value = node.get("typeAnnotation")
    if value:
        state.push(": ")
        handle_type(value, state)
    state.push(" }")


@type_handler("TSTypeOperator")
def _type_operator(node: Node, state: RenderState) -> None:
    state.push(node["operator"] + " ")
    handle_type(node["typeAnnotation"], state)


@type_handler("TSIndexedAccessType")
def _indexed_access(node: Node, state: RenderState) -> None:
    obj = node["objectType"]
    _handle_type_wrapped(obj, state, obj["type"] in _LOOSE_TYPES)
    state.push("[")
    handle_type(node["indexType"], state)
    state.push("]")


@type_handler("TSTypeQuery")
def _type_query(node: Node, state: RenderState) -> None:
    state.push("typeof ")
    handle_type_or_node(node["exprName"], state)
    _handle_type_arguments(node, state)


@type_handler("TSLiteralType")
def _literal_type(node: Node, state: RenderState) -> None:
    handle(node["literal"], state)


@type_handler("TSTemplateLiteralType")
def _template_literal_type(node: Node, state: RenderState) -> None:
    quasis = node["quasis"]
    types = node["types"]

    state.push("`")
    for i, quasi in enumerate(quasis):
        raw = quasi["value"]["raw"]
        state.push(raw)
        if "\n" in raw:
            state.multiline = True
        if i < len(types):
            state.push("${")
            handle_type(types[i], state)
            state.push("}")
    state.push("`")


@type_handler("TSParenthesizedType")
def _parenthesized_type(node: Node, state: RenderState) -> None:
    state.push("(")
    handle_type(node["typeAnnotation"], state)
    state.push(")")


@type_handler("TSImportType")
def _import_type(node: Node, state: RenderState) -> None:
    state.push("import(")
    handle_type_or_node(node.get("argument") or node["parameter"], state)
    state.push(")")
    qualifier = node.get("qualifier")
    if qualifier:
        state.push(".")
        handle(qualifier, state)
    _handle_type_arguments(node, state)


@type_handler("TSTypePredicate")
def _type_predicate(node: Node, state: RenderState) -> None:
    if node.get("asserts"):
        state.push("asserts ")
    handle_type_or_node(node["parameterName"], state)

    annotation = node.get("typeAnnotation")
    if annotation:
        state.push(" is ")
        if annotation["type"] == "TSTypeAnnotation":
            annotation = annotation["typeAnnotation"]
        handle_type(annotation, state)
