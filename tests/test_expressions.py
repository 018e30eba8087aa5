"""Expression printing: operators, calls, literals, objects and arrays."""

from __future__ import annotations

from tests.conftest import (
    arrow,
    array,
    assign,
    binary,
    call,
    function,
    ident,
    member,
    new,
    num,
    obj,
    prop,
    ret,
    stmt,
    string,
    unary,
    update,
    var,
)


def _template(*parts: str, expressions: tuple = ()) -> dict:
    quasis = [
        {
            "type": "TemplateElement",
            "value": {"raw": part, "cooked": part},
            "tail": i == len(parts) - 1,
        }
        for i, part in enumerate(parts)
    ]
    return {"type": "TemplateLiteral", "quasis": quasis, "expressions": list(expressions)}


def _chain(expression: dict) -> dict:
    return {"type": "ChainExpression", "expression": expression}


# ---------------------------------------------------------------------------
# Operators and precedence
# ---------------------------------------------------------------------------


class TestOperators:
    def test_grouping_kept(self, render) -> None:
        node = binary("*", binary("+", ident("a"), ident("b")), ident("c"))
        assert render([stmt(node)]) == "(a + b) * c;"

    def test_natural_precedence_no_parens(self, render) -> None:
        node = binary("+", ident("a"), binary("*", ident("b"), ident("c")))
        assert render([stmt(node)]) == "a + b * c;"

    def test_right_nested_subtraction(self, render) -> None:
        node = binary("-", ident("a"), binary("-", ident("b"), ident("c")))
        assert render([stmt(node)]) == "a - (b - c);"

    def test_exponent_right_nested(self, render) -> None:
        node = binary("**", ident("a"), binary("**", ident("b"), ident("c")))
        assert render([stmt(node)]) == "a ** b ** c;"

    def test_exponent_left_nested(self, render) -> None:
        node = binary("**", binary("**", ident("a"), ident("b")), ident("c"))
        assert render([stmt(node)]) == "(a ** b) ** c;"

    def test_negated_base(self, render) -> None:
        node = binary("**", unary("-", ident("a")), ident("b"))
        assert render([stmt(node)]) == "(-a) ** b;"

    def test_awaited_base(self, render) -> None:
        node = binary("**", {"type": "AwaitExpression", "argument": ident("x")}, num(2))
        assert render([stmt(node)]) == "(await x) ** 2;"

    def test_coalesce_with_or(self, render) -> None:
        node = binary("??", ident("a"), binary("||", ident("b"), ident("c")))
        assert render([stmt(node)]) == "a ?? (b || c);"

    def test_parenthesized_expression_is_rederived(self, render) -> None:
        product = binary("*", ident("b"), ident("c"))
        node = binary("+", ident("a"), {"type": "ParenthesizedExpression", "expression": product})
        assert render([stmt(node)]) == "a + b * c;"

    def test_assignment(self, render) -> None:
        assert render([stmt(assign(ident("a"), num(1), "+="))]) == "a += 1;"

    def test_sequence(self, render) -> None:
        node = {"type": "SequenceExpression", "expressions": [ident("a"), ident("b")]}
        assert render([stmt(node)]) == "(a, b);"


class TestUnary:
    def test_not(self, render) -> None:
        assert render([stmt(unary("!", ident("a")))]) == "!a;"

    def test_keyword_operator_spaced(self, render) -> None:
        assert render([stmt(unary("typeof", ident("a")))]) == "typeof a;"

    def test_double_negation_spaced(self, render) -> None:
        assert render([stmt(unary("-", unary("-", ident("a"))))]) == "- -a;"

    def test_negated_pre_decrement_spaced(self, render) -> None:
        assert render([stmt(unary("-", update("--", ident("a"), prefix=True)))]) == "- --a;"

    def test_binary_argument_wrapped(self, render) -> None:
        node = unary("-", binary("+", ident("a"), ident("b")))
        assert render([stmt(node)]) == "-(a + b);"

    def test_update_prefix_and_postfix(self, render) -> None:
        pre = update("++", ident("a"), prefix=True)
        post = update("--", ident("b"))
        assert render([stmt(pre), stmt(post)]) == "++a;\nb--;"

    def test_await_wraps_binary(self, render) -> None:
        node = {"type": "AwaitExpression", "argument": binary("+", ident("a"), ident("b"))}
        assert render([stmt(node)]) == "await (a + b);"

    def test_await_call(self, render) -> None:
        node = {"type": "AwaitExpression", "argument": call(ident("f"))}
        assert render([stmt(node)]) == "await f();"

    def test_yield_delegate(self, render) -> None:
        node = {"type": "YieldExpression", "delegate": True, "argument": ident("a")}
        assert render([stmt(node)]) == "yield* a;"

    def test_bare_yield(self, render) -> None:
        node = {"type": "YieldExpression", "delegate": False, "argument": None}
        assert render([stmt(node)]) == "yield;"


# ---------------------------------------------------------------------------
# Member access and calls
# ---------------------------------------------------------------------------


class TestMembers:
    def test_dot(self, render) -> None:
        assert render([stmt(member(ident("a"), "b"))]) == "a.b;"

    def test_computed(self, render) -> None:
        assert render([stmt(member(ident("a"), num(0), computed=True))]) == "a[0];"

    def test_optional(self, render) -> None:
        node = {"type": "ChainExpression", "expression": member(ident("a"), "b", optional=True)}
        assert render([stmt(node)]) == "a?.b;"

    def test_optional_computed(self, render) -> None:
        node = member(ident("a"), ident("k"), computed=True, optional=True)
        assert render([stmt(node)]) == "a?.[k];"

    def test_optional_chain_object_wrapped(self, render) -> None:
        node = member(_chain(member(ident("a"), "b", optional=True)), "c")
        assert render([stmt(node)]) == "(a?.b).c;"

    def test_member_inside_chain_not_wrapped(self, render) -> None:
        node = _chain(member(member(ident("a"), "b", optional=True), "c"))
        assert render([stmt(node)]) == "a?.b.c;"

    def test_number_object_wrapped(self, render) -> None:
        assert render([stmt(member(num(1), "toString"))]) == "(1).toString;"

    def test_private_member(self, render) -> None:
        node = member({"type": "ThisExpression"}, {"type": "PrivateIdentifier", "name": "x"})
        assert render([stmt(node)]) == "this.#x;"

    def test_meta_property(self, render) -> None:
        node = {"type": "MetaProperty", "meta": ident("new"), "property": ident("target")}
        assert render([stmt(node)]) == "new.target;"


class TestCalls:
    def test_simple(self, render) -> None:
        assert render([stmt(call(ident("f"), ident("a"), ident("b")))]) == "f(a, b);"

    def test_no_arguments(self, render) -> None:
        assert render([stmt(call(ident("f")))]) == "f();"

    def test_optional_call(self, render) -> None:
        assert render([stmt(call(ident("f"), optional=True))]) == "f?.();"

    def test_spread_argument(self, render) -> None:
        spread = {"type": "SpreadElement", "argument": ident("args")}
        assert render([stmt(call(ident("f"), spread))]) == "f(...args);"

    def test_new(self, render) -> None:
        assert render([stmt(new(ident("Foo"), num(1)))]) == "new Foo(1);"

    def test_new_with_call_in_callee(self, render) -> None:
        assert render([stmt(new(call(ident("a"))))]) == "new (a())();"

    def test_optional_chain_callee_wrapped(self, render) -> None:
        node = call(_chain(member(ident("a"), "b", optional=True)))
        assert render([stmt(node)]) == "(a?.b)();"

    def test_new_with_optional_chain_callee(self, render) -> None:
        node = new(_chain(member(ident("a"), "b", optional=True)))
        assert render([stmt(node)]) == "new (a?.b)();"

    def test_immediately_invoked_function(self, render) -> None:
        fn = function(None, [], expression=True)
        assert render([stmt(call(fn))]) == "(function () {})();"

    def test_arrow_callee_wrapped(self, render) -> None:
        assert render([stmt(call(arrow([], ident("x"))))]) == "(() => x)();"

    def test_long_arguments_wrap(self, render) -> None:
        args = [ident(letter * 30) for letter in "abcd"]
        expected = "f(\n\t" + ",\n\t".join(letter * 30 for letter in "abcd") + "\n);"
        assert render([stmt(call(ident("f"), *args))]) == expected

    def test_multiline_final_argument_hugs(self, render) -> None:
        callback = function(None, [], ret(num(1)), expression=True)
        code = render([stmt(call(ident("f"), ident("a"), callback))])
        assert code == "f(a, function () {\n\treturn 1;\n});"

    def test_tagged_template(self, render) -> None:
        node = {"type": "TaggedTemplateExpression", "tag": ident("tag"), "quasi": _template("x")}
        assert render([stmt(node)]) == "tag`x`;"

    def test_optional_chain_tag_wrapped(self, render) -> None:
        tag = _chain(member(ident("a"), "b", optional=True))
        node = {"type": "TaggedTemplateExpression", "tag": tag, "quasi": _template("x")}
        assert render([stmt(node)]) == "(a?.b)`x`;"

    def test_dynamic_import(self, render) -> None:
        node = {"type": "ImportExpression", "source": string("./x", "'./x'")}
        assert render([stmt(node)]) == "import('./x');"


# ---------------------------------------------------------------------------
# Conditionals and arrows
# ---------------------------------------------------------------------------


class TestConditional:
    def test_inline(self, render) -> None:
        node = {
            "type": "ConditionalExpression",
            "test": ident("a"),
            "consequent": ident("b"),
            "alternate": ident("c"),
        }
        assert render([stmt(node)]) == "a ? b : c;"

    def test_assignment_test_wrapped(self, render) -> None:
        node = {
            "type": "ConditionalExpression",
            "test": assign(ident("a"), ident("b")),
            "consequent": ident("c"),
            "alternate": ident("d"),
        }
        assert render([stmt(node)]) == "(a = b) ? c : d;"

    def test_multiline_branch(self, render) -> None:
        node = {
            "type": "ConditionalExpression",
            "test": ident("a"),
            "consequent": function(None, [], ret(num(1)), expression=True),
            "alternate": ident("c"),
        }
        expected = "a\n\t? function () {\n\t\treturn 1;\n\t}\n\t: c;"
        assert render([stmt(node)]) == expected


class TestArrows:
    def test_expression_body(self, render) -> None:
        node = arrow([ident("x")], binary("*", ident("x"), num(2)))
        assert render([stmt(node)]) == "(x) => x * 2;"

    def test_object_body_wrapped(self, render) -> None:
        assert render([stmt(arrow([], obj()))]) == "() => ({});"

    def test_object_headed_body_wrapped(self, render) -> None:
        body = member(obj(), "x")
        # the object is already wrapped for the member access
        assert render([stmt(arrow([], body))]) == "() => ({}).x;"

    def test_block_body(self, render) -> None:
        node = arrow([], {"type": "BlockStatement", "body": []}, **{"async": True})
        assert render([stmt(node)]) == "async () => {};"

    def test_default_parameter(self, render) -> None:
        param = {"type": "AssignmentPattern", "left": ident("a"), "right": num(1)}
        assert render([stmt(arrow([param], ident("a")))]) == "(a = 1) => a;"


# ---------------------------------------------------------------------------
# Objects, arrays and templates
# ---------------------------------------------------------------------------


class TestObjects:
    def test_inline(self, render) -> None:
        node = var("const", ("o", obj(prop("a", num(1)), prop("b", num(2)))))
        assert render([node]) == "const o = { a: 1, b: 2 };"

    def test_empty(self, render) -> None:
        assert render([var("const", ("o", obj()))]) == "const o = {};"

    def test_statement_wrapped(self, render) -> None:
        assert render([stmt(obj(prop("a", num(1))))]) == "({ a: 1 });"

    def test_shorthand(self, render) -> None:
        node = var("const", ("o", obj(prop("a", ident("a"), shorthand=True))))
        assert render([node]) == "const o = { a };"

    def test_computed_key(self, render) -> None:
        node = var("const", ("o", obj(prop(ident("k"), num(1), computed=True))))
        assert render([node]) == "const o = { [k]: 1 };"

    def test_method_shorthand(self, render) -> None:
        method = prop("m", function(None, [], expression=True), method=True)
        assert render([var("const", ("o", obj(method)))]) == "const o = { m() {} };"

    def test_getter(self, render) -> None:
        getter = prop("x", function(None, [], expression=True), kind="get")
        assert render([var("const", ("o", obj(getter)))]) == "const o = { get x() {} };"

    def test_function_valued_property(self, render) -> None:
        fn = prop("f", function(None, [], expression=True), method=False)
        assert render([var("const", ("o", obj(fn)))]) == "const o = { f: function () {} };"

    def test_wraps_past_width(self, render) -> None:
        letters = obj(prop("alpha", num(1)), prop("beta", num(2)), prop("gamma", num(3)))
        node = var("const", ("o", letters))
        expected = "const o = {\n\talpha: 1,\n\tbeta: 2,\n\tgamma: 3\n};"
        assert render([node], width=20) == expected

    def test_wraps_with_spaces_indent(self, render) -> None:
        node = var("const", ("o", obj(prop("alpha", num(1)), prop("beta", num(2)))))
        assert render([node], width=10, indent="  ") == "const o = {\n  alpha: 1,\n  beta: 2\n};"

    def test_destructuring_pattern(self, render) -> None:
        pattern = {
            "type": "ObjectPattern",
            "properties": [
                prop("a", ident("a"), shorthand=True),
                prop("b", ident("c")),
                {"type": "RestElement", "argument": ident("rest")},
            ],
        }
        assert render([var("const", (pattern, ident("o")))]) == "const { a, b: c, ...rest } = o;"

    def test_assignment_to_pattern_wrapped(self, render) -> None:
        pattern = {"type": "ObjectPattern", "properties": [prop("a", ident("a"), shorthand=True)]}
        assert render([stmt(assign(pattern, ident("o")))]) == "({ a } = o);"


class TestArrays:
    def test_elements(self, render) -> None:
        assert render([stmt(array(num(1), num(2)))]) == "[1, 2];"

    def test_empty(self, render) -> None:
        assert render([stmt(array())]) == "[];"

    def test_holes(self, render) -> None:
        assert render([stmt(array(num(1), None, num(2)))]) == "[1, , 2];"

    def test_leading_hole(self, render) -> None:
        pattern = {"type": "ArrayPattern", "elements": [None, ident("b")]}
        assert render([var("const", (pattern, ident("xs")))]) == "const [, b] = xs;"


class TestTemplates:
    def test_plain(self, render) -> None:
        assert render([stmt(_template("hello"))]) == "`hello`;"

    def test_with_expression(self, render) -> None:
        node = _template("a", "b", expressions=(ident("x"),))
        assert render([stmt(node)]) == "`a${x}b`;"

    def test_multiline_text_marks_statement(self, render) -> None:
        first = stmt(_template("line one\nline two"))
        second = stmt(ident("x"))
        # the multi-line template earns a blank line before the next statement
        assert render([first, second]) == "`line one\nline two`;\n\nx;"


# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------


class TestLiterals:
    def test_raw_kept(self, render) -> None:
        assert render([stmt(string("x", '"x"'))]) == '"x";'

    def test_single_quote_escaped(self, render) -> None:
        assert render([stmt(string("b'ar"))]) == "'b\\'ar';"

    def test_double_quote_config(self, render) -> None:
        assert render([stmt(string("b'ar"))], quotes="double") == '"b\'ar";'

    def test_double_quote_config_escapes_double(self, render) -> None:
        assert render([stmt(string('say "hi"'))], quotes="double") == '"say \\"hi\\"";'

    def test_backslash_and_newline_escaped(self, render) -> None:
        assert render([stmt(string("a\\b\nc"))]) == "'a\\\\b\\nc';"

    def test_null_and_booleans(self, render) -> None:
        nodes = [stmt({"type": "Literal", "value": v}) for v in (None, True, False)]
        assert render(nodes) == "null;\ntrue;\nfalse;"

    def test_integral_float(self, render) -> None:
        assert render([stmt({"type": "Literal", "value": 3.0})]) == "3;"

    def test_fraction(self, render) -> None:
        assert render([stmt({"type": "Literal", "value": 0.5})]) == "0.5;"

    def test_regex(self, render) -> None:
        node = {"type": "Literal", "value": None, "regex": {"pattern": "a+", "flags": "g"}}
        assert render([stmt(node)]) == "/a+/g;"

    def test_bigint(self, render) -> None:
        node = {"type": "Literal", "value": None, "bigint": "10"}
        assert render([stmt(node)]) == "10n;"

    def test_directive(self, render) -> None:
        node = stmt(string("use strict", "'use strict'"))
        node["directive"] = "use strict"
        assert render([node]) == "'use strict';"
