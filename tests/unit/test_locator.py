"""Unit tests for the run-method locator and its tree-sitter parser."""

import pytest

from javax_bridge.services.transform.errors import ParseError, ProcedureNotFoundError
from javax_bridge.services.transform.locator import locate_run_method
from javax_bridge.services.transform.parser import (
    SourceParser,
    TreeSitterJavaParser,
    comment_content,
    trim_indent,
)
from javax_bridge.services.transform.types import ParameterInfo


# =============================================================================
# Helper Tests
# =============================================================================


class TestCommentContent:
    """Test suite for comment delimiter stripping."""

    @pytest.mark.parametrize("raw, expected", [
        ("// 10", "10"),
        ("//", ""),
        ("/* 42 */", "42"),
        ("/** doc */", "doc"),
        ("/*\n * first\n * second\n */", "first second"),
        ("// String a = **x;", "String a = **x;"),
    ])
    def test_comment_content(self, raw, expected):
        """Test that delimiters go and the inner text is trimmed."""
        assert comment_content(raw) == expected


class TestTrimIndent:
    """Test suite for trim_indent."""

    def test_common_indent_removed(self):
        """Test that the shallowest line ends up at column zero."""
        text = "\n        a();\n            b();\n        c();\n    "

        assert trim_indent(text) == "a();\n    b();\nc();"

    def test_blank_lines_emptied(self):
        """Test that whitespace-only lines become empty."""
        assert trim_indent("\n    a();\n  \n    b();\n") == "a();\n\nb();"

    def test_empty(self):
        """Test that an empty body yields empty text."""
        assert trim_indent("") == ""
        assert trim_indent("   ") == ""


# =============================================================================
# Locator Tests
# =============================================================================


class TestLocateRunMethod:
    """Test suite for locate_run_method."""

    def test_parameters_and_comments(self, run_class):
        """Test that parameters come back with their trailing comments."""
        record = locate_run_method(run_class)

        assert record.parameters == (
            ParameterInfo(type="int", name="count", comment="10"),
            ParameterInfo(type="String", name="message", comment=""),
        )

    def test_body_text(self, run_class):
        """Test that the body loses its braces and base indentation."""
        record = locate_run_method(run_class)

        assert record.body_text == (
            "// method logic\n"
            'System.out.println("count: " + count);\n'
            "System.out.println(message);"
        )

    def test_leading_block_comment_is_attached(self):
        """Test that a comment before a parameter belongs to that parameter."""
        code = "public class A { public static void run(/* 6 * 7 */ int answer) { } }"
        record = locate_run_method(code)

        assert record.parameters == (ParameterInfo(type="int", name="answer", comment="6 * 7"),)

    def test_generic_parameter_type(self):
        """Test that generic type text is kept as written."""
        code = (
            "public class A {\n"
            "    public static void run(Map<String, Double> prices, List<Integer> scores) {\n"
            "        use(prices, scores);\n"
            "    }\n"
            "}\n"
        )
        record = locate_run_method(code)

        assert [(p.type, p.name) for p in record.parameters] == [
            ("Map<String, Double>", "prices"),
            ("List<Integer>", "scores"),
        ]
        assert record.body_text == "use(prices, scores);"

    def test_empty_body(self):
        """Test that a method without statements has empty body text."""
        record = locate_run_method("public class A { public static void run() {} }")

        assert record.parameters == ()
        assert record.body_text == ""

    def test_modifier_order_does_not_matter(self):
        """Test that 'static public' qualifies as well."""
        record = locate_run_method("class A { static public void run(int x) { x++; } }")

        assert record.parameters[0].name == "x"

    def test_first_qualifying_method_wins(self):
        """Test that non-qualifying methods are skipped and the first match is used."""
        code = (
            "public class A {\n"
            "    public void run(int instance) { }\n"
            "    private static void run(int hidden) { }\n"
            "    public static void run(int first) { }\n"
            "    public static void run(int second) { }\n"
            "}\n"
        )
        record = locate_run_method(code)

        assert [p.name for p in record.parameters] == ["first"]

    @pytest.mark.parametrize("code", [
        "public class A { private static void run() { } }",
        "public class A { public void run() { } }",
        "public class A { public static void start() { } }",
        "",
    ])
    def test_not_found(self, code):
        """Test that only public static run qualifies."""
        with pytest.raises(ProcedureNotFoundError) as exc_info:
            locate_run_method(code)

        assert exc_info.value.kind == "NotFound"

    def test_parse_failure(self):
        """Test that malformed class text is a parse failure, not not-found."""
        with pytest.raises(ParseError) as exc_info:
            locate_run_method("public class Broken { public static void run( { }")

        assert exc_info.value.kind == "ParseFailure"
        assert exc_info.value.line >= 1
        assert "Parse error" in exc_info.value.message

    def test_custom_parser_is_used(self):
        """Test that any SourceParser implementation can drive the locator."""

        class StubParser(SourceParser):
            def parse_unit(self, source):
                return source

            def find_procedures(self, unit):
                return ["helper", "run"]

            def is_qualifying(self, unit, procedure, name):
                return procedure == name

            def parameters_of(self, unit, procedure):
                return ["p"]

            def signature_of(self, unit, parameter):
                return "long", "total"

            def attached_comment_of(self, unit, procedure, parameter):
                return "0L"

            def body_text_of(self, unit, procedure):
                return "report(total);"

        record = locate_run_method("ignored", parser=StubParser())

        assert record.parameters == (ParameterInfo(type="long", name="total", comment="0L"),)
        assert record.body_text == "report(total);"

    def test_parser_is_reusable(self, run_class):
        """Test that one parser instance handles several units."""
        parser = TreeSitterJavaParser()

        first = locate_run_method(run_class, parser=parser)
        second = locate_run_method(run_class, parser=parser)

        assert first == second
