"""Unit tests for the class-form builder."""

import pytest

from javax_bridge.config import settings
from javax_bridge.services.transform.builder import (
    ClassBuilder,
    input_path_expression,
    resolve_expression,
)
from javax_bridge.services.transform.converter import Script2ClassConverter
from javax_bridge.services.transform.patterns import match_binding


def _record(line: str, number: int = 1):
    record = match_binding(line, number)
    assert record is not None
    return record


# =============================================================================
# Expression Resolution Tests
# =============================================================================


class TestResolveExpression:
    """Test suite for type-directed initializer generation."""

    def test_input_path(self):
        """Test that argument files live under inputs/."""
        assert input_path_expression("user_info") == 'Paths.get("inputs", "user_info.json")'

    def test_list_type(self):
        """Test that List<...> uses parseList with the exact type text."""
        expr = resolve_expression(_record("List<Integer> scores = **score_list;"))

        assert expr == (
            'parseList(Paths.get("inputs", "score_list.json"), '
            'new TypeReference<List<Integer>>(){})'
        )

    def test_map_type(self):
        """Test that Map<...> uses parseMap with the exact type text."""
        expr = resolve_expression(_record("Map<String,Double> prices = **price_map;"))

        assert expr == (
            'parseMap(Paths.get("inputs", "price_map.json"), '
            'new TypeReference<Map<String,Double>>(){})'
        )

    def test_plain_type(self):
        """Test that other types use parseObject with a class literal."""
        expr = resolve_expression(_record("boolean isAdmin = **admin_flag;"))

        assert expr == 'parseObject(Paths.get("inputs", "admin_flag.json"), boolean.class)'


# =============================================================================
# Class Builder Tests
# =============================================================================


class TestClassBuilder:
    """Test suite for ClassBuilder output."""

    @pytest.fixture
    def demo_class(self, demo_script):
        """Class text for the demo script."""
        return Script2ClassConverter(class_name="Demo", package_name="").convert(demo_script)

    def test_no_package_line_without_package(self, demo_class):
        """Test that an empty package emits no package declaration."""
        assert demo_class.startswith("import com.alibaba.fastjson.*;\n")
        assert "package " not in demo_class

    def test_package_line(self):
        """Test that a package declaration is followed by a blank line."""
        java = ClassBuilder(class_name="Demo", package_name="com.acme").build([], ["x();"])

        assert java.startswith("package com.acme;\n\nimport com.alibaba.fastjson.*;\n")

    def test_imports(self, demo_class):
        """Test the fixed import block."""
        for line in (
            "import com.alibaba.fastjson.*;",
            "import java.nio.file.*;",
            "import java.io.*;",
            "import java.util.*;",
        ):
            assert line in demo_class

    def test_class_header_and_footer(self, demo_class):
        """Test the class declaration and closing brace."""
        assert "public class Demo {" in demo_class
        assert demo_class.rstrip().endswith("}")

    def test_main_declarations(self, demo_class):
        """Test that main() loads each argument from its file."""
        assert "        // Line 1\n" in demo_class
        assert (
            '        String username = parseObject(Paths.get("inputs", "user_info.json"), String.class);'
            in demo_class
        )
        assert "        // Line 2\n" in demo_class
        assert (
            '        List<Integer> scores = parseList(Paths.get("inputs", "score_list.json"), '
            'new TypeReference<List<Integer>>(){});'
            in demo_class
        )

    def test_debug_block(self, demo_class):
        """Test that every argument is printed between header and footer."""
        header = demo_class.index('System.out.println("=== Argument Values ===>");')
        first = demo_class.index('System.out.println("username (String): " + username);')
        second = demo_class.index('System.out.println("scores (List<Integer>): " + scores);')
        footer = demo_class.index('System.out.println("<=== Argument Values ===");')

        assert header < first < second < footer

    def test_run_call(self, demo_class):
        """Test the business-logic marker and the run() call."""
        assert "        // business logic\n        run(username, scores);\n" in demo_class

    def test_run_method(self, demo_class):
        """Test parameters with re-attached statements and the body."""
        expected = (
            "    public static void run(\n"
            "        String username, // String username = **user_info;\n"
            "        List<Integer> scores // List<Integer> scores = **score_list;\n"
            "    ) {\n"
            "        System.out.println(username);\n"
            "    }\n"
        )
        assert expected in demo_class

    def test_helpers_always_present(self, demo_class):
        """Test that all helper methods are emitted."""
        assert "private static String readFile(Path path) throws IOException {" in demo_class
        assert "Demo.class.getResourceAsStream(path.toString())" in demo_class
        assert "private static <T> java.util.List<T> parseList(" in demo_class
        assert "private static <K, V> java.util.Map<K, V> parseMap(" in demo_class
        assert "private static <T> T parseObject(Path path, Class<T> clazz) throws IOException {" in demo_class

    def test_no_variables_calls_run_without_arguments(self):
        """Test that a script without bindings calls run()."""
        java = ClassBuilder(class_name="Plain").build([], ["System.out.println(1);"])

        assert "        run();\n" in java
        assert "// Line" not in java
        assert "    public static void run(\n    ) {\n" in java

    def test_no_business_logic_omits_run_method(self):
        """Test that run() is only declared when there is business logic."""
        records = [_record("int a = **a;")]
        java = ClassBuilder(class_name="OnlyArgs").build(records, [])

        assert "public static void run(" not in java
        assert "        run(a);\n" in java
        assert "private static <T> T parseObject(" in java

    def test_blank_business_lines_are_not_indented(self):
        """Test that blank lines stay empty instead of carrying indentation."""
        java = ClassBuilder(class_name="Gap").build([], ["a();", "", "b();"])

        assert "        a();\n\n        b();\n" in java

    def test_default_class_name_comes_from_settings(self, monkeypatch):
        """Test that builder and converter share the configured default name."""
        monkeypatch.setattr(settings, "DEFAULT_CLASS_NAME", "Fallback")

        assert ClassBuilder().class_name == "Fallback"
        assert "public class Fallback {" in Script2ClassConverter().convert("x();")
