"""
Class-form builder.

Assembles a self-contained Java class from placeholder bindings and the
remaining business logic: a main() that loads every argument from
inputs/<key>.json and prints it, a run() that holds the business logic, and
fastjson-based helpers.
"""
from typing import List, Optional, Sequence

from javax_bridge.config import settings

from .patterns import ParserKind, resolve_parser_kind
from .types import VariableRecord

INDENT = "    "
BODY_INDENT = INDENT * 2

# Directory of the argument files read by generated classes
INPUTS_DIR = "inputs"

IMPORTS = [
    "import com.alibaba.fastjson.*;",
    "import java.nio.file.*;",
    "import java.io.*;",
    "import java.util.*;",
]

DEBUG_HEADER = "=== Argument Values ===>"
DEBUG_FOOTER = "<=== Argument Values ==="
BUSINESS_LOGIC_MARKER = "// business logic"

HELPER_METHODS = """\
// Shared file reader
private static String readFile(Path path) throws IOException {
    try (InputStream in = {class_name}.class.getResourceAsStream(path.toString())) {
        if (in == null) {
            throw new RuntimeException(String.format("File %s does not exist", path));
        }
        return new String(in.readAllBytes());
    }
}

// Collection parsing
private static <T> java.util.List<T> parseList(
    Path path, TypeReference<java.util.List<T>> typeRef
) throws IOException {
    return JSON.parseObject(readFile(path), typeRef);
}

private static <K, V> java.util.Map<K, V> parseMap(
    Path path, TypeReference<java.util.Map<K, V>> typeRef
) throws IOException {
    return JSON.parseObject(readFile(path), typeRef);
}

// Plain object parsing
private static <T> T parseObject(Path path, Class<T> clazz) throws IOException {
    return JSON.parseObject(readFile(path), clazz);
}"""


def input_path_expression(argument_key: str) -> str:
    """Java expression for the data file of an argument."""
    return f'Paths.get("{INPUTS_DIR}", "{argument_key}.json")'


def resolve_expression(variable: VariableRecord) -> str:
    """
    Build the initializer that loads a variable from its data file.

    Args:
        variable: Binding record

    Returns:
        Java expression calling parseList, parseMap or parseObject
    """
    path = input_path_expression(variable.argument_key)
    kind = resolve_parser_kind(variable.declared_type)
    if kind is ParserKind.OBJECT:
        return f"{kind.value}({path}, {variable.declared_type}.class)"
    return f"{kind.value}({path}, new TypeReference<{variable.declared_type}>(){{}})"


class ClassBuilder:
    """
    Builds class-form source text.

    Example:
        builder = ClassBuilder(class_name="Demo")
        java_code = builder.build(variables, business_lines)
    """

    def __init__(self, class_name: Optional[str] = None, package_name: Optional[str] = None):
        self.class_name = class_name or settings.DEFAULT_CLASS_NAME
        self.package_name = package_name
        self._lines: List[str] = []

    def build(self, variables: Sequence[VariableRecord], business_lines: Sequence[str]) -> str:
        """
        Generate the complete class.

        Args:
            variables: Bindings in script order
            business_lines: Non-binding script lines in original order

        Returns:
            Java source text
        """
        self._lines = []
        self._append_package()
        self._append_imports()
        self._lines.append(f"public class {self.class_name} {{")
        self._append_main_method(variables)
        self._append_run_method(variables, business_lines)
        self._append_helper_methods()
        self._lines.append("}")
        return "\n".join(self._lines) + "\n"

    def _append_package(self):
        if self.package_name:
            self._lines.append(f"package {self.package_name};")
            self._lines.append("")

    def _append_imports(self):
        self._lines.extend(IMPORTS)
        self._lines.append("")

    def _append_main_method(self, variables: Sequence[VariableRecord]):
        self._lines.append(f"{INDENT}public static void main(String[] args) throws IOException {{")
        for var in variables:
            self._lines.append(f"{BODY_INDENT}// Line {var.line_number}")
            self._lines.append(f"{BODY_INDENT}{var.declared_type} {var.name} = {resolve_expression(var)};")
        self._append_debug_output(variables)
        self._lines.append(f"{BODY_INDENT}{BUSINESS_LOGIC_MARKER}")
        arguments = ", ".join(var.name for var in variables)
        self._lines.append(f"{BODY_INDENT}run({arguments});")
        self._lines.append(f"{INDENT}}}")
        self._lines.append("")

    def _append_debug_output(self, variables: Sequence[VariableRecord]):
        self._lines.append(f'{BODY_INDENT}System.out.println("{DEBUG_HEADER}");')
        for var in variables:
            self._lines.append(
                f'{BODY_INDENT}System.out.println("{var.name} ({var.declared_type}): " + {var.name});'
            )
        self._lines.append(f'{BODY_INDENT}System.out.println("{DEBUG_FOOTER}");')
        self._lines.append(f"{BODY_INDENT}System.out.println();")
        self._lines.append("")

    def _append_run_method(self, variables: Sequence[VariableRecord], business_lines: Sequence[str]):
        if not business_lines:
            return
        self._lines.append(f"{INDENT}public static void run(")
        last = len(variables) - 1
        for index, var in enumerate(variables):
            # comma goes before the comment, except on the last parameter
            separator = "" if index == last else ","
            self._lines.append(
                f"{BODY_INDENT}{var.declared_type} {var.name}{separator} // {var.original_statement}"
            )
        self._lines.append(f"{INDENT}) {{")
        for line in business_lines:
            self._lines.append(f"{BODY_INDENT}{line}" if line.strip() else "")
        self._lines.append(f"{INDENT}}}")
        self._lines.append("")

    def _append_helper_methods(self):
        helpers = HELPER_METHODS.replace("{class_name}", self.class_name)
        for line in helpers.split("\n"):
            self._lines.append(f"{INDENT}{line}" if line else "")
