"""
Java parser wrapper using tree-sitter.

The locator only talks to the SourceParser interface, so another parser
library can be substituted by implementing it.
"""
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

import tree_sitter_java as tsjava
from tree_sitter import Language, Node, Parser

from .errors import ParseError
from .splitter import split_lines

JAVA_LANGUAGE = Language(tsjava.language())

COMMENT_TYPES = ("line_comment", "block_comment", "comment")
PARAMETER_TYPES = ("formal_parameter", "spread_parameter")

_COMMENT_EDGES = re.compile(r"^\s*[/*]+|[/*]+\s*$")


class SourceParser(ABC):
    """
    Capabilities the procedure locator needs from a parser.

    Units, procedures and parameters are opaque handles owned by the
    implementation.
    """

    @abstractmethod
    def parse_unit(self, source: str) -> Any:
        """Parse a whole compilation unit; raise ParseError if malformed."""

    @abstractmethod
    def find_procedures(self, unit: Any) -> List[Any]:
        """All method declarations, in declaration order."""

    @abstractmethod
    def is_qualifying(self, unit: Any, procedure: Any, name: str) -> bool:
        """True if the method has the given name and is public and static."""

    @abstractmethod
    def parameters_of(self, unit: Any, procedure: Any) -> List[Any]:
        """Parameters of a method in declaration order."""

    @abstractmethod
    def signature_of(self, unit: Any, parameter: Any) -> Tuple[str, str]:
        """(type text, name) of a parameter, both trimmed."""

    @abstractmethod
    def attached_comment_of(self, unit: Any, procedure: Any, parameter: Any) -> str:
        """Inner text of the comment attached to a parameter, or ''."""

    @abstractmethod
    def body_text_of(self, unit: Any, procedure: Any) -> str:
        """Method body without braces and common indentation."""


@dataclass
class JavaUnit:
    """A parsed compilation unit"""
    source: bytes
    root: Node


def node_text(source: bytes, node: Node) -> str:
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def comment_content(raw: str) -> str:
    """
    Strip comment delimiters and return the inner text.

    Multi-line block comments are collapsed to one line, dropping the
    leading '*' of javadoc-style continuation lines.
    """
    if raw.startswith("//"):
        content = raw[2:]
    elif raw.startswith("/*"):
        content = raw[2:-2] if raw.endswith("*/") else raw[2:]
    else:
        content = raw
    content = _COMMENT_EDGES.sub("", content)
    parts = [_COMMENT_EDGES.sub("", line).strip() for line in split_lines(content)]
    return " ".join(part for part in parts if part)


def trim_indent(text: str) -> str:
    """
    Remove the common leading indentation of all non-blank lines.

    A blank first or last line is dropped, and blank lines come out empty.
    """
    lines = split_lines(text)
    if lines and not lines[0].strip():
        lines = lines[1:]
    if lines and not lines[-1].strip():
        lines = lines[:-1]
    indents = [len(line) - len(line.lstrip()) for line in lines if line.strip()]
    margin = min(indents) if indents else 0
    return "\n".join(line[margin:] if line.strip() else "" for line in lines)


def _first_error(node: Node) -> Optional[Node]:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


class TreeSitterJavaParser(SourceParser):
    """
    SourceParser backed by tree-sitter-java.

    tree-sitter recovers from syntax errors; any ERROR or MISSING node in the
    tree is reported as a ParseError.
    """

    def __init__(self):
        self._parser = Parser()
        self._parser.language = JAVA_LANGUAGE

    def parse_unit(self, source: str) -> JavaUnit:
        data = source.encode("utf-8")
        tree = self._parser.parse(data)
        root = tree.root_node
        if root.has_error:
            error = _first_error(root) or root
            row, column = error.start_point
            if error.is_missing:
                message = f"missing '{error.type}'"
            else:
                snippet = node_text(data, error).strip().split("\n")[0][:40]
                message = f"unexpected input '{snippet}'"
            raise ParseError(message, row + 1, column + 1)
        return JavaUnit(source=data, root=root)

    def find_procedures(self, unit: JavaUnit) -> List[Node]:
        found: List[Node] = []
        stack = [unit.root]
        # pre-order walk keeps declaration order
        while stack:
            node = stack.pop()
            if node.type == "method_declaration":
                found.append(node)
            stack.extend(reversed(node.children))
        return found

    def is_qualifying(self, unit: JavaUnit, procedure: Node, name: str) -> bool:
        name_node = procedure.child_by_field_name("name")
        if name_node is None or node_text(unit.source, name_node) != name:
            return False
        modifiers = self._modifiers(procedure)
        return "public" in modifiers and "static" in modifiers

    def parameters_of(self, unit: JavaUnit, procedure: Node) -> List[Node]:
        params = procedure.child_by_field_name("parameters")
        if params is None:
            return []
        return [child for child in params.named_children if child.type in PARAMETER_TYPES]

    def signature_of(self, unit: JavaUnit, parameter: Node) -> Tuple[str, str]:
        if parameter.type == "spread_parameter":
            declarator = next(
                (c for c in parameter.named_children if c.type == "variable_declarator"), None
            )
            name_node = declarator.child_by_field_name("name") if declarator else None
            if name_node is None:
                return node_text(unit.source, parameter).strip(), ""
            type_text = unit.source[parameter.start_byte:declarator.start_byte].decode("utf-8")
            return type_text.strip(), node_text(unit.source, name_node).strip()

        type_node = parameter.child_by_field_name("type")
        name_node = parameter.child_by_field_name("name")
        type_text = node_text(unit.source, type_node) if type_node else ""
        dimensions = parameter.child_by_field_name("dimensions")
        if dimensions is not None:
            type_text += node_text(unit.source, dimensions)
        name = node_text(unit.source, name_node) if name_node else ""
        return type_text.strip(), name.strip()

    def attached_comment_of(self, unit: JavaUnit, procedure: Node, parameter: Node) -> str:
        comment = self._attach_comments(unit, procedure).get(parameter.start_byte)
        if comment is None:
            return ""
        return comment_content(node_text(unit.source, comment))

    def body_text_of(self, unit: JavaUnit, procedure: Node) -> str:
        body = procedure.child_by_field_name("body")
        if body is None:
            return ""
        inner = unit.source[body.start_byte + 1:body.end_byte - 1].decode("utf-8", errors="replace")
        return trim_indent(inner)

    @staticmethod
    def _modifiers(procedure: Node) -> set:
        for child in procedure.children:
            if child.type == "modifiers":
                return {c.type for c in child.children}
        return set()

    def _attach_comments(self, unit: JavaUnit, procedure: Node) -> dict:
        """
        Map parameter start byte -> attached comment node.

        A line comment on the row where a parameter ends belongs to that
        parameter. Every other comment goes to the next parameter that has
        none yet.
        """
        params_node = procedure.child_by_field_name("parameters")
        if params_node is None:
            return {}
        params = [c for c in params_node.named_children if c.type in PARAMETER_TYPES]
        comments = [c for c in params_node.children if c.type in COMMENT_TYPES]

        attached = {}
        claimed = set()
        for comment in comments:
            if not node_text(unit.source, comment).startswith("//"):
                continue
            preceding = [p for p in params if p.end_byte <= comment.start_byte]
            if not preceding:
                continue
            owner = preceding[-1]
            if owner.end_point[0] == comment.start_point[0] and owner.start_byte not in attached:
                attached[owner.start_byte] = comment
                claimed.add(comment.start_byte)

        for comment in comments:
            if comment.start_byte in claimed:
                continue
            following = [p for p in params if p.start_byte >= comment.end_byte]
            if following and following[0].start_byte not in attached:
                attached[following[0].start_byte] = comment
        return attached
