"""
Pattern matching for script text.

Script text is treated as lines, not as a grammar: a single anchored pattern
recognizes placeholder bindings such as

    List<Integer> scores = **score_list;

and an explicit two-state scanner skips block comments.
"""
import logging
import re
from enum import Enum
from functools import reduce
from typing import List, Optional, Tuple

from .splitter import split_lines
from .types import VariableRecord

logger = logging.getLogger(__name__)

BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"
PLACEHOLDER_MARKER = "**"

BINDING_PATTERN = re.compile(
    r"""
    ^
    (?!\s*//)                       # not a line comment
    \s*
    (?P<type>[\w.$<>,\s]+?)         # declared type
    \s+
    (?P<name>\w+)                   # variable name
    \s*=\s*
    .*?\*\*(?P<key>\w+)             # placeholder argument key
    .*?;
    \s*$
    """,
    re.VERBOSE,
)

_WHITESPACE = re.compile(r"\s+")

# Prefixes checked by resolve_parser_kind(), in order
LIST_PREFIX = "List<"
MAP_PREFIX = "Map<"


class ScanState(str, Enum):
    """Block comment state of the line scanner"""
    NORMAL = "normal"
    IN_BLOCK_COMMENT = "in_block_comment"


class ParserKind(str, Enum):
    """Deserialization helper used for a declared type"""
    LIST = "parseList"
    MAP = "parseMap"
    OBJECT = "parseObject"


def normalize_type(type_text: str) -> str:
    """Collapse whitespace runs in type text to single spaces."""
    return _WHITESPACE.sub(" ", type_text)


def match_binding(line: str, line_number: int = 0) -> Optional[VariableRecord]:
    """
    Match a single line against the binding pattern.

    Args:
        line: Original line text
        line_number: 1-based position of the line in its text

    Returns:
        VariableRecord if the whole trimmed line is a binding, else None
    """
    match = BINDING_PATTERN.fullmatch(line.strip())
    if match is None:
        return None
    return VariableRecord(
        declared_type=normalize_type(match.group("type")),
        name=match.group("name"),
        argument_key=match.group("key"),
        line_number=line_number,
        original_statement=line,
    )


def _scan_line(
    acc: Tuple[ScanState, Tuple[VariableRecord, ...]],
    numbered_line: Tuple[int, str]
) -> Tuple[ScanState, Tuple[VariableRecord, ...]]:
    state, records = acc
    number, line = numbered_line
    trimmed = line.strip()

    if trimmed.startswith(BLOCK_COMMENT_OPEN):
        return ScanState.IN_BLOCK_COMMENT, records
    if trimmed.endswith(BLOCK_COMMENT_CLOSE):
        return ScanState.NORMAL, records
    if state is ScanState.IN_BLOCK_COMMENT:
        return state, records

    record = match_binding(line, number)
    if record is None:
        return state, records
    return state, records + (record,)


def extract_variables(code: str) -> List[VariableRecord]:
    """
    Find all placeholder bindings in script text.

    A line starting with /* opens a block comment and a line ending with */
    closes it; neither is ever matched, and nothing in between is. A line
    that opens and closes a comment on the same line counts as opening.

    Args:
        code: Script text

    Returns:
        Records in line order
    """
    _, records = reduce(
        _scan_line,
        enumerate(split_lines(code), start=1),
        (ScanState.NORMAL, ()),
    )
    logger.debug(f"Extracted {len(records)} placeholder binding(s)")
    return list(records)


def resolve_parser_kind(declared_type: str) -> ParserKind:
    """
    Pick the deserialization helper for a declared type.

    This is a plain prefix test on the type text, not type analysis:
    "List<..." and "Map<..." get the generic helpers, everything else
    (including java.util.List<...> or ArrayList<...>) is read as an object.
    """
    if declared_type.startswith(LIST_PREFIX):
        return ParserKind.LIST
    if declared_type.startswith(MAP_PREFIX):
        return ParserKind.MAP
    return ParserKind.OBJECT
