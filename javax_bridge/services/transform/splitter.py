"""
Line splitting and business-logic partitioning for script text.
"""
import re
from typing import List, Sequence, Set, Tuple

from .types import VariableRecord

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """
    Split text on \\r\\n, \\r or \\n.

    Unlike str.splitlines(), a trailing line break yields a final empty line,
    so line numbers match what an editor shows.
    """
    return _LINE_BREAK.split(text)


def split_code(
    text: str,
    variables: Sequence[VariableRecord]
) -> Tuple[List[str], Set[int]]:
    """
    Partition script text into business-logic lines and binding lines.

    Args:
        text: Original script text
        variables: Records produced by the placeholder extractor

    Returns:
        Tuple of (business lines in original order and content,
        set of 1-based line numbers consumed by bindings)
    """
    consumed = {var.line_number for var in variables}
    business_lines = [
        line
        for number, line in enumerate(split_lines(text), start=1)
        if number not in consumed
    ]
    return business_lines, consumed
