"""
Class to Script Converter

Converts class-form Java back to script form. This is the reverse of
Script2ClassConverter, though not an exact inverse: main(), the helpers and
anything outside run() are dropped.
"""
import logging
from typing import List, Optional

from .locator import locate_run_method
from .parser import SourceParser
from .patterns import match_binding, normalize_type
from .types import ParameterInfo, ProcedureRecord

logger = logging.getLogger(__name__)


def _restored_binding(param: ParameterInfo) -> Optional[str]:
    """
    Return the comment as-is when it is a full binding for this parameter.

    Generated classes annotate each run() parameter with the script line it
    came from; emitting that line back keeps its placeholder key.
    """
    record = match_binding(param.comment)
    if record is None:
        return None
    if record.name != param.name or record.declared_type != normalize_type(param.type):
        return None
    return param.comment.strip()


def binding_line(param: ParameterInfo) -> str:
    """
    Build the script binding statement for a run() parameter.

    A non-blank comment is used verbatim as the initializer. Without one the
    parameter name becomes the placeholder key.
    """
    comment = param.comment.strip()
    if not comment:
        return f"{param.type} {param.name} = ({param.type}) **{param.name};"

    restored = _restored_binding(param)
    if restored is not None:
        return restored
    terminator = "" if comment.endswith(";") else ";"
    return f"{param.type} {param.name} = {comment}{terminator}"


def build_script(record: ProcedureRecord) -> str:
    """
    Generate script text from a located run method.

    Args:
        record: Parameters and body of the run method

    Returns:
        One binding per parameter, a blank line, then the body
    """
    lines: List[str] = [binding_line(param) for param in record.parameters]
    lines.append("")
    return "\n".join(lines) + "\n" + record.body_text


class Class2ScriptConverter:
    """
    Converts class-form Java to script form.

    Example:
        converter = Class2ScriptConverter()
        script = converter.convert(java_code)
    """

    def __init__(self, parser: Optional[SourceParser] = None):
        self.parser = parser

    def parse_run_method(self, java_code: str) -> ProcedureRecord:
        """
        Locate the public static run method.

        Raises:
            ParseError: If the code cannot be parsed
            ProcedureNotFoundError: If there is no qualifying method
        """
        return locate_run_method(java_code, self.parser)

    def convert(self, java_code: str) -> str:
        """
        Convert Java class text to script text.

        Args:
            java_code: Java source containing a public static run method

        Returns:
            Script text
        """
        record = self.parse_run_method(java_code)
        script = build_script(record)
        logger.debug(f"Generated script with {len(record.parameters)} binding(s)")
        return script
