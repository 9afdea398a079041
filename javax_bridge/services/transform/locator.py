"""
Locates the run method of a class unit.
"""
import logging
from typing import Optional

from .errors import ProcedureNotFoundError
from .parser import SourceParser, TreeSitterJavaParser
from .types import ParameterInfo, ProcedureRecord

logger = logging.getLogger(__name__)

RUN_METHOD_NAME = "run"


def locate_run_method(java_code: str, parser: Optional[SourceParser] = None) -> ProcedureRecord:
    """
    Parse Java code and extract the first public static run method.

    Args:
        java_code: Java source of a whole compilation unit
        parser: SourceParser implementation (tree-sitter by default)

    Returns:
        ProcedureRecord with parameters and body text

    Raises:
        ParseError: If the code cannot be parsed
        ProcedureNotFoundError: If no public static run method exists
    """
    parser = parser or TreeSitterJavaParser()
    unit = parser.parse_unit(java_code)

    method = next(
        (m for m in parser.find_procedures(unit) if parser.is_qualifying(unit, m, RUN_METHOD_NAME)),
        None,
    )
    if method is None:
        raise ProcedureNotFoundError(
            f"No public static {RUN_METHOD_NAME} method found"
        )

    parameters = []
    for param in parser.parameters_of(unit, method):
        type_text, name = parser.signature_of(unit, param)
        parameters.append(ParameterInfo(
            type=type_text,
            name=name,
            comment=parser.attached_comment_of(unit, method, param),
        ))

    record = ProcedureRecord(
        parameters=tuple(parameters),
        body_text=parser.body_text_of(unit, method),
    )
    logger.debug(f"Located {RUN_METHOD_NAME} method with {len(parameters)} parameter(s)")
    return record
