"""
Script/Class Converter (Bidirectional)

Converts between two forms of the same Java procedure:

- Script form: inputs are placeholder bindings such as
  `List<Integer> scores = **score_list;`
- Class form: a compilable class whose main() loads every input from
  inputs/<key>.json, prints it and calls run().

- Script2ClassConverter: line-oriented, pattern-driven, never fails
- Class2ScriptConverter: structural, driven by the public static run method
"""
from typing import Optional

from .class2script import Class2ScriptConverter, build_script
from .converter import Script2ClassConverter
from .errors import ConversionError, ParseError, ProcedureNotFoundError
from .locator import locate_run_method
from .parser import SourceParser, TreeSitterJavaParser
from .patterns import extract_variables, resolve_parser_kind, ParserKind, ScanState
from .splitter import split_code
from .types import ParameterInfo, ProcedureRecord, VariableRecord


def script_to_class(source_text: str, package_name: str = "", class_name: Optional[str] = None) -> str:
    """Convert script text to class text; the class name defaults to settings.DEFAULT_CLASS_NAME."""
    return Script2ClassConverter(class_name=class_name, package_name=package_name).convert(source_text)


def class_to_script(source_text: str) -> str:
    """
    Convert class text to script text.

    Raises:
        ParseError: If the class cannot be parsed
        ProcedureNotFoundError: If no public static run method exists
    """
    return Class2ScriptConverter().convert(source_text)


__all__ = [
    "script_to_class",
    "class_to_script",
    "Script2ClassConverter",
    "Class2ScriptConverter",
    "build_script",
    "locate_run_method",
    "extract_variables",
    "split_code",
    "resolve_parser_kind",
    "ParserKind",
    "ScanState",
    "SourceParser",
    "TreeSitterJavaParser",
    "VariableRecord",
    "ParameterInfo",
    "ProcedureRecord",
    "ConversionError",
    "ParseError",
    "ProcedureNotFoundError",
]
