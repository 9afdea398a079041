"""
Type definitions for the script/class converter
"""
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class VariableRecord:
    """
    A placeholder binding found in script text.

    Attributes:
        declared_type: Type text, whitespace collapsed to single spaces
        name: Name of the bound variable
        argument_key: Identifier after the ** marker, base name of inputs/<key>.json
        line_number: 1-based line of the binding statement
        original_statement: The full original line, re-emitted as a parameter comment
    """
    declared_type: str
    name: str
    argument_key: str
    line_number: int
    original_statement: str


@dataclass(frozen=True)
class ParameterInfo:
    """A parameter of the run method, with its attached comment (empty if none)."""
    type: str
    name: str
    comment: str = ""


@dataclass(frozen=True)
class ProcedureRecord:
    """
    The qualifying run method of a class unit.

    Attributes:
        parameters: Parameters in declaration order
        body_text: Method body without braces and base indentation
    """
    parameters: Tuple[ParameterInfo, ...] = field(default_factory=tuple)
    body_text: str = ""

    def __str__(self) -> str:
        params = "\n".join(f"  {p.type} {p.name} // {p.comment}" for p in self.parameters)
        return f"Parameters:\n{params}\n\nMethod Body:\n{self.body_text}"

