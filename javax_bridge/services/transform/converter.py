"""
Main Script to Class Converter.

Converts script-form text into a self-contained Java class.
"""
import logging
from typing import List, Optional, Tuple

from javax_bridge.config import settings

from .builder import ClassBuilder
from .patterns import extract_variables
from .splitter import split_code
from .types import VariableRecord

logger = logging.getLogger(__name__)


class Script2ClassConverter:
    """
    Converts script text with placeholder bindings to a Java class.

    Every line of the form `Type name = ...**key...;` outside a block
    comment becomes an argument loaded from inputs/<key>.json; all other
    lines become the body of run(). Lines that fail to match are never an
    error, they simply stay business logic.

    Example:
        converter = Script2ClassConverter(class_name="Demo")
        java_code = converter.convert('''
            String username = **user_info;
            System.out.println(username);
        ''')
    """

    def __init__(self, class_name: Optional[str] = None, package_name: Optional[str] = None):
        self.class_name = class_name or settings.DEFAULT_CLASS_NAME
        self.package_name = package_name

    def parse_variables(self, code: str) -> List[VariableRecord]:
        """Find the placeholder bindings of a script."""
        return extract_variables(code)

    def convert(self, code: str) -> str:
        """
        Convert script text to Java class text.

        Args:
            code: Script text

        Returns:
            Java source text
        """
        java_code, _ = self.convert_with_variables(code)
        return java_code

    def convert_with_variables(self, code: str) -> Tuple[str, List[VariableRecord]]:
        """
        Convert script text and also return the bindings that became arguments.

        Returns:
            Tuple of (Java source text, bindings in script order)
        """
        variables = self.parse_variables(code)
        business_lines, _ = split_code(code, variables)
        logger.debug(
            f"Building class {self.class_name}: {len(variables)} argument(s), "
            f"{len(business_lines)} business line(s)"
        )
        builder = ClassBuilder(class_name=self.class_name, package_name=self.package_name)
        return builder.build(variables, business_lines), variables
