"""
Errors raised by the converter.

Both kinds are terminal for the conversion that raised them; hosts decide how
to present them.
"""


class ConversionError(Exception):
    """Base class for labeled conversion failures"""
    kind = "ConversionError"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class ProcedureNotFoundError(ConversionError):
    """No public static run method exists in the class unit"""
    kind = "NotFound"

    def __init__(self, message: str = "No public static run method found"):
        super().__init__(message)


class ParseError(ConversionError):
    """Exception raised when class text cannot be parsed"""
    kind = "ParseFailure"

    def __init__(self, message: str, line: int = 0, column: int = 0):
        self.line = line
        self.column = column
        super().__init__(f"Parse error at line {line}, column {column}: {message}")
