"""jsonparsec exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class JsonParsecError(Exception):
    """Base exception for all jsonparsec errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize JsonParsecError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class JsonSyntaxError(JsonParsecError):
    """The input is not a document of the grammar.

    Raised when the object rule fails: either the input does not start
    with an object at all, or a committed production is malformed.
    """


class TrailingInputError(JsonParsecError):
    """A complete object was parsed but input remains after it.

    Kept apart from JsonSyntaxError: the text that WAS parsed is a valid
    object, the failure is at the document level.

    Attributes:
        remainder: The unconsumed text following the object
    """

    def __init__(self, message: str | Diagnostic, *, remainder: str = "") -> None:
        """Initialize TrailingInputError.

        Args:
            message: Error message string OR Diagnostic object
            remainder: The unconsumed text following the object
        """
        super().__init__(message)
        self.remainder = remainder
