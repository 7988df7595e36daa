"""Enumerations for jsonparsec type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ValueKind(StrEnum):
    """Kind of a document value.

    StrEnum provides automatic string conversion: str(ValueKind.NUMBER) == "number"
    """

    STRING = "string"
    """Double-quoted string: "text" """

    NUMBER = "number"
    """Base-10 integer: 42, -7"""

    ARRAY = "array"
    """Ordered sequence: [1, 2, 3]"""

    TRUE = "true"
    """Keyword: true"""

    FALSE = "false"
    """Keyword: false"""

    NULL = "null"
    """Keyword: null"""

    OBJECT = "object"
    """Ordered members: {"key": value}"""

    @property
    def is_keyword(self) -> bool:
        """True for the literal keywords true, false and null."""
        return self in (ValueKind.TRUE, ValueKind.FALSE, ValueKind.NULL)


__all__ = [
    "ValueKind",
]
