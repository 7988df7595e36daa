"""Document model produced by the parser.

Every value variant is a frozen, slotted dataclass; containers hold tuples,
so a parsed document is immutable and structurally comparable with ==.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import ClassVar

from jsonparsec.enums import ValueKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Scalars
    "JsonString",
    "JsonInteger",
    "JsonTrue",
    "JsonFalse",
    "JsonNull",
    # Containers
    "JsonArray",
    "Member",
    "JsonObject",
    # Type aliases
    "JsonValue",
]


# ============================================================================
# SCALARS
# ============================================================================


@dataclass(frozen=True, slots=True)
class JsonString:
    """String value.

    The text between the quotes, as written: escape sequences are kept
    verbatim, not decoded. '"a\\\\nb"' yields JsonString('a\\\\nb').
    """

    value: str
    kind: ClassVar[ValueKind] = ValueKind.STRING


@dataclass(frozen=True, slots=True)
class JsonInteger:
    """Signed 64-bit integer value."""

    value: int
    kind: ClassVar[ValueKind] = ValueKind.NUMBER


@dataclass(frozen=True, slots=True)
class JsonTrue:
    """Keyword true."""

    kind: ClassVar[ValueKind] = ValueKind.TRUE


@dataclass(frozen=True, slots=True)
class JsonFalse:
    """Keyword false."""

    kind: ClassVar[ValueKind] = ValueKind.FALSE


@dataclass(frozen=True, slots=True)
class JsonNull:
    """Keyword null."""

    kind: ClassVar[ValueKind] = ValueKind.NULL


# ============================================================================
# CONTAINERS
# ============================================================================


@dataclass(frozen=True, slots=True)
class JsonArray:
    """Ordered sequence of values.

    Attributes:
        items: Elements in textual order
    """

    items: tuple["JsonValue", ...] = ()
    kind: ClassVar[ValueKind] = ValueKind.ARRAY


@dataclass(frozen=True, slots=True)
class Member:
    """Object member: "key": value

    Attributes:
        key: Raw key text (escapes not decoded)
        value: Member value
    """

    key: str
    value: "JsonValue"


@dataclass(frozen=True, slots=True)
class JsonObject:
    """Ordered sequence of members.

    Members keep textual order. Duplicate keys are retained as separate
    members; nothing is merged or re-sorted.

    Attributes:
        members: Members in textual order

    Example:
        >>> obj = JsonObject((Member("a", JsonInteger(1)), Member("a", JsonInteger(2))))
        >>> obj.keys()
        ('a', 'a')
        >>> obj.get("a")
        JsonInteger(value=1)
    """

    members: tuple[Member, ...] = ()
    kind: ClassVar[ValueKind] = ValueKind.OBJECT

    def keys(self) -> tuple[str, ...]:
        """Member keys in textual order, duplicates included."""
        return tuple(member.key for member in self.members)

    def get(self, key: str) -> "JsonValue | None":
        """Value of the FIRST member named key, or None."""
        for member in self.members:
            if member.key == key:
                return member.value
        return None

    def get_all(self, key: str) -> tuple["JsonValue", ...]:
        """Values of every member named key, in textual order."""
        return tuple(member.value for member in self.members if member.key == key)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type JsonValue = (
    JsonString | JsonInteger | JsonArray | JsonTrue | JsonFalse | JsonNull | JsonObject
)
