"""Visitor pattern for document traversal.

Enables tools to traverse and convert parsed documents without modifying
the node classes.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeName (PascalCase) rather than visit_node_name
(snake_case), e.g. visit_JsonArray.

Python 3.13+.
"""

from collections.abc import Callable
from typing import ClassVar

from .ast import (
    JsonArray,
    JsonFalse,
    JsonInteger,
    JsonNull,
    JsonObject,
    JsonString,
    JsonTrue,
    JsonValue,
    Member,
)

__all__ = ["ASTVisitor", "to_python"]

type Node = JsonValue | Member


class ASTVisitor[T = Node]:
    """Base visitor for traversing a parsed document.

    Follows stdlib ast.NodeVisitor convention: generic_visit() automatically
    traverses all child nodes. Override visit_NodeType methods to add custom
    behavior.

    Example:
        >>> class CountIntegersVisitor(ASTVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_JsonInteger(self, node):
        ...         self.count += 1
        ...         return node
        ...
        >>> visitor = CountIntegersVisitor()
        >>> visitor.visit(document)
        >>> print(visitor.count)
    """

    __slots__ = ("_dispatch_cache",)

    # Built once per class definition via __init_subclass__
    _class_visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {
            name[len("visit_") :]: name
            for name in dir(cls)
            if name.startswith("visit_") and name != "visit"
        }

    def __init__(self) -> None:
        """Initialize the per-instance dispatch cache.

        Subclasses MUST call super().__init__().
        """
        self._dispatch_cache: dict[type, Callable[[Node], T]] = {}

    def visit(self, node: Node) -> T:
        """Visit a node, dispatching to visit_<ClassName> or generic_visit."""
        node_type = type(node)
        method = self._dispatch_cache.get(node_type)
        if method is None:
            method_name = self._class_visit_methods.get(node_type.__name__)
            method = getattr(self, method_name) if method_name else self.generic_visit
            self._dispatch_cache[node_type] = method
        return method(node)

    def generic_visit(self, node: Node) -> T:
        """Default visitor: visit every child, return the node itself."""
        match node:
            case JsonArray(items=items):
                for item in items:
                    self.visit(item)
            case JsonObject(members=members):
                for member in members:
                    self.visit(member)
            case Member(value=value):
                self.visit(value)
        return node  # type: ignore[return-value]  # T defaults to Node


class _PythonConverter(ASTVisitor[object]):
    """Builds plain Python data from a document."""

    __slots__ = ()

    def visit_JsonString(self, node: JsonString) -> object:
        return node.value

    def visit_JsonInteger(self, node: JsonInteger) -> object:
        return node.value

    def visit_JsonTrue(self, node: JsonTrue) -> object:  # noqa: ARG002
        return True

    def visit_JsonFalse(self, node: JsonFalse) -> object:  # noqa: ARG002
        return False

    def visit_JsonNull(self, node: JsonNull) -> object:  # noqa: ARG002
        return None

    def visit_JsonArray(self, node: JsonArray) -> object:
        return [self.visit(item) for item in node.items]

    def visit_JsonObject(self, node: JsonObject) -> object:
        # Later duplicates win, as with json.loads
        return {member.key: self.visit(member.value) for member in node.members}


def to_python(node: JsonValue) -> object:
    """Convert a document value into plain Python data.

    Objects become dicts (a later duplicate key overrides an earlier one),
    arrays lists, keywords True/False/None. Strings stay raw: escape
    sequences are not decoded.

    Example:
        >>> to_python(JsonObject((Member("a", JsonArray((JsonNull(),))),)))
        {'a': [None]}
    """
    return _PythonConverter().visit(node)
