"""Scalar literal handlers used when rendering argument lists.

Provides a protocol for defining how a Python value passed for a GraphQL
scalar argument is written into the generated document.

Example usage:
    from gql_opgen.core.scalars import ScalarRegistry, StringHandler

    registry = ScalarRegistry()
    registry.register("Address", StringHandler())

    # Create custom handler
    class MoneyHandler:
        def to_literal(self, value):
            return str(value.quantize(Decimal("0.01")))

    registry.register("Money", MoneyHandler())
"""

import json
from datetime import date, datetime
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ScalarHandler(Protocol):
    """Protocol for scalar literal handlers.

    Implement this protocol to control how values of a scalar are written
    into a GraphQL argument list.
    """

    def to_literal(self, value: Any) -> str:
        """Convert a Python value into GraphQL literal text."""
        ...


class StringHandler:
    """Handler for string-kind scalars: the value is written quoted."""

    def to_literal(self, value: Any) -> str:
        """Quote the string form of the value, escaping as JSON does."""
        return json.dumps(str(value), ensure_ascii=False)


class NumberHandler:
    """Handler for Int and Float scalars."""

    def to_literal(self, value: Any) -> str:
        return str(value)


class BooleanHandler:
    """Handler for Boolean scalars."""

    def to_literal(self, value: Any) -> str:
        return "true" if value else "false"


class DateTimeHandler:
    """Handler for DateTime and Date scalars using ISO 8601 format."""

    def to_literal(self, value: Any) -> str:
        if isinstance(value, (datetime, date)):
            value = value.isoformat()
        return json.dumps(str(value))


class RawHandler:
    """Fallback for unknown scalars: the value's string form, unquoted."""

    def to_literal(self, value: Any) -> str:
        return str(value)


class ScalarRegistry:
    """Registry for scalar literal handlers.

    Manages the mapping between GraphQL scalar names and their handlers.
    Scalars without a registered handler fall back to ``RawHandler``.

    Example:
        registry = ScalarRegistry()
        registry.get("String").to_literal("abc")  # '"abc"'
        registry.get("Int").to_literal(123)  # '123'
    """

    def __init__(self):
        self._handlers: dict[str, ScalarHandler] = {}
        self._fallback: ScalarHandler = RawHandler()
        # Register default handlers
        self._register_defaults()

    def _register_defaults(self):
        """Register built-in default handlers."""
        self.register("String", StringHandler())
        self.register("ID", StringHandler())
        self.register("Int", NumberHandler())
        self.register("Float", NumberHandler())
        self.register("Boolean", BooleanHandler())
        self.register("DateTime", DateTimeHandler())
        self.register("Date", DateTimeHandler())
        self.register("UUID", StringHandler())

    def register(self, scalar_name: str, handler: ScalarHandler):
        """Register a handler for a scalar type."""
        self._handlers[scalar_name] = handler

    def get(self, scalar_name: str | None) -> ScalarHandler:
        """Get the handler for a scalar type, or the raw fallback."""
        return self._handlers.get(scalar_name, self._fallback)

    def has(self, scalar_name: str) -> bool:
        """Check if a handler is registered for a scalar type."""
        return scalar_name in self._handlers

    def is_string_kind(self, scalar_name: str | None) -> bool:
        """Check whether values of the scalar are written as quoted strings."""
        return isinstance(self._handlers.get(scalar_name), (StringHandler, DateTimeHandler))


default_registry = ScalarRegistry()
