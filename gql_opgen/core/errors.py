"""Exceptions raised while loading schemas and building operations."""

from typing import Any


class OpGenError(Exception):
    """Base class for all gql-opgen errors."""


class SchemaLoadError(OpGenError):
    """Raised when introspection data cannot be read or has the wrong shape."""


class SchemaResolutionError(OpGenError):
    """Raised when a referenced type name is missing from the type index."""

    def __init__(self, type_name: str, field_name: str | None = None):
        self.type_name = type_name
        self.field_name = field_name
        message = f"Unknown type '{type_name}'"
        if field_name:
            message += f" referenced by field '{field_name}'"
        super().__init__(message)


class ArgumentValidationError(OpGenError):
    """Raised when call-time values cannot be turned into an argument list."""


class MissingArguments(ArgumentValidationError):
    """Raised when no values are supplied for an operation that takes arguments."""

    def __init__(self, message: str = "Empty args when generating graphql query"):
        super().__init__(message)


class MissingRequiredArgument(ArgumentValidationError):
    """Raised when a non-null argument is absent or falsy."""

    def __init__(self, names: list[str]):
        self.names = names
        super().__init__(
            f"Missing required args when generating graphql query: {', '.join(names)}"
        )


class GraphQLResponseError(OpGenError):
    """Exception raised for GraphQL errors returned by the server."""

    def __init__(self, message: str, errors: list[dict[str, Any]]):
        self.message = message
        self.errors = errors
        super().__init__(message)


class EmptySelectionError(OpGenError):
    """Raised when field exclusions leave an operation with nothing to select."""

    def __init__(self, operation_name: str):
        self.operation_name = operation_name
        super().__init__(f"Every field of '{operation_name}' is excluded by ignore_fields")
